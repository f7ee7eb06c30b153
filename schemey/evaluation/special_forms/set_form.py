from schemey import EvaluatorFn
from schemey import SExpression, LispValue
from schemey.types.symbol import Symbol
from schemey.types.environment import Environment
from schemey.evaluation.special_forms.shape import unrecognised


def set_form(
    form: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(set! var value) writes the existing cell bound to `var`."""
    if len(form) != 3 or not isinstance(form[1], Symbol):
        raise unrecognised(form)
    _, var_sym, val_expr = form
    value = evaluate_fn(val_expr, env)
    return env.set(var_sym.id, value)
