from schemey import EvaluatorFn
from schemey import SExpression, LispValue
from schemey.types.environment import Environment
from schemey.evaluation.special_forms.shape import unrecognised


def if_form(
    form: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (if test then else)
    Only the boolean #t selects `then`; every other value selects `else`.
    """
    if len(form) != 4:
        raise unrecognised(form)

    _, test, when_true, when_false = form
    result = evaluate_fn(test, env)
    if result is True:
        return evaluate_fn(when_true, env)
    return evaluate_fn(when_false, env)
