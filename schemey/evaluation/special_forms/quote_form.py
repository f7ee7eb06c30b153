from schemey import SExpression, LispValue, EvaluatorFn
from schemey.types.environment import Environment
from schemey.evaluation.special_forms.shape import unrecognised


def quote_form(
    form: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(form) != 2:
        raise unrecognised(form)
    return form[1]
