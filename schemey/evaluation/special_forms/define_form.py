from schemey import EvaluatorFn
from schemey import SExpression, LispValue
from schemey.types.dotted_list import DottedList
from schemey.types.environment import Environment
from schemey.types.symbol import Symbol
from schemey.evaluation.special_forms.lambda_form import make_closure
from schemey.evaluation.special_forms.shape import unrecognised


def define_form(
    form: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    (define (name params...) body...)
    (define (name params... . rest) body...)

    A name already visible from `env` is overwritten in place; otherwise the
    binding is added to the innermost frame. Returns the defined value.
    """
    if len(form) < 3:
        raise unrecognised(form)

    target = form[1]
    if isinstance(target, Symbol):
        if len(form) != 3:
            raise unrecognised(form)
        value = evaluate_fn(form[2], env)
        return env.define(target.id, value)

    body = form[2:]
    if isinstance(target, list) and target and isinstance(target[0], Symbol):
        fn = make_closure(form, target[1:], None, body, env)
        return env.define(target[0].id, fn)
    if isinstance(target, DottedList) and isinstance(target.head[0], Symbol):
        fn = make_closure(form, target.head[1:], target.tail, body, env)
        return env.define(target.head[0].id, fn)
    raise unrecognised(form)
