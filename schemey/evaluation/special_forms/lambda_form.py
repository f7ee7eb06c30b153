from __future__ import annotations

from typing import Optional

from schemey import EvaluatorFn
from schemey import SExpression, LispValue
from schemey.types.dotted_list import DottedList
from schemey.types.environment import Environment
from schemey.types.procedures import Closure
from schemey.types.symbol import Symbol
from schemey.evaluation.special_forms.shape import unrecognised


def make_closure(
    form: list[SExpression],
    params: list[SExpression],
    vararg: Optional[SExpression],
    body: list[SExpression],
    env: Environment,
) -> Closure:
    """Build a Closure over `env`, rejecting non-symbol parameters and empty bodies."""
    if not body:
        raise unrecognised(form)
    if not all(isinstance(p, Symbol) for p in params):
        raise unrecognised(form)
    if vararg is not None and not isinstance(vararg, Symbol):
        raise unrecognised(form)
    return Closure(
        [p.id for p in params],
        vararg.id if vararg is not None else None,
        list(body),
        env,
    )


def lambda_form(
    form: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (lambda (a b) body...)        fixed parameters
    (lambda (a b . rest) body...) fixed parameters plus a rest list
    (lambda args body...)         every argument collected into `args`
    """
    if len(form) < 2:
        raise unrecognised(form)

    spec, body = form[1], form[2:]
    if isinstance(spec, list):
        return make_closure(form, spec, None, body, env)
    if isinstance(spec, DottedList):
        return make_closure(form, spec.head, spec.tail, body, env)
    if isinstance(spec, Symbol):
        return make_closure(form, [], spec, body, env)
    raise unrecognised(form)
