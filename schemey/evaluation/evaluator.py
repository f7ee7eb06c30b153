"""Core evaluator for the Schemey interpreter.

Atoms evaluate to themselves, symbols are looked up in the environment, and
non-empty lists are either special forms (dispatched by their keyword) or
procedure applications. Evaluation recurses on the host stack: every nested
call costs host frames and there is no tail-call elimination.
"""

from __future__ import annotations

from schemey import SExpression, LispValue
from schemey.errors import BadSpecialForm
from schemey.types.char import Char
from schemey.types.environment import Environment
from schemey.types.symbol import Symbol
from schemey.evaluation.apply import apply
from schemey.evaluation.special_forms import SPECIAL_FORMS

SELF_EVALUATING = (str, bool, int, float, Char)


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    if isinstance(expr, SELF_EVALUATING):
        return expr

    if isinstance(expr, Symbol):
        return env.get(expr.id)

    match expr:
        case [Symbol() as head, *_] if head in SPECIAL_FORMS:
            return SPECIAL_FORMS[head](expr, env, evaluate)
        case [head, *tail_args]:
            proc = evaluate(head, env)
            args = [evaluate(arg, env) for arg in tail_args]
            return apply(proc, args)

    raise BadSpecialForm("Unrecognised special form", expr)
