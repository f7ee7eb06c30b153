"""Procedure application for Schemey.

Primitives receive the evaluated argument list directly. Closures bind their
parameters in a fresh extension of the captured environment and evaluate the
body there, returning the value of the last body expression.
"""

from schemey import LispValue
from schemey.errors import NumArgs, NotFunction
from schemey.types.procedures import Primitive, Closure


def apply_closure(fn: Closure, args: list[LispValue]) -> LispValue:
    """Apply a user-defined Closure to already-evaluated arguments.

    - Without a rest parameter the argument count must equal the parameter count.
    - With a rest parameter at least the fixed parameters must be supplied;
      the remainder (possibly empty) is bound to the rest parameter as a list.
    """
    arity = len(fn.params)
    provided = len(args)
    if fn.vararg is None and provided != arity:
        raise NumArgs(arity, args)
    if fn.vararg is not None and provided < arity:
        raise NumArgs(arity, args)

    # Imported here: the evaluator depends on this module
    from schemey.evaluation.evaluator import evaluate

    env = fn.bind_arguments(args)
    result: LispValue = []
    for expr in fn.body:
        result = evaluate(expr, env)
    return result


def apply(head: LispValue, args: list[LispValue]) -> LispValue:
    """Apply either a Primitive or a Closure; anything else is not a function."""
    if isinstance(head, Primitive):
        return head(args)
    elif isinstance(head, Closure):
        return apply_closure(head, args)
    else:
        raise NotFunction("Not a function", head)
