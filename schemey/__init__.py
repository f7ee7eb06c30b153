# Core type aliases for the Schemey data model.
# Plain Python types carry most runtime values:
#   Integer -> int, Float -> float, String -> str, Boolean -> bool,
#   List -> list (the empty list [] doubles as the unit value).
# Symbols, characters, dotted lists and procedures have their own small
# classes under schemey.types.
#
# Naming guidance:
# - SExpression: use in reader code to denote syntactic forms (code-as-data).
# - LispValue:  use in evaluator/runtime code to denote evaluated values.
# Both resolve to `Any` and are interchangeable.

from typing import Any, Callable

LispValue = Any
SExpression = LispValue

# Native procedure signature: takes the evaluated arguments, returns a value
PrimitiveFn = Callable[[list[LispValue]], LispValue]

# Evaluator function type: passed to special-form handlers so they can recurse
EvaluatorFn = Callable[..., LispValue]
