"""Primitive procedures for the Schemey runtime environment.

This module defines the fixed table of native procedures (arithmetic,
comparison, predicates, list and string operations, application, and the
print/sleep side effects) together with the helpers that install the table
into a root environment.
"""
from __future__ import annotations

import time
from functools import reduce
from types import MappingProxyType
from typing import Callable, Mapping

from schemey import LispValue, PrimitiveFn
from schemey.errors import NumArgs, TypeMismatch, GenericError
from schemey.evaluation.apply import apply as apply_engine
from schemey.printer import render
from schemey.types.char import Char
from schemey.types.dotted_list import DottedList
from schemey.types.environment import Environment
from schemey.types.procedures import Primitive
from schemey.types.symbol import Symbol


# -------------------------------
# Argument unpacking
# -------------------------------
def is_integer(value: LispValue) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def unpack_num(value: LispValue) -> int:
    if is_integer(value):
        return value
    raise TypeMismatch("number", value)


def unpack_str(value: LispValue) -> str:
    if isinstance(value, str):
        return value
    raise TypeMismatch("string", value)


def unpack_bool(value: LispValue) -> bool:
    if isinstance(value, bool):
        return value
    raise TypeMismatch("boolean", value)


# -------------------------------
# Arity adapters
# -------------------------------
def f1(fn: Callable[[LispValue], LispValue]) -> PrimitiveFn:
    def wrapped(args: list[LispValue]) -> LispValue:
        if len(args) != 1:
            raise NumArgs(1, args)
        return fn(args[0])
    return wrapped


def f2(fn: Callable[[LispValue, LispValue], LispValue]) -> PrimitiveFn:
    def wrapped(args: list[LispValue]) -> LispValue:
        if len(args) != 2:
            raise NumArgs(2, args)
        return fn(args[0], args[1])
    return wrapped


def predicate(test: Callable[[LispValue], bool]) -> PrimitiveFn:
    return f1(lambda v: bool(test(v)))


# -------------------------------
# Arithmetic
# -------------------------------
def _floor_div(a: int, b: int) -> int:
    if b == 0:
        raise GenericError("Division by zero")
    return a // b


def _floor_mod(a: int, b: int) -> int:
    if b == 0:
        raise GenericError("Division by zero")
    return a % b


def _quotient(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    if b == 0:
        raise GenericError("Division by zero")
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _remainder(a: int, b: int) -> int:
    """Remainder with the sign of the dividend."""
    return a - b * _quotient(a, b)


def numeric_fold(op: Callable[[int, int], int]) -> PrimitiveFn:
    """Left fold of `op` over one or more Integer arguments."""
    def wrapped(args: list[LispValue]) -> LispValue:
        if not args:
            raise NumArgs(1, args)
        return reduce(op, [unpack_num(a) for a in args])
    return wrapped


# -------------------------------
# Comparison
# -------------------------------
def bool_binop(unpack: Callable[[LispValue], LispValue], op: Callable[[LispValue, LispValue], bool]) -> PrimitiveFn:
    def compare(left: LispValue, right: LispValue) -> bool:
        return bool(op(unpack(left), unpack(right)))
    return f2(compare)


def num_bool_binop(op: Callable[[int, int], bool]) -> PrimitiveFn:
    return bool_binop(unpack_num, op)


def str_bool_binop(op: Callable[[str, str], bool]) -> PrimitiveFn:
    return bool_binop(unpack_str, op)


def bool_bool_binop(op: Callable[[bool, bool], bool]) -> PrimitiveFn:
    return bool_binop(unpack_bool, op)


# -------------------------------
# Equality
# -------------------------------
def is_equal(a: LispValue, b: LispValue) -> bool:
    """Deep structural equality over data values; never equates different kinds."""
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b
    if isinstance(a, list) and isinstance(b, list):
        return len(a) == len(b) and all(is_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, DottedList) and isinstance(b, DottedList):
        return is_equal(a.head, b.head) and is_equal(a.tail, b.tail)
    if type(a) != type(b):
        return False
    if isinstance(a, (int, float, str, Symbol, Char)):
        return a == b
    # procedures never compare equal, not even to themselves
    return False


# -------------------------------
# Symbols and strings
# -------------------------------
def symbol_to_string(value: LispValue) -> str:
    if isinstance(value, Symbol):
        return value.id
    raise TypeMismatch("symbol", value)


def string_to_symbol(value: LispValue) -> Symbol:
    if isinstance(value, str):
        return Symbol(value)
    raise TypeMismatch("string", value)


def string_ref(args: list[LispValue]) -> Char:
    if len(args) != 2:
        raise NumArgs(2, args)
    s, n = args
    if not isinstance(s, str) or not is_integer(n):
        found = " ".join(render(a) for a in args)
        raise GenericError(f"string-ref expects a string and an integer, got {found}")
    if n < 0 or n >= len(s):
        raise GenericError(f"string-ref: Index out of bounds, {n} (length {len(s)})")
    return Char(s[n])


# -------------------------------
# List operations
# -------------------------------
def car(value: LispValue) -> LispValue:
    if isinstance(value, list) and value:
        return value[0]
    if isinstance(value, DottedList):
        return value.head[0]
    raise TypeMismatch("pair", value)


def cdr(value: LispValue) -> LispValue:
    if isinstance(value, list) and value:
        return value[1:]
    if isinstance(value, DottedList):
        if len(value.head) == 1:
            return value.tail
        return DottedList(value.head[1:], value.tail)
    raise TypeMismatch("pair", value)


def length(value: LispValue) -> int:
    if isinstance(value, list):
        return len(value)
    raise TypeMismatch("list", value)


def cons(head: LispValue, tail: LispValue) -> LispValue:
    if isinstance(tail, list):
        return [head, *tail]
    if isinstance(tail, DottedList):
        return DottedList([head, *tail.head], tail.tail)
    return DottedList([head], tail)


# -------------------------------
# Application
# -------------------------------
def apply_primitive(args: list[LispValue]) -> LispValue:
    """(apply f '(a b)) spreads a list; (apply f a b) passes the arguments as given."""
    if not args:
        raise NumArgs(1, args)
    fn, *rest = args
    if len(rest) == 1 and isinstance(rest[0], list):
        return apply_engine(fn, list(rest[0]))
    return apply_engine(fn, rest)


# -------------------------------
# Side effects
# -------------------------------
def print_value(value: LispValue) -> list:
    print(render(value), flush=True)
    return []


def sleep(value: LispValue) -> list:
    if not is_integer(value):
        raise TypeMismatch("number", value)
    if value < 0:
        raise GenericError(f"sleep: negative duration {value}")
    try:
        time.sleep(value)
    except OverflowError:
        raise GenericError(f"sleep: duration too large {value}") from None
    return []


# -------------------------------
# Registration
# -------------------------------
PRIMITIVES: Mapping[str, PrimitiveFn] = MappingProxyType({
    "+": numeric_fold(lambda a, b: a + b),
    "-": numeric_fold(lambda a, b: a - b),
    "*": numeric_fold(lambda a, b: a * b),
    "/": numeric_fold(_floor_div),
    "mod": numeric_fold(_floor_mod),
    "quotient": numeric_fold(_quotient),
    "remainder": numeric_fold(_remainder),

    "symbol?": predicate(lambda v: isinstance(v, Symbol)),
    "list?": predicate(lambda v: isinstance(v, list)),
    "boolean?": predicate(lambda v: isinstance(v, bool)),
    "number?": predicate(is_integer),
    "real?": predicate(lambda v: isinstance(v, float)),
    "char?": predicate(lambda v: isinstance(v, Char)),
    "null?": predicate(lambda v: isinstance(v, list) and not v),
    "string?": predicate(lambda v: isinstance(v, str)),
    "symbol->string": f1(symbol_to_string),
    "string->symbol": f1(string_to_symbol),

    "=": num_bool_binop(lambda a, b: a == b),
    "<": num_bool_binop(lambda a, b: a < b),
    ">": num_bool_binop(lambda a, b: a > b),
    "/=": num_bool_binop(lambda a, b: a != b),
    ">=": num_bool_binop(lambda a, b: a >= b),
    "<=": num_bool_binop(lambda a, b: a <= b),
    "&&": bool_bool_binop(lambda a, b: a and b),
    "||": bool_bool_binop(lambda a, b: a or b),

    "string=?": str_bool_binop(lambda a, b: a == b),
    "string<?": str_bool_binop(lambda a, b: a < b),
    "string>?": str_bool_binop(lambda a, b: a > b),
    "string<=?": str_bool_binop(lambda a, b: a <= b),
    "string>=?": str_bool_binop(lambda a, b: a >= b),
    "string-ref": string_ref,

    "car": f1(car),
    "cdr": f1(cdr),
    "length": f1(length),
    "cons": f2(cons),
    "eq?": f2(is_equal),
    "eqv?": f2(is_equal),
    "equal?": f2(is_equal),

    "apply": apply_primitive,
    "print": f1(print_value),
    "sleep": f1(sleep),
})


def register(env: Environment, table: Mapping[str, PrimitiveFn] = PRIMITIVES) -> Environment:
    """Bind every entry of `table` in `env` as a Primitive value."""
    for name, fn in table.items():
        env.define(name, Primitive(name, fn))
    return env


def primitive_env(table: Mapping[str, PrimitiveFn] = PRIMITIVES) -> Environment:
    """Create a root environment holding the primitive table."""
    return Environment().extend((name, Primitive(name, fn)) for name, fn in table.items())
