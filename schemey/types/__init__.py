"""Runtime value classes for Schemey."""

from schemey.types.symbol import Symbol
from schemey.types.char import Char
from schemey.types.dotted_list import DottedList
from schemey.types.cell import Cell
from schemey.types.environment import Environment
from schemey.types.procedures import Primitive, Closure

__all__ = [
    "Symbol",
    "Char",
    "DottedList",
    "Cell",
    "Environment",
    "Primitive",
    "Closure",
]
