from __future__ import annotations
import sys


class Symbol:
    """An identifier value; names are interned so lookups compare cheaply.

    Special-form keywords and environment names are both Symbols, and two
    Symbols are equal exactly when their names are.
    """

    __slots__ = ("id",)

    def __init__(self, name: str):
        self.id = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash(("symbol", self.id))

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id
