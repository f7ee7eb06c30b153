from __future__ import annotations

from schemey import LispValue


class Cell:
    """A mutable slot holding one value; frames share cells by reference."""

    __slots__ = ("value",)

    def __init__(self, value: LispValue):
        self.value = value

    def __repr__(self):
        return f"Cell({self.value!r})"
