from __future__ import annotations

from schemey import LispValue


class DottedList:
    """An improper list: one or more head values followed by a non-list tail."""

    __slots__ = ("head", "tail")

    def __init__(self, head: list[LispValue], tail: LispValue):
        if not head:
            raise ValueError("DottedList requires a non-empty head")
        self.head: list[LispValue] = list(head)
        self.tail: LispValue = tail

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, DottedList)
            and self.head == other.head
            and self.tail == other.tail
        )

    __hash__ = None

    def __repr__(self):
        return f"DottedList({self.head!r}, {self.tail!r})"
