from __future__ import annotations


class Char:
    """A character value, kept distinct from one-character strings."""

    __slots__ = ("value",)

    def __init__(self, value: str):
        if len(value) != 1:
            raise ValueError(f"Char requires exactly one character, got {value!r}")
        self.value = value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Char) and self.value == other.value

    def __hash__(self) -> int:
        return hash(("char", self.value))

    def __repr__(self):
        return f"Char({self.value!r})"

    def __str__(self):
        return self.value
