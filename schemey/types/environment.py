"""Runtime environment for Schemey.

An Environment is an ordered list of bindings, each pairing a name with a
shared mutable Cell. Lookup resolves to the most recently added binding for
a name.

Extending an environment takes a snapshot: the child receives fresh cells for
its own bindings followed by the parent's binding list as it stands at that
moment. Names the parent gains later are invisible to the child, while `set!`
on a name both can see writes the shared Cell and is visible from either.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Optional

from schemey import LispValue
from schemey.errors import UnboundVar
from schemey.types.cell import Cell


class Environment:
    """Ordered name -> Cell bindings with snapshot extension."""

    __slots__ = ("bindings",)

    def __init__(self, bindings: Optional[list[tuple[str, Cell]]] = None):
        # Stored oldest first; lookups scan from the end
        self.bindings: list[tuple[str, Cell]] = bindings if bindings is not None else []

    def _find(self, name: str) -> Optional[Cell]:
        for bound, cell in reversed(self.bindings):
            if bound == name:
                return cell
        return None

    def is_bound(self, name: str) -> bool:
        return self._find(name) is not None

    def get(self, name: str) -> LispValue:
        """Return the value bound to `name`; raises UnboundVar on a miss."""
        cell = self._find(name)
        if cell is None:
            raise UnboundVar("Getting an unbound variable", name)
        return cell.value

    def set(self, name: str, value: LispValue) -> LispValue:
        """Overwrite the existing cell for `name` and return `value`."""
        cell = self._find(name)
        if cell is None:
            raise UnboundVar("Setting an unbound variable", name)
        cell.value = value
        return value

    def define(self, name: str, value: LispValue) -> LispValue:
        """Rebind a visible name in place, or add a fresh binding to this frame."""
        cell = self._find(name)
        if cell is not None:
            cell.value = value
            return value
        self.bindings.append((name, Cell(value)))
        return value

    def extend(self, bindings: Iterable[tuple[str, LispValue]]) -> Environment:
        """Build a child environment holding `bindings` in front of a snapshot of ours.

        When `bindings` repeats a name, the earliest occurrence wins lookups.
        """
        fresh = [(name, Cell(value)) for name, value in bindings]
        fresh.reverse()
        return Environment(self.bindings + fresh)

    def names(self) -> list[str]:
        """Visible names, most recent first, without duplicates."""
        seen: dict[str, None] = {}
        for name, _ in reversed(self.bindings):
            seen.setdefault(name, None)
        return list(seen)

    def __len__(self) -> int:
        return len(self.bindings)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.is_bound(name)

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment {")
            buffer.write(", ".join(f"{name}: {cell.value!r}" for name, cell in reversed(self.bindings)))
            buffer.write("}>")
            return buffer.getvalue()
