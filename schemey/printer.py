"""Canonical text rendering of Schemey values.

Rendered atoms and lists read back to equal values, except procedures,
which print as opaque placeholders.
"""

from __future__ import annotations

from schemey import LispValue
from schemey.types.symbol import Symbol
from schemey.types.char import Char
from schemey.types.dotted_list import DottedList
from schemey.types.procedures import Primitive, Closure

STRING_ESCAPES: dict[str, str] = {
    '"': '\\"',
    "\\": "\\\\",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}

CHAR_NAMES: dict[str, str] = {
    " ": "space",
    "\n": "newline",
}


def render_string(s: str) -> str:
    return '"' + "".join(STRING_ESCAPES.get(c, c) for c in s) + '"'


def render(value: LispValue) -> str:
    if isinstance(value, bool):
        return "#t" if value else "#f"
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, str):
        return render_string(value)
    if isinstance(value, Symbol):
        return value.id
    if isinstance(value, Char):
        return "#\\" + CHAR_NAMES.get(value.value, value.value)
    if isinstance(value, list):
        return "(" + " ".join(render(v) for v in value) + ")"
    if isinstance(value, DottedList):
        head = " ".join(render(v) for v in value.head)
        return f"({head} . {render(value.tail)})"
    if isinstance(value, Primitive):
        return "<primitive>"
    if isinstance(value, Closure):
        return str(value)
    return repr(value)


def render_result(value: LispValue) -> str:
    """Top-level display form: the unit value prints as nothing."""
    if isinstance(value, list) and not value:
        return ""
    return render(value)
