"""
  Schemey Reader

Turns source text into values. Grammar alternatives are tried in a fixed
order at the current position and the first one that matches wins; an
alternative that fails leaves the position untouched so the next one can be
tried.

   - floats        -> float      (digits '.' digits)
   - integers      -> int        (#o, #d, #x radix prefixes or plain digits)
   - characters    -> Char       (#\\space, #\\newline, #\\<any>)
   - strings       -> str
   - #t / #f       -> bool
   - symbols       -> Symbol
   - 'x            -> [quote, x]
   - ( ... )       -> list
   - ( ... . x )   -> DottedList
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from schemey import SExpression
from schemey.errors import ParseFailure
from schemey.types.char import Char
from schemey.types.dotted_list import DottedList
from schemey.types.symbol import Symbol

SYMBOL_CHARS = "!#$%&|*+\\-/:<=>?@^_~"

WHITESPACE_RE = re.compile(r"[ \t\n\r\f\v]+")
FLOAT_RE = re.compile(r"[0-9]+\.[0-9]+")
BINARY_RE = re.compile(r"#b[01]+")
RADIX_RES: list[tuple[re.Pattern, int]] = [
    (re.compile(r"#o([0-7]+)"), 8),
    (re.compile(r"#d([0-9]+)"), 10),
    (re.compile(r"#x([0-9A-F]+)"), 16),
    (re.compile(r"([0-9]+)"), 10),
]
CHAR_RE = re.compile(r"#\\((?i:space|newline)|.)", re.DOTALL)
SYMBOL_RE = re.compile(
    rf"(?:[^\W\d_]|[{SYMBOL_CHARS}])(?:[^\W\d_]|[0-9]|[{SYMBOL_CHARS}])*"
)

NAMED_CHARS: dict[str, str] = {
    "space": " ",
    "newline": "\n",
}

STRING_ESCAPES: dict[str, str] = {
    '"': '"',
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "\\": "\\",
}

BOOLEANS: dict[str, bool] = {
    "#t": True,
    "#f": False,
}

QUOTE = Symbol("quote")


class Reader:
    def __init__(self, source: str):
        self.source = source
        self.pos = 0

    # --- Position helpers ---
    def at_end(self) -> bool:
        return self.pos >= len(self.source)

    def peek(self) -> Optional[str]:
        if self.at_end():
            return None
        return self.source[self.pos]

    def skip_whitespace(self) -> bool:
        """Consume whitespace; report whether any was present."""
        m = WHITESPACE_RE.match(self.source, self.pos)
        if not m:
            return False
        self.pos = m.end()
        return True

    def location(self, pos: Optional[int] = None) -> tuple[int, int]:
        if pos is None:
            pos = self.pos
        line = self.source.count("\n", 0, pos) + 1
        last_nl = self.source.rfind("\n", 0, pos)
        return line, pos - last_nl

    def fail(self, message: str, pos: Optional[int] = None) -> ParseFailure:
        line, column = self.location(pos)
        return ParseFailure(message, line, column)

    def unexpected(self, expecting: str) -> ParseFailure:
        ch = self.peek()
        found = "end of input" if ch is None else repr(ch)
        return self.fail(f"unexpected {found}, expecting {expecting}")

    def _match(self, pattern: re.Pattern) -> Optional[re.Match]:
        m = pattern.match(self.source, self.pos)
        if m:
            self.pos = m.end()
        return m

    # --- Alternatives, tried in order by parse_expr ---
    def parse_float(self) -> Optional[float]:
        m = self._match(FLOAT_RE)
        return float(m.group(0)) if m else None

    def parse_number(self) -> Optional[int]:
        if BINARY_RE.match(self.source, self.pos):
            raise self.fail("binary literals are not supported")
        for pattern, base in RADIX_RES:
            m = self._match(pattern)
            if m:
                return int(m.group(1), base)
        return None

    def parse_char(self) -> Optional[Char]:
        m = self._match(CHAR_RE)
        if not m:
            return None
        text = m.group(1)
        return Char(NAMED_CHARS.get(text.lower(), text))

    def parse_string(self) -> Optional[str]:
        if self.peek() != '"':
            return None
        start = self.pos
        self.pos += 1
        chars: list[str] = []
        while True:
            ch = self.peek()
            if ch is None:
                raise self.fail("unterminated string literal", start)
            self.pos += 1
            if ch == '"':
                return "".join(chars)
            if ch == "\\":
                esc = self.peek()
                if esc not in STRING_ESCAPES:
                    raise self.unexpected("a string escape")
                self.pos += 1
                chars.append(STRING_ESCAPES[esc])
            else:
                chars.append(ch)

    def parse_symbol(self) -> Optional[SExpression]:
        m = self._match(SYMBOL_RE)
        if not m:
            return None
        text = m.group(0)
        if text in BOOLEANS:
            return BOOLEANS[text]
        return Symbol(text)

    def parse_quoted(self) -> Optional[list]:
        if self.peek() != "'":
            return None
        self.pos += 1
        return [QUOTE, self.parse_expr()]

    def parse_list(self) -> Optional[SExpression]:
        if self.peek() != "(":
            return None
        self.pos += 1
        self.skip_whitespace()
        items: list[SExpression] = []
        if self.peek() == ")":
            self.pos += 1
            return items
        while True:
            items.append(self.parse_expr())
            spaced = self.skip_whitespace()
            ch = self.peek()
            if ch == ")":
                self.pos += 1
                return items
            if ch == "." and spaced:
                return self._finish_dotted(items)
            if not spaced:
                raise self.unexpected("space or ')'")

    def _finish_dotted(self, head: list[SExpression]) -> DottedList:
        self.pos += 1  # the '.'
        if not self.skip_whitespace():
            raise self.unexpected("space after '.'")
        tail = self.parse_expr()
        self.skip_whitespace()
        if self.peek() != ")":
            raise self.unexpected("')' after dotted tail")
        self.pos += 1
        return DottedList(head, tail)

    def parse_expr(self) -> SExpression:
        if self.peek() == "(" and self._dotted_without_head():
            raise self.fail("dotted list requires at least one element before '.'")
        for alternative in (
            self.parse_float,
            self.parse_number,
            self.parse_char,
            self.parse_string,
            self.parse_symbol,
            self.parse_quoted,
            self.parse_list,
        ):
            value = alternative()
            if value is not None:
                return value
        raise self.unexpected("expression")

    def _dotted_without_head(self) -> bool:
        m = WHITESPACE_RE.match(self.source, self.pos + 1)
        nxt = m.end() if m else self.pos + 1
        return self.source.startswith(".", nxt)

    def parse_all(self) -> Iterator[SExpression]:
        """Yield whitespace-separated expressions until the input is exhausted."""
        self.skip_whitespace()
        while not self.at_end():
            yield self.parse_expr()
            if not self.skip_whitespace() and not self.at_end():
                raise self.unexpected("space or end of input")


def read_one(source: str) -> SExpression:
    """Read exactly one expression; trailing non-whitespace input is an error."""
    reader = Reader(source)
    reader.skip_whitespace()
    expr = reader.parse_expr()
    reader.skip_whitespace()
    if not reader.at_end():
        raise reader.unexpected("end of input")
    return expr


def read_all(source: str) -> list[SExpression]:
    """Read every expression in `source`, in order."""
    return list(Reader(source).parse_all())
