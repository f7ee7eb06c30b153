from __future__ import annotations

"""
Lightweight indexer for Schemey files without evaluating code.

We scan for top-level `define` forms and record:
- variable definitions: (define name ...)
- procedure definitions: (define (name params...) ...) and (define (name . rest) ...)
- parse errors reported by the Reader, with their 1-based line/column

The scanner is tolerant: partial buffers never raise, they only produce a
parse error entry and a paren balance.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
import re

from schemey.errors import ParseFailure
from schemey.reader.parser import read_all
from schemey.builtin.primitives import PRIMITIVES

TOKEN_REGEX = re.compile(
    r'\s+|\(|\)|\'|"(?:\\.|[^"\\])*"?|#\\.|[^\s()\']+',
    re.DOTALL,
)


@dataclass
class SymbolDef:
    name: str
    kind: str  # "var" | "function"
    line: int
    col: int


@dataclass
class DocumentIndex:
    symbols: Dict[str, SymbolDef] = field(default_factory=dict)
    paren_balance: int = 0
    parse_error: Optional[ParseFailure] = None


def _iter_tokens(text: str):
    for m in TOKEN_REGEX.finditer(text):
        tok = m.group(0)
        if not tok or tok.isspace():
            continue
        yield tok, m.start(), m.end()


def _position_from_offset(text: str, offset: int) -> Tuple[int, int]:
    # Return (line, col), 0-based
    line = text.count("\n", 0, offset)
    last_nl = text.rfind("\n", 0, offset)
    col = offset if last_nl == -1 else offset - last_nl - 1
    return line, col


def build_index(text: str) -> DocumentIndex:
    idx = DocumentIndex()
    tokens = list(_iter_tokens(text))

    for i, (tok, start, end) in enumerate(tokens):
        if tok == ')':
            idx.paren_balance -= 1
            continue
        if tok != "(":
            continue
        depth = idx.paren_balance
        idx.paren_balance += 1
        # only top-level forms define document symbols
        if depth != 0 or i + 2 >= len(tokens) or tokens[i + 1][0] != "define":
            continue
        # (define name ...) or (define (name ...) ...)
        name_tok, name_start, _ = tokens[i + 2]
        kind = 'var'
        if name_tok == '(':
            if i + 3 >= len(tokens):
                continue
            name_tok, name_start, _ = tokens[i + 3]
            kind = 'function'
        if name_tok in ('(', ')', "'") or name_tok.startswith('"'):
            continue
        line, col = _position_from_offset(text, name_start)
        idx.symbols.setdefault(name_tok, SymbolDef(name=name_tok, kind=kind, line=line, col=col))

    try:
        read_all(text)
    except ParseFailure as ex:
        idx.parse_error = ex
    except RecursionError:
        idx.parse_error = ParseFailure("expressions nested too deeply to read")

    return idx


# Primitive signatures for hover/completion without evaluation
PRIMITIVE_SIGNATURES: Dict[str, str] = {
    "+": "(+ n ...)",
    "-": "(- n ...)",
    "*": "(* n ...)",
    "/": "(/ n ...)",
    "mod": "(mod n ...)",
    "quotient": "(quotient n ...)",
    "remainder": "(remainder n ...)",
    "string-ref": "(string-ref s k)",
    "car": "(car pair)",
    "cdr": "(cdr pair)",
    "length": "(length xs)",
    "cons": "(cons x xs)",
    "apply": "(apply f args)",
    "print": "(print x)",
    "sleep": "(sleep seconds)",
    "string?": "(string? x)",
    "symbol->string": "(symbol->string sym)",
    "string->symbol": "(string->symbol s)",
}


def primitive_signature(name: str) -> Optional[str]:
    """Signature for a primitive; unlisted primitives are predicates or binary comparisons."""
    if name not in PRIMITIVES:
        return None
    if name in PRIMITIVE_SIGNATURES:
        return PRIMITIVE_SIGNATURES[name]
    if name.endswith("?") and name not in ("eq?", "eqv?", "equal?") and not name.startswith("string"):
        return f"({name} x)"
    return f"({name} a b)"


def all_primitive_names() -> List[str]:
    return sorted(PRIMITIVES)
