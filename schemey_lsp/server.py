from __future__ import annotations

"""
A minimal pygls-based Language Server for Schemey.

Features:
- Text synchronization and document store
- Diagnostics: Reader parse errors, unbalanced parentheses
- Hover: primitive signatures and locally defined names
- Completion: primitives, special forms and locally defined names
- Document Symbols: from indexer

Note: We never evaluate the buffer. We build a static index per document.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional, List

from pygls.server import LanguageServer
from lsprotocol.types import (
    TEXT_DOCUMENT_COMPLETION,
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_CLOSE,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_DOCUMENT_SYMBOL,
    TEXT_DOCUMENT_HOVER,
    CompletionItem,
    CompletionItemKind,
    CompletionList,
    CompletionOptions,
    CompletionParams,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
    DocumentSymbol,
    DocumentSymbolParams,
    Hover,
    HoverParams,
    MarkupContent,
    MarkupKind,
    Position,
    Range,
    SymbolKind,
)

from schemey.evaluation.special_forms import SPECIAL_FORMS
from schemey_lsp.indexer import build_index, primitive_signature, all_primitive_names, DocumentIndex

log = logging.getLogger(__name__)

SOURCE = "schemey-ls"


@dataclass
class DocumentState:
    text: str
    index: DocumentIndex


class SchemeyLanguageServer(LanguageServer):
    CMD_NAME = "schemey-ls"
    VERSION = "0.1.0"

    def __init__(self):
        super().__init__(self.CMD_NAME, self.VERSION)
        self.documents: Dict[str, DocumentState] = {}


ls = SchemeyLanguageServer()


# --- Text sync ---
@ls.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(params: DidOpenTextDocumentParams):
    uri = params.text_document.uri
    update_document(uri, params.text_document.text or "")
    log.debug("opened %s", uri)
    _publish_diagnostics(uri)


@ls.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(params: DidChangeTextDocumentParams):
    uri = params.text_document.uri
    if params.content_changes:
        text = params.content_changes[-1].text
    else:
        text = ls.documents[uri].text if uri in ls.documents else ""
    update_document(uri, text)
    _publish_diagnostics(uri)


@ls.feature(TEXT_DOCUMENT_DID_CLOSE)
def did_close(params: DidCloseTextDocumentParams):
    uri = params.text_document.uri
    ls.documents.pop(uri, None)
    log.debug("closed %s", uri)
    ls.publish_diagnostics(uri, [])


def update_document(uri: str, text: str) -> DocumentState:
    state = DocumentState(text=text, index=build_index(text))
    ls.documents[uri] = state
    return state


# --- Diagnostics ---
def _mk_range(line: int, col: int) -> Range:
    return Range(start=Position(line=line, character=col), end=Position(line=line, character=col + 1))


def collect_diagnostics(idx: DocumentIndex) -> List[Diagnostic]:
    diags: List[Diagnostic] = []

    if idx.parse_error is not None:
        err = idx.parse_error
        diags.append(
            Diagnostic(
                range=_mk_range(err.line - 1, err.column - 1),
                message=str(err),
                severity=DiagnosticSeverity.Error,
                source=SOURCE,
            )
        )

    if idx.paren_balance != 0:
        diags.append(
            Diagnostic(
                range=_mk_range(0, 0),
                message="Unmatched parentheses detected",
                severity=DiagnosticSeverity.Warning,
                source=SOURCE,
            )
        )
    return diags


def _publish_diagnostics(uri: str):
    ls.publish_diagnostics(uri, collect_diagnostics(ls.documents[uri].index))


# --- Hover ---
@ls.feature(TEXT_DOCUMENT_HOVER)
def on_hover(params: HoverParams) -> Optional[Hover]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None

    word = _extract_word_at(state.text, params.position)
    if not word:
        return None

    contents = primitive_signature(word)
    if contents is None and word in state.index.symbols:
        sdef = state.index.symbols[word]
        contents = f"{word} - {sdef.kind} (defined at {sdef.line+1}:{sdef.col+1})"

    if contents is None:
        return None
    return Hover(contents=MarkupContent(kind=MarkupKind.PlainText, value=contents))


# --- Completion ---
@ls.feature(TEXT_DOCUMENT_COMPLETION, CompletionOptions(trigger_characters=["("]))
def on_completion(params: CompletionParams) -> CompletionList:
    state = ls.documents.get(params.text_document.uri)
    items: List[CompletionItem] = []

    for keyword in SPECIAL_FORMS:
        items.append(CompletionItem(label=str(keyword), kind=CompletionItemKind.Keyword))
    for name in all_primitive_names():
        items.append(CompletionItem(label=name, kind=CompletionItemKind.Function, detail=primitive_signature(name)))
    if state:
        for name, sdef in state.index.symbols.items():
            kind = CompletionItemKind.Function if sdef.kind == 'function' else CompletionItemKind.Variable
            items.append(CompletionItem(label=name, kind=kind))

    return CompletionList(is_incomplete=False, items=items)


# --- Document Symbols ---
@ls.feature(TEXT_DOCUMENT_DOCUMENT_SYMBOL)
def on_document_symbols(params: DocumentSymbolParams) -> Optional[List[DocumentSymbol]]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None
    symbols: List[DocumentSymbol] = []

    for name, sdef in state.index.symbols.items():
        rng = Range(
            start=Position(line=sdef.line, character=sdef.col),
            end=Position(line=sdef.line, character=sdef.col + len(name)),
        )
        symbols.append(
            DocumentSymbol(
                name=name,
                kind=SymbolKind.Function if sdef.kind == 'function' else SymbolKind.Variable,
                range=rng,
                selection_range=rng,
            )
        )
    return symbols


# --- Helpers ---
def _extract_word_at(text: str, pos: Position) -> Optional[str]:
    lines = text.splitlines(True)
    if pos.line >= len(lines):
        return None
    line = lines[pos.line]
    # expand to word boundaries (anything but whitespace, parens and quote)
    start = pos.character
    while start > 0 and line[start - 1] not in " \t()'\n\r":
        start -= 1
    end = pos.character
    while end < len(line) and line[end] not in " \t()'\n\r":
        end += 1
    return line[start:end] or None


def main():
    logging.basicConfig(level=logging.INFO)
    # Run the language server over stdio
    ls.start_io()


if __name__ == "__main__":
    main()
