import json

from lsprotocol.types import (
    CompletionParams,
    HoverParams,
    Position,
    TextDocumentIdentifier,
)

from schemey_lsp import server
from schemey_lsp.indexer import build_index, primitive_signature
from schemey_lsp.repl_server import ReplServer

SOURCE = """(define x 10)
(define (square n) (* n n))
(define (collect . items) items)
(square x)
"""


def test_index_collects_definitions():
    idx = build_index(SOURCE)
    assert set(idx.symbols) == {"x", "square", "collect"}
    assert idx.symbols["x"].kind == "var"
    assert idx.symbols["square"].kind == "function"
    assert (idx.symbols["square"].line, idx.symbols["square"].col) == (1, 9)
    assert idx.paren_balance == 0
    assert idx.parse_error is None


def test_index_reports_parse_errors():
    idx = build_index("(define x 1)\n(define y")
    assert idx.paren_balance == 1
    assert idx.parse_error is not None
    assert idx.parse_error.line == 2
    diags = server.collect_diagnostics(idx)
    assert len(diags) == 2
    assert diags[0].range.start.line == 1


def test_primitive_signatures():
    assert primitive_signature("cons") == "(cons x xs)"
    assert primitive_signature("null?") == "(null? x)"
    assert primitive_signature("string<?") == "(string<? a b)"
    assert primitive_signature("not-a-primitive") is None


def test_hover_and_completion():
    uri = "file:///tmp/test.scm"
    server.update_document(uri, SOURCE)
    doc = TextDocumentIdentifier(uri=uri)

    hover = server.on_hover(HoverParams(text_document=doc, position=Position(line=1, character=20)))
    assert hover.contents.value == "(* n ...)"

    hover = server.on_hover(HoverParams(text_document=doc, position=Position(line=3, character=2)))
    assert hover.contents.value.startswith("square - function")

    completions = server.on_completion(CompletionParams(text_document=doc, position=Position(line=0, character=0)))
    labels = {item.label for item in completions.items}
    assert {"define", "lambda", "car", "square", "x"} <= labels


def test_repl_server_requests():
    srv = ReplServer(host="127.0.0.1", port=0)
    ok = srv.handle_request(json.dumps({"cmd": "eval", "code": "(define x 20) (+ x 1)"}).encode())
    assert ok == {"ok": True, "result": "21"}
    assert srv.handle_request(b'{"cmd": "eval", "code": "x"}') == {"ok": True, "result": "20"}
    err = srv.handle_request(b'{"cmd": "eval", "code": "(car 1)"}')
    assert err == {"ok": False, "error": "Invalid type: expected pair, found 1"}
    assert srv.handle_request(b'{"cmd": "quit"}')["error"] == "Unknown cmd: quit"
    assert srv.handle_request(b"not json")["error"].startswith("Invalid request")


def test_index_skips_local_defines():
    idx = build_index("(define (outer n)\n  (define inner (* n 2))\n  inner)\n(define top 1)\n")
    assert set(idx.symbols) == {"outer", "top"}


def test_index_reports_deep_nesting_as_parse_error():
    idx = build_index("(" * 6000 + ")" * 6000)
    assert idx.paren_balance == 0
    assert idx.parse_error is not None
    assert len(server.collect_diagnostics(idx)) == 1


def test_repl_server_reports_deep_nesting():
    srv = ReplServer(host="127.0.0.1", port=0)
    code = "(quote " + "(" * 6000 + ")" * 6000 + ")"
    resp = srv.handle_request(json.dumps({"cmd": "eval", "code": code}).encode())
    assert resp == {"ok": False, "error": "Error: Recursion depth exceeded"}
