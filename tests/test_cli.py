import io

import pytest

from schemey.cli import main, repl, print_result, PROMPT
from schemey.interpreter import Interpreter
from schemey.types.procedures import Primitive


def test_eval_expression(capsys):
    assert main(["-e", "(+ 1 2)"]) == 0
    assert capsys.readouterr().out == "3\n"


def test_eval_expression_unit_prints_nothing(capsys):
    assert main(["-e", "'()"]) == 0
    assert capsys.readouterr().out == ""


def test_eval_expression_error(capsys):
    assert main(["-e", "(car 1)"]) == 1
    assert capsys.readouterr().out == "Invalid type: expected pair, found 1\n"


def test_parse_error_is_one_line(capsys):
    assert main(["-e", "(+ 1"]) == 1
    out = capsys.readouterr().out
    assert out.startswith("Parse error at")
    assert out.count("\n") == 1


def test_run_file_with_args(tmp_path, capsys):
    script = tmp_path / "prog.scm"
    script.write_text("(define (first xs) (car xs))\n(first args)\n")
    assert main([str(script), "alpha", "beta"]) == 0
    assert capsys.readouterr().out == '"alpha"\n'


def test_help_exits(capsys):
    with pytest.raises(SystemExit) as info:
        main(["-h"])
    assert info.value.code == 0
    assert "usage: schemey" in capsys.readouterr().out


def _scripted(lines):
    feed = iter(lines)

    def read_line(prompt):
        assert prompt == PROMPT
        item = next(feed)
        if isinstance(item, BaseException):
            raise item
        return item
    return read_line


def test_repl_session_until_eof():
    out = io.StringIO()
    interp = Interpreter()
    repl(interp, _scripted(["(define x 2)", "", "(* x 21)", "(car '())", "'()", EOFError()]), out)
    assert out.getvalue().splitlines() == [
        "2",
        "42",
        "Invalid type: expected pair, found ()",
        "",
    ]


def test_repl_quits_on_interrupt():
    out = io.StringIO()
    repl(Interpreter(), _scripted(["(+ 1 1)", KeyboardInterrupt()]), out)
    assert out.getvalue() == "2\n\nquitting...\n"


def test_print_result_reports_failure():
    out = io.StringIO()
    assert print_result(lambda: Interpreter().read_eval("nope"), out) is False
    assert out.getvalue() == "Getting an unbound variable: nope\n"


DEEPLY_NESTED = "(quote " + "(" * 6000 + ")" * 6000 + ")"


def test_deeply_nested_expression_is_one_line_error(capsys):
    assert main(["-e", DEEPLY_NESTED]) == 1
    assert capsys.readouterr().out == "Error: Recursion depth exceeded\n"


def test_repl_quits_on_interrupt_during_evaluation():
    def interrupt(args):
        raise KeyboardInterrupt

    interp = Interpreter()
    interp.env.define("interrupt", Primitive("interrupt", interrupt))
    out = io.StringIO()
    repl(interp, _scripted(["(+ 1 1)", "(interrupt)", "(+ 2 2)"]), out)
    assert out.getvalue() == "2\n\nquitting...\n"
