import pytest
from hypothesis import given, strategies as st

from schemey.errors import ParseFailure
from schemey.printer import render
from schemey.reader.parser import read_one, read_all
from schemey.types.char import Char
from schemey.types.dotted_list import DottedList
from schemey.types.symbol import Symbol
from schemey.builtin.primitives import is_equal


@pytest.mark.parametrize(
    "source, expected",
    [
        ("123", 123),
        ("3.14", 3.14),
        ("#o17", 15),
        ("#d42", 42),
        ("#xFF", 255),
        ("#t", True),
        ("#f", False),
        ("abc", Symbol("abc")),
        ("-5", Symbol("-5")),
        ("string->symbol", Symbol("string->symbol")),
        ("#true", Symbol("#true")),
        ("#o9", Symbol("#o9")),
        ("#bob", Symbol("#bob")),
        ("#xff", Symbol("#xff")),
        ('"hello"', "hello"),
        ('"a\\nb"', "a\nb"),
        ('"tab\\there"', "tab\there"),
        ('"q\\"uote\\\\"', 'q"uote\\'),
        ("#\\a", Char("a")),
        ("#\\space", Char(" ")),
        ("#\\SPACE", Char(" ")),
        ("#\\Newline", Char("\n")),
        ("#\\(", Char("(")),
        ("'a", [Symbol("quote"), Symbol("a")]),
        ("()", []),
        ("(a b c)", [Symbol("a"), Symbol("b"), Symbol("c")]),
        ("(1 (2 3) \"x\")", [1, [2, 3], "x"]),
        ("(a . b)", DottedList([Symbol("a")], Symbol("b"))),
        ("(1 2 . 3)", DottedList([1, 2], 3)),
        ("'(1 . 2)", [Symbol("quote"), DottedList([1], 2)]),
    ]
)
def test_read_one(source, expected):
    result = read_one(source)
    assert is_equal(result, expected)


def test_character_and_string_are_distinct():
    assert read_one("#\\a") != read_one('"a"')


def test_whitespace_inside_lists_and_newlines():
    source = "(define (f x)\n  (* x\tx))"
    assert read_one(source) == [
        Symbol("define"),
        [Symbol("f"), Symbol("x")],
        [Symbol("*"), Symbol("x"), Symbol("x")],
    ]
    assert read_one("( a b )") == [Symbol("a"), Symbol("b")]


def test_read_all_sequence():
    exprs = read_all("  (define y 1)\n(+ y 1)\n")
    assert exprs == [
        [Symbol("define"), Symbol("y"), 1],
        [Symbol("+"), Symbol("y"), 1],
    ]


def test_read_all_empty():
    assert read_all("") == []
    assert read_all(" \n\t ") == []


@pytest.mark.parametrize(
    "source",
    [
        "",
        "(",
        "(a b",
        ")",
        "(a . )",
        "(. a)",
        "(a .b)",
        "(a. b)",
        "(a . b c)",
        '"unterminated',
        '"bad \\q escape"',
        "#b101",
        "12abc",
        "#x1f",
        "(a b) c",
        "' a",
        ".",
    ]
)
def test_read_one_rejects(source):
    with pytest.raises(ParseFailure):
        read_one(source)


def test_read_all_requires_separating_whitespace():
    with pytest.raises(ParseFailure):
        read_all("(a)(b)")


def test_parse_failure_location():
    with pytest.raises(ParseFailure) as info:
        read_all("(a b)\n(c ]")
    assert info.value.line == 2
    assert str(info.value).startswith('Parse error at "schemey" (line 2')


# -------------------------------
# Strategies
# -------------------------------
symbol_strat = st.from_regex(r"[a-z!$%&*/:<=>?^_~][a-z0-9!$%&*/:<=>?^_~+\-]{0,8}", fullmatch=True)

string_strat = st.text(
    st.characters(min_codepoint=32, max_codepoint=126) | st.sampled_from(["\n", "\t", "\r"]),
    max_size=12,
)

atom_strat = st.one_of(
    st.integers(min_value=0, max_value=10**12),
    st.booleans(),
    string_strat,
    symbol_strat.map(Symbol),
    st.characters(min_codepoint=33, max_codepoint=126).map(Char),
    st.sampled_from([Char(" "), Char("\n")]),
)


def _extend(children):
    return st.one_of(
        st.lists(children, max_size=4),
        st.builds(DottedList, st.lists(children, min_size=1, max_size=3), atom_strat),
    )


value_strat = st.recursive(atom_strat, _extend, max_leaves=12)


# -------------------------------
# Hypothesis tests
# -------------------------------
@given(value_strat)
def test_render_read_round_trip(value):
    text = render(value)
    assert is_equal(read_one(text), value)


@given(st.floats(min_value=0.001, max_value=1e6, allow_nan=False, allow_infinity=False))
def test_float_round_trip(value):
    text = render(value)
    if "e" not in text:
        assert read_one(text) == value


def test_symbols_compare_by_name():
    assert read_one("abc") == Symbol("abc")
    assert read_one("abc") != "abc"
    assert len({Symbol("a"), Symbol("a"), Symbol("b")}) == 2
    assert str(Symbol("set!")) == "set!"
