import pytest
from hypothesis import given, strategies as st

from schemey.errors import GenericError, NumArgs, TypeMismatch


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2 3)", 6),
        ("(- 10 3 2)", 5),
        ("(* 2 3 4)", 24),
        ("(/ 12 3)", 4),
        ("(+ 5)", 5),
        ("(- 5)", 5),
        ("(+ (* 2 3) (- 10 4))", 12),
        ("(/ (+ 20 10) (* 2 5))", 3),
        ("(* 1 2 3 4 5 6)", 720),
        ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", 57),
        ("(/ 7 2)", 3),
        ("(/ (- 0 7) 2)", -4),
        ("(mod 7 3)", 1),
        ("(mod (- 0 7) 3)", 2),
        ("(mod 7 (- 0 3))", -2),
        ("(quotient 7 2)", 3),
        ("(quotient (- 0 7) 2)", -3),
        ("(remainder 7 3)", 1),
        ("(remainder (- 0 7) 3)", -1),
        ("(remainder 7 (- 0 3))", 1),
        ("(- 100 1 2 3)", 94),
        ("(* 99999999999 99999999999)", 9999999999800000000001),
    ]
)
def test_arithmetic(run, source, expected):
    assert run(source) == expected


def test_zero_arguments_is_arity_error(run):
    with pytest.raises(NumArgs) as info:
        run("(+)")
    assert info.value.expected == 1
    assert info.value.found == []
    assert str(info.value) == "Expected 1 args; found values "


@pytest.mark.parametrize("source", ["(+ 1 \"2\")", "(* 1.5 2)", "(- #t 1)", "(/ 'a 1)"])
def test_non_integer_is_type_mismatch(run, source):
    with pytest.raises(TypeMismatch) as info:
        run(source)
    assert info.value.expected == "number"


@pytest.mark.parametrize("op", ["/", "mod", "quotient", "remainder"])
def test_division_by_zero(run, op):
    with pytest.raises(GenericError) as info:
        run(f"({op} 1 0)")
    assert str(info.value) == "Error: Division by zero"


@given(st.lists(st.integers(min_value=0, max_value=10**9), min_size=1, max_size=20))
def test_apply_plus_is_sum(xs):
    from schemey.interpreter import Interpreter
    interp = Interpreter()
    source = "(apply + '(" + " ".join(str(x) for x in xs) + "))"
    assert interp.eval(source) == sum(xs)


@given(st.integers(min_value=-1000, max_value=1000), st.integers(min_value=-1000, max_value=1000).filter(lambda d: d != 0))
def test_quotient_remainder_identity(n, d):
    from schemey.builtin.primitives import PRIMITIVES
    q = PRIMITIVES["quotient"]([n, d])
    r = PRIMITIVES["remainder"]([n, d])
    assert q * d + r == n
    assert abs(r) < abs(d)
    assert r == 0 or (r < 0) == (n < 0)
