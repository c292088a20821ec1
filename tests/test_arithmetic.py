"""
Unary numeral arithmetic.

Every operation here is built from sequence operations on the unit
sequences behind the numerals; the expected values are plain integers.
"""

import pytest

from typerw import (
    Str,
    TRUE,
    FALSE,
    num,
    evaluate,
    run_operation,
    try_run,
    NegativeResult,
    NoMatchingClause,
)


@pytest.mark.parametrize("a, b", [(0, 0), (0, 3), (3, 0), (2, 5), (7, 4)])
def test_add(a, b):
    assert evaluate("Add", num(a), num(b)) == num(a + b)


@pytest.mark.parametrize("a, b", [(0, 0), (5, 0), (5, 2), (4, 4)])
def test_subtract(a, b):
    assert run_operation("Subtract", a, b) == a - b


def test_subtract_below_zero_is_a_failure():
    with pytest.raises(NegativeResult) as info:
        evaluate("Subtract", num(2), num(5))
    assert info.value.op == "DropUnits"


def test_subtract_failure_outcome():
    out = try_run("Subtract", 0, 1)
    assert not out.ok
    assert out.describe_error()["kind"] == "NegativeResult"


@pytest.mark.parametrize("a, b", [(0, 4), (4, 0), (1, 1), (3, 4), (2, 5)])
def test_multiply(a, b):
    assert run_operation("Multiply", a, b) == a * b


@pytest.mark.parametrize("n, expected", [(0, 0), (1, 1), (2, 1), (3, 2), (4, 3), (5, 5), (6, 8), (7, 13)])
def test_fibonacci_is_zero_indexed(n, expected):
    assert run_operation("Fibonacci", n) == expected


@pytest.mark.parametrize(
    "a, b, expected",
    [(0, 0, FALSE), (1, 0, TRUE), (0, 1, FALSE), (3, 3, FALSE), (4, 3, TRUE), (2, 6, FALSE)],
)
def test_greater_than(a, b, expected):
    assert evaluate("GreaterThan", num(a), num(b)) == expected


@pytest.mark.parametrize("op, args", [
    ("Add", (num(1), Str("1"))),
    ("Subtract", ([1], num(1))),
    ("Subtract", (num(2), Str("abc"))),
    ("Multiply", (Str("abc"), num(0))),
    ("Multiply", (num(0), Str("abc"))),
    ("GreaterThan", (num(0), Str("a"))),
    ("GreaterThan", (Str("a"), num(0))),
    ("Fibonacci", (Str("a"),)),
])
def test_arithmetic_rejects_non_numerals(op, args):
    with pytest.raises(NoMatchingClause):
        evaluate(op, *args)


def test_drop_units_requires_a_sequence():
    with pytest.raises(NoMatchingClause):
        evaluate("DropUnits", Str("abc"), [])


def test_add_beyond_the_interpreter_recursion_limit():
    assert run_operation("Add", 200, 200) == 400
    assert run_operation("Add", 600, 600) == 1200


def test_subtract_beyond_the_interpreter_recursion_limit():
    assert run_operation("Subtract", 900, 400) == 500


def test_multiply_of_twenty_by_twenty():
    out = try_run("Multiply", 20, 20)
    assert out.ok
    assert out.value == num(400)


def test_results_are_canonical_numerals():
    r = evaluate("Add", num(2), num(3))
    assert r.magnitude == 5
    assert hash(r) == hash(num(5))
