"""
Sequence operations of the standard catalog.
"""

import pytest

from typerw import (
    EMPTY,
    Str,
    TRUE,
    FALSE,
    num,
    seq_of,
    evaluate,
    new_evaluator,
    run_operation,
    index_of,
    EmptySequence,
    NoMatchingClause,
    NotFound,
)


@pytest.mark.parametrize(
    "op, arg, expected",
    [
        ("Head", [1, 2, 3], 1),
        ("Head", [[1], 2], [1]),
        ("Last", [1, 2, 3], 3),
        ("Last", ["only"], "only"),
        ("Shift", [1, 2, 3], [2, 3]),
        ("Shift", [], []),
        ("Pop", [1, 2, 3], [1, 2]),
        ("Pop", [], []),
        ("Length", [], 0),
        ("Length", [1, [2, 3], "x"], 3),
        ("Reverse", [], []),
        ("Reverse", [1, 2, 3], [3, 2, 1]),
        ("Reverse", [1, [2, 3]], [[2, 3], 1]),
        ("IsEmpty", [], True),
        ("IsEmpty", [0], False),
    ],
)
def test_unary_sequence_ops(op, arg, expected):
    assert run_operation(op, arg) == expected


@pytest.mark.parametrize("op", ["Head", "Last"])
def test_empty_sequence_failures(op):
    with pytest.raises(EmptySequence) as info:
        evaluate(op, EMPTY)
    assert info.value.op == op


def test_push_and_unshift():
    assert run_operation("Push", [1, 2], 3) == [1, 2, 3]
    assert run_operation("Unshift", [1, 2], 0) == [0, 1, 2]
    assert run_operation("Push", [], [1]) == [[1]]


def test_push_requires_a_sequence():
    with pytest.raises(NoMatchingClause):
        evaluate("Push", Str("ab"), num(1))


@pytest.mark.parametrize("op, args", [
    ("IsEmpty", (Str("abc"),)),
    ("IsEmpty", (num(0),)),
    ("Length", (Str("abc"),)),
    ("IndexFrom", (seq_of(1, 2), num(1), Str("0"))),
    ("IndexFrom", (EMPTY, num(1), Str("0"))),
])
def test_sequence_ops_reject_other_variants(op, args):
    with pytest.raises(NoMatchingClause):
        evaluate(op, *args)


def test_length_beyond_the_interpreter_recursion_limit():
    assert run_operation("Length", list(range(5)) * 100) == 500
    assert run_operation("Length", [0, "a"] * 2000) == 4000


def test_reverse_of_a_long_sequence():
    xs = list(range(7)) * 150
    assert run_operation("Reverse", xs) == xs[::-1]


class TestConcat:
    def test_concat(self):
        assert run_operation("Concat", [1, 2], [3]) == [1, 2, 3]

    def test_concat_identity(self):
        s = seq_of(1, "a")
        assert evaluate("Concat", EMPTY, s) == s
        assert evaluate("Concat", s, EMPTY) == s

    def test_concat_keeps_nesting(self):
        assert run_operation("Concat", [[1]], [[2]]) == [[1], [2]]

    def test_concat_rejects_non_sequence(self):
        with pytest.raises(NoMatchingClause):
            evaluate("Concat", seq_of(1), num(2))


class TestIncludes:
    def test_present(self):
        assert evaluate("Includes", seq_of(1, 2, 3), num(2)) == TRUE

    def test_absent(self):
        assert evaluate("Includes", seq_of(1, 2, 3), num(4)) == FALSE

    def test_empty(self):
        assert evaluate("Includes", EMPTY, num(1)) == FALSE

    def test_structural_membership(self):
        assert run_operation("Includes", [[1, 2], "a"], [1, 2]) is True
        assert run_operation("Includes", [[1, 2], "a"], [2, 1]) is False

    def test_short_circuits_on_first_hit(self):
        ev = new_evaluator()
        ev.evaluate("Includes", seq_of(1, 2, 3, 4), num(1))
        assert ev.steps == 1


class TestIndexOf:
    def test_first_occurrence(self):
        assert run_operation("IndexOf", [5, 6, 5], 5) == 0
        assert run_operation("IndexOf", [5, 6, 7], 7) == 2

    def test_missing_raises_not_found(self):
        with pytest.raises(NotFound):
            evaluate("IndexOf", seq_of(1, 2), num(3))

    def test_empty_raises_not_found(self):
        with pytest.raises(NotFound):
            evaluate("IndexOf", EMPTY, num(0))

    def test_host_convention(self):
        assert index_of([1, 2], 3) == -1
        assert index_of(["a", "b"], "b") == 1
