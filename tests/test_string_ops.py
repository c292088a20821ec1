"""
String operations: trimming, prefix/suffix tests and replacement.
"""

import pytest

from typerw import Str, TRUE, FALSE, num, evaluate, run_operation, NoMatchingClause


@pytest.mark.parametrize(
    "op, text, expected",
    [
        ("TrimLeft", "   abc", "abc"),
        ("TrimLeft", "\n\t x ", "x "),
        ("TrimLeft", "abc", "abc"),
        ("TrimLeft", "", ""),
        ("TrimLeft", "   ", ""),
        ("TrimRight", "abc  \n", "abc"),
        ("TrimRight", " abc", " abc"),
        ("Trim", "  a b  ", "a b"),
        ("Trim", "\t\n", ""),
    ],
)
def test_trimming(op, text, expected):
    assert run_operation(op, text) == expected


def test_trim_leaves_other_characters():
    assert run_operation("Trim", "\r x \r") == "\r x \r"


class TestStartsEnds:
    def test_starts_with(self):
        assert evaluate("StartsWith", Str("Hello"), Str("He")) == TRUE
        assert evaluate("StartsWith", Str("Hello"), Str("lo")) == FALSE

    def test_ends_with(self):
        assert evaluate("EndsWith", Str("Hello"), Str("lo")) == TRUE
        assert evaluate("EndsWith", Str("Hello"), Str("He")) == FALSE

    def test_empty_affix_always_matches(self):
        assert evaluate("StartsWith", Str("abc"), Str("")) == TRUE
        assert evaluate("EndsWith", Str(""), Str("")) == TRUE

    def test_longer_affix_never_matches(self):
        assert evaluate("StartsWith", Str("ab"), Str("abc")) == FALSE

    def test_non_strings_are_rejected(self):
        with pytest.raises(NoMatchingClause):
            evaluate("StartsWith", Str("abc"), num(1))


class TestReplace:
    def test_replace_first_occurrence_only(self):
        assert run_operation("Replace", "a-b-c", "-", "+") == "a+b-c"

    def test_replace_all(self):
        assert run_operation("ReplaceAll", "a-b-c", "-", "+") == "a+b+c"

    def test_missing_needle_returns_input(self):
        assert run_operation("Replace", "abc", "x", "y") == "abc"
        assert run_operation("ReplaceAll", "abc", "x", "y") == "abc"

    def test_empty_from_returns_input(self):
        assert run_operation("Replace", "abc", "", "y") == "abc"
        assert run_operation("ReplaceAll", "abc", "", "y") == "abc"

    def test_replacement_is_not_rescanned(self):
        assert run_operation("ReplaceAll", "aa", "a", "aa") == "aaaa"

    def test_delete_by_empty_replacement(self):
        assert run_operation("ReplaceAll", "b a n a n a", " ", "") == "banana"

    def test_multichar_needle(self):
        assert run_operation("ReplaceAll", "foo boo", "oo", "0") == "f0 b0"


@pytest.mark.parametrize(
    "op, args, expected",
    [
        ("TrimLeft", (" hi",), "hi"),
        ("StartsWith", ("Hello", "He"), True),
        ("Replace", ("Hello World", "World", "TS"), "Hello TS"),
        ("ReplaceAll", ("foo foo", "foo", "bar"), "bar bar"),
    ],
)
def test_catalog_scenarios(op, args, expected):
    assert run_operation(op, *args) == expected
