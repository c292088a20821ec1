# typerw/library/strings.py
"""
String operations. These mirror the sequence ones, splitting with
PrefixSplit / SuffixSplit / InfixSplit where sequences use HeadTail.
"""

from __future__ import annotations

from typerw.core.value import Str, TRUE, FALSE
from typerw.operation_registry import Clause
from typerw.reduction.body import Call, Join, Lit, Ref
from typerw.reduction.pattern_matching import (
    InfixSplit,
    Literal,
    PrefixSplit,
    Shape,
    SuffixSplit,
)

WHITESPACE = (" ", "\n", "\t")


TRIM_LEFT = [
    *(Clause([PrefixSplit(ws, "r")], Call("TrimLeft", "r")) for ws in WHITESPACE),
    Clause([Shape(Str, "s")], "s"),
]

TRIM_RIGHT = [
    *(Clause([SuffixSplit("r", ws)], Call("TrimRight", "r")) for ws in WHITESPACE),
    Clause([Shape(Str, "s")], "s"),
]

TRIM = [Clause([Shape(Str, "s")], Call("TrimRight", Call("TrimLeft", "s")))]

STARTS_WITH = [
    Clause([PrefixSplit(Ref("p"), "_"), Shape(Str, "p")], Lit(TRUE)),
    Clause([Shape(Str), Shape(Str)], Lit(FALSE)),
]

ENDS_WITH = [
    Clause([SuffixSplit("_", Ref("q")), Shape(Str, "q")], Lit(TRUE)),
    Clause([Shape(Str), Shape(Str)], Lit(FALSE)),
]

# An empty `from` would match everywhere; leave the string alone instead.
REPLACE = [
    Clause([Shape(Str, "s"), Literal(""), Shape(Str)], "s"),
    Clause(
        [InfixSplit("pre", Ref("from"), "post"), Shape(Str, "from"), Shape(Str, "to")],
        Join("pre", "to", "post"),
    ),
    Clause([Shape(Str, "s"), Shape(Str), Shape(Str)], "s"),
]

# Only the part after each replacement is searched again.
REPLACE_ALL = [
    Clause([Shape(Str, "s"), Literal(""), Shape(Str)], "s"),
    Clause(
        [InfixSplit("pre", Ref("from"), "post"), Shape(Str, "from"), Shape(Str, "to")],
        Join("pre", "to", Call("ReplaceAll", "post", "from", "to")),
    ),
    Clause([Shape(Str, "s"), Shape(Str), Shape(Str)], "s"),
]


OPERATIONS = [
    ("TrimLeft", TRIM_LEFT, (Str,)),
    ("TrimRight", TRIM_RIGHT, (Str,)),
    ("Trim", TRIM, (Str,)),
    ("StartsWith", STARTS_WITH, (Str, Str)),
    ("EndsWith", ENDS_WITH, (Str, Str)),
    ("Replace", REPLACE, (Str, Str, Str)),
    ("ReplaceAll", REPLACE_ALL, (Str, Str, Str)),
]
