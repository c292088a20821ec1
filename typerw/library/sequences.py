# typerw/library/sequences.py
"""
Sequence operations.

    Head / Last            first / last element (EmptySequence on [])
    Shift / Pop            drop first / last element ([] stays [])
    Push / Unshift         append / prepend an element
    IsEmpty                [] test
    Length                 element count as a numeral
    Reverse                reversed copy
    Concat                 A ++ B
    Includes               membership, short-circuit left to right
    IndexOf / IndexFrom    position of the first equal element (NotFound)
"""

from __future__ import annotations

from typerw.core.numbers import ZERO
from typerw.core.value import Num, Seq, EMPTY, TRUE, FALSE
from typerw.errors import EmptySequence, NotFound
from typerw.operation_registry import Clause
from typerw.reduction.body import Call, Cons, Equal, Fail, If, Inc, Lit, Or, Snoc
from typerw.reduction.pattern_matching import Bind, HeadTail, Literal, Shape, TailLast, Wildcard

NIL = Literal(EMPTY)


HEAD = [
    Clause([HeadTail("h", "_")], "h"),
    Clause([NIL], Fail(EmptySequence, "Head of an empty sequence")),
]

LAST = [
    Clause([TailLast("_", "l")], "l"),
    Clause([NIL], Fail(EmptySequence, "Last of an empty sequence")),
]

SHIFT = [
    Clause([HeadTail("_", "t")], "t"),
    Clause([NIL], Lit(EMPTY)),
]

POP = [
    Clause([TailLast("i", "_")], "i"),
    Clause([NIL], Lit(EMPTY)),
]

PUSH = [Clause([Shape(Seq, "s"), Bind("x")], Snoc("s", "x"))]

UNSHIFT = [Clause([Shape(Seq, "s"), Bind("x")], Cons("x", "s"))]

IS_EMPTY = [
    Clause([NIL], Lit(TRUE)),
    Clause([Shape(Seq)], Lit(FALSE)),
]

LENGTH = [
    Clause([NIL], Lit(ZERO)),
    Clause([HeadTail("_", "t")], Inc(Call("Length", "t"))),
]

# Appending (not prepending) the head to the reversed tail yields reversed order.
REVERSE = [
    Clause([NIL], Lit(EMPTY)),
    Clause([HeadTail("h", "t")], Snoc(Call("Reverse", "t"), "h")),
]

CONCAT = [
    Clause([NIL, Shape(Seq, "b")], "b"),
    Clause([HeadTail("h", "t"), Shape(Seq, "b")], Cons("h", Call("Concat", "t", "b"))),
]

INCLUDES = [
    Clause([NIL, Wildcard()], Lit(FALSE)),
    Clause(
        [HeadTail("h", "t"), Bind("target")],
        Or(Equal("h", "target"), Call("Includes", "t", "target")),
    ),
]

INDEX_OF = [
    Clause([Shape(Seq, "s"), Bind("target")], Call("IndexFrom", "s", "target", Lit(ZERO))),
]

# IndexFrom(s, target, i): i counts the elements already consumed.
INDEX_FROM = [
    Clause([NIL, Wildcard(), Shape(Num)], Fail(NotFound, "element not in sequence")),
    Clause(
        [HeadTail("h", "t"), Bind("target"), Shape(Num, "i")],
        If(Equal("h", "target"), "i", Call("IndexFrom", "t", "target", Inc("i"))),
    ),
]


OPERATIONS = [
    ("Head", HEAD, (Seq,)),
    ("Last", LAST, (Seq,)),
    ("Shift", SHIFT, (Seq,)),
    ("Pop", POP, (Seq,)),
    ("Push", PUSH, (Seq, None)),
    ("Unshift", UNSHIFT, (Seq, None)),
    ("IsEmpty", IS_EMPTY, (Seq,)),
    ("Length", LENGTH, (Seq,)),
    ("Reverse", REVERSE, (Seq,)),
    ("Concat", CONCAT, (Seq, Seq)),
    ("Includes", INCLUDES, (Seq, None)),
    ("IndexOf", INDEX_OF, (Seq, None)),
    ("IndexFrom", INDEX_FROM, (Seq, None, Num)),
]
