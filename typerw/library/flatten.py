# typerw/library/flatten.py
"""
Flattening. Sequence elements are spliced into the result, one level for
FlattenOnce, all levels for FlattenDeep. Other elements pass through; order
is preserved left to right.
"""

from __future__ import annotations

from typerw.core.value import Seq, EMPTY
from typerw.operation_registry import Clause
from typerw.reduction.body import Call, Cons, Lit
from typerw.reduction.pattern_matching import HeadTail, Literal, Shape


FLATTEN_ONCE = [
    Clause([Literal(EMPTY)], Lit(EMPTY)),
    Clause([HeadTail(Shape(Seq, "h"), "t")], Call("Concat", "h", Call("FlattenOnce", "t"))),
    Clause([HeadTail("h", "t")], Cons("h", Call("FlattenOnce", "t"))),
]

FLATTEN_DEEP = [
    Clause([Literal(EMPTY)], Lit(EMPTY)),
    Clause(
        [HeadTail(Shape(Seq, "h"), "t")],
        Call("Concat", Call("FlattenDeep", "h"), Call("FlattenDeep", "t")),
    ),
    Clause([HeadTail("h", "t")], Cons("h", Call("FlattenDeep", "t"))),
]


OPERATIONS = [
    ("FlattenOnce", FLATTEN_ONCE, (Seq,)),
    ("FlattenDeep", FLATTEN_DEEP, (Seq,)),
]
