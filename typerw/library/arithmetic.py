# typerw/library/arithmetic.py
"""
Numeral arithmetic.

Numerals are unary, so every operation here bottoms out in sequence
operations on their unit sequences:

    Add(a, b)        = Length(Concat(Unary(a), Unary(b)))
    Subtract(a, b)   = Length(DropUnits(Unary(a), Unary(b)))
    Multiply(a, 0)   = 0
    Multiply(a, b+1) = Add(a, Multiply(a, b))
    Fibonacci        0-indexed: 0, 1, 1, 2, 3, 5, 8, ...

Fibonacci recomputes both branches on every call; the exponential cost
is accepted, callers that need sharing cache results themselves.
"""

from __future__ import annotations

from typerw.core.numbers import ZERO, ONE
from typerw.core.value import Num, Seq, EMPTY, TRUE, FALSE
from typerw.errors import NegativeResult
from typerw.operation_registry import Clause
from typerw.reduction.body import Call, Dec, Fail, Lit, Unary
from typerw.reduction.pattern_matching import HeadTail, Literal, Shape, Succ


ADD = [
    Clause([Shape(Num, "a"), Shape(Num, "b")], Call("Length", Call("Concat", Unary("a"), Unary("b")))),
]

# DropUnits(xs, ys): strip len(ys) leading units off xs.
DROP_UNITS = [
    Clause([Shape(Seq, "xs"), Literal(EMPTY)], "xs"),
    Clause([HeadTail("_", "xs"), HeadTail("_", "ys")], Call("DropUnits", "xs", "ys")),
    Clause([Literal(EMPTY), Shape(Seq)], Fail(NegativeResult, "subtraction below zero")),
]

SUBTRACT = [
    Clause([Shape(Num, "a"), Shape(Num, "b")], Call("Length", Call("DropUnits", Unary("a"), Unary("b")))),
]

MULTIPLY = [
    Clause([Shape(Num), Literal(ZERO)], Lit(ZERO)),
    Clause([Shape(Num, "a"), Succ("b")], Call("Add", "a", Call("Multiply", "a", "b"))),
]

FIBONACCI = [
    Clause([Literal(ZERO)], Lit(ZERO)),
    Clause([Literal(ONE)], Lit(ONE)),
    Clause([Succ("m")], Call("Add", Call("Fibonacci", "m"), Call("Fibonacci", Dec("m")))),
]

GREATER_THAN = [
    Clause([Literal(ZERO), Shape(Num)], Lit(FALSE)),
    Clause([Succ("_"), Literal(ZERO)], Lit(TRUE)),
    Clause([Succ("a"), Succ("b")], Call("GreaterThan", "a", "b")),
]


OPERATIONS = [
    ("Add", ADD, (Num, Num)),
    ("DropUnits", DROP_UNITS, (Seq, Seq)),
    ("Subtract", SUBTRACT, (Num, Num)),
    ("Multiply", MULTIPLY, (Num, Num)),
    ("Fibonacci", FIBONACCI, (Num,)),
    ("GreaterThan", GREATER_THAN, (Num, Num)),
]
