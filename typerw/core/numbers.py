# typerw/core/numbers.py
"""
Unary numeral helpers.

Kept apart from typerw.__init__ so that bridge, pretty and the library
can import them without circular imports.
"""

from __future__ import annotations

from .value import Num, Seq, UNIT, Value


def num(n: int) -> Num:
    """Build the unary numeral for n."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"num expects an int, got {n!r}")
    if n < 0:
        raise ValueError("num only supports n>=0")
    return Num(Seq(*([UNIT] * n)))


def num_to_int(v: Value) -> int | None:
    """
    Interpret a Value as an integer.

    Returns:
        int   if v is a Num
        None  otherwise
    """
    if isinstance(v, Num):
        return v.magnitude
    return None


ZERO = num(0)
ONE = num(1)
