"""
TYPERW VALUE CORE
=================
The closed set of symbolic shapes the engine rewrites:

    Seq(*elements)        ordered, positional identity
    Str(text)             literal string, immutable
    Num(units)            unary numeral: a Seq of n UNIT placeholders
    Tagged(tag, payload)  one branch of a sum
    UNIT                  the empty / terminal value

Every value is immutable and compares structurally.
"""

from __future__ import annotations

from dataclasses import dataclass


class Value:
    """Base of every engine value."""

    __slots__ = ()


class Unit(Value):
    """The terminal value. Use the UNIT singleton."""

    __slots__ = ()

    _instance: "Unit | None" = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __eq__(self, other):
        return isinstance(other, Unit)

    def __hash__(self):
        return hash("typerw.Unit")

    def __repr__(self):
        return "UNIT"


UNIT = Unit()


class Seq(Value):
    """An ordered sequence of values."""

    __slots__ = ("elements",)

    def __init__(self, *elements: Value):
        for e in elements:
            if not isinstance(e, Value):
                raise TypeError(f"Seq elements must be Values, got {e!r}")
        object.__setattr__(self, "elements", tuple(elements))

    def __setattr__(self, name, value):
        raise AttributeError("Seq is immutable")

    # ---------- structural identity ----------

    def __eq__(self, other):
        if not isinstance(other, Seq):
            return False
        return self.elements == other.elements

    def __hash__(self):
        return hash(("Seq", self.elements))

    def __repr__(self):
        return "Seq(" + ", ".join(repr(e) for e in self.elements) + ")"

    def __len__(self):
        return len(self.elements)

    def __iter__(self):
        return iter(self.elements)

    # ---------- primitive queries ----------

    def is_empty(self) -> bool:
        return not self.elements

    def head(self) -> Value:
        return self.elements[0]

    def tail(self) -> "Seq":
        return Seq(*self.elements[1:])

    def last(self) -> Value:
        return self.elements[-1]

    def init(self) -> "Seq":
        return Seq(*self.elements[:-1])

    # ---------- structural builders ----------

    def cons(self, x: Value) -> "Seq":
        return Seq(x, *self.elements)

    def snoc(self, x: Value) -> "Seq":
        return Seq(*self.elements, x)

    def concat(self, other: "Seq") -> "Seq":
        return Seq(*self.elements, *other.elements)


EMPTY = Seq()


@dataclass(frozen=True, slots=True)
class Str(Value):
    text: str

    def __post_init__(self):
        if not isinstance(self.text, str):
            raise TypeError(f"Str expects str, got {type(self.text).__name__}")

    def __repr__(self):
        return f"Str({self.text!r})"


@dataclass(frozen=True, slots=True)
class Num(Value):
    """
    Unary numeral. `units` holds exactly `magnitude` UNIT placeholders so
    that arithmetic reduces to sequence operations.
    """

    units: Seq

    def __post_init__(self):
        if not isinstance(self.units, Seq):
            raise TypeError("Num units must be a Seq")
        if any(u is not UNIT for u in self.units):
            raise TypeError("Num units must all be UNIT")

    @property
    def magnitude(self) -> int:
        return len(self.units)

    def is_zero(self) -> bool:
        return self.units.is_empty()

    def succ(self) -> "Num":
        return Num(self.units.cons(UNIT))

    def pred(self) -> "Num":
        # caller guarantees non-zero
        return Num(self.units.tail())

    def __repr__(self):
        return f"Num({self.magnitude})"


@dataclass(frozen=True, slots=True)
class Tagged(Value):
    tag: str
    payload: Value

    def __post_init__(self):
        if not isinstance(self.tag, str):
            raise TypeError("Tagged tag must be a str")
        if not isinstance(self.payload, Value):
            raise TypeError(f"Tagged payload must be a Value, got {self.payload!r}")

    def __repr__(self):
        return f"Tagged({self.tag!r}, {self.payload!r})"


# ---------- booleans as a two-branch sum ----------

TRUE = Tagged("true", UNIT)
FALSE = Tagged("false", UNIT)


def truth(flag: bool) -> Tagged:
    return TRUE if flag else FALSE


VALUE_KINDS = (Seq, Str, Num, Tagged, Unit)
