# typerw/reduction/body.py
"""
Clause bodies.

A body is a small term tree reduced against the bindings produced by a
clause's patterns:

    Lit(v)               a literal value
    Ref(name)            a pattern variable
    Call(op, *args)      a nested evaluation (this is where recursion lives)
    SeqOf / Cons / Snoc  sequence builders
    Join                 string concatenation
    Tag                  tagged-value builder
    Inc / Dec / Unary    numeral builders
    Equal / Or / If      boolean tests; Or and If only reduce what they need
    Fail(error, msg)     raise a specific EvalError

Bodies are pure data; reduce() is the only behaviour and it never mutates
the bindings it is given.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Tuple

from typerw.bridge import from_py
from typerw.core.value import Value, Seq, Str, Num, Tagged, TRUE, FALSE, truth
from typerw.errors import EvalError, NegativeResult


class Body:
    __slots__ = ()

    def reduce(self, ev, env: dict) -> Value:
        raise NotImplementedError

    def children(self) -> Tuple["Body", ...]:
        return ()

    def refs(self) -> Iterator[str]:
        """Every variable name this body reads."""
        for child in self.children():
            yield from child.refs()


def as_body(x: Any) -> Body:
    """Promote a bare variable name or a literal into a body term."""
    if isinstance(x, Body):
        return x
    if isinstance(x, str):
        return Ref(x)
    return Lit(from_py(x))


# ---------------------------------------------------------------------------
# Leaves
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Lit(Body):
    value: Value

    def reduce(self, ev, env):
        return self.value


@dataclass(frozen=True)
class Ref(Body):
    name: str

    def reduce(self, ev, env):
        return env[self.name]

    def refs(self):
        yield self.name


# ---------------------------------------------------------------------------
# Recursion
# ---------------------------------------------------------------------------

class Call(Body):
    __slots__ = ("op", "args")

    def __init__(self, op: str, *args: Any):
        self.op = op
        self.args = tuple(as_body(a) for a in args)

    def __repr__(self):
        return f"Call({self.op!r}, " + ", ".join(repr(a) for a in self.args) + ")"

    def children(self):
        return self.args

    def reduce(self, ev, env):
        # list comprehensions, not generators: each level stays in pure Python frames
        return ev.apply(self.op, tuple([a.reduce(ev, env) for a in self.args]))


# ---------------------------------------------------------------------------
# Structural builders
# ---------------------------------------------------------------------------

def _expect(kind, v: Value, ctx: str):
    if not isinstance(v, kind):
        raise TypeError(f"{ctx}: expected {kind.__name__}, got {v!r}")
    return v


class SeqOf(Body):
    __slots__ = ("items",)

    def __init__(self, *items: Any):
        self.items = tuple(as_body(i) for i in items)

    def __repr__(self):
        return "SeqOf(" + ", ".join(repr(i) for i in self.items) + ")"

    def children(self):
        return self.items

    def reduce(self, ev, env):
        return Seq(*[i.reduce(ev, env) for i in self.items])


class Cons(Body):
    """Prepend an element."""

    __slots__ = ("head", "tail")

    def __init__(self, head: Any, tail: Any):
        self.head = as_body(head)
        self.tail = as_body(tail)

    def __repr__(self):
        return f"Cons({self.head!r}, {self.tail!r})"

    def children(self):
        return (self.head, self.tail)

    def reduce(self, ev, env):
        h = self.head.reduce(ev, env)
        t = _expect(Seq, self.tail.reduce(ev, env), "Cons")
        return t.cons(h)


class Snoc(Body):
    """Append an element at the end."""

    __slots__ = ("init", "last")

    def __init__(self, init: Any, last: Any):
        self.init = as_body(init)
        self.last = as_body(last)

    def __repr__(self):
        return f"Snoc({self.init!r}, {self.last!r})"

    def children(self):
        return (self.init, self.last)

    def reduce(self, ev, env):
        i = _expect(Seq, self.init.reduce(ev, env), "Snoc")
        return i.snoc(self.last.reduce(ev, env))


class Join(Body):
    """Concatenate string parts left to right."""

    __slots__ = ("parts",)

    def __init__(self, *parts: Any):
        self.parts = tuple(as_body(p) for p in parts)

    def __repr__(self):
        return "Join(" + ", ".join(repr(p) for p in self.parts) + ")"

    def children(self):
        return self.parts

    def reduce(self, ev, env):
        return Str("".join([_expect(Str, p.reduce(ev, env), "Join").text for p in self.parts]))


class Tag(Body):
    __slots__ = ("tag", "payload")

    def __init__(self, tag: str, payload: Any):
        self.tag = tag
        self.payload = as_body(payload)

    def __repr__(self):
        return f"Tag({self.tag!r}, {self.payload!r})"

    def children(self):
        return (self.payload,)

    def reduce(self, ev, env):
        return Tagged(self.tag, self.payload.reduce(ev, env))


# ---------- numerals ----------

class Inc(Body):
    __slots__ = ("n",)

    def __init__(self, n: Any):
        self.n = as_body(n)

    def __repr__(self):
        return f"Inc({self.n!r})"

    def children(self):
        return (self.n,)

    def reduce(self, ev, env):
        return _expect(Num, self.n.reduce(ev, env), "Inc").succ()


class Dec(Body):
    __slots__ = ("n",)

    def __init__(self, n: Any):
        self.n = as_body(n)

    def __repr__(self):
        return f"Dec({self.n!r})"

    def children(self):
        return (self.n,)

    def reduce(self, ev, env):
        n = _expect(Num, self.n.reduce(ev, env), "Dec")
        if n.is_zero():
            raise NegativeResult("predecessor of zero")
        return n.pred()


class Unary(Body):
    """The unit sequence behind a numeral."""

    __slots__ = ("n",)

    def __init__(self, n: Any):
        self.n = as_body(n)

    def __repr__(self):
        return f"Unary({self.n!r})"

    def children(self):
        return (self.n,)

    def reduce(self, ev, env):
        return _expect(Num, self.n.reduce(ev, env), "Unary").units


# ---------- booleans ----------

def _truthy(v: Value, ctx: str) -> bool:
    if v == TRUE:
        return True
    if v == FALSE:
        return False
    raise TypeError(f"{ctx}: expected a boolean, got {v!r}")


class Equal(Body):
    __slots__ = ("left", "right")

    def __init__(self, left: Any, right: Any):
        self.left = as_body(left)
        self.right = as_body(right)

    def __repr__(self):
        return f"Equal({self.left!r}, {self.right!r})"

    def children(self):
        return (self.left, self.right)

    def reduce(self, ev, env):
        return truth(self.left.reduce(ev, env) == self.right.reduce(ev, env))


class Or(Body):
    __slots__ = ("left", "right")

    def __init__(self, left: Any, right: Any):
        self.left = as_body(left)
        self.right = as_body(right)

    def __repr__(self):
        return f"Or({self.left!r}, {self.right!r})"

    def children(self):
        return (self.left, self.right)

    def reduce(self, ev, env):
        if _truthy(self.left.reduce(ev, env), "Or"):
            return TRUE
        return truth(_truthy(self.right.reduce(ev, env), "Or"))


class If(Body):
    __slots__ = ("cond", "then", "orelse")

    def __init__(self, cond: Any, then: Any, orelse: Any):
        self.cond = as_body(cond)
        self.then = as_body(then)
        self.orelse = as_body(orelse)

    def __repr__(self):
        return f"If({self.cond!r}, {self.then!r}, {self.orelse!r})"

    def children(self):
        return (self.cond, self.then, self.orelse)

    def reduce(self, ev, env):
        if _truthy(self.cond.reduce(ev, env), "If"):
            return self.then.reduce(ev, env)
        return self.orelse.reduce(ev, env)


# ---------------------------------------------------------------------------
# Failure
# ---------------------------------------------------------------------------

class Fail(Body):
    __slots__ = ("error", "message")

    def __init__(self, error: type, message: str = ""):
        if not (isinstance(error, type) and issubclass(error, EvalError)):
            raise TypeError(f"Fail expects an EvalError subclass, got {error!r}")
        self.error = error
        self.message = message

    def __repr__(self):
        return f"Fail({self.error.__name__}, {self.message!r})"

    def reduce(self, ev, env):
        raise self.error(self.message)


__all__ = [
    "Body",
    "as_body",
    "Lit",
    "Ref",
    "Call",
    "SeqOf",
    "Cons",
    "Snoc",
    "Join",
    "Tag",
    "Inc",
    "Dec",
    "Unary",
    "Equal",
    "Or",
    "If",
    "Fail",
]
