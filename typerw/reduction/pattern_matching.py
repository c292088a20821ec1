# typerw/reduction/pattern_matching.py
"""
Structural pattern matching over engine values.

    match(pattern, value) -> dict of bindings | NO_MATCH

A non-matching value is never an error; clause selection in the evaluator
decides what a miss means.

Slots that take a sub-value (HeadTail, TailLast, TagMatch, Succ) accept a
variable name, "_" to discard, or a nested pattern. The literal text of the
string splits may be a Ref to a variable bound by another argument of the
same clause.
"""

from __future__ import annotations

from typing import Any, Iterator, Sequence, Tuple, Union

from typerw.bridge import from_py
from typerw.core.value import Value, Seq, Str, Num, Tagged
from typerw.reduction.body import Ref


DISCARD = "_"


class _NoMatch:
    """Sentinel indicating pattern did not match."""
    __slots__ = ()

    def __repr__(self) -> str:
        return "NO_MATCH"

    def __bool__(self) -> bool:
        return False


NO_MATCH = _NoMatch()


class Pattern:
    """Base pattern. Subclasses fill `env` in place and return True on match."""

    __slots__ = ()

    # Value variant this pattern can apply to, or None for any.
    shape: type | None = None

    def bind_into(self, value: Value, env: dict) -> bool:
        raise NotImplementedError

    def binds(self) -> Iterator[str]:
        """Variable names this pattern binds."""
        return iter(())

    def requires(self) -> Iterator[str]:
        """Variable names this pattern reads (through Ref)."""
        return iter(())


Slot = Union[str, Pattern]
Text = Union[str, Ref]


# ---------------------------------------------------------------------------
# Slot helpers
# ---------------------------------------------------------------------------

def _bind_slot(slot: Slot, value: Value, env: dict) -> bool:
    if isinstance(slot, Pattern):
        return slot.bind_into(value, env)
    if slot != DISCARD:
        env[slot] = value
    return True


def _slot_binds(slot: Slot) -> Iterator[str]:
    if isinstance(slot, Pattern):
        yield from slot.binds()
    elif slot != DISCARD:
        yield slot


def _slot_requires(slot: Slot) -> Iterator[str]:
    if isinstance(slot, Pattern):
        yield from slot.requires()


def _resolve_text(text: Text, env: dict) -> str | None:
    if isinstance(text, Ref):
        bound = env.get(text.name)
        return bound.text if isinstance(bound, Str) else None
    return text


def _text_requires(text: Text) -> Iterator[str]:
    if isinstance(text, Ref):
        yield text.name


# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------

class Literal(Pattern):
    __slots__ = ("value",)

    def __init__(self, value: Any):
        self.value = from_py(value)

    @property
    def shape(self):
        return type(self.value)

    def __repr__(self):
        return f"Literal({self.value!r})"

    def bind_into(self, value, env):
        return value == self.value


class Wildcard(Pattern):
    __slots__ = ()

    def __repr__(self):
        return "Wildcard()"

    def bind_into(self, value, env):
        return True


class Bind(Pattern):
    """A plain pattern variable."""

    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = name

    def __repr__(self):
        return f"Bind({self.name!r})"

    def bind_into(self, value, env):
        return _bind_slot(self.name, value, env)

    def binds(self):
        return _slot_binds(self.name)


class Shape(Pattern):
    """Bind only when the value is of the given variant."""

    __slots__ = ("kind", "name")

    def __init__(self, kind: type, name: str = DISCARD):
        self.kind = kind
        self.name = name

    @property
    def shape(self):
        return self.kind

    def __repr__(self):
        return f"Shape({self.kind.__name__}, {self.name!r})"

    def bind_into(self, value, env):
        if not isinstance(value, self.kind):
            return False
        return _bind_slot(self.name, value, env)

    def binds(self):
        return _slot_binds(self.name)


class HeadTail(Pattern):
    """Non-empty Seq split into its first element and the rest."""

    __slots__ = ("head", "tail")
    shape = Seq

    def __init__(self, head: Slot, tail: Slot):
        self.head = head
        self.tail = tail

    def __repr__(self):
        return f"HeadTail({self.head!r}, {self.tail!r})"

    def bind_into(self, value, env):
        if not isinstance(value, Seq) or value.is_empty():
            return False
        return _bind_slot(self.head, value.head(), env) and _bind_slot(self.tail, value.tail(), env)

    def binds(self):
        yield from _slot_binds(self.head)
        yield from _slot_binds(self.tail)

    def requires(self):
        yield from _slot_requires(self.head)
        yield from _slot_requires(self.tail)


class TailLast(Pattern):
    """Non-empty Seq split into everything but the last element, and the last."""

    __slots__ = ("init", "last")
    shape = Seq

    def __init__(self, init: Slot, last: Slot):
        self.init = init
        self.last = last

    def __repr__(self):
        return f"TailLast({self.init!r}, {self.last!r})"

    def bind_into(self, value, env):
        if not isinstance(value, Seq) or value.is_empty():
            return False
        return _bind_slot(self.init, value.init(), env) and _bind_slot(self.last, value.last(), env)

    def binds(self):
        yield from _slot_binds(self.init)
        yield from _slot_binds(self.last)

    def requires(self):
        yield from _slot_requires(self.init)
        yield from _slot_requires(self.last)


class PrefixSplit(Pattern):
    """Str starting with `prefix`; binds the remaining suffix."""

    __slots__ = ("prefix", "rest")
    shape = Str

    def __init__(self, prefix: Text, rest: str):
        self.prefix = prefix
        self.rest = rest

    def __repr__(self):
        return f"PrefixSplit({self.prefix!r}, {self.rest!r})"

    def bind_into(self, value, env):
        if not isinstance(value, Str):
            return False
        p = _resolve_text(self.prefix, env)
        if p is None or not value.text.startswith(p):
            return False
        return _bind_slot(self.rest, Str(value.text[len(p):]), env)

    def binds(self):
        return _slot_binds(self.rest)

    def requires(self):
        return _text_requires(self.prefix)


class SuffixSplit(Pattern):
    """Str ending with `suffix`; binds the leading part."""

    __slots__ = ("rest", "suffix")
    shape = Str

    def __init__(self, rest: str, suffix: Text):
        self.rest = rest
        self.suffix = suffix

    def __repr__(self):
        return f"SuffixSplit({self.rest!r}, {self.suffix!r})"

    def bind_into(self, value, env):
        if not isinstance(value, Str):
            return False
        s = _resolve_text(self.suffix, env)
        if s is None or not value.text.endswith(s):
            return False
        return _bind_slot(self.rest, Str(value.text[:len(value.text) - len(s)]), env)

    def binds(self):
        return _slot_binds(self.rest)

    def requires(self):
        return _text_requires(self.suffix)


class InfixSplit(Pattern):
    """Str containing `needle`; splits around its leftmost occurrence."""

    __slots__ = ("before", "needle", "after")
    shape = Str

    def __init__(self, before: str, needle: Text, after: str):
        self.before = before
        self.needle = needle
        self.after = after

    def __repr__(self):
        return f"InfixSplit({self.before!r}, {self.needle!r}, {self.after!r})"

    def bind_into(self, value, env):
        if not isinstance(value, Str):
            return False
        n = _resolve_text(self.needle, env)
        if n is None:
            return False
        i = value.text.find(n)
        if i < 0:
            return False
        return (
            _bind_slot(self.before, Str(value.text[:i]), env)
            and _bind_slot(self.after, Str(value.text[i + len(n):]), env)
        )

    def binds(self):
        yield from _slot_binds(self.before)
        yield from _slot_binds(self.after)

    def requires(self):
        return _text_requires(self.needle)


class TagMatch(Pattern):
    __slots__ = ("tag", "payload")
    shape = Tagged

    def __init__(self, tag: str, payload: Slot):
        self.tag = tag
        self.payload = payload

    def __repr__(self):
        return f"TagMatch({self.tag!r}, {self.payload!r})"

    def bind_into(self, value, env):
        if not isinstance(value, Tagged) or value.tag != self.tag:
            return False
        return _bind_slot(self.payload, value.payload, env)

    def binds(self):
        return _slot_binds(self.payload)

    def requires(self):
        return _slot_requires(self.payload)


class Succ(Pattern):
    """Non-zero numeral; binds its predecessor."""

    __slots__ = ("pred",)
    shape = Num

    def __init__(self, pred: Slot):
        self.pred = pred

    def __repr__(self):
        return f"Succ({self.pred!r})"

    def bind_into(self, value, env):
        if not isinstance(value, Num) or value.is_zero():
            return False
        return _bind_slot(self.pred, value.pred(), env)

    def binds(self):
        return _slot_binds(self.pred)

    def requires(self):
        return _slot_requires(self.pred)


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------

def match(pattern: Pattern, value: Value, env: dict | None = None):
    """
    Match one pattern against one value.

    Returns a fresh bindings dict (a copy of `env` plus new bindings), or
    NO_MATCH. `env` itself is never modified.
    """
    out = dict(env) if env else {}
    if pattern.bind_into(value, out):
        return out
    return NO_MATCH


def match_order(patterns: Sequence[Pattern]) -> Tuple[int, ...]:
    """
    Argument positions in matching order: patterns without Ref first,
    then the ones that read variables bound by the others.
    """
    free = [i for i, p in enumerate(patterns) if not any(True for _ in p.requires())]
    dependent = [i for i, p in enumerate(patterns) if i not in free]
    return tuple(free + dependent)


def match_clause(patterns: Sequence[Pattern], args: Sequence[Value]):
    """Match a clause's patterns argument-wise. Bindings dict or NO_MATCH."""
    if len(patterns) != len(args):
        return NO_MATCH
    env: dict = {}
    for i in match_order(patterns):
        if not patterns[i].bind_into(args[i], env):
            return NO_MATCH
    return env


__all__ = [
    "NO_MATCH",
    "DISCARD",
    "Pattern",
    "Literal",
    "Wildcard",
    "Bind",
    "Shape",
    "HeadTail",
    "TailLast",
    "PrefixSplit",
    "SuffixSplit",
    "InfixSplit",
    "TagMatch",
    "Succ",
    "match",
    "match_order",
    "match_clause",
]
