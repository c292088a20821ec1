# typerw/bridge.py
"""
Host <-> engine value bridges.

Design:
-------
* Python -> Value (from_py):
      None            -> UNIT
      bool            -> TRUE / FALSE
      int (>= 0)      -> Num
      str             -> Str
      (str, x)        -> Tagged(tag, from_py(x))
      list / tuple    -> Seq
      Value           -> itself

* Value -> Python (to_py):
      Seq             -> list
      Str             -> str
      Num             -> int
      TRUE / FALSE    -> bool
      Tagged          -> (tag, payload)
      UNIT            -> None

  A 2-tuple headed by a str is always a tagged value, so from_py inverts
  to_py. Write a two-element sequence with a str head as a list.

* JSON uses the same mapping, except that tagged values are objects
  {"tag": ..., "payload": ...} since JSON has no tuples.
"""

from __future__ import annotations

from typing import Any

from typerw.core.numbers import num
from typerw.core.value import (
    Value,
    Seq,
    Str,
    Num,
    Tagged,
    Unit,
    UNIT,
    TRUE,
    FALSE,
    truth,
)


# ---------------------------------------------------------------------------
# Construction helpers
# ---------------------------------------------------------------------------

def seq_of(*items: Any) -> Seq:
    """
    Build a Seq, converting plain Python items on the way.

    Example:
        seq_of(1, [2, 3])  ->  Seq(Num(1), Seq(Num(2), Num(3)))
    """
    return Seq(*(from_py(x) for x in items))


def str_of(text: str) -> Str:
    return Str(text)


def num_of(n: int) -> Num:
    return num(n)


def tagged_of(tag: str, payload: Any = None) -> Tagged:
    return Tagged(tag, from_py(payload))


def from_py(obj: Any) -> Value:
    """Convert a plain Python object into a Value."""
    if isinstance(obj, Value):
        return obj
    if obj is None:
        return UNIT
    # bool is an int subclass; check it first.
    if isinstance(obj, bool):
        return truth(obj)
    if isinstance(obj, int):
        return num(obj)
    if isinstance(obj, str):
        return Str(obj)
    if isinstance(obj, tuple) and len(obj) == 2 and isinstance(obj[0], str):
        return Tagged(obj[0], from_py(obj[1]))
    if isinstance(obj, (list, tuple)):
        return Seq(*(from_py(x) for x in obj))
    raise TypeError(f"from_py: cannot embed {obj!r}")


# ---------------------------------------------------------------------------
# Destructuring
# ---------------------------------------------------------------------------

def to_py(v: Value) -> Any:
    """Convert a Value back to plain Python."""
    if isinstance(v, Seq):
        return [to_py(x) for x in v]
    if isinstance(v, Str):
        return v.text
    if isinstance(v, Num):
        return v.magnitude
    if isinstance(v, Tagged):
        if v == TRUE:
            return True
        if v == FALSE:
            return False
        return (v.tag, to_py(v.payload))
    if isinstance(v, Unit):
        return None
    raise TypeError(f"to_py: not a Value: {v!r}")


# ---------------------------------------------------------------------------
# JSON codec
# ---------------------------------------------------------------------------

def from_json(obj: Any) -> Value:
    """Decode a parsed JSON document into a Value."""
    if isinstance(obj, dict):
        if set(obj.keys()) - {"tag", "payload"} or "tag" not in obj:
            raise ValueError(f"tagged value must look like {{'tag': ..., 'payload': ...}}, got {obj!r}")
        if not isinstance(obj["tag"], str):
            raise ValueError("tag must be a string")
        return Tagged(obj["tag"], from_json(obj.get("payload")))
    if isinstance(obj, list):
        return Seq(*(from_json(x) for x in obj))
    if isinstance(obj, float):
        raise ValueError(f"numbers must be non-negative integers, got {obj!r}")
    if isinstance(obj, int) and not isinstance(obj, bool) and obj < 0:
        raise ValueError(f"numbers must be non-negative integers, got {obj!r}")
    return from_py(obj)


def to_json(v: Value) -> Any:
    """Encode a Value as a JSON-serializable object."""
    if isinstance(v, Seq):
        return [to_json(x) for x in v]
    if isinstance(v, Tagged) and v != TRUE and v != FALSE:
        return {"tag": v.tag, "payload": to_json(v.payload)}
    return to_py(v)
