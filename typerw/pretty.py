# typerw/pretty.py
"""
Pretty-print helpers for engine values.

This does NOT change any __repr__. It gives a compact, human-facing
rendering for error messages and CLI text output:

    Seq(Num(1), Str('a'))       ->  [1, "a"]
    Tagged('ok', Num(2))        ->  ok(2)
    TRUE / FALSE                ->  true / false
    UNIT                        ->  ()

Deep or wide values are elided with "..." according to max_depth /
max_width.
"""

from __future__ import annotations

import json

from typerw.core.value import Value, Seq, Str, Num, Tagged, Unit, TRUE, FALSE


def pretty_value(v: Value, *, max_depth: int = 6, max_width: int = 8) -> str:
    """Render a Value into a compact string."""
    return _render(v, max_depth, max_width)


def _render(v: Value, depth: int, width: int) -> str:
    if isinstance(v, Num):
        return str(v.magnitude)
    if isinstance(v, Str):
        return json.dumps(v.text, ensure_ascii=False)
    if isinstance(v, Unit):
        return "()"
    if v == TRUE:
        return "true"
    if v == FALSE:
        return "false"
    if depth <= 0:
        return "..."
    if isinstance(v, Tagged):
        return f"{v.tag}({_render(v.payload, depth - 1, width)})"
    if isinstance(v, Seq):
        items = [_render(x, depth - 1, width) for x in v.elements[:width]]
        if len(v) > width:
            items.append("...")
        return "[" + ", ".join(items) + "]"
    return repr(v)


def pretty_args(args) -> str:
    return ", ".join(pretty_value(a) for a in args)
