# typerw/api.py
"""
High-level typerw API helpers.

This module provides a small, stable surface for callers that work in
plain Python values:

    - run_operation(name, *args)      : Python in, Python out
    - try_run(name, *args)            : same, but failures come back as
                                        an explicit Outcome instead of
                                        an exception
    - index_of(seq, target)           : host-side -1 for "not found"
    - distribute_py(name, value, tags): distribution on Python values
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Optional

from typerw.bridge import from_py, to_py
from typerw.core.value import Value
from typerw.distribute import distribute
from typerw.engine.evaluator import RewriteEvaluator
from typerw.errors import EvalError, NotFound, StackExhausted
from typerw.pretty import pretty_args


@dataclass(frozen=True)
class Outcome:
    """Result of an evaluation: either a value or the error that stopped it."""

    ok: bool
    value: Optional[Value] = None
    error: Optional[EvalError] = None
    steps: int = 0

    def unwrap(self) -> Value:
        if not self.ok:
            raise self.error
        return self.value

    def describe_error(self) -> Optional[dict]:
        """Error kind, message and triggering call, for host reporting."""
        if self.error is None:
            return None
        return {
            "kind": self.error.kind,
            "message": self.error.message,
            "operation": self.error.op,
            "arguments": pretty_args(self.error.op_args),
        }


def run_operation(name: str, *args: Any) -> Any:
    """
    Run a registered operation on plain Python arguments.

    Raises:
        EvalError subclasses on evaluation failure.
        TypeError if an argument cannot be converted.
    """
    return to_py(RewriteEvaluator().evaluate(name, *(from_py(a) for a in args)))


def try_run(name: str, *args: Any, trace: Optional[List[dict]] = None) -> Outcome:
    """Evaluate and return an Outcome; EvalErrors become ok=False results."""
    ev = RewriteEvaluator(trace=trace)
    try:
        value = ev.evaluate(name, *args)
    except EvalError as e:
        return Outcome(ok=False, error=e, steps=ev.steps)
    except RecursionError:
        # host arguments nested too deeply to convert
        return Outcome(ok=False, error=StackExhausted(f"{name}: arguments nest too deeply", name), steps=ev.steps)
    return Outcome(ok=True, value=value, steps=ev.steps)


def index_of(seq: Any, target: Any) -> int:
    """IndexOf with the host convention of -1 when the element is absent."""
    try:
        return run_operation("IndexOf", seq, target)
    except NotFound:
        return -1


def distribute_py(name: str, value: Any, handles: Iterable[str]) -> Any:
    """
    Distribute `name` over a tagged value given in Python form.

    Tagged branches are written as (tag, payload) tuples; a list of such
    tuples is a union.
    """
    return to_py(distribute(name, from_py(value), handles))
