# typerw/distribute.py
"""
Distribution over tagged sums.

    Tagged(tag, p)  ->  Tagged(tag, evaluate(handlers[tag], p))

A union is written as a Seq of Tagged branches; each branch is handled
independently and the results are reassembled in the same order.

The handler table must be total for the tags it will meet: a tag with no
handler raises UnhandledTag instead of passing through untouched.
"""

from __future__ import annotations

from typing import Iterable, Mapping, Optional

from typerw.core.value import Seq, Tagged, Value
from typerw.engine.evaluator import RewriteEvaluator
from typerw.errors import UnhandledTag
from typerw.operation_registry import get_operation


class Distribution:
    """A total tag -> operation-name table applied branch by branch."""

    def __init__(self, handlers: Mapping[str, str], evaluator: Optional[RewriteEvaluator] = None):
        # Fails closed on unknown operations before anything is distributed.
        for op_name in handlers.values():
            get_operation(op_name)
        self.handlers = dict(handlers)
        self.evaluator = evaluator or RewriteEvaluator()

    def handles(self, tag: str) -> bool:
        return tag in self.handlers

    def apply_branch(self, branch: Value) -> Tagged:
        if not isinstance(branch, Tagged):
            raise TypeError(f"distribute expects Tagged branches, got {branch!r}")
        op_name = self.handlers.get(branch.tag)
        if op_name is None:
            raise UnhandledTag(
                f"no handler for tag {branch.tag!r}; handled: {sorted(self.handlers)}",
                "distribute",
                (branch,),
            )
        return Tagged(branch.tag, self.evaluator.evaluate(op_name, branch.payload))

    def apply(self, value: Value) -> Value:
        """Distribute over one Tagged value, or over a Seq of them."""
        if isinstance(value, Seq):
            return Seq(*(self.apply_branch(b) for b in value))
        return self.apply_branch(value)

    __call__ = apply


def distribute(
    op_name: str,
    value: Value,
    handles: Iterable[str],
    evaluator: Optional[RewriteEvaluator] = None,
) -> Value:
    """
    Apply `op_name` to the payload of every branch of `value`.

    `handles` lists every tag the caller is prepared to see; any other tag
    raises UnhandledTag.
    """
    return Distribution({tag: op_name for tag in handles}, evaluator).apply(value)
