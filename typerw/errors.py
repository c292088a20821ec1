# typerw/errors.py
"""
Failure taxonomy of the rewrite engine.

Every failure is an EvalError subclass. `kind` is the class name; `op` and
`args` name the innermost operation call that raised it (filled in by the
evaluator as the error leaves a clause body).
"""

from __future__ import annotations

from typing import Any, Tuple


class EvalError(Exception):
    """Base class for engine failures."""

    def __init__(self, message: str = "", op: str | None = None, args: Tuple[Any, ...] = ()):
        super().__init__(message or self.__class__.__name__)
        self.message = message or self.__class__.__name__
        self.op = op
        self.op_args = tuple(args)

    @property
    def kind(self) -> str:
        return self.__class__.__name__

    def at(self, op: str, args: Tuple[Any, ...]) -> "EvalError":
        """Attach call context once; the innermost call wins."""
        if self.op is None:
            self.op = op
            self.op_args = tuple(args)
        return self

    def __str__(self) -> str:
        if self.op is None:
            return self.message
        return f"{self.message} (in {self.op})"


class UnknownOperation(EvalError):
    """Name not registered."""


class NoMatchingClause(EvalError):
    """Arguments matched no clause of a known operation."""


class EmptySequence(EvalError):
    """Head / Last and friends on an empty sequence."""


class NegativeResult(EvalError):
    """Numeral subtraction below zero."""


class NotFound(EvalError):
    """A search exhausted its input."""


class UnhandledTag(EvalError):
    """Distribution over a tag with no registered handler."""


class MalformedPattern(EvalError):
    """A clause can never apply to its declared argument shape."""


class DuplicateOperation(EvalError):
    """An operation name was registered twice."""


class StackExhausted(EvalError):
    """Recursion outgrew the host stack provisioned for one evaluation."""


ERROR_KINDS = (
    UnknownOperation,
    NoMatchingClause,
    EmptySequence,
    NegativeResult,
    NotFound,
    UnhandledTag,
    MalformedPattern,
    DuplicateOperation,
    StackExhausted,
)
