# typerw/operation_registry.py
"""
Process-wide registry of named rewrite operations.

Design:

- Registry is just a dict[str, OperationDef].
- register_operation() validates clauses before they go in, so a clause
  that can never apply fails at startup with MalformedPattern rather
  than lazily at first use.
- Names are write-once: a second registration raises DuplicateOperation.
- The standard library (typerw.library) is seeded lazily on first access,
  which avoids import-order issues between the library and this module.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Sequence, Tuple

from typerw.core.value import VALUE_KINDS
from typerw.errors import DuplicateOperation, MalformedPattern, UnknownOperation
from typerw.reduction.body import Body, as_body
from typerw.reduction.pattern_matching import Pattern, match_order


@dataclass(frozen=True)
class Clause:
    """One rule: argument patterns plus the body they enable."""

    patterns: Tuple[Pattern, ...]
    body: Body

    def __init__(self, patterns: Sequence[Pattern], body):
        object.__setattr__(self, "patterns", tuple(patterns))
        object.__setattr__(self, "body", as_body(body))

    @property
    def arity(self) -> int:
        return len(self.patterns)


@dataclass(frozen=True)
class OperationDef:
    name: str
    clauses: Tuple[Clause, ...]
    signature: Optional[Tuple[Optional[type], ...]] = None

    @property
    def arity(self) -> int:
        return self.clauses[0].arity


# Internal registry mapping string names -> operation definitions.
_REGISTRY: Dict[str, OperationDef] = {}
_DEFAULTS_SEEDED = False


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

def _check_clause(name: str, index: int, clause: Clause, arity: int, signature) -> None:
    where = f"{name} clause {index}"

    if not isinstance(clause, Clause):
        raise MalformedPattern(f"{where}: expected Clause, got {clause!r}")
    if clause.arity != arity:
        raise MalformedPattern(f"{where}: takes {clause.arity} argument(s), expected {arity}")

    bound: list[str] = []
    for pos, p in enumerate(clause.patterns):
        if not isinstance(p, Pattern):
            raise MalformedPattern(f"{where}: argument {pos} is not a Pattern: {p!r}")
        if signature is not None and signature[pos] is not None and p.shape is not None:
            if not issubclass(p.shape, signature[pos]):
                raise MalformedPattern(
                    f"{where}: {p!r} can never match a {signature[pos].__name__} argument"
                )
        bound.extend(p.binds())

    dupes = sorted({b for b in bound if bound.count(b) > 1})
    if dupes:
        raise MalformedPattern(f"{where}: variable(s) bound twice: {dupes}")

    order = match_order(clause.patterns)
    seen: set[str] = set()
    for pos in order:
        p = clause.patterns[pos]
        missing = [r for r in p.requires() if r not in seen]
        if missing:
            raise MalformedPattern(
                f"{where}: argument {pos} reads {missing} before any other argument binds them"
            )
        seen.update(p.binds())

    unbound = sorted(set(clause.body.refs()) - set(bound))
    if unbound:
        raise MalformedPattern(f"{where}: body reads unbound variable(s) {unbound}")


def validate_operation(op: OperationDef) -> None:
    if not isinstance(op.name, str) or not op.name:
        raise MalformedPattern(f"operation name must be a non-empty string, got {op.name!r}")
    if not op.clauses:
        raise MalformedPattern(f"{op.name}: at least one clause is required")

    arity = op.clauses[0].arity if isinstance(op.clauses[0], Clause) else -1
    signature = op.signature
    if signature is not None:
        if len(signature) != arity:
            raise MalformedPattern(f"{op.name}: signature has {len(signature)} entries, clauses take {arity}")
        for s in signature:
            if s is not None and not (isinstance(s, type) and issubclass(s, VALUE_KINDS)):
                raise MalformedPattern(f"{op.name}: signature entry {s!r} is not a Value variant")

    for i, clause in enumerate(op.clauses):
        _check_clause(op.name, i, clause, arity, signature)


# ---------------------------------------------------------------------------
# Core registry operations
# ---------------------------------------------------------------------------

def register_operation(
    name: str,
    clauses: Iterable[Clause],
    signature: Optional[Sequence[Optional[type]]] = None,
) -> OperationDef:
    """
    Validate and register a named operation.

    Args:
        name: API-facing operation name.
        clauses: Ordered clauses; the first matching clause wins.
        signature: Optional Value variant per argument (None = any).

    Raises:
        DuplicateOperation if the name is already registered.
        MalformedPattern if a clause cannot apply to its argument shape.
    """
    _ensure_defaults()
    return _register(name, clauses, signature)


def _register(name, clauses, signature) -> OperationDef:
    if name in _REGISTRY:
        raise DuplicateOperation(f"operation {name!r} is already registered")
    op = OperationDef(
        name=name,
        clauses=tuple(clauses),
        signature=tuple(signature) if signature is not None else None,
    )
    validate_operation(op)
    _REGISTRY[name] = op
    return op


def get_operation(name: str) -> OperationDef:
    """
    Look up a registered operation.

    Raises:
        UnknownOperation if no such name is registered.
    """
    _ensure_defaults()
    op = _REGISTRY.get(name)
    if op is None:
        raise UnknownOperation(f"no operation named {name!r} is registered")
    return op


def has_operation(name: str) -> bool:
    _ensure_defaults()
    return name in _REGISTRY


def list_operations() -> list[str]:
    """Return all registered operation names, sorted for stability."""
    _ensure_defaults()
    return sorted(_REGISTRY.keys())


def clear_registry() -> None:
    """
    Remove all registered operations.

    Used by tests that want a clean slate; the standard library is
    re-seeded on the next access.
    """
    global _DEFAULTS_SEEDED
    _REGISTRY.clear()
    _DEFAULTS_SEEDED = False


# ---------------------------------------------------------------------------
# Default / built-in operations
# ---------------------------------------------------------------------------

def _ensure_defaults() -> None:
    global _DEFAULTS_SEEDED
    if _DEFAULTS_SEEDED:
        return
    _DEFAULTS_SEEDED = True

    # Local import avoids circular import at module import time.
    from typerw.library import STANDARD_OPERATIONS

    for name, clauses, signature in STANDARD_OPERATIONS:
        _register(name, clauses, signature)
