# typerw/library/__init__.py
"""
Standard operation catalog.

Each submodule exposes OPERATIONS, a list of (name, clauses, signature)
entries that typerw.operation_registry seeds on first access.
"""

from __future__ import annotations

from . import arithmetic, flatten, sequences, strings

STANDARD_OPERATIONS = [
    *sequences.OPERATIONS,
    *arithmetic.OPERATIONS,
    *strings.OPERATIONS,
    *flatten.OPERATIONS,
]

__all__ = ["STANDARD_OPERATIONS"]
