# typerw/__init__.py
"""
typerw public API surface.

A pure structural rewrite engine over a closed set of symbolic values.
This module exposes a small, coherent core:

    - Values: Value, Seq, Str, Num, Tagged, Unit, UNIT, TRUE, FALSE, EMPTY
    - Numerals: num, num_to_int
    - Bridges: seq_of, str_of, num_of, tagged_of, from_py, to_py
    - Patterns: Literal, Wildcard, Bind, Shape, HeadTail, TailLast,
                PrefixSplit, SuffixSplit, InfixSplit, TagMatch, Succ, match
    - Bodies: Lit, Ref, Call, SeqOf, Cons, Snoc, Join, Tag, Inc, Dec,
              Unary, Equal, Or, If, Fail
    - Registry: Clause, OperationDef, register_operation, get_operation,
                has_operation, list_operations
    - Evaluator: RewriteEvaluator, new_evaluator, evaluate
    - Distribution: Distribution, distribute
    - Errors: EvalError and its subclasses
    - High-level API: run_operation, try_run, Outcome, index_of
"""

from __future__ import annotations

from .core.value import (
    Value,
    Seq,
    Str,
    Num,
    Tagged,
    Unit,
    UNIT,
    EMPTY,
    TRUE,
    FALSE,
)
from .core.numbers import num, num_to_int

# ---------------------------------------------------------------------------
# Host bridges
# ---------------------------------------------------------------------------

from .bridge import seq_of, str_of, num_of, tagged_of, from_py, to_py

# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

from .errors import (
    EvalError,
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

# ---------------------------------------------------------------------------
# Patterns and bodies
# ---------------------------------------------------------------------------

from .reduction.pattern_matching import (
    NO_MATCH,
    Pattern,
    Literal,
    Wildcard,
    Bind,
    Shape,
    HeadTail,
    TailLast,
    PrefixSplit,
    SuffixSplit,
    InfixSplit,
    TagMatch,
    Succ,
    match,
)
from .reduction.body import (
    Lit,
    Ref,
    Call,
    SeqOf,
    Cons,
    Snoc,
    Join,
    Tag,
    Inc,
    Dec,
    Unary,
    Equal,
    Or,
    If,
    Fail,
)

# ---------------------------------------------------------------------------
# Registry / evaluator / distribution
# ---------------------------------------------------------------------------

from .operation_registry import (
    Clause,
    OperationDef,
    register_operation,
    get_operation,
    has_operation,
    list_operations,
)
from .engine.evaluator import RewriteEvaluator, new_evaluator, evaluate
from .distribute import Distribution, distribute

# ---------------------------------------------------------------------------
# High-level API
# ---------------------------------------------------------------------------

from .pretty import pretty_value
from .api import Outcome, run_operation, try_run, index_of, distribute_py


__all__ = [
    # values
    "Value",
    "Seq",
    "Str",
    "Num",
    "Tagged",
    "Unit",
    "UNIT",
    "EMPTY",
    "TRUE",
    "FALSE",
    "num",
    "num_to_int",

    # bridges
    "seq_of",
    "str_of",
    "num_of",
    "tagged_of",
    "from_py",
    "to_py",

    # errors
    "EvalError",
    "UnknownOperation",
    "NoMatchingClause",
    "EmptySequence",
    "NegativeResult",
    "NotFound",
    "UnhandledTag",
    "MalformedPattern",
    "DuplicateOperation",
    "StackExhausted",

    # patterns
    "NO_MATCH",
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

    # bodies
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

    # registry / evaluator
    "Clause",
    "OperationDef",
    "register_operation",
    "get_operation",
    "has_operation",
    "list_operations",
    "RewriteEvaluator",
    "new_evaluator",
    "evaluate",
    "Distribution",
    "distribute",

    # pretty / high-level API
    "pretty_value",
    "Outcome",
    "run_operation",
    "try_run",
    "index_of",
    "distribute_py",
]
