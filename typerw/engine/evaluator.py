"""
Rewrite evaluator for typerw.

Execution model:
----------------
    evaluate(name, *args) -> Value

1. Look up the OperationDef for `name` (UnknownOperation if missing).
2. Scan its clauses in declaration order; the first clause whose patterns
   match the arguments wins.
3. Reduce that clause's body against the bindings. A body may Call any
   operation, including the one being evaluated; that is how recursion
   happens.
4. No clause matched -> NoMatchingClause.

There is no memoization and the engine imposes no step or depth ceiling.
Recursion depth equals the size of the decreasing argument, so the
outermost call runs on a worker thread with a large stack and a raised
interpreter recursion limit, sized by `max_depth`. Only if that host
stack runs out does the evaluation fail, with StackExhausted.

Definitions must recurse on a strictly smaller argument; a definition that
does not is a programming error and ends in StackExhausted.
"""

from __future__ import annotations

import sys
import threading
from typing import Any, Callable, List, Optional, Tuple

from typerw.bridge import from_py
from typerw.core.value import Value
from typerw.errors import EvalError, NoMatchingClause, StackExhausted
from typerw.operation_registry import OperationDef, get_operation
from typerw.reduction.pattern_matching import NO_MATCH, match_clause


# Engine recursion levels one evaluation is provisioned for.
DEFAULT_MAX_DEPTH = 20_000

# Interpreter frames per engine level: apply, the clause body and the
# builders / comprehensions between it and the next Call.
FRAMES_PER_LEVEL = 12

# Worker thread stack; only the pages actually touched are committed.
STACK_BYTES = 512 * 1024 * 1024


def _run_on_deep_stack(fn: Callable[[], Value]) -> Value:
    """Run fn on a fresh thread with a STACK_BYTES stack; re-raise its error here."""
    outcome: dict = {}

    def target():
        try:
            outcome["value"] = fn()
        except BaseException as e:
            outcome["error"] = e

    previous = threading.stack_size(STACK_BYTES)
    try:
        worker = threading.Thread(target=target, name="typerw-eval", daemon=True)
        worker.start()
    finally:
        threading.stack_size(previous)
    worker.join()

    if "error" in outcome:
        raise outcome["error"]
    return outcome["value"]


class RewriteEvaluator:
    """Evaluates registered operations by clause selection and body reduction."""

    def __init__(
        self,
        lookup: Optional[Callable[[str], OperationDef]] = None,
        trace: Optional[List[dict]] = None,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ):
        self._lookup = lookup or get_operation
        self.trace = trace
        self.max_depth = max_depth
        self.steps = 0
        self._depth = 0

    # ----------------------------------------------------------------------
    # Core API
    # ----------------------------------------------------------------------
    def evaluate(self, name: str, *args: Any) -> Value:
        """
        Evaluate operation `name` on `args`.

        Plain Python arguments are converted with bridge.from_py.

        Raises:
            UnknownOperation  if `name` is not registered.
            NoMatchingClause  if no clause matches.
            StackExhausted    if recursion outgrows the provisioned host stack.
            EvalError         anything a clause body raises, annotated with
                              the innermost operation and its arguments.
        """
        values = tuple(from_py(a) for a in args)
        if self._depth:
            return self.apply(name, values)
        return self._outermost(name, values)

    __call__ = evaluate

    def apply(self, name: str, values: Tuple[Value, ...]) -> Value:
        """
        Evaluate on already-converted values. This is the recursive entry
        used by Call bodies; it is a plain method call so that each engine
        level stays a handful of interpreter frames.
        """
        op = self._lookup(name)

        for index, clause in enumerate(op.clauses):
            env = match_clause(clause.patterns, values)
            if env is NO_MATCH:
                continue
            self._record(name, index)
            self._depth += 1
            try:
                return clause.body.reduce(self, env)
            except EvalError as e:
                raise e.at(name, values)
            finally:
                self._depth -= 1

        raise NoMatchingClause(
            f"{name}: no clause matches {len(values)} argument(s)", name, values
        )

    def _outermost(self, name: str, values: Tuple[Value, ...]) -> Value:
        previous = sys.getrecursionlimit()
        sys.setrecursionlimit(max(previous, FRAMES_PER_LEVEL * self.max_depth))
        try:
            return _run_on_deep_stack(lambda: self.apply(name, values))
        except RecursionError:
            raise StackExhausted(
                f"{name}: recursion exceeded the host stack ({self.max_depth} levels provisioned)",
                name,
                values,
            ) from None
        finally:
            sys.setrecursionlimit(previous)
            self._depth = 0

    # ----------------------------------------------------------------------
    # Trace
    # ----------------------------------------------------------------------
    def _record(self, name: str, clause_index: int) -> None:
        self.steps += 1
        if self.trace is not None:
            self.trace.append({"op": name, "clause": clause_index, "depth": self._depth})


def new_evaluator(trace: Optional[List[dict]] = None, max_depth: int = DEFAULT_MAX_DEPTH) -> RewriteEvaluator:
    """Return a fresh evaluator instance."""
    return RewriteEvaluator(trace=trace, max_depth=max_depth)


def evaluate(name: str, *args: Any) -> Value:
    """Evaluate on a fresh, trace-free evaluator."""
    return RewriteEvaluator().evaluate(name, *args)
