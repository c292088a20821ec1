from __future__ import annotations

"""
typerw Operation Run CLI

A thin host wrapper around the rewrite engine: takes an operation name and
a JSON list of arguments, evaluates, and emits a JSON payload.

Contract: emits JSON with schema tag + schema_doc.

Argument encoding (JSON -> engine):
    [..]                      Seq
    "text"                    Str
    3                         Num (non-negative)
    true / false              boolean tags
    {"tag": t, "payload": p}  Tagged
    null                      UNIT
"""

import argparse
import datetime
import hashlib
import json
import sys
from typing import Any, List, Optional

from typerw.api import Outcome, try_run
from typerw.bridge import from_json, to_json
from typerw.cli_schema import print_schema_triplet
from typerw.distribute import Distribution
from typerw.engine.evaluator import RewriteEvaluator
from typerw.errors import EvalError
from typerw.operation_registry import list_operations


SCHEMA_TAG = "typerw-operation-run.v1"
SCHEMA_DOC = "docs/operation_run_schema.md"
SCHEMA_JSON = "docs/schemas/operation_run_schema.json"


def _utc_now_z() -> str:
    return datetime.datetime.now(datetime.timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z")


def _inputs_hash(operation: str, args: Any) -> str:
    payload = json.dumps({"operation": operation, "input": args}, separators=(",", ":"), ensure_ascii=False)
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


def _parse_json_text(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Input must be JSON. Parse error: {e}") from e


def _read_input_json(args: argparse.Namespace) -> Any:
    """
    Priority:
      1) positional input_json (if provided)
      2) --input-file
      3) --stdin
    """
    if args.input_json is not None:
        return _parse_json_text(args.input_json)

    if args.input_file is not None:
        with args.input_file as fh:
            return _parse_json_text(fh.read())

    if args.stdin:
        return _parse_json_text(sys.stdin.read())

    raise ValueError("No input provided. Use positional JSON, --input-file, or --stdin.")


def _emit(payload: dict[str, Any], pretty: bool) -> None:
    if pretty:
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        print(json.dumps(payload, ensure_ascii=False))


def _run_distribution(operation: str, tags: List[str], doc: Any, trace: Optional[List[dict]]) -> Outcome:
    ev = RewriteEvaluator(trace=trace)
    try:
        dist = Distribution({t: operation for t in tags}, ev)
        value = dist.apply(from_json(doc))
    except EvalError as e:
        return Outcome(ok=False, error=e, steps=ev.steps)
    return Outcome(ok=True, value=value, steps=ev.steps)


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(
        prog="typerw",
        description="Evaluate a registered typerw operation on JSON arguments and emit JSON.",
    )
    ap.add_argument("--schema", action="store_true", help="Print schema tag + schema doc paths and exit.")
    ap.add_argument("--list", action="store_true", help="List registered operation names and exit.")
    ap.add_argument("--pretty", action="store_true", help="Pretty-print JSON output.")
    ap.add_argument("--stdin", action="store_true", help="Read input JSON from stdin.")
    ap.add_argument(
        "--input-file",
        type=argparse.FileType("r", encoding="utf-8"),
        default=None,
        help="Read input JSON from a file.",
    )
    ap.add_argument(
        "--distribute",
        metavar="TAGS",
        default=None,
        help="Comma-separated tags to handle; input is a tagged value or a list of them.",
    )
    ap.add_argument("--trace", action="store_true", help="Include the reduction trace in meta.")

    ap.add_argument("operation", nargs="?", help="Registered operation name (e.g. Reverse)")
    ap.add_argument(
        "input_json",
        nargs="?",
        default=None,
        help='JSON list of arguments, e.g. \'[[1,2,3]]\'. Optional if using --stdin/--input-file.',
    )

    args = ap.parse_args(argv)

    if args.schema:
        print_schema_triplet(SCHEMA_TAG, SCHEMA_DOC, SCHEMA_JSON)
        return 0

    if args.list:
        for name in list_operations():
            print(name)
        return 0

    if not args.operation:
        ap.error("operation is required unless --schema or --list is used")

    try:
        doc = _read_input_json(args)
        if args.distribute is None:
            if not isinstance(doc, list):
                raise ValueError("Input JSON must be a list of arguments (e.g. [[1,2,3]]).")
            values = [from_json(x) for x in doc]
        tags = [t for t in (args.distribute or "").split(",") if t]
    except (ValueError, TypeError, RecursionError) as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return 2

    warnings: List[str] = []
    trace: Optional[List[dict]] = [] if args.trace else None
    if args.distribute is not None:
        if not tags:
            warnings.append("--distribute given with no tags; every branch is unhandled")
        try:
            outcome = _run_distribution(args.operation, tags, doc, trace)
        except (ValueError, TypeError, RecursionError) as e:
            print(f"Invalid input: {e}", file=sys.stderr)
            return 2
    else:
        outcome = try_run(args.operation, *values, trace=trace)

    meta: dict[str, Any] = {
        "tool": "operation_run_cli",
        "generated_at": _utc_now_z(),
        "steps": outcome.steps,
        "determinism": {
            "inputs_hash": _inputs_hash(args.operation, doc),
        },
    }
    if args.trace:
        meta["trace"] = trace

    payload: dict[str, Any] = {
        "schema": SCHEMA_TAG,
        "schema_doc": SCHEMA_DOC,
        "operation": args.operation,
        "input": doc,
        "output": to_json(outcome.value) if outcome.ok else None,
        "ok": bool(outcome.ok),
        "error": outcome.describe_error(),
        "warnings": warnings,
        "meta": meta,
    }

    _emit(payload, pretty=bool(args.pretty))
    return 0 if outcome.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
