from __future__ import annotations

import json
import sys
from pathlib import Path
from subprocess import run, PIPE

import jsonschema
import pytest

from typerw.cli_schema import SchemaTriplet, parse_schema_triplet
from typerw.errors import ERROR_KINDS
from typerw.operation_run_cli import main, SCHEMA_TAG, SCHEMA_DOC, SCHEMA_JSON


REPO_ROOT = Path(__file__).resolve().parents[1]


def _run(args, cwd: Path = REPO_ROOT, stdin: str | None = None):
    return run(
        [sys.executable, "-m", "typerw.operation_run_cli", *args],
        cwd=str(cwd),
        input=stdin,
        stdout=PIPE,
        stderr=PIPE,
        text=True,
    )


def _schema() -> dict:
    schema_path = REPO_ROOT / SCHEMA_JSON
    assert schema_path.exists(), f"missing schema: {schema_path}"
    return json.loads(schema_path.read_text())


# ---------------------------------------------------------------------------
# Subprocess smoke
# ---------------------------------------------------------------------------

def test_operation_run_jsonschema_smoke():
    r = _run(["Reverse", "[[1,2,3]]"])
    assert r.returncode == 0, f"stderr:\n{r.stderr}\nstdout:\n{r.stdout}"

    data = json.loads(r.stdout)
    jsonschema.validate(instance=data, schema=_schema())
    assert data["output"] == [3, 2, 1]
    assert data["ok"] is True
    assert data["error"] is None


def test_operation_run_schema_flag():
    r = _run(["--schema"])
    assert r.returncode == 0
    assert r.stdout.strip() == f"{SCHEMA_TAG} {SCHEMA_DOC} {SCHEMA_JSON}"
    assert parse_schema_triplet(r.stdout) == SchemaTriplet(SCHEMA_TAG, SCHEMA_DOC, SCHEMA_JSON)


def test_schema_files_live_in_docs():
    assert (REPO_ROOT / SCHEMA_DOC).exists()
    assert (REPO_ROOT / SCHEMA_JSON).exists()


def test_schema_error_kinds_match_engine():
    kinds = _schema()["properties"]["error"]["oneOf"][1]["properties"]["kind"]["enum"]
    assert sorted(kinds) == sorted(k.__name__ for k in ERROR_KINDS)


def test_operation_run_stdin():
    r = _run(["--stdin", "Add"], stdin="[2, 3]")
    assert r.returncode == 0, r.stderr
    assert json.loads(r.stdout)["output"] == 5


# ---------------------------------------------------------------------------
# In-process contract
# ---------------------------------------------------------------------------

def _payload(capsys) -> dict:
    return json.loads(capsys.readouterr().out)


def test_failure_payload_validates(capsys):
    rc = main(["Head", "[[]]"])
    assert rc == 1

    data = _payload(capsys)
    jsonschema.validate(instance=data, schema=_schema())
    assert data["ok"] is False
    assert data["output"] is None
    assert data["error"]["kind"] == "EmptySequence"
    assert data["error"]["operation"] == "Head"


def test_unknown_operation_payload(capsys):
    rc = main(["NoSuchOp", "[[]]"])
    assert rc == 1
    data = _payload(capsys)
    assert data["error"]["kind"] == "UnknownOperation"
    assert data["meta"]["steps"] == 0


def test_boolean_output_is_json_bool(capsys):
    rc = main(["StartsWith", '["Hello", "He"]'])
    assert rc == 0
    assert _payload(capsys)["output"] is True


def test_inputs_hash_is_deterministic(capsys):
    main(["Length", "[[1,2]]"])
    first = _payload(capsys)
    main(["Length", "[[1, 2]]"])
    second = _payload(capsys)
    assert first["meta"]["determinism"]["inputs_hash"] == second["meta"]["determinism"]["inputs_hash"]
    assert first["output"] == 2


def test_trace_flag(capsys):
    assert main(["--trace", "Length", "[[1,2]]"]) == 0
    data = _payload(capsys)
    jsonschema.validate(instance=data, schema=_schema())
    assert [t["clause"] for t in data["meta"]["trace"]] == [1, 1, 0]
    assert data["meta"]["steps"] == 3


def test_trace_omitted_by_default(capsys):
    main(["Length", "[[]]"])
    assert "trace" not in _payload(capsys)["meta"]


def test_deep_recursion_payload(capsys):
    assert main(["Add", "[300, 300]"]) == 0
    data = _payload(capsys)
    jsonschema.validate(instance=data, schema=_schema())
    assert data["output"] == 600


def test_long_sequence_argument(capsys):
    assert main(["Length", json.dumps([list(range(10)) * 60])]) == 0
    assert _payload(capsys)["output"] == 600


def test_input_file(tmp_path, capsys):
    p = tmp_path / "args.json"
    p.write_text('["a-b", "-", "+"]', encoding="utf-8")
    assert main(["--input-file", str(p), "ReplaceAll"]) == 0
    assert _payload(capsys)["output"] == "a+b"


def test_list_flag(capsys):
    assert main(["--list"]) == 0
    names = capsys.readouterr().out.split()
    assert "Reverse" in names
    assert names == sorted(names)


class TestDistributeFlag:
    def test_union(self, capsys):
        doc = json.dumps([{"tag": "ok", "payload": [1, 2]}, {"tag": "ok", "payload": []}])
        assert main(["--distribute", "ok", "Length", doc]) == 0
        data = _payload(capsys)
        jsonschema.validate(instance=data, schema=_schema())
        assert data["output"] == [{"tag": "ok", "payload": 2}, {"tag": "ok", "payload": 0}]

    def test_unhandled_tag(self, capsys):
        doc = json.dumps({"tag": "err", "payload": []})
        assert main(["--distribute", "ok", "Length", doc]) == 1
        assert _payload(capsys)["error"]["kind"] == "UnhandledTag"

    def test_empty_tag_list_warns(self, capsys):
        doc = json.dumps({"tag": "ok", "payload": []})
        assert main(["--distribute", "", "Length", doc]) == 1
        data = _payload(capsys)
        assert data["warnings"]
        assert data["error"]["kind"] == "UnhandledTag"


# ---------------------------------------------------------------------------
# Invalid input
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "argv",
    [
        ["Length", "not json"],
        ["Length", '{"a": 1}'],
        ["Length", "[[-1]]"],
        ["Length", "[[1.5]]"],
        ["Length"],
        ["Length", "[" * 100_000 + "]" * 100_000],
    ],
    ids=["not-json", "object", "negative", "float", "missing", "nested-too-deep"],
)
def test_invalid_input_exit_code(argv, capsys):
    assert main(argv) == 2
    assert "Invalid input" in capsys.readouterr().err


def test_operation_required():
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2


@pytest.mark.parametrize(
    "bad",
    [
        "",
        "\n",
        " a.v1 docs/a.md docs/schemas/a.json",
        "a.v1  docs/a.md docs/schemas/a.json",
        "a.v1\tdocs/a.md docs/schemas/a.json",
        "a.v1 docs/a.md",
        "a.v1 docs/a.md docs/schemas/a.json extra",
    ],
)
def test_parse_schema_triplet_rejects(bad):
    with pytest.raises(ValueError):
        parse_schema_triplet(bad)
