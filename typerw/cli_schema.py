from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SchemaTriplet:
    """The `--schema` line of a JSON-emitting CLI: tag, markdown doc, JSON Schema path."""

    tag: str
    doc_md: str
    schema_json: str

    def __post_init__(self):
        for field in ("tag", "doc_md", "schema_json"):
            _check_token(field, getattr(self, field))

    def line(self) -> str:
        """Single line, three space-separated fields, no trailing newline."""
        return f"{self.tag} {self.doc_md} {self.schema_json}"


def _check_token(name: str, s: str) -> None:
    if not isinstance(s, str):
        raise TypeError(f"{name} must be str, got {type(s).__name__}")
    if not s or any(ch.isspace() for ch in s):
        raise ValueError(f"{name} must be a non-empty token without whitespace: {s!r}")


def print_schema_triplet(tag: str, doc_md: str, schema_json: str) -> None:
    print(SchemaTriplet(tag, doc_md, schema_json).line(), flush=True)


def parse_schema_triplet(line: str) -> SchemaTriplet:
    """
    Strict inverse of SchemaTriplet.line(). One trailing newline is
    tolerated; any other stray whitespace or field count is rejected.
    """
    if not isinstance(line, str):
        raise TypeError(f"line must be str, got {type(line).__name__}")
    parts = line.removesuffix("\n").split(" ")
    if len(parts) != 3:
        raise ValueError(f"expected 3 fields separated by single spaces: {line!r}")
    return SchemaTriplet(*parts)
