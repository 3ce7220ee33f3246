"""Issues reported by the scanner's rules and the report that gathers them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Iterable

from gosec import cwe
from gosec.errors import Error

SNIPPET_OFFSET = 1
"""Number of lines captured before the start and after the end of a snippet."""


class Score(IntEnum):
    """Severity or confidence of an issue."""

    LOW = 0
    MEDIUM = 1
    HIGH = 2

    def __str__(self) -> str:
        return self.name


# Rules grouped by the weakness they detect.
_RULES_BY_CWE: dict[str, tuple[str, ...]] = {
    "798": ("G101",),
    "200": ("G102", "G108"),
    "242": ("G103",),
    "703": ("G104", "G307"),
    "322": ("G106",),
    "88": ("G107",),
    "190": ("G109",),
    "409": ("G110",),
    "89": ("G201", "G202"),
    "79": ("G203",),
    "78": ("G204",),
    "276": ("G301", "G302", "G306"),
    "377": ("G303",),
    "22": ("G304", "G305"),
    "326": ("G401",),
    "295": ("G402",),
    "310": ("G403",),
    "338": ("G404",),
    "327": tuple(f"G50{n}" for n in range(1, 6)),
    "118": ("G601",),
}

_RULE_TO_CWE = {rule: cwe_id for cwe_id, rules in _RULES_BY_CWE.items() for rule in rules}


def get_cwe_by_rule(rule_id: str) -> cwe.Weakness | None:
    """Return the weakness associated with a rule, or None."""
    cwe_id = _RULE_TO_CWE.get(rule_id)
    if not cwe_id:
        return None
    return cwe.get(cwe_id)


@dataclass(frozen=True)
class MetaData:
    """Identity and rating shared by every issue a rule reports."""

    id: str
    severity: Score = Score.LOW
    confidence: Score = Score.LOW
    what: str = ""


@dataclass
class Issue:
    """A problem found by a rule in the scanned code."""

    severity: Score = Score.LOW
    confidence: Score = Score.LOW
    rule_id: str = ""
    what: str = ""
    file: str = ""
    code: str = ""
    line: str = ""
    col: str = ""
    cwe: cwe.Weakness | None = None
    nosec: bool = False

    def file_location(self) -> str:
        """Return ``file:line``."""
        return f"{self.file}:{self.line}"

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON representation."""
        return {
            "severity": str(self.severity),
            "confidence": str(self.confidence),
            "cwe": self.cwe.to_json() if self.cwe is not None else None,
            "rule_id": self.rule_id,
            "details": self.what,
            "file": self.file,
            "code": self.code,
            "line": self.line,
            "column": self.col,
            "nosec": self.nosec,
        }


def _strip_line_ending(text: str) -> str:
    return text.removesuffix("\n").removesuffix("\r")


def code_snippet(lines: Iterable[str], start: int, end: int) -> str:
    """Return the lines numbered ``start`` to ``end`` (from 1), each prefixed by its number."""
    parts = []
    for number, text in enumerate(lines, start=1):
        if number > end:
            break
        if number >= start:
            parts.append(f"{number}: {_strip_line_ending(text)}\n")
    return "".join(parts)


def new_issue(
    path: str,
    start_line: int,
    end_line: int,
    column: int,
    rule_id: str,
    desc: str,
    severity: Score,
    confidence: Score,
) -> Issue:
    """Create an issue for a node spanning ``start_line`` to ``end_line`` of ``path``.

    The code snippet is read from the file; it is empty when the file cannot be opened.
    """
    line = str(start_line) if start_line == end_line else f"{start_line}-{end_line}"
    snippet_start = max(start_line - SNIPPET_OFFSET, 1) if start_line > SNIPPET_OFFSET else start_line
    snippet_end = end_line + SNIPPET_OFFSET
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as handle:
            code = code_snippet(handle, snippet_start, snippet_end)
    except OSError:
        code = ""
    return Issue(
        severity=severity,
        confidence=confidence,
        rule_id=rule_id,
        what=desc,
        file=path,
        code=code,
        line=line,
        col=str(column),
        cwe=get_cwe_by_rule(rule_id),
    )


@dataclass
class ReportInfo:
    """Everything a report needs: issues, statistics and parse errors."""

    issues: list[Issue] = field(default_factory=list)
    stats: Any = None
    errors: dict[str, list[Error]] = field(default_factory=dict)
    gosec_version: str = ""

    def with_version(self, version: str) -> ReportInfo:
        """Record the scanner version and return this report."""
        self.gosec_version = version
        return self