"""Errors found while parsing the scanned sources."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class Error:
    """A parse or build error at a line and column of a file."""

    line: int
    column: int
    err: str

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON representation."""
        return {"line": self.line, "column": self.column, "error": self.err}


def sort_errors(all_errors: dict[str, list[Error]]) -> None:
    """Sort every file's errors in place by line, then column."""
    for errors in all_errors.values():
        errors.sort(key=lambda error: (error.line, error.column))