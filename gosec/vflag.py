"""A command-line value that rejects arguments containing a dash."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ValidatedFlag:
    """String option value that refuses anything looking like another flag."""

    value: str = ""

    def set(self, value: str) -> None:
        """Store ``value``; raise ValueError when it contains a dash."""
        if "-" in value:
            raise ValueError("flag value cannot start with -")
        self.value = value

    def __str__(self) -> str:
        return self.value