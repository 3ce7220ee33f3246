"""Bookkeeping of a scanning run: issues, parse errors, metrics and nosec handling."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Iterable

from gosec.config import Config, ConfigError, GlobalOption
from gosec.errors import Error, sort_errors
from gosec.issue import Issue

DEFAULT_NOSEC_TAG = "#nosec"

_GENERATED_CODE = re.compile(r"// Code generated .* DO NOT EDIT\.")
_NO_BUILDABLE_FILES = re.compile(r"no buildable Go source files in")
_RULE_ID = re.compile(r"(G\d{3})", re.ASCII)
_DECIMAL = re.compile(r"[+-]?[0-9]+", re.ASCII)
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


@dataclass
class Metrics:
    """Counters reported about a scanning run."""

    num_files: int = 0
    num_lines: int = 0
    num_nosec: int = 0
    num_found: int = 0

    def to_dict(self) -> dict[str, int]:
        """Return the JSON representation."""
        return {
            "files": self.num_files,
            "lines": self.num_lines,
            "nosec": self.num_nosec,
            "found": self.num_found,
        }


@dataclass(frozen=True)
class PackageError:
    """An error reported while loading a package, positioned as ``file:line:column``."""

    pos: str
    msg: str


def is_generated_file(comments: Iterable[str]) -> bool:
    """Tell whether any comment line marks the file as generated code."""
    return any(_GENERATED_CODE.fullmatch(text) for text in comments)


def _atoi(text: str) -> int:
    if not _DECIMAL.fullmatch(text):
        raise ValueError(f"invalid syntax: {text!r}")
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"value out of range: {text!r}")
    return value


def _enabled(config: Config, option: GlobalOption) -> bool:
    try:
        return config.is_global_enabled(option)
    except ConfigError:
        return False


class Analyzer:
    """Collects what a scan finds and applies the nosec and show-ignored settings."""

    def __init__(
        self,
        config: Config | None = None,
        tests: bool = False,
        exclude_generated: bool = False,
        logger: logging.Logger | None = None,
    ) -> None:
        self.config: Config = config if config is not None else Config()
        self.ignore_nosec = _enabled(self.config, GlobalOption.NOSEC)
        self.show_ignored = _enabled(self.config, GlobalOption.SHOW_IGNORED)
        self.tests = tests
        self.exclude_generated = exclude_generated
        self.logger = logger if logger is not None else logging.getLogger("gosec")
        self.issues: list[Issue] = []
        self.stats = Metrics()
        self.errors: dict[str, list[Error]] = {}
        self.context: dict[str, Any] = {}

    def parse_errors(self, errors: Iterable[PackageError]) -> None:
        """Record package errors under their files.

        Raises ValueError when a line or column in a position cannot be parsed.
        """
        for package_error in errors:
            parts = package_error.pos.split(":")
            file = parts[0]
            line = column = 0
            if len(parts) > 1:
                try:
                    line = _atoi(parts[1])
                except ValueError as exc:
                    raise ValueError(f"parsing line: {exc}") from exc
            if len(parts) > 2:
                try:
                    column = _atoi(parts[2])
                except ValueError as exc:
                    raise ValueError(f"parsing column: {exc}") from exc
            self.errors.setdefault(file, []).append(
                Error(line, column, package_error.msg.strip())
            )

    def append_error(self, file: str, err: BaseException | str) -> None:
        """Record an error for ``file``, except for packages with no buildable files."""
        message = str(err)
        if _NO_BUILDABLE_FILES.search(message):
            return
        self.errors.setdefault(file, []).append(Error(0, 0, message))

    def _nosec_tag(self) -> str:
        try:
            return self.config.get_global(GlobalOption.NOSEC_ALTERNATIVE)
        except ConfigError:
            return DEFAULT_NOSEC_TAG

    def ignored_rules(self, comment_texts: Iterable[str]) -> tuple[list[str], bool]:
        """Inspect the comment groups attached to a node for a nosec tag.

        Returns the rule ids the tag names and whether everything is ignored,
        which is the case for a tag naming no rule. Nothing is ignored when
        nosec comments are themselves ignored.
        """
        if self.ignore_nosec:
            return [], False
        alternative = self._nosec_tag()
        for text in comment_texts:
            if DEFAULT_NOSEC_TAG in text or alternative in text:
                self.stats.num_nosec += 1
                rules = _RULE_ID.findall(text)
                if not rules:
                    return [], True
                return rules, False
        return [], False

    def record_issue(self, issue: Issue, ignored: bool) -> bool:
        """Count an issue and keep it if it is to be reported; return whether it was kept."""
        if self.show_ignored:
            issue.nosec = ignored
        if not ignored or not self.show_ignored:
            self.stats.num_found += 1
        if not ignored or self.show_ignored or self.ignore_nosec:
            self.issues.append(issue)
            return True
        return False

    def record_file(self, line_count: int) -> None:
        """Count one more scanned file of ``line_count`` lines."""
        self.stats.num_files += 1
        self.stats.num_lines += line_count

    def finish(self) -> None:
        """Sort the recorded errors of every file by line and column."""
        sort_errors(self.errors)

    def report(self) -> tuple[list[Issue], Metrics, dict[str, list[Error]]]:
        """Return the issues, the metrics and the errors recorded so far."""
        return self.issues, self.stats, self.errors

    def reset(self) -> None:
        """Clear the context, the issues and the metrics."""
        self.context = {}
        self.issues = []
        self.stats = Metrics()