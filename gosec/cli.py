"""Command-line support: version info, issue ordering and filtering, option handling."""

from __future__ import annotations

from typing import Iterable

from gosec.config import Config, GlobalOption
from gosec.helpers import excluded_dirs_regexp, package_paths, root_path
from gosec.issue import Issue, Score

DEFAULT_VERSION = "dev"

_SCORES = {
    "low": Score.LOW,
    "medium": Score.MEDIUM,
    "high": Score.HIGH,
}


def prepare_version_info(version: str | None) -> str:
    """Return the build version, or ``"dev"`` when none was set."""
    return version or DEFAULT_VERSION


def extract_line_number(line: str) -> int:
    """Return the first line number of a line or a ``start-end`` range; 0 if unparsable."""
    try:
        return int(line.split("-")[0])
    except ValueError:
        return 0


def _severity_key(issue: Issue) -> tuple[int, str, str, int]:
    return (issue.severity, issue.what, issue.file, extract_line_number(issue.line))


def sort_issues(issues: list[Issue]) -> None:
    """Sort issues in place by severity, description, file and line, all descending."""
    issues.sort(key=_severity_key, reverse=True)


def convert_to_score(severity: str) -> Score:
    """Turn ``low``, ``medium`` or ``high`` (any case) into a score.

    Raises ValueError for any other value.
    """
    key = severity.lower()
    try:
        return _SCORES[key]
    except KeyError:
        raise ValueError(
            f"provided severity '{key}' not valid. Valid options: low, medium, high"
        ) from None


def filter_issues(
    issues: Iterable[Issue],
    severity: Score,
    confidence: Score,
    show_ignored: bool,
) -> tuple[list[Issue], int]:
    """Keep the issues at or above both thresholds.

    Returns the kept issues and how many of them count as findings: an issue
    marked nosec is not counted when ignored issues are shown.
    """
    kept = [
        issue
        for issue in issues
        if issue.severity >= severity and issue.confidence >= confidence
    ]
    true_issues = sum(1 for issue in kept if not issue.nosec or not show_ignored)
    return kept, true_issues


def printed_format(output_format: str, verbose: str) -> str:
    """Return the format for printed output: ``verbose`` overrides when given."""
    return verbose or output_format


def load_config(
    config_file: str,
    ignore_nosec: bool,
    show_ignored: bool,
    nosec_tag: str,
) -> Config:
    """Build the configuration from an optional JSON file and the command-line options.

    Raises OSError when the file cannot be read and ValueError when it is invalid.
    """
    config = Config()
    if config_file:
        with open(config_file, "rb") as handle:
            config.read_from(handle)
    if ignore_nosec:
        config.set_global(GlobalOption.NOSEC, "true")
    if show_ignored:
        config.set_global(GlobalOption.SHOW_IGNORED, "true")
    if nosec_tag:
        config.set_global(GlobalOption.NOSEC_ALTERNATIVE, nosec_tag)
    return config


def root_paths(paths: Iterable[str]) -> list[str]:
    """Return the absolute root path of each scanned path."""
    return [root_path(path) for path in paths]


def collect_packages(paths: Iterable[str], excluded_dirs: Iterable[str] | None) -> list[str]:
    """Return the package directories to scan for all ``paths``.

    Raises LookupError when no package is found.
    """
    excludes = excluded_dirs_regexp(excluded_dirs)
    packages: list[str] = []
    for path in paths:
        packages.extend(package_paths(path, excludes))
    if not packages:
        raise LookupError("No packages found")
    return packages


def split_list(value: str) -> list[str]:
    """Split a comma separated option value; an empty value gives an empty list."""
    if not value:
        return []
    return value.split(",")