"""Helpers for reading literals and for locating the packages to scan."""

from __future__ import annotations

import os
import re
from typing import Iterable, Pattern

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_SIMPLE_ESCAPES = {
    "a": 0x07,
    "b": 0x08,
    "f": 0x0C,
    "n": 0x0A,
    "r": 0x0D,
    "t": 0x09,
    "v": 0x0B,
    "\\": 0x5C,
    '"': 0x22,
}
_HEX_ESCAPE_WIDTH = {"x": 2, "u": 4, "U": 8}
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_OCTAL_DIGITS = frozenset("01234567")


def _split_sign(text: str) -> tuple[str, str]:
    if text[:1] in ("+", "-"):
        return text[0], text[1:]
    return "", text


def _valid_underscores(digits: str) -> bool:
    return not (digits.startswith("_") or digits.endswith("_") or "__" in digits)


def get_int(literal: str) -> int:
    """Parse an integer literal with its base prefix (``0x``, ``0o``, ``0b`` or ``0``).

    Raises ValueError when the literal is malformed or does not fit in 64 bits.
    """
    sign, body = _split_sign(literal)
    if not body:
        raise ValueError(f"invalid integer literal: {literal!r}")
    if len(body) > 1 and body[0] == "0" and (body[1].isdigit() or body[1] == "_"):
        digits = body[1:]
        if not _valid_underscores(digits.lstrip("_")) or not set(digits) <= _OCTAL_DIGITS | {"_"}:
            raise ValueError(f"invalid integer literal: {literal!r}")
        value = int(digits.replace("_", ""), 8)
        if sign == "-":
            value = -value
    else:
        try:
            value = int(sign + body, 0)
        except ValueError:
            raise ValueError(f"invalid integer literal: {literal!r}") from None
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"integer literal out of range: {literal!r}")
    return value


def get_float(literal: str) -> float:
    """Parse a decimal or hexadecimal floating point literal.

    Raises ValueError when the literal is malformed or out of range.
    """
    if not literal or literal != literal.strip():
        raise ValueError(f"invalid float literal: {literal!r}")
    sign, body = _split_sign(literal)
    try:
        if body[:2].lower() == "0x":
            if not _valid_underscores(body[2:].lstrip("_")):
                raise ValueError
            value = float.fromhex(sign + body.replace("_", ""))
        else:
            if "_" in body:
                raise ValueError
            value = float(literal)
    except (ValueError, OverflowError):
        raise ValueError(f"invalid float literal: {literal!r}") from None
    if value in (float("inf"), float("-inf")) and "inf" not in body.lower():
        raise ValueError(f"float literal out of range: {literal!r}")
    return value


def get_char(literal: str) -> int:
    """Return the first byte of a character literal as written, i.e. its opening quote.

    Raises ValueError when ``literal`` is not a quoted character literal.
    """
    if len(literal) < 3 or not (literal.startswith("'") and literal.endswith("'")):
        raise ValueError(f"invalid character literal: {literal!r}")
    return literal.encode("utf-8")[0]


def get_string(literal: str) -> str:
    """Return the value of an interpreted (``"..."``) or raw (`` `...` ``) string literal.

    Raises ValueError when the literal is malformed.
    """
    if len(literal) < 2 or literal[0] != literal[-1]:
        raise ValueError(f"invalid string literal: {literal!r}")
    quote, body = literal[0], literal[1:-1]
    if quote == "`":
        if "`" in body:
            raise ValueError(f"invalid string literal: {literal!r}")
        return body.replace("\r", "")
    if quote != '"' or "\n" in body:
        raise ValueError(f"invalid string literal: {literal!r}")

    out = bytearray()
    index = 0
    while index < len(body):
        char = body[index]
        index += 1
        if char == '"':
            raise ValueError(f"invalid string literal: {literal!r}")
        if char != "\\":
            out += char.encode("utf-8", errors="surrogateescape")
            continue
        if index >= len(body):
            raise ValueError(f"invalid string literal: {literal!r}")
        escape = body[index]
        index += 1
        if escape in _SIMPLE_ESCAPES:
            out.append(_SIMPLE_ESCAPES[escape])
        elif escape in _HEX_ESCAPE_WIDTH:
            width = _HEX_ESCAPE_WIDTH[escape]
            digits = body[index:index + width]
            if len(digits) != width or not set(digits) <= _HEX_DIGITS:
                raise ValueError(f"invalid string literal: {literal!r}")
            index += width
            value = int(digits, 16)
            if escape == "x":
                out.append(value)
            else:
                if value > 0x10FFFF or 0xD800 <= value <= 0xDFFF:
                    raise ValueError(f"invalid string literal: {literal!r}")
                out += chr(value).encode("utf-8")
        elif escape in _OCTAL_DIGITS:
            digits = escape + body[index:index + 2]
            if len(digits) != 3 or not set(digits) <= _OCTAL_DIGITS:
                raise ValueError(f"invalid string literal: {literal!r}")
            index += 2
            value = int(digits, 8)
            if value > 0xFF:
                raise ValueError(f"invalid string literal: {literal!r}")
            out.append(value)
        else:
            raise ValueError(f"invalid string literal: {literal!r}")
    return out.decode("utf-8", errors="surrogateescape")


def getenv(key: str, default: str) -> str:
    """Return the environment variable ``key``, or ``default`` when unset or empty."""
    return os.environ.get(key) or default


def gopath() -> list[str]:
    """Return the absolute GOPATH entries, defaulting to ``~/go``."""
    home = os.path.expanduser("~")
    default = os.path.join(home, "go") if home != "~" else os.environ.get("GOROOT", "")
    return [os.path.abspath(entry) for entry in getenv("GOPATH", default).split(os.pathsep)]


def get_pkg_relative_path(path: str) -> str:
    """Return the path of a package relative to the ``src`` directory of a GOPATH entry.

    Raises LookupError when the path lies under no GOPATH entry.
    """
    abspath = os.path.abspath(path)
    if abspath.endswith(".go"):
        abspath = os.path.dirname(abspath)
    for base in gopath():
        project_root = os.path.join(base, "src", "")
        if abspath.startswith(project_root):
            return abspath[len(project_root):]
    raise LookupError("no project relative path found")


def get_pkg_abs_path(pkg_path: str) -> str:
    """Return the absolute path of a package; raise FileNotFoundError when it is missing."""
    abspath = os.path.abspath(pkg_path)
    if not os.path.exists(abspath):
        raise FileNotFoundError("no project absolute path found")
    return abspath


def is_excluded(text: str, excludes: Iterable[Pattern[str] | None] | None) -> bool:
    """Tell whether any of the exclusion patterns matches ``text``."""
    if excludes is None:
        return False
    return any(exclude is not None and exclude.search(text) for exclude in excludes)


def _to_slash(path: str) -> str:
    return path.replace(os.sep, "/") if os.sep != "/" else path


def package_paths(root: str, excludes: Iterable[Pattern[str] | None] | None) -> list[str]:
    """Return the package directories to scan for ``root``.

    A root ending in ``...`` is walked and every directory holding a ``.go``
    entry that no exclusion pattern matches is returned, sorted; any other root
    is returned as it is.
    """
    if not root.endswith("..."):
        return [root]
    root = root[:-3]
    excludes = list(excludes) if excludes is not None else None
    found: set[str] = set()

    def consider(path: str) -> None:
        if os.path.splitext(path)[1] != ".go":
            return
        directory = os.path.normpath(os.path.dirname(path)) if os.path.dirname(path) else "."
        if not is_excluded(_to_slash(directory), excludes):
            found.add(directory)

    consider(os.path.normpath(root) if root else ".")
    for dirpath, dirnames, filenames in os.walk(root or "."):
        for name in (*dirnames, *filenames):
            consider(os.path.join(dirpath, name))
    return sorted(found)


def excluded_dirs_regexp(excluded_dirs: Iterable[str] | None) -> list[Pattern[str]]:
    """Build one exclusion pattern for each excluded directory."""
    patterns = []
    for excluded in excluded_dirs or ():
        escaped = _to_slash(excluded).replace("/", "\\/")
        patterns.append(re.compile(rf"([\\/])?{escaped}([\\/])?"))
    return patterns


def root_path(root: str) -> str:
    """Return the absolute root path of a scan, without a trailing ``...``."""
    return os.path.abspath(root.removesuffix("..."))