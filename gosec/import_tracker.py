"""Tracking of the packages a source file imports, their aliases and init-only imports."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable


def _unquote(path: str) -> str:
    return path.strip('"')


@dataclass
class ImportTracker:
    """Imports of a file: plain names, aliases and initialization-only imports."""

    imported: dict[str, str] = field(default_factory=dict)
    aliased: dict[str, str] = field(default_factory=dict)
    init_only: set[str] = field(default_factory=set)

    def track_file(self, import_paths: Iterable[str]) -> None:
        """Record each import path of a file under the last element of the path."""
        for raw in import_paths:
            path = _unquote(raw)
            self.imported[path] = path.split("/")[-1]

    def track_packages(self, packages: Iterable[tuple[str, str]]) -> None:
        """Record ``(path, name)`` pairs of packages."""
        for path, name in packages:
            self.imported[path] = name

    def track_import(self, path: str, name: str | None = None) -> None:
        """Record the local name of an import spec: an alias or ``_`` for init only."""
        path = _unquote(path)
        if name is not None:
            if name == "_":
                self.init_only.add(path)
            else:
                self.aliased[path] = name
        if path == "unsafe":
            self.imported[path] = path

    def imported_name(self, path: str) -> str | None:
        """Return the name the code uses for a package, or None.

        None is returned when the package is not imported or is imported only
        for its initialization.
        """
        name = self.imported.get(path)
        if name is None or path in self.init_only:
            return None
        return self.aliased.get(path, name)

    def import_path(self, name: str) -> str | None:
        """Return the import path of the package the code refers to as ``name``."""
        for path in self.imported:
            if self.imported_name(path) == name:
                return path
        return None