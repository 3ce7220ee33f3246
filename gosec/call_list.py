"""Sets of package or type selectors and the calls on them that rules look for."""

from __future__ import annotations

VENDOR_PATH = "vendor/"


def strip_vendor(path: str) -> str:
    """Drop everything up to and including the first ``vendor/`` in an import path."""
    index = path.find(VENDOR_PATH)
    if index >= 0:
        return path[index + len(VENDOR_PATH):]
    return path


class CallList(dict):
    """Mapping of a selector (package or type) to the set of call names on it."""

    def add(self, selector: str, ident: str) -> None:
        """Add one call on ``selector``."""
        self.setdefault(selector, set()).add(ident)

    def add_all(self, selector: str, *args: str) -> None:
        """Add several calls on ``selector`` at once."""
        for ident in args:
            self.add(selector, ident)

    def contains(self, selector: str, ident: str) -> bool:
        """Tell whether the call is in the list."""
        return ident in self.get(selector, ())

    def contains_pointer(self, selector: str, ident: str) -> bool:
        """Tell whether a pointer selector, or the type it points to, holds the call."""
        if not selector.startswith("*"):
            return False
        return self.contains(selector, ident) or self.contains(selector[1:], ident)