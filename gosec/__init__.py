"""Building blocks of a security checker for Go source code."""

__version__ = "2.8.1"

__all__ = [
    "analyzer",
    "call_list",
    "cli",
    "config",
    "cwe",
    "errors",
    "helpers",
    "import_tracker",
    "issue",
    "vflag",
]