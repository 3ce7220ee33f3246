"""Scanner configuration: per-rule sections plus a section of global options."""

from __future__ import annotations

import json
from enum import Enum
from typing import IO, Any

GLOBALS = "global"


class GlobalOption(str, Enum):
    """Names of the global options."""

    NOSEC = "nosec"
    SHOW_IGNORED = "show-ignored"
    AUDIT = "audit"
    NOSEC_ALTERNATIVE = "#nosec"

    def __str__(self) -> str:
        return self.value


class ConfigError(LookupError):
    """Raised when a configuration section or global option is missing."""


def _option_key(option: GlobalOption | str) -> str:
    return option.value if isinstance(option, GlobalOption) else str(option)


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "<nil>"
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return str(value)


def _encode(data: Any) -> str:
    text = json.dumps(data, separators=(",", ":"), sort_keys=True, ensure_ascii=False)
    return (
        text.replace("<", "\\u003c")
        .replace(">", "\\u003e")
        .replace("&", "\\u0026")
        .replace("\u2028", "\\u2028")
        .replace("\u2029", "\\u2029")
    )


class Config(dict):
    """Mapping of section names to settings, always holding a global section."""

    def __init__(self) -> None:
        super().__init__()
        self[GLOBALS] = {}

    def _convert_globals(self) -> None:
        settings = self.get(GLOBALS)
        if isinstance(settings, dict):
            self[GLOBALS] = {str(key): _format_value(value) for key, value in settings.items()}

    def read_from(self, stream: IO) -> int:
        """Merge JSON configuration read from ``stream``; return the bytes read.

        Raises ValueError when the data is not a valid JSON object.
        """
        data = stream.read()
        raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
        loaded = json.loads(raw.decode("utf-8"))
        if not isinstance(loaded, dict):
            raise ValueError("configuration must be a JSON object")
        self.update(loaded)
        self._convert_globals()
        return len(raw)

    def write_to(self, stream: IO) -> int:
        """Write the configuration as compact JSON; return the bytes written."""
        text = _encode(dict(self))
        raw = text.encode("utf-8")
        try:
            stream.write(raw)
        except TypeError:
            stream.write(text)
        return len(raw)

    def section(self, name: str) -> Any:
        """Return the settings of a section; raise ConfigError when absent."""
        try:
            return self[name]
        except KeyError:
            raise ConfigError(f"Section {name} not in configuration") from None

    def get_global(self, option: GlobalOption | str) -> str:
        """Return the value of a global option; raise ConfigError when absent."""
        settings = self.get(GLOBALS)
        if not isinstance(settings, dict):
            raise ConfigError("no global config options found")
        key = _option_key(option)
        try:
            return settings[key]
        except KeyError:
            raise ConfigError(f"global setting for {key} not found") from None

    def set_global(self, option: GlobalOption | str, value: str) -> None:
        """Associate a value with a global option."""
        settings = self.get(GLOBALS)
        if isinstance(settings, dict):
            settings[_option_key(option)] = value

    def is_global_enabled(self, option: GlobalOption | str) -> bool:
        """Tell whether a global option is set to "true" or "enabled"."""
        return self.get_global(option) in ("true", "enabled")