"""Engine configuration with dot-path key access."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from rmxbuild.errors import ConfigError, ConfigNotFoundError

__all__ = ["Config"]

_DEFAULTS: dict[str, Any] = {
    "scan": {
        "max_depth": 32,
        "follow_symlinks": False,
    },
    "install": {
        "default_folder": None,
    },
}


class Config:
    """Configuration accessor with dot-path key support.

    Keys missing from the supplied data fall back to the built-in defaults.
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}

    @classmethod
    def load(cls, path: str | Path) -> Config:
        """Load configuration from a YAML mapping file."""
        path = Path(path)
        if not path.exists():
            raise ConfigNotFoundError(config_path=str(path))
        try:
            parsed = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ConfigError(message=f"Invalid YAML in config file: {path}") from e
        if parsed is None:
            return cls()
        if not isinstance(parsed, dict):
            raise ConfigError(message=f"Config file must be a YAML mapping: {path}")
        return cls(parsed)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dot-path key."""
        for source in (self._data, _DEFAULTS):
            found, value = _lookup(source, key)
            if found and value is not None:
                return value
        return default


def _lookup(data: dict[str, Any], key: str) -> tuple[bool, Any]:
    current: Any = data
    for part in key.split("."):
        if isinstance(current, dict) and part in current:
            current = current[part]
        else:
            return False, None
    return True, current
