"""Configuration management for pretti."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Final

from pretti.shared.errors import ConfigError

_logger = logging.getLogger(__name__)

DEFAULT_FORMATTER: Final[str] = "prettier"
DEFAULT_WRITE_FLAG: Final[str] = "--write"
DEFAULT_ALL_FILES_PATTERN: Final[str] = "./**/*"
DEFAULT_EXTENSIONS: Final[tuple[str, ...]] = (".js", ".ts", ".json", ".tsx", ".jsx")


@dataclass(slots=True, frozen=True)
class Config:
    """Application configuration."""

    # Formatter executable, resolved through PATH
    formatter: str = DEFAULT_FORMATTER

    # Flag that makes the formatter rewrite files in place
    write_flag: str = DEFAULT_WRITE_FLAG

    # Pattern handed to the formatter by ``--all``; expanded by the formatter itself
    all_files_pattern: str = DEFAULT_ALL_FILES_PATTERN

    # Suffixes used when ``--ext`` is empty
    default_extensions: tuple[str, ...] = DEFAULT_EXTENSIONS

    # Optional log file; console logging is always enabled
    log_file: Path | None = None

    @classmethod
    def load(cls, path: Path) -> Config:
        """Load configuration from ``path``.

        Args:
            path: TOML file to read. A missing file yields the defaults.

        Returns:
            Config: Loaded configuration object.

        Raises:
            ConfigError: If the file cannot be read or holds invalid values.
        """
        if not path.exists():
            _logger.debug("No configuration file at %s, using defaults", path)
            return cls()

        try:
            with open(path, "rb") as f:
                raw = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML in {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Cannot read configuration file {path}: {e}") from e

        config = cls.from_mapping(raw, source=path)
        _logger.debug("Configuration loaded from %s", path)
        return config

    @classmethod
    def from_mapping(cls, raw: dict[str, Any], source: Path | None = None) -> Config:
        """Build a configuration from parsed TOML values."""

        known = {f.name for f in fields(cls)}
        for key in raw:
            if key not in known:
                _logger.warning("Ignoring unknown configuration key '%s' in %s", key, source)

        values: dict[str, Any] = {}
        for key in ("formatter", "write_flag", "all_files_pattern"):
            if key in raw:
                values[key] = _require_str(raw[key], key)

        if "default_extensions" in raw:
            values["default_extensions"] = _require_extensions(raw["default_extensions"])

        log_file = raw.get("log_file")
        if log_file is not None:
            text = _require_str(log_file, "log_file").strip()
            values["log_file"] = Path(text).expanduser() if text else None

        return cls(**values)


def _require_str(value: Any, key: str) -> str:
    if not isinstance(value, str):
        raise ConfigError(f"'{key}' must be a string, got {type(value).__name__}")
    return value


def _require_extensions(value: Any) -> tuple[str, ...]:
    if not isinstance(value, list) or not value:
        raise ConfigError("'default_extensions' must be a non-empty list of strings")
    items: list[Any] = list(value)
    if not all(isinstance(item, str) for item in items):
        raise ConfigError("'default_extensions' must contain only strings")
    return tuple(items)


__all__ = [
    "DEFAULT_ALL_FILES_PATTERN",
    "DEFAULT_EXTENSIONS",
    "DEFAULT_FORMATTER",
    "DEFAULT_WRITE_FLAG",
    "Config",
]
