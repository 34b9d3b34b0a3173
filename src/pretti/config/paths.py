"""Shared path utilities for configuration locations.

Policy:
- Config: ``~/.config/pretti/config.toml`` unless overridden by the
  ``--config`` flag or the ``PRETTI_CONFIG`` environment variable.
- Logs: only written when ``log_file`` is configured; there is no default
  log location so running inside a repository leaves no files behind.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Callable, Final


ENV_CONFIG_PATH: Final[str] = "PRETTI_CONFIG"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a configuration path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = mapping.get(env_var) or ""
        candidate = candidate.strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    default_path = default_factory()
    return default_path.expanduser().resolve()


def default_config_path() -> Path:
    """Get the default path to the TOML config file."""

    return Path.home() / ".config" / "pretti" / "config.toml"


def resolve_config_path(
    explicit_path: Path | str | None = None,
    env: Mapping[str, str] | None = None,
) -> Path:
    """Return the config file location, preferring ``explicit_path`` then the environment."""

    return resolve_overridable_path(
        explicit_path=explicit_path,
        env=env,
        env_var=ENV_CONFIG_PATH,
        default_factory=default_config_path,
    )


__all__ = [
    "ENV_CONFIG_PATH",
    "default_config_path",
    "resolve_config_path",
    "resolve_overridable_path",
]
