"""Configuration loading for pretti."""

from .config import Config
from .paths import default_config_path, resolve_config_path

__all__ = ["Config", "default_config_path", "resolve_config_path"]
