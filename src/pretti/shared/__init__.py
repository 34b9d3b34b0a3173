"""Shared value objects and errors used across features."""

from .commands import CommandResult, CommandRunner
from .errors import (
    ChangeListFailedError,
    ConfigError,
    FormatFailedError,
    FormatterError,
    FormatUnavailableError,
    PrettiError,
    RepositoryNotFoundError,
)

__all__ = [
    "ChangeListFailedError",
    "CommandResult",
    "CommandRunner",
    "ConfigError",
    "FormatFailedError",
    "FormatUnavailableError",
    "FormatterError",
    "PrettiError",
    "RepositoryNotFoundError",
]
