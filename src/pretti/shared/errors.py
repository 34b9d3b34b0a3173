"""Error hierarchy for pretti."""

from __future__ import annotations


class PrettiError(Exception):
    """Base class for errors reported to the user."""


class ConfigError(PrettiError):
    """Raised when the configuration file cannot be read or is invalid."""


class RepositoryNotFoundError(PrettiError):
    """Raised when the working-tree root cannot be determined."""


class ChangeListFailedError(PrettiError):
    """Raised when the unstaged change list cannot be produced."""


class FormatterError(PrettiError):
    """Base class for failures of the external formatter."""


class FormatUnavailableError(FormatterError):
    """Raised when the formatter executable could not be launched."""

    def __init__(self, formatter: str, reason: str) -> None:
        self.formatter = formatter
        self.reason = reason
        super().__init__(
            f"failed to run {formatter}: {reason} (make sure it's installed and in PATH)"
        )


class FormatFailedError(FormatterError):
    """Raised when the formatter ran but reported failure."""

    def __init__(self, formatter: str, exit_code: int) -> None:
        self.formatter = formatter
        self.exit_code = exit_code
        super().__init__(f"{formatter} exited with code {exit_code}")


__all__ = [
    "ChangeListFailedError",
    "ConfigError",
    "FormatFailedError",
    "FormatUnavailableError",
    "FormatterError",
    "PrettiError",
    "RepositoryNotFoundError",
]
