"""Console output helpers for the CLI."""

from .help import HelpDisplay
from .result import ResultDisplay

__all__ = ["HelpDisplay", "ResultDisplay"]
