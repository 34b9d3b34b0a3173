"""Application service exports."""

from .format_service import FormatOutcome, FormatService

__all__ = ["FormatOutcome", "FormatService"]
