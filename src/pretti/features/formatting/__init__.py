"""Public surface for the formatting feature."""

from .usecases.formatter import FormatterInvoker

__all__ = ["FormatterInvoker"]
