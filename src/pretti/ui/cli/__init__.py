"""Command line interface package."""

from pretti.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
