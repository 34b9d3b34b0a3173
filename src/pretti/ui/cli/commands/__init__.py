"""Command execution package for CLI."""

from pretti.ui.cli.commands.all_files import AllFilesCommand
from pretti.ui.cli.commands.current import CurrentChangesCommand

__all__ = ["AllFilesCommand", "CurrentChangesCommand"]
