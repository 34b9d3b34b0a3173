"""Usage text for the ``help`` command."""

from __future__ import annotations

from typing import final

from rich.console import Console

HELP_LINES: tuple[str, ...] = (
    "Usage: pretti [options]",
    "Options:",
    "  --ext <exts>     Comma-separated file extensions to include (default: .js, .ts, .json, .tsx, .jsx)",
    "  --all            Format all files recursively in the current directory (asks for confirmation)",
    "  --current        Format only changed files in the current branch",
    "  --config <path>  Configuration file (default: ~/.config/pretti/config.toml)",
    "  --verbose        Show detailed progress information",
    "  --quiet          Suppress all log output except errors",
    "  --version        Show the program version and exit",
    "  help             Show this help message",
)


@final
class HelpDisplay:
    """Print the usage block."""

    console: Console

    def __init__(self) -> None:
        self.console = Console(highlight=False, emoji=False)

    def show(self) -> None:
        for line in HELP_LINES:
            self.console.print(line, markup=False, soft_wrap=True)
