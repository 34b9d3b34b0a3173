"""src/pretti/ui/cli/display/result.py
What: Render user-facing outcomes of formatting runs.
Why: Keep console wording in one place so commands stay free of print calls.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import final

from rich.console import Console


@final
class ResultDisplay:
    """Handles result display in CLI."""

    console: Console

    def __init__(self) -> None:
        """Initialize result display."""
        self.console = Console(highlight=False, soft_wrap=True, emoji=False)

    def show_formatted(self, files: Sequence[Path]) -> None:
        """List the files the formatter was run on.

        Args:
            files: Paths passed to the formatter, in order.
        """
        self.console.print(f"Successfully formatted {len(files)} files:")
        for path in files:
            self.console.print(f"  {path}", markup=False)

    def show_all_formatted(self) -> None:
        self.console.print("Successfully formatted all files.")

    def show_no_files(self) -> None:
        self.console.print("No files to format")

    def show_cancelled(self) -> None:
        self.console.print("Operation canceled.")

    def show_no_mode(self) -> None:
        self.console.print("No valid option selected. Use --current or --all.")
