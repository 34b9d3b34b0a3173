"""
Summary: Yes/no confirmation read from standard input.
Why: Formatting the whole tree must be opted into explicitly.
"""

from __future__ import annotations

import sys
from typing import TextIO, final

from rich.console import Console

ALL_FILES_PROMPT = (
    "This will format all files recursively in the current directory. "
    "Do you want to continue? (yes/no): "
)


@final
class ConfirmationPrompt:
    """Print a prompt and accept only a literal ``yes``."""

    console: Console

    def __init__(self, console: Console | None = None, stream: TextIO | None = None) -> None:
        self.console = console or Console(highlight=False, emoji=False)
        self._stream = stream

    def confirm(self, prompt: str = ALL_FILES_PROMPT) -> bool:
        """Return True when the answer, trimmed and lowercased, is ``yes``.

        End of input counts as declining.
        """
        self.console.print(prompt, end="", markup=False, soft_wrap=True)
        stream = self._stream or sys.stdin
        answer = stream.readline()
        return answer.strip().lower() == "yes"


__all__ = ["ALL_FILES_PROMPT", "ConfirmationPrompt"]
