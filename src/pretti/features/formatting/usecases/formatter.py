"""
Summary: Invoke the external formatter on a file list or on every file.
Why: Translate the formatter's exit status into typed errors for the driver.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import final

from pretti.shared.commands import CommandRunner
from pretti.shared.errors import FormatFailedError, FormatUnavailableError

_logger = logging.getLogger(__name__)


@final
class FormatterInvoker:
    """Run the formatter in place, streaming its output to the terminal."""

    def __init__(
        self,
        runner: CommandRunner,
        *,
        formatter: str,
        write_flag: str,
        all_files_pattern: str,
    ) -> None:
        self._runner = runner
        self.formatter = formatter
        self.write_flag = write_flag
        self.all_files_pattern = all_files_pattern

    def format_files(self, files: Sequence[Path]) -> None:
        """Format each path in ``files``, passed as separate arguments.

        Raises:
            ValueError: If ``files`` is empty.
            FormatUnavailableError: If the formatter cannot be launched.
            FormatFailedError: If the formatter exits non-zero.
        """
        if not files:
            raise ValueError("format_files requires at least one path")

        _logger.debug(
            "Formatting files",
            extra={"format_event": "format.start", "count": len(files)},
        )
        self._run([self.write_flag, *(str(path) for path in files)])

    def format_all(self) -> None:
        """Format every file below the current directory.

        The pattern is handed to the formatter unexpanded.

        Raises:
            FormatUnavailableError: If the formatter cannot be launched.
            FormatFailedError: If the formatter exits non-zero.
        """
        _logger.debug(
            "Formatting all files",
            extra={"format_event": "format.start", "path": self.all_files_pattern},
        )
        self._run([self.write_flag, self.all_files_pattern])

    def _run(self, args: list[str]) -> None:
        result = self._runner.run(self.formatter, args, capture=False)
        if not result.started:
            raise FormatUnavailableError(self.formatter, result.failure_reason())
        if result.exit_code != 0:
            raise FormatFailedError(self.formatter, result.exit_code or 1)


__all__ = ["FormatterInvoker"]
