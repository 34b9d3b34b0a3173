"""
Summary: Blocking subprocess adapter implementing the CommandRunner port.
Why: Keep every process spawn in one place with uniform launch-failure handling.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
from collections.abc import Sequence
from typing import final

from pretti.shared.commands import CommandResult, CommandRunner

_logger = logging.getLogger(__name__)


@final
class SubprocessCommandRunner(CommandRunner):
    """Run commands with :func:`subprocess.run`, waiting for them to exit."""

    def run(
        self,
        name: str,
        args: Sequence[str],
        *,
        capture: bool = True,
    ) -> CommandResult:
        argv = [name, *args]
        _logger.debug("Running: %s", shlex.join(argv))

        try:
            completed = subprocess.run(
                argv,
                capture_output=capture,
                text=True,
                check=False,
            )
        except OSError as exc:
            _logger.debug("Could not start %s: %s", name, exc)
            return CommandResult(
                exit_code=None,
                started=False,
                error_message=exc.strerror or str(exc),
            )

        _logger.debug("%s exited with status %d", name, completed.returncode)
        return CommandResult(
            exit_code=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )


__all__ = ["SubprocessCommandRunner"]
