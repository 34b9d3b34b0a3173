"""
Summary: Port and result type for spawning external command-line tools.
Why: Let use cases talk to git and the formatter without touching subprocess.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(slots=True, frozen=True)
class CommandResult:
    """Outcome of a single external command invocation."""

    exit_code: int | None
    stdout: str = ""
    stderr: str = ""
    started: bool = True
    error_message: str | None = None

    @property
    def succeeded(self) -> bool:
        """Return True when the process launched and exited with status zero."""

        return self.started and self.exit_code == 0

    def failure_reason(self) -> str:
        """Describe why the command did not succeed, preferring the tool's own words."""

        if not self.started:
            return self.error_message or "process could not be started"
        detail = self.stderr.strip()
        if detail:
            return detail
        return f"exit status {self.exit_code}"


@runtime_checkable
class CommandRunner(Protocol):
    """Port for running an external program to completion."""

    def run(
        self,
        name: str,
        args: Sequence[str],
        *,
        capture: bool = True,
    ) -> CommandResult:
        """Run ``name`` with ``args`` and block until it exits.

        When ``capture`` is False the child inherits the caller's stdout and
        stderr, so its output reaches the user directly.
        """
        ...


__all__ = ["CommandResult", "CommandRunner"]
