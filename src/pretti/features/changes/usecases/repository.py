"""
Summary: Locate the enclosing git working-tree root.
Why: Changed paths from git are root-relative and need an absolute anchor.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Final, final

from pretti.shared.commands import CommandRunner
from pretti.shared.errors import RepositoryNotFoundError

GIT: Final[str] = "git"

_logger = logging.getLogger(__name__)


@final
class RepositoryLocator:
    """Ask git for the top-level directory of the current working tree."""

    def __init__(self, runner: CommandRunner) -> None:
        self._runner = runner

    def locate(self) -> Path:
        """Return the absolute working-tree root.

        Raises:
            RepositoryNotFoundError: If git fails or is not installed.
        """
        result = self._runner.run(GIT, ["rev-parse", "--show-toplevel"])
        if not result.succeeded:
            raise RepositoryNotFoundError(f"git rev-parse failed: {result.failure_reason()}")

        root = Path(result.stdout.strip())
        _logger.debug("Repository root", extra={"format_event": "discovery.root", "path": root})
        return root


__all__ = ["GIT", "RepositoryLocator"]
