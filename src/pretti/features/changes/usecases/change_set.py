"""
Summary: List files with unstaged modifications as absolute paths.
Why: ``--current`` formats exactly the working-tree edits not yet in the index.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import final

from pretti.shared.commands import CommandRunner
from pretti.shared.errors import ChangeListFailedError

from .repository import GIT

_logger = logging.getLogger(__name__)


@final
class ChangeSetLister:
    """Translate ``git diff --name-only`` output into absolute paths.

    Only the working tree versus index diff is reported. Staged changes,
    untracked files and commits ahead of upstream are not included.
    """

    def __init__(self, runner: CommandRunner) -> None:
        self._runner = runner

    def list_changes(self, root: Path) -> list[Path]:
        """Return changed files joined onto ``root``, in git's order.

        Raises:
            ChangeListFailedError: If git fails.
        """
        result = self._runner.run(GIT, ["diff", "--name-only"])
        if not result.succeeded:
            raise ChangeListFailedError(f"git diff failed: {result.failure_reason()}")

        files: list[Path] = []
        for line in result.stdout.strip().splitlines():
            if not line:
                continue
            files.append(root / line)

        _logger.debug(
            "Unstaged files",
            extra={"format_event": "discovery.changes", "path": root, "count": len(files)},
        )
        return files


__all__ = ["ChangeSetLister"]
