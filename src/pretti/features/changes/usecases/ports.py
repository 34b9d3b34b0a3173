"""Ports for the change discovery feature."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class FileSystemGateway(Protocol):
    """Filesystem queries needed while narrowing candidate paths."""

    def exists(self, path: Path) -> bool:
        """Return True if the path exists."""

        ...
