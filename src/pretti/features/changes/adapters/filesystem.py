"""Filesystem adapter for change discovery."""

from __future__ import annotations

from pathlib import Path

from ..usecases.ports import FileSystemGateway


class LocalFileSystemGateway(FileSystemGateway):
    """Thin wrapper around the local filesystem."""

    def exists(self, path: Path) -> bool:
        # Only a missing path counts as gone; stat errors such as EACCES keep
        # the path so the formatter reports the problem itself.
        try:
            _ = path.stat()
        except FileNotFoundError:
            return False
        except OSError:
            return True
        return True


__all__ = ["LocalFileSystemGateway"]
