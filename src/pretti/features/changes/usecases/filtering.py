"""
Summary: Narrow candidate paths to existing files with a wanted suffix.
Why: Files deleted since they were listed must be skipped, not reported.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from ..domain.extensions import ExtensionSet
from .ports import FileSystemGateway

_logger = logging.getLogger(__name__)


def filter_paths(
    paths: Iterable[Path],
    extensions: ExtensionSet,
    filesystem: FileSystemGateway,
) -> list[Path]:
    """Return the subsequence of ``paths`` that exist and match ``extensions``.

    Order is preserved and duplicates are kept.

    Args:
        paths: Candidate paths, typically from :class:`ChangeSetLister`.
        extensions: Suffixes to keep, possibly containing the match-all sentinel.
        filesystem: Existence checker.

    Returns:
        list[Path]: Matching paths.
    """
    selected: list[Path] = []
    for path in paths:
        if not filesystem.exists(path):
            _logger.debug("Skipping missing file %s", path)
            continue
        if extensions.matches(path):
            selected.append(path)

    _logger.debug(
        "Files selected for formatting",
        extra={"format_event": "discovery.filtered", "count": len(selected)},
    )
    return selected


__all__ = ["filter_paths"]
