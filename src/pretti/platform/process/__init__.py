"""Process execution adapters."""

from __future__ import annotations

from .runner import SubprocessCommandRunner

__all__ = ["SubprocessCommandRunner"]
