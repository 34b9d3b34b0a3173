"""
Summary: Extension set parsed from the ``--ext`` option with a match-all sentinel.
Why: Keep suffix matching rules in one pure value object.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import PurePath
from typing import Final

MATCH_ALL: Final[str] = ""


@dataclass(slots=True, frozen=True)
class ExtensionSet:
    """Ordered suffixes used to select files.

    A member equal to :data:`MATCH_ALL` (the empty string) makes the set
    accept every path. Otherwise a path matches when its string form ends
    with one of the suffixes, compared case-sensitively.
    """

    suffixes: tuple[str, ...]

    @classmethod
    def parse(cls, raw: str, default: Sequence[str]) -> ExtensionSet:
        """Split a comma separated option value.

        An empty ``raw`` selects ``default``. Empty elements inside a
        non-empty value (``".md,"``) are kept and act as the sentinel.
        """
        if raw == "":
            return cls(tuple(default))
        return cls(tuple(raw.split(",")))

    @property
    def matches_all(self) -> bool:
        return MATCH_ALL in self.suffixes

    def matches(self, path: str | PurePath) -> bool:
        if self.matches_all:
            return True
        text = str(path)
        return any(text.endswith(suffix) for suffix in self.suffixes)


__all__ = ["MATCH_ALL", "ExtensionSet"]
