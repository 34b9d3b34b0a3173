"""Command line argument options."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, final

from pretti.config import Config


@final
@dataclass(slots=True, frozen=True)
class InvocationOptions:
    """Options captured once at startup and passed to every command."""

    extensions: str
    all_files: bool
    current: bool
    command: Literal["help"] | None
    config: Config

    @property
    def wants_help(self) -> bool:
        return self.command == "help"


__all__ = ["InvocationOptions"]
