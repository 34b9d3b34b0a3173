"""Application service that discovers changed files and formats them."""

from __future__ import annotations

from dataclasses import dataclass
from logging import Logger, getLogger
from pathlib import Path
from typing import final

from pretti.config import Config
from pretti.features.changes import (
    ChangeSetLister,
    ExtensionSet,
    RepositoryLocator,
    filter_paths,
)
from pretti.features.changes.adapters import LocalFileSystemGateway
from pretti.features.changes.usecases.ports import FileSystemGateway
from pretti.features.formatting import FormatterInvoker
from pretti.platform.process import SubprocessCommandRunner
from pretti.shared.commands import CommandRunner
from pretti.shared.errors import FormatterError


@dataclass(slots=True, frozen=True)
class FormatOutcome:
    """Files handed to the formatter and the formatter error, if any."""

    files: tuple[Path, ...] = ()
    error: FormatterError | None = None

    @property
    def success(self) -> bool:
        return self.error is None


@final
class FormatService:
    """Application façade wiring git discovery into the formatter."""

    _locator: RepositoryLocator
    _lister: ChangeSetLister
    _invoker: FormatterInvoker
    _filesystem: FileSystemGateway

    def __init__(
        self,
        config: Config,
        *,
        runner: CommandRunner | None = None,
        filesystem: FileSystemGateway | None = None,
        logger: Logger | None = None,
    ) -> None:
        command_runner = runner or SubprocessCommandRunner()

        self.config = config
        self._locator = RepositoryLocator(command_runner)
        self._lister = ChangeSetLister(command_runner)
        self._invoker = FormatterInvoker(
            command_runner,
            formatter=config.formatter,
            write_flag=config.write_flag,
            all_files_pattern=config.all_files_pattern,
        )
        self._filesystem = filesystem or LocalFileSystemGateway()
        self._logger = logger or getLogger(__name__)

    def extension_set(self, raw: str) -> ExtensionSet:
        """Parse an ``--ext`` value against the configured defaults."""

        return ExtensionSet.parse(raw, self.config.default_extensions)

    def format_current_changes(self, extensions: ExtensionSet) -> FormatOutcome:
        """Format unstaged files in the enclosing repository.

        Discovery errors propagate; formatter errors are captured in the outcome.
        An empty selection returns an outcome with no files and the formatter
        is not run.

        Raises:
            RepositoryNotFoundError: If no repository encloses the working directory.
            ChangeListFailedError: If the change list cannot be produced.
        """
        root = self._locator.locate()
        changed = self._lister.list_changes(root)
        selected = tuple(filter_paths(changed, extensions, self._filesystem))

        if not selected:
            return FormatOutcome()

        try:
            self._invoker.format_files(selected)
        except FormatterError as exc:
            self._logger.debug(
                "Formatter failed", extra={"format_event": "format.error"}
            )
            return FormatOutcome(files=selected, error=exc)

        self._logger.debug(
            "Formatter finished",
            extra={"format_event": "format.success", "count": len(selected)},
        )
        return FormatOutcome(files=selected)

    def format_all(self) -> FormatOutcome:
        """Format every file below the working directory."""

        try:
            self._invoker.format_all()
        except FormatterError as exc:
            self._logger.debug(
                "Formatter failed", extra={"format_event": "format.error"}
            )
            return FormatOutcome(error=exc)
        return FormatOutcome()


__all__ = ["FormatOutcome", "FormatService"]
