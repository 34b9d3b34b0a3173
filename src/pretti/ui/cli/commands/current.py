"""Format files with unstaged changes."""

from __future__ import annotations

from typing import final

from pretti.application.services import FormatOutcome, FormatService
from pretti.ui.cli.args.options import InvocationOptions
from pretti.ui.cli.display.result import ResultDisplay


@final
class CurrentChangesCommand:
    """Command behind ``--current``."""

    def __init__(
        self,
        options: InvocationOptions,
        service: FormatService | None = None,
        display: ResultDisplay | None = None,
    ) -> None:
        self.options = options
        self.service = service or FormatService(options.config)
        self.display = display or ResultDisplay()

    def execute(self) -> FormatOutcome:
        """Discover, filter and format changed files.

        Returns:
            FormatOutcome: Files handed to the formatter and any formatter error.
        """
        extensions = self.service.extension_set(self.options.extensions)
        outcome = self.service.format_current_changes(extensions)

        if not outcome.files:
            self.display.show_no_files()
        elif outcome.success:
            self.display.show_formatted(outcome.files)
        return outcome
