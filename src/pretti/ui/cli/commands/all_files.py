"""Format every file below the working directory after confirmation."""

from __future__ import annotations

from typing import final

from pretti.application.services import FormatOutcome, FormatService
from pretti.ui.cli.args.options import InvocationOptions
from pretti.ui.cli.display.result import ResultDisplay
from pretti.ui.cli.prompt import ConfirmationPrompt


@final
class AllFilesCommand:
    """Command behind ``--all``."""

    def __init__(
        self,
        options: InvocationOptions,
        service: FormatService | None = None,
        prompt: ConfirmationPrompt | None = None,
        display: ResultDisplay | None = None,
    ) -> None:
        self.options = options
        self.service = service or FormatService(options.config)
        self.prompt = prompt or ConfirmationPrompt()
        self.display = display or ResultDisplay()

    def execute(self) -> FormatOutcome | None:
        """Ask for confirmation, then run the formatter recursively.

        Returns:
            FormatOutcome | None: None when the user declined.
        """
        if not self.prompt.confirm():
            self.display.show_cancelled()
            return None

        outcome = self.service.format_all()
        if outcome.success:
            self.display.show_all_formatted()
        return outcome
