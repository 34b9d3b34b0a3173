"""Command line interface for pretti."""

import sys
from typing import final

from pretti.application.services import FormatOutcome
from pretti.platform.logging import logger
from pretti.shared.errors import (
    ChangeListFailedError,
    PrettiError,
    RepositoryNotFoundError,
)
from pretti.ui.cli.args import ArgumentParser, InvocationOptions
from pretti.ui.cli.commands import AllFilesCommand, CurrentChangesCommand
from pretti.ui.cli.display import HelpDisplay, ResultDisplay


@final
class CommandProcessor:
    """Command line interface processor.

    Every error is turned into an exit status here and nowhere else.
    """

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            options: InvocationOptions = ArgumentParser.process_args(args_list)

            if options.wants_help:
                HelpDisplay().show()
                return

            if options.all_files:
                outcome = AllFilesCommand(options).execute()
                if outcome is not None:
                    CommandProcessor._exit_on_failure(outcome, "Error formatting all files")
                return

            if options.current:
                outcome = CurrentChangesCommand(options).execute()
                CommandProcessor._exit_on_failure(outcome, "Error formatting files")
                return

            ResultDisplay().show_no_mode()

        except RepositoryNotFoundError as e:
            logger.error("Error finding Git repository: %s", e)
            sys.exit(1)
        except ChangeListFailedError as e:
            logger.error("Error getting changed files: %s", e)
            sys.exit(1)
        except PrettiError as e:
            logger.error("%s", e)
            sys.exit(1)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)

    @staticmethod
    def _exit_on_failure(outcome: FormatOutcome, context: str) -> None:
        if outcome.error is None:
            return
        logger.error("%s: %s", context, outcome.error)
        sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures call ``sys.exit``
        directly, so this return is only reached on success.
    """
    CommandProcessor.process_command()
    return 0
