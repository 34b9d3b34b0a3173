"""Command line argument parser."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from typing import final

from pretti import __version__
from pretti.config import Config, resolve_config_path
from pretti.platform.logging import logger, setup_logger
from pretti.ui.cli.args.options import InvocationOptions


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="pretti",
            description="Run prettier over all files or only files with unstaged changes.",
        )
        _ = parser.add_argument(
            "command",
            nargs="?",
            choices=["help"],
            help="Show usage information and exit",
        )
        _ = parser.add_argument(
            "--ext",
            type=str,
            default="",
            metavar="EXTS",
            help=(
                "Comma-separated file extensions to include "
                "(default: .js, .ts, .json, .tsx, .jsx; an empty entry matches all files)"
            ),
        )
        _ = parser.add_argument(
            "--all",
            dest="all_files",
            action="store_true",
            help="Format all files recursively in the current directory (asks for confirmation)",
        )
        _ = parser.add_argument(
            "--current",
            action="store_true",
            help="Format only files with unstaged changes in the current repository",
        )
        _ = parser.add_argument(
            "--config",
            type=str,
            metavar="PATH",
            help="Configuration file (default: ~/.config/pretti/config.toml)",
        )
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed progress information",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all log output except errors",
        )
        _ = parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {__version__}",
        )
        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> InvocationOptions:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            InvocationOptions: Parsed options with the loaded configuration.

        Raises:
            SystemExit: On malformed command line input.
            ConfigError: If the configuration file is invalid.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        _ = setup_logger(console_level=log_level)

        config_path = resolve_config_path(parsed_args.config)
        configuration = Config.load(config_path)
        if configuration.log_file is not None:
            _ = setup_logger(log_file=configuration.log_file, console_level=log_level)
        logger.debug("Using formatter '%s'", configuration.formatter)

        return InvocationOptions(
            extensions=parsed_args.ext,
            all_files=parsed_args.all_files,
            current=parsed_args.current,
            command=parsed_args.command,
            config=configuration,
        )
