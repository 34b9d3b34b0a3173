"""Command line argument handling package."""

from pretti.ui.cli.args.options import InvocationOptions
from pretti.ui.cli.args.parser import ArgumentParser

__all__ = ["ArgumentParser", "InvocationOptions"]
