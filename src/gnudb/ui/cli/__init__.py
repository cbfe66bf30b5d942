"""Command line interface package."""

from gnudb.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
