"""Display management for CLI interface."""

from gnudb.ui.cli.display.result import ResultDisplay

__all__ = ["ResultDisplay"]
