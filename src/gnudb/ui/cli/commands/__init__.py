"""Command execution package for CLI."""

from gnudb.ui.cli.commands.config import ConfigCommand
from gnudb.ui.cli.commands.executor import CommandExecutor, open_client
from gnudb.ui.cli.commands.lookup import LookupCommand
from gnudb.ui.cli.commands.query import QueryCommand
from gnudb.ui.cli.commands.read import ReadCommand

__all__ = [
    "CommandExecutor",
    "ConfigCommand",
    "LookupCommand",
    "QueryCommand",
    "ReadCommand",
    "open_client",
]
