"""Command line argument handling package."""

from gnudb.ui.cli.args.options import (
    CLIArgs,
    ConfigArgs,
    LookupArgs,
    QueryArgs,
    ReadArgs,
    ServerOptions,
)
from gnudb.ui.cli.args.parser import ArgumentParser

__all__ = [
    "ArgumentParser",
    "CLIArgs",
    "ConfigArgs",
    "LookupArgs",
    "QueryArgs",
    "ReadArgs",
    "ServerOptions",
]
