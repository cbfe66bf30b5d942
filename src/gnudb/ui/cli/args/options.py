"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final

from gnudb.domain.toc import DiscToc


@final
@dataclass(slots=True, frozen=True)
class ServerOptions:
    """Connection settings after merging the config file with CLI flags."""

    transport: Literal["cddbp", "http"]
    host: str
    port: int
    timeout: float
    hello: str
    proto_level: int


@final
@dataclass(slots=True)
class QueryArgs:
    """Command line arguments for the ``query`` subcommand."""

    command: Literal["query"]
    server: ServerOptions
    toc: DiscToc
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class ReadArgs:
    """Command line arguments for the ``read`` subcommand."""

    command: Literal["read"]
    server: ServerOptions
    category: str
    discid: str
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class LookupArgs:
    """Command line arguments for the ``lookup`` subcommand."""

    command: Literal["lookup"]
    server: ServerOptions
    toc: DiscToc
    index: int
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class ConfigArgs:
    """Command line arguments for the ``config`` subcommand."""

    command: Literal["config"]
    init: bool
    force: bool
    path: Path | None


CLIArgs = QueryArgs | ReadArgs | LookupArgs | ConfigArgs
ServerArgs = QueryArgs | ReadArgs | LookupArgs

__all__ = [
    "CLIArgs",
    "ConfigArgs",
    "LookupArgs",
    "QueryArgs",
    "ReadArgs",
    "ServerArgs",
    "ServerOptions",
]
