"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from gnudb.config.config import Config, ConfigError
from gnudb.domain.toc import DiscToc
from gnudb.platform.logging import logger, setup_logger
from gnudb.ui.cli.args.options import (
    CLIArgs,
    ConfigArgs,
    LookupArgs,
    QueryArgs,
    ReadArgs,
    ServerOptions,
)


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
            prog="gnudb",
            description="Look up CD metadata on a CDDB server (gnudb.org by default).",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        query_parser = subparsers.add_parser(
            "query",
            help="List albums matching a disc layout",
        )
        ArgumentParser._configure_server_parser(query_parser)
        ArgumentParser._add_toc_argument(query_parser)

        read_parser = subparsers.add_parser(
            "read",
            help="Show the record stored under a category and disc id",
        )
        ArgumentParser._configure_server_parser(read_parser)
        _ = read_parser.add_argument(
            "category",
            type=str,
            help="Genre bucket of the record, as printed by 'query'",
            metavar="CATEGORY",
        )
        _ = read_parser.add_argument(
            "discid",
            type=str,
            help="Hexadecimal disc id of the record",
            metavar="DISCID",
        )

        lookup_parser = subparsers.add_parser(
            "lookup",
            help="Query a disc layout and show the chosen match",
        )
        ArgumentParser._configure_server_parser(lookup_parser)
        ArgumentParser._add_toc_argument(lookup_parser)
        _ = lookup_parser.add_argument(
            "--index",
            type=int,
            default=1,
            help="Which match to read when several are found (1-based, default 1)",
            metavar="N",
        )

        config_parser = subparsers.add_parser(
            "config",
            help="Manage the configuration file",
        )
        _ = config_parser.add_argument(
            "--init",
            action="store_true",
            help="Write a configuration file populated with defaults",
        )
        _ = config_parser.add_argument(
            "--force",
            action="store_true",
            help="Overwrite an existing configuration file",
        )
        _ = config_parser.add_argument(
            "--config",
            type=str,
            help="Configuration file to write instead of the default location",
            metavar="PATH",
        )

        return parser

    @staticmethod
    def _add_toc_argument(parser: argparse.ArgumentParser) -> None:
        _ = parser.add_argument(
            "--toc",
            type=str,
            required=True,
            help='Disc TOC as "first last leadout offset1 ... offsetN" (libdiscid layout)',
            metavar="TOC",
        )

    @staticmethod
    def _configure_server_parser(parser: argparse.ArgumentParser) -> None:
        """Apply options shared by every subcommand that talks to a server."""

        _ = parser.add_argument(
            "--http",
            action="store_true",
            help="Use the HTTP interface instead of a CDDBP connection",
        )
        _ = parser.add_argument(
            "--host",
            type=str,
            help="Server host name (defaults to the configured host)",
        )
        _ = parser.add_argument(
            "--port",
            type=int,
            help="Server port (defaults to the configured port for the transport)",
        )
        _ = parser.add_argument(
            "--timeout",
            type=float,
            help="Seconds to wait for the connection and for each response line",
        )
        _ = parser.add_argument(
            "--config",
            type=str,
            help="Read configuration from PATH",
            metavar="PATH",
        )
        _ = parser.add_argument(
            "--log-file",
            type=str,
            help="Also write a debug log to PATH",
            metavar="PATH",
        )
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show the protocol exchange",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            Processed command line arguments.

        Raises:
            SystemExit: If validation fails.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        config_path = Path(parsed_args.config) if parsed_args.config else None
        _ = setup_logger(console_level=log_level)

        command: str = parsed_args.command

        if command == "config":
            return ConfigArgs(
                command="config",
                init=bool(parsed_args.init),
                force=bool(parsed_args.force),
                path=config_path,
            )

        try:
            configuration = Config.load(config_path)
        except ConfigError as e:
            logger.error("%s", e)
            sys.exit(1)

        log_file = parsed_args.log_file or configuration.log_file
        if log_file:
            _ = setup_logger(log_file=Path(log_file), console_level=log_level)

        server = ArgumentParser._server_options(parsed_args, configuration)

        if command == "query":
            return QueryArgs(
                command="query",
                server=server,
                toc=ArgumentParser._parse_toc(parsed_args.toc),
                verbose=is_verbose,
                quiet=is_quiet,
            )

        if command == "read":
            return ReadArgs(
                command="read",
                server=server,
                category=parsed_args.category,
                discid=parsed_args.discid,
                verbose=is_verbose,
                quiet=is_quiet,
            )

        if command == "lookup":
            if parsed_args.index < 1:
                logger.error("Index must be a positive integer; received %s", parsed_args.index)
                sys.exit(1)
            return LookupArgs(
                command="lookup",
                server=server,
                toc=ArgumentParser._parse_toc(parsed_args.toc),
                index=parsed_args.index,
                verbose=is_verbose,
                quiet=is_quiet,
            )

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _parse_toc(raw: str) -> DiscToc:
        try:
            return DiscToc.from_toc_string(raw)
        except ValueError as e:
            logger.error("Invalid TOC: %s", e)
            sys.exit(1)

    @staticmethod
    def _server_options(parsed_args: argparse.Namespace, configuration: Config) -> ServerOptions:
        """Merge CLI flags over configuration values."""

        transport = "http" if parsed_args.http else configuration.transport
        port = parsed_args.port if parsed_args.port is not None else configuration.port_for(transport)
        timeout = parsed_args.timeout if parsed_args.timeout is not None else configuration.timeout
        if timeout <= 0:
            logger.error("Timeout must be positive; received %s", timeout)
            sys.exit(1)

        return ServerOptions(
            transport="http" if transport == "http" else "cddbp",
            host=parsed_args.host or configuration.host,
            port=port,
            timeout=timeout,
            hello=configuration.hello_string,
            proto_level=configuration.proto_level,
        )
