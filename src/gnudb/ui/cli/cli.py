"""Command line interface for gnudb."""

import sys
from typing import final

from gnudb.domain.errors import ProtocolError, TransportError
from gnudb.platform.logging import logger
from gnudb.ui.cli.args import ArgumentParser
from gnudb.ui.cli.args.options import CLIArgs, ConfigArgs, LookupArgs, QueryArgs, ReadArgs
from gnudb.ui.cli.commands import ConfigCommand, LookupCommand, QueryCommand, ReadCommand

EXIT_FAILURE = 1
EXIT_PROTOCOL_ERROR = 2
EXIT_TRANSPORT_ERROR = 3
EXIT_INTERRUPTED = 130


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            if isinstance(args, ConfigArgs):
                succeeded = ConfigCommand(args).execute()
            elif isinstance(args, QueryArgs):
                succeeded = QueryCommand(args).execute()
            elif isinstance(args, ReadArgs):
                succeeded = ReadCommand(args).execute()
            else:
                assert isinstance(args, LookupArgs)
                succeeded = LookupCommand(args).execute()

            if not succeeded:
                sys.exit(EXIT_FAILURE)
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(EXIT_INTERRUPTED)
        except ProtocolError as e:
            logger.error("Server response could not be understood: %s", e)
            if e.raw:
                logger.debug("Offending response: %r", e.raw)
            sys.exit(EXIT_PROTOCOL_ERROR)
        except TransportError as e:
            logger.error("Connection failed: %s", e)
            sys.exit(EXIT_TRANSPORT_ERROR)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(EXIT_FAILURE)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Command processing calls
        ``sys.exit(...)`` on errors, so this return is only reached when
        processing completes successfully.
    """
    CommandProcessor.process_command()
    return 0
