"""src/gnudb/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Every server command opens the configured client the same way.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Protocol

from gnudb.application.lookup import LookupClient
from gnudb.platform.cddbp import Connection
from gnudb.platform.http import HttpEndpoint
from gnudb.platform.logging import logger
from gnudb.ui.cli.args.options import ServerArgs, ServerOptions
from gnudb.ui.cli.display.result import ResultDisplay


class ServerClient(LookupClient, Protocol):
    """A lookup client that holds resources until closed."""

    def close(self) -> None:
        ...


ClientFactory = Callable[[ServerOptions], ServerClient]


def open_client(options: ServerOptions) -> ServerClient:
    """Open a CDDBP connection or build an HTTP endpoint from ``options``."""

    if options.transport == "http":
        logger.debug("Using HTTP endpoint %s:%s", options.host, options.port)
        return HttpEndpoint(
            host=options.host,
            port=options.port,
            timeout=options.timeout,
            hello=options.hello,
            proto_level=options.proto_level,
        )

    logger.debug("Connecting to %s:%s", options.host, options.port)
    return Connection.open(
        options.host,
        options.port,
        timeout=options.timeout,
        hello=options.hello,
        proto_level=options.proto_level,
    )


class CommandExecutor(ABC):
    """Base class for command execution."""

    args: ServerArgs
    result_display: ResultDisplay

    def __init__(
        self,
        args: ServerArgs,
        *,
        client_factory: ClientFactory | None = None,
        result_display: ResultDisplay | None = None,
    ) -> None:
        """Initialize command executor.

        Args:
            args: Command line arguments.
            client_factory: Builds the server client; ``open_client`` by default.
            result_display: Renderer for command output.
        """
        self.args = args
        self._client_factory: ClientFactory = client_factory or open_client
        self.result_display = result_display or ResultDisplay()

    def execute(self) -> bool:
        """Open the client, run the command and always release the client.

        Returns:
            Whether the command produced the requested result.
        """
        client = self._client_factory(self.args.server)
        try:
            return self.run(client)
        finally:
            client.close()

    @abstractmethod
    def run(self, client: ServerClient) -> bool:
        """Run the command against an open client."""
        pass


__all__ = ["ClientFactory", "CommandExecutor", "ServerClient", "open_client"]
