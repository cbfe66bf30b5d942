"""Where: src/gnudb/platform/cddbp/connection.py
What: Persistent CDDBP session: login handshake, query, read and quit.
Why: Wrap the socket transport around the shared framer and parser.
"""

from __future__ import annotations

from collections.abc import Callable
from types import TracebackType
from typing import final

from gnudb.config.settings import (
    DEFAULT_CDDBP_PORT,
    DEFAULT_HELLO,
    DEFAULT_HOST,
    DEFAULT_PROTO_LEVEL,
    DEFAULT_TIMEOUT,
    WIRE_ENCODING,
)
from gnudb.domain.errors import GnuDbError, TransportError
from gnudb.domain.models import Disc, Match
from gnudb.domain.toc import DiscToc
from gnudb.platform.logging import logger
from gnudb.platform.transport import SocketTransport
from gnudb.protocol.commands import (
    QUIT_CMD,
    create_hello_cmd,
    create_proto_cmd,
    create_query_cmd,
    create_read_cmd,
)
from gnudb.protocol.framing import LogicalResponse, read_response, receive_response
from gnudb.protocol.parser import parse_query_response, parse_read_response
from gnudb.protocol.ports import LineTransport


@final
class Connection:
    """A logged-in CDDBP session.

    Commands are strictly sequential: each call consumes the full response,
    multi-line body included, before returning. A transport failure leaves
    the session unusable because there is no resynchronisation point in the
    middle of a body.
    """

    def __init__(self, transport: LineTransport) -> None:
        self._transport: LineTransport = transport
        self._broken: bool = False
        self._closed: bool = False
        self.banner: str | None = None

    @classmethod
    def open(
        cls,
        host: str = DEFAULT_HOST,
        port: int = DEFAULT_CDDBP_PORT,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        hello: str = DEFAULT_HELLO,
        proto_level: int = DEFAULT_PROTO_LEVEL,
        transport_factory: Callable[[str, int, float], LineTransport] = SocketTransport.open,
    ) -> Connection:
        """Connect, log in and switch protocol level."""

        transport = transport_factory(host, port, timeout)
        connection = cls(transport)
        try:
            connection.login(hello=hello, proto_level=proto_level)
        except GnuDbError:
            connection.shutdown()
            raise
        logger.debug("Logged in to %s:%s at protocol level %s", host, port, proto_level)
        return connection

    def login(self, *, hello: str, proto_level: int) -> None:
        """Read the server banner, say hello and select the protocol level."""

        banner = self._guard(lambda: receive_response(self._transport, "<banner>"))
        self.banner = banner.status_line.rstrip("\r\n")
        self.command(create_hello_cmd(hello))
        # Level 6 makes read replies carry DYEAR and DGENRE.
        self.command(create_proto_cmd(proto_level))

    def command(self, cmd: str) -> LogicalResponse:
        """Send one raw command and return its framed response."""

        if self._closed:
            raise TransportError("connection is closed")
        if self._broken:
            raise TransportError("connection is unusable after an earlier transport failure")
        return self._guard(lambda: read_response(self._transport, cmd))

    def send_command(self, cmd: str) -> str:
        """Send one raw command and return the payload text."""

        return self.command(cmd).payload

    def query(self, toc: DiscToc) -> list[Match]:
        """Issue ``cddb query``; an empty list means no match."""

        return parse_query_response(self.send_command(create_query_cmd(toc)))

    def read(self, match: Match) -> Disc:
        """Issue ``cddb read`` for ``match``."""

        disc = parse_read_response(self.send_command(create_read_cmd(match)))
        logger.debug("disc: %s", disc)
        return disc

    def close(self) -> None:
        """Say goodbye and release the socket. Safe to call repeatedly."""

        if self._closed:
            return
        if not self._broken:
            # 230 has no framer class, so the goodbye line is read raw.
            logger.debug(
                "sent %s",
                QUIT_CMD.rstrip("\r\n"),
                extra={"wire_direction": "sent", "wire_line": QUIT_CMD},
            )
            try:
                self._transport.send(QUIT_CMD.encode(WIRE_ENCODING))
                farewell = self._transport.read_line().decode(WIRE_ENCODING, errors="replace")
                logger.debug(
                    "quit acknowledged: %s",
                    farewell.rstrip("\r\n"),
                    extra={"wire_direction": "received", "wire_line": farewell, "wire_command": QUIT_CMD},
                )
            except TransportError as exc:
                logger.debug("quit not acknowledged: %s", exc)
        self.shutdown()

    def shutdown(self) -> None:
        """Drop the connection without the ``quit`` exchange."""

        self._closed = True
        self._transport.shutdown()

    @property
    def closed(self) -> bool:
        return self._closed

    def _guard(self, call: Callable[[], LogicalResponse]) -> LogicalResponse:
        try:
            return call()
        except TransportError:
            self._broken = True
            raise

    def __enter__(self) -> Connection:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


__all__ = ["Connection"]
