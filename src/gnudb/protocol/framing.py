"""Where: src/gnudb/protocol/framing.py
What: Turn the server's line stream for one command into a logical response.
Why: Status handling, multi-line bodies and dot-stuffing are shared by every
     command and by both transports.
"""

from __future__ import annotations

from dataclasses import dataclass

from gnudb.config.settings import WIRE_ENCODING
from gnudb.domain.errors import ProtocolError, TransportError
from gnudb.platform.logging import logger

from .buffer import BufferTransport
from .ports import LineTransport
from .status import StatusCode

TERMINATOR = "."


@dataclass(slots=True, frozen=True)
class LogicalResponse:
    """Status line plus the de-stuffed body of a multi-line reply."""

    status_line: str
    body: str | None = None

    @property
    def status(self) -> StatusCode:
        return StatusCode.parse(self.status_line)

    @property
    def is_multiline(self) -> bool:
        return self.body is not None

    @property
    def payload(self) -> str:
        """Text handed to the record parser.

        Single-line replies yield the status line verbatim; multi-line
        replies yield the body only.
        """
        if self.body is None:
            return self.status_line
        return self.body


def unstuff_line(line: str) -> str:
    """Undo sender-side dot-stuffing of one body line."""

    if line.startswith(".."):
        return line[1:]
    return line


def _strip_eol(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def _read_text_line(transport: LineTransport, command: str) -> str:
    raw = transport.read_line()
    if not raw:
        raise TransportError("connection closed by server while waiting for a response line")
    try:
        line = raw.decode(WIRE_ENCODING)
    except UnicodeDecodeError as exc:
        raise TransportError(
            f"failed to decode response line: {exc}",
            raw=raw.decode(WIRE_ENCODING, errors="replace"),
        ) from exc
    logger.debug(
        "response: %s",
        line.rstrip("\r\n"),
        extra={"wire_direction": "received", "wire_line": line, "wire_command": command},
    )
    return line


def receive_response(transport: LineTransport, command: str = "") -> LogicalResponse:
    """Read one complete response from ``transport``.

    Args:
        transport: Source of response lines.
        command: The command that was sent; used for log context only.

    Raises:
        ProtocolError: On 4xx/5xx replies and malformed status lines.
        TransportError: When a line cannot be read or decoded.
    """

    status_line = _read_text_line(transport, command)

    if status_line[:1] in ("4", "5"):
        raise ProtocolError(status_line.rstrip("\r\n"), raw=status_line)

    status = StatusCode.parse(status_line)
    if status.is_single_line:
        return LogicalResponse(status_line=status_line)
    if not status.has_body:
        raise ProtocolError(
            f"unexpected response code: {status.line}",
            raw=status_line,
        )

    body: list[str] = []
    while True:
        line = _read_text_line(transport, command)
        if line.rstrip("\r\n") == TERMINATOR:
            break
        body.append(unstuff_line(_strip_eol(line)))
        body.append("\n")

    return LogicalResponse(status_line=status_line, body="".join(body))


def read_response(transport: LineTransport, command: str) -> LogicalResponse:
    """Send ``command`` and read its response.

    The protocol is not pipelined: the full response, body included, is
    consumed before this returns.
    """

    logger.debug(
        "sent %s",
        command.rstrip("\r\n"),
        extra={"wire_direction": "sent", "wire_line": command},
    )
    transport.send(command.encode(WIRE_ENCODING))
    return receive_response(transport, command)


def parse_raw_response(raw: str | bytes) -> str:
    """Frame a complete response already held in memory and return its payload."""

    data = raw.encode(WIRE_ENCODING) if isinstance(raw, str) else raw
    return receive_response(BufferTransport(data)).payload


__all__ = [
    "LogicalResponse",
    "TERMINATOR",
    "parse_raw_response",
    "read_response",
    "receive_response",
    "unstuff_line",
]
