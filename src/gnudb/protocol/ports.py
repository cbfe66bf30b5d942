"""Summary: Capability interface the response framer reads from.
Why: Lets the framer run against sockets, HTTP bodies and in-memory fakes alike.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class LineTransport(Protocol):
    """Byte stream delivering one newline-terminated line at a time."""

    def send(self, data: bytes) -> None:
        """Write ``data`` to the server."""
        ...

    def read_line(self) -> bytes:
        """Return the next line including its terminator, or ``b""`` at end of stream.

        Implementations apply their configured timeout to every call and
        raise ``TransportError`` on expiry or on a broken connection.
        """
        ...

    def shutdown(self) -> None:
        """Release the underlying resource; safe to call more than once."""
        ...


__all__ = ["LineTransport"]
