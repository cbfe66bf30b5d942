"""Where: src/gnudb/protocol/buffer.py
What: In-memory ``LineTransport`` over a response that is already complete.
Why: HTTP bodies and raw replies are framed without touching a socket.
"""

from __future__ import annotations

import io
from typing import final

from gnudb.domain.errors import TransportError


@final
class BufferTransport:
    """In-memory transport over a complete response body."""

    def __init__(self, data: bytes = b"") -> None:
        self._buffer: io.BytesIO = io.BytesIO(data)
        self._closed: bool = False
        self.sent: list[bytes] = []

    def send(self, data: bytes) -> None:
        if self._closed:
            raise TransportError("cannot send on a closed transport")
        self.sent.append(data)

    def read_line(self) -> bytes:
        if self._closed:
            raise TransportError("cannot read from a closed transport")
        return self._buffer.readline()

    def shutdown(self) -> None:
        self._closed = True


__all__ = ["BufferTransport"]
