"""Where: src/gnudb/platform/transport.py
What: Socket transport backing the response framer.
Why: Keep socket handling out of the protocol code.

``SocketTransport`` wraps a persistent CDDBP TCP connection. The in-memory
``BufferTransport`` lives in ``gnudb.protocol.buffer`` and is re-exported here
so callers find every transport in one place.
"""

from __future__ import annotations

import socket
import time
from typing import Final, final

from gnudb.domain.errors import TransportError
from gnudb.platform.logging import logger
from gnudb.protocol.buffer import BufferTransport
from gnudb.protocol.ports import LineTransport

RECV_CHUNK_SIZE: Final[int] = 4096


@final
class SocketTransport:
    """Blocking socket whose timeout bounds each whole line, not each ``recv``."""

    def __init__(self, sock: socket.socket, *, timeout: float) -> None:
        sock.settimeout(timeout)
        self._sock: socket.socket = sock
        self._pending: bytearray = bytearray()
        self._eof: bool = False
        self._closed: bool = False
        self.timeout: float = timeout

    @classmethod
    def open(cls, host: str, port: int, timeout: float) -> SocketTransport:
        """Connect to ``host:port`` within ``timeout`` seconds."""

        try:
            sock = socket.create_connection((host, port), timeout=timeout)
        except TimeoutError as exc:
            raise TransportError(f"connection to {host}:{port} timed out") from exc
        except OSError as exc:
            raise TransportError(f"failed to connect to {host}:{port}: {exc}") from exc
        logger.debug("Successfully connected to server %s:%s", host, port)
        return cls(sock, timeout=timeout)

    @property
    def closed(self) -> bool:
        return self._closed

    def send(self, data: bytes) -> None:
        if self._closed:
            raise TransportError("cannot send on a closed connection")
        try:
            # read_line leaves whatever remained of its deadline on the socket.
            self._sock.settimeout(self.timeout)
            self._sock.sendall(data)
        except TimeoutError as exc:
            raise TransportError("send timed out") from exc
        except OSError as exc:
            raise TransportError(f"failed to send data: {exc}") from exc

    def read_line(self) -> bytes:
        """Return the next line within ``timeout`` seconds of the call.

        Bytes after the newline stay buffered for the next call. At end of
        stream the unterminated remainder is returned, then ``b""``.
        """
        if self._closed:
            raise TransportError("cannot read from a closed connection")

        deadline = time.monotonic() + self.timeout
        while True:
            newline = self._pending.find(b"\n")
            if newline >= 0:
                line = bytes(self._pending[: newline + 1])
                del self._pending[: newline + 1]
                return line
            if self._eof:
                line = bytes(self._pending)
                self._pending.clear()
                return line

            remaining = deadline - time.monotonic()
            if remaining <= 0:
                raise TransportError(f"read timed out after {self.timeout:g}s")
            try:
                self._sock.settimeout(remaining)
                chunk = self._sock.recv(RECV_CHUNK_SIZE)
            except TimeoutError as exc:
                raise TransportError(f"read timed out after {self.timeout:g}s") from exc
            except OSError as exc:
                raise TransportError(f"failed to receive data: {exc}") from exc

            if chunk:
                self._pending += chunk
            else:
                self._eof = True

    def shutdown(self) -> None:
        if self._closed:
            return
        self._closed = True
        try:
            self._sock.shutdown(socket.SHUT_RDWR)
        except OSError as exc:
            # Peer already gone; closing below still releases the descriptor.
            logger.debug("Socket shutdown reported: %s", exc)
        finally:
            self._sock.close()


__all__ = ["BufferTransport", "LineTransport", "RECV_CHUNK_SIZE", "SocketTransport"]
