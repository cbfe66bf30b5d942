"""Tests for the socket and in-memory line transports."""

from __future__ import annotations

import socket
import threading
import time
from collections.abc import Iterator

import pytest

from gnudb.domain.errors import TransportError
from gnudb.platform.transport import BufferTransport, LineTransport, SocketTransport


@pytest.fixture
def socket_pair() -> Iterator[tuple[SocketTransport, socket.socket]]:
    """Client transport wired to a raw peer socket."""

    client_sock, server_sock = socket.socketpair()
    transport = SocketTransport(client_sock, timeout=0.5)
    try:
        yield transport, server_sock
    finally:
        transport.shutdown()
        server_sock.close()


def test_transports_satisfy_line_transport() -> None:
    assert isinstance(BufferTransport(), LineTransport)


def test_buffer_transport_reads_lines_then_eof() -> None:
    transport = BufferTransport(b"200 one\r\nsecond")

    assert transport.read_line() == b"200 one\r\n"
    assert transport.read_line() == b"second"
    assert transport.read_line() == b""


def test_buffer_transport_records_sent_bytes() -> None:
    transport = BufferTransport()
    transport.send(b"proto 6\n")

    assert transport.sent == [b"proto 6\n"]


def test_buffer_transport_refuses_after_shutdown() -> None:
    transport = BufferTransport(b"200 ok\n")
    transport.shutdown()

    with pytest.raises(TransportError):
        _ = transport.read_line()
    with pytest.raises(TransportError):
        transport.send(b"quit\n")


def test_socket_transport_round_trip(socket_pair: tuple[SocketTransport, socket.socket]) -> None:
    transport, peer = socket_pair

    transport.send(b"cddb hello a b c d\n")
    assert peer.recv(64) == b"cddb hello a b c d\n"

    peer.sendall(b"200 hello\r\n210 more\r\n")
    assert transport.read_line() == b"200 hello\r\n"
    assert transport.read_line() == b"210 more\r\n"


def test_socket_transport_eof(socket_pair: tuple[SocketTransport, socket.socket]) -> None:
    transport, peer = socket_pair
    peer.shutdown(socket.SHUT_WR)

    assert transport.read_line() == b""


def test_socket_transport_read_timeout(socket_pair: tuple[SocketTransport, socket.socket]) -> None:
    transport, _peer = socket_pair

    with pytest.raises(TransportError, match="timed out"):
        _ = transport.read_line()


def test_socket_transport_timeout_bounds_a_trickled_line(
    socket_pair: tuple[SocketTransport, socket.socket],
) -> None:
    """A line arriving one byte at a time still has to finish within the timeout."""

    transport, peer = socket_pair
    stop = threading.Event()

    def trickle() -> None:
        for byte in b"200 slow banner from a trickling server\n":
            if stop.wait(0.05):
                return
            try:
                peer.sendall(bytes([byte]))
            except OSError:
                return

    sender = threading.Thread(target=trickle, daemon=True)
    sender.start()
    started = time.monotonic()
    try:
        with pytest.raises(TransportError, match="timed out"):
            _ = transport.read_line()
    finally:
        stop.set()
        sender.join()

    assert time.monotonic() - started < 1.5


def test_socket_transport_joins_split_chunks(socket_pair: tuple[SocketTransport, socket.socket]) -> None:
    transport, peer = socket_pair

    peer.sendall(b"210 fou")
    peer.sendall(b"nd\r\nrock 6909aa09 Dire")
    assert transport.read_line() == b"210 found\r\n"

    peer.sendall(b" Straits\r\n")
    assert transport.read_line() == b"rock 6909aa09 Dire Straits\r\n"


def test_socket_transport_returns_unterminated_tail_at_eof(
    socket_pair: tuple[SocketTransport, socket.socket],
) -> None:
    transport, peer = socket_pair
    peer.sendall(b"200 partial")
    peer.shutdown(socket.SHUT_WR)

    assert transport.read_line() == b"200 partial"
    assert transport.read_line() == b""


def test_socket_transport_shutdown_is_idempotent(
    socket_pair: tuple[SocketTransport, socket.socket],
) -> None:
    transport, _peer = socket_pair

    transport.shutdown()
    transport.shutdown()

    assert transport.closed
    with pytest.raises(TransportError):
        transport.send(b"quit\n")


def test_open_refused_connection_is_transport_error() -> None:
    """Connecting to a port nobody listens on fails with ``TransportError``."""

    listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    listener.bind(("127.0.0.1", 0))
    port = listener.getsockname()[1]
    listener.close()

    with pytest.raises(TransportError, match=f"127.0.0.1:{port}"):
        _ = SocketTransport.open("127.0.0.1", port, 1.0)
