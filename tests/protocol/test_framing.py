"""Tests for status handling, multi-line bodies and dot-stuffing."""

import ast
import inspect

import pytest

from gnudb.domain.errors import ProtocolError, TransportError
from gnudb.protocol import framing
from gnudb.protocol.buffer import BufferTransport
from gnudb.protocol.framing import (
    LogicalResponse,
    parse_raw_response,
    read_response,
    receive_response,
    unstuff_line,
)


def test_multiline_body_is_unstuffed() -> None:
    """A leading ``..`` should lose one dot and the terminator is dropped."""

    assert parse_raw_response("211 multiple matches\n..hello\nworld\n.\n") == ".hello\nworld\n"


def test_single_line_response_is_returned_verbatim() -> None:
    assert parse_raw_response("200 OK\n") == "200 OK\n"


def test_single_line_without_newline() -> None:
    assert parse_raw_response("200 OK") == "200 OK"


def test_lines_of_dots_keep_all_but_one() -> None:
    assert parse_raw_response("210 data\n...\n...test\n.\n") == "..\n..test\n"


def test_empty_body() -> None:
    assert parse_raw_response("210 data\n.\n") == ""


def test_crlf_line_endings_are_normalised() -> None:
    """Bodies are rebuilt with ``\\n`` separators; the terminator may carry ``\\r``."""

    raw = b"210 rock 6909aa09 CD database entry follows\r\nDTITLE=A / B\r\n..dots\r\n.\r\n"

    assert parse_raw_response(raw) == "DTITLE=A / B\n.dots\n"


@pytest.mark.parametrize("raw", ["500 fail\n", "401 Permission denied\n", "402 Already shook hands\n"])
def test_failure_codes_raise_protocol_error(raw: str) -> None:
    """4xx and 5xx replies carry the status line in the error."""

    with pytest.raises(ProtocolError) as exc_info:
        _ = parse_raw_response(raw)

    assert raw.rstrip("\n") in str(exc_info.value)
    assert exc_info.value.raw == raw


def test_unknown_second_digit_raises_protocol_error() -> None:
    with pytest.raises(ProtocolError):
        _ = parse_raw_response("330 connection closing\n")


@pytest.mark.parametrize("raw", ["2", "2\n", "\n"])
def test_too_short_status_line(raw: str) -> None:
    with pytest.raises(ProtocolError, match="failed to parse response code"):
        _ = parse_raw_response(raw)


def test_eof_before_status_line_is_transport_error() -> None:
    with pytest.raises(TransportError):
        _ = parse_raw_response(b"")


def test_eof_inside_body_is_transport_error() -> None:
    """A body that never reaches its terminator is a delivery failure."""

    with pytest.raises(TransportError):
        _ = parse_raw_response("211 matches follow\nrock 1234 A / B\n")


def test_undecodable_line_is_transport_error() -> None:
    with pytest.raises(TransportError, match="decode"):
        _ = parse_raw_response(b"210 ok\nDTITLE=\xff\xfe\n.\n")


def test_non_ascii_utf8_body() -> None:
    body = "DTITLE=Björk / Homogenic\n"

    assert parse_raw_response(f"210 ok\n{body}.\n".encode()) == body


def test_read_response_sends_command_first() -> None:
    """The command is written before any line is read."""

    transport = BufferTransport(b"200 hello and welcome\n")

    response = read_response(transport, "cddb hello a b c d\n")

    assert transport.sent == [b"cddb hello a b c d\n"]
    assert response == LogicalResponse(status_line="200 hello and welcome\n")
    assert response.payload == "200 hello and welcome\n"
    assert not response.is_multiline


def test_receive_response_leaves_following_lines_unread() -> None:
    """Consecutive responses on one stream are framed independently."""

    transport = BufferTransport(b"210 one\nline\n.\n201 OK, protocol version now: 6\n")

    first = receive_response(transport)
    second = receive_response(transport)

    assert first.body == "line\n"
    assert first.status.code == 210
    assert second.payload == "201 OK, protocol version now: 6\n"


@pytest.mark.parametrize(
    ("line", "expected"),
    [("..", "."), ("...x", "..x"), (".x", ".x"), ("x..", "x.."), ("", "")],
)
def test_unstuff_line(line: str, expected: str) -> None:
    assert unstuff_line(line) == expected


def test_framing_does_not_import_the_socket_transport() -> None:
    """The framer reads through the port; the socket layer depends on it, not the reverse."""

    tree = ast.parse(inspect.getsource(framing))
    imported = {
        node.module
        for node in ast.walk(tree)
        if isinstance(node, ast.ImportFrom) and node.module is not None
    }
    imported |= {
        alias.name
        for node in ast.walk(tree)
        if isinstance(node, ast.Import)
        for alias in node.names
    }

    assert "gnudb.platform.transport" not in imported
    assert BufferTransport.__module__ == "gnudb.protocol.buffer"
