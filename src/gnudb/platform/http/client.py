"""Where: src/gnudb/platform/http/client.py
What: Single-shot HTTP variant of the CDDB command set.
Why: Some networks only allow HTTP; the body is framed exactly like CDDBP.

Every command becomes one GET on ``/~cddb/cddb.cgi`` carrying the command in
``cmd`` next to fixed ``hello`` and ``proto`` parameters. Only byte delivery
differs from the persistent connection: framing and parsing are shared.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

import requests

from gnudb.config.settings import (
    DEFAULT_HELLO,
    DEFAULT_HOST,
    DEFAULT_HTTP_PORT,
    DEFAULT_PROTO_LEVEL,
    DEFAULT_TIMEOUT,
    HTTP_PATH,
)
from gnudb.domain.errors import TransportError
from gnudb.domain.models import Disc, Match
from gnudb.domain.toc import DiscToc
from gnudb.platform.logging import logger
from gnudb.protocol.commands import create_query_cmd, create_read_cmd
from gnudb.protocol.framing import parse_raw_response
from gnudb.protocol.parser import parse_query_response, parse_read_response


@dataclass(slots=True)
class HTTPResult:
    """Represent an HTTP response relevant to the CDDB client."""

    status: int
    body: bytes


class HTTPClient(Protocol):
    """Protocol for HTTP clients able to fetch raw bodies."""

    def get(self, url: str, params: dict[str, str], timeout: float) -> HTTPResult:
        ...


class RequestsHTTPClient:
    """Perform GET requests with ``requests``; failures become ``TransportError``."""

    def get(self, url: str, params: dict[str, str], timeout: float) -> HTTPResult:
        try:
            response = requests.get(url, params=params, timeout=timeout)
        except requests.Timeout as exc:
            raise TransportError(f"HTTP request to {url} timed out") from exc
        except requests.RequestException as exc:
            raise TransportError(f"HTTP request to {url} failed: {exc}") from exc

        status = int(response.status_code)
        if not 200 <= status < 300:
            logger.warning("gnudb HTTP error: status=%s", status)
            raise TransportError(f"HTTP request to {url} returned status {status}")
        return HTTPResult(status=status, body=response.content)


DEFAULT_HTTP_CLIENT: HTTPClient = RequestsHTTPClient()
_HTTP_CLIENT: HTTPClient = DEFAULT_HTTP_CLIENT


def _http_get(url: str, params: dict[str, str], timeout: float) -> HTTPResult:
    """Thin wrapper kept for tests patching the HTTP boundary."""

    return _HTTP_CLIENT.get(url, params, timeout)


def build_url(host: str, port: int) -> str:
    return f"http://{host}:{port}{HTTP_PATH}"


def http_request(
    host: str,
    port: int,
    cmd: str,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    hello: str = DEFAULT_HELLO,
    proto_level: int = DEFAULT_PROTO_LEVEL,
) -> bytes:
    """Send one command over HTTP and return the raw response body."""

    url = build_url(host, port)
    params = {
        "cmd": cmd.rstrip("\r\n"),
        "hello": hello,
        "proto": str(proto_level),
    }
    logger.debug(
        "sent %s",
        params["cmd"],
        extra={"wire_direction": "sent", "wire_line": params["cmd"]},
    )
    logger.debug("HTTP request URL: %s", url)
    result = _http_get(url, params, timeout)
    logger.debug("HTTP response body: %d bytes", len(result.body))
    return result.body


def http_query(
    host: str,
    port: int,
    toc: DiscToc,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    hello: str = DEFAULT_HELLO,
    proto_level: int = DEFAULT_PROTO_LEVEL,
) -> list[Match]:
    """Query matches for ``toc`` over HTTP."""

    body = http_request(
        host, port, create_query_cmd(toc), timeout=timeout, hello=hello, proto_level=proto_level
    )
    return parse_query_response(parse_raw_response(body))


def http_read(
    host: str,
    port: int,
    match: Match,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    hello: str = DEFAULT_HELLO,
    proto_level: int = DEFAULT_PROTO_LEVEL,
) -> Disc:
    """Read the record behind ``match`` over HTTP."""

    body = http_request(
        host, port, create_read_cmd(match), timeout=timeout, hello=hello, proto_level=proto_level
    )
    return parse_read_response(parse_raw_response(body))


@dataclass(slots=True)
class HttpEndpoint:
    """HTTP server settings exposing the same ``query``/``read`` pair as a connection."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_HTTP_PORT
    timeout: float = DEFAULT_TIMEOUT
    hello: str = DEFAULT_HELLO
    proto_level: int = DEFAULT_PROTO_LEVEL

    def query(self, toc: DiscToc) -> list[Match]:
        return http_query(
            self.host,
            self.port,
            toc,
            timeout=self.timeout,
            hello=self.hello,
            proto_level=self.proto_level,
        )

    def read(self, match: Match) -> Disc:
        return http_read(
            self.host,
            self.port,
            match,
            timeout=self.timeout,
            hello=self.hello,
            proto_level=self.proto_level,
        )

    def close(self) -> None:
        """Nothing to release; present for symmetry with ``Connection``."""


__all__ = [
    "DEFAULT_HTTP_CLIENT",
    "HTTPClient",
    "HTTPResult",
    "HttpEndpoint",
    "RequestsHTTPClient",
    "build_url",
    "http_query",
    "http_read",
    "http_request",
]
