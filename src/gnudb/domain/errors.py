"""Where: src/gnudb/domain/errors.py
What: Failure hierarchy shared by the framer, parser and transports.
Why: Callers must tell a dropped connection apart from a server refusal.
"""

from __future__ import annotations


class GnuDbError(Exception):
    """Base exception for every failure raised by the gnudb client."""

    def __init__(self, message: str, *, raw: str | None = None) -> None:
        super().__init__(message)
        self.message: str = message
        self.raw: str | None = raw


class TransportError(GnuDbError):
    """Raised when bytes could not be delivered or received.

    Covers refused connections, timeouts, connections dropped mid-response,
    undecodable lines and failed HTTP requests.
    """


class ProtocolError(GnuDbError):
    """Raised when the server answered with something unusable.

    Covers 4xx/5xx rejections, unknown status digits and malformed fields.
    """


__all__ = ["GnuDbError", "ProtocolError", "TransportError"]
