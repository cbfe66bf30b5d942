"""Where: src/gnudb/protocol/status.py
What: Classification of the three-digit CDDBP status code.
Why: Framing decisions depend only on the first two digits.

First digit:
    1xx  informative message
    2xx  command OK
    3xx  command OK so far, continue
    4xx  command OK, but cannot be performed for some specified reason
    5xx  command unimplemented, incorrect, or program error

Second digit:
    x0x  ready for further commands
    x1x  more server-to-client output follows (until terminating marker)
    x2x  more client-to-server input follows (until terminating marker)
    x3x  connection will close
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from gnudb.domain.errors import ProtocolError


class StatusKind(str, Enum):
    """Meaning of the first digit."""

    INFORMATIVE = "1"
    OK = "2"
    CONTINUE = "3"
    REJECTED = "4"
    ERROR = "5"


class Continuation(str, Enum):
    """Meaning of the second digit."""

    READY = "0"
    SERVER_MORE = "1"
    CLIENT_MORE = "2"
    CLOSING = "3"


@dataclass(slots=True, frozen=True)
class StatusCode:
    """First two digits of a status line plus the raw line for diagnostics."""

    first: str
    second: str
    line: str

    @classmethod
    def parse(cls, status_line: str) -> StatusCode:
        """Read the leading digits of ``status_line``.

        Raises:
            ProtocolError: When the line is too short to carry a second digit.
        """

        stripped = status_line.rstrip("\r\n")
        if len(stripped) < 2:
            raise ProtocolError("failed to parse response code", raw=status_line)
        return cls(first=stripped[0], second=stripped[1], line=stripped)

    @property
    def kind(self) -> StatusKind | None:
        try:
            return StatusKind(self.first)
        except ValueError:
            return None

    @property
    def continuation(self) -> Continuation | None:
        try:
            return Continuation(self.second)
        except ValueError:
            return None

    @property
    def is_failure(self) -> bool:
        """True for 4xx and 5xx replies."""

        return self.kind in (StatusKind.REJECTED, StatusKind.ERROR)

    @property
    def has_body(self) -> bool:
        """True when a dot-terminated body follows the status line."""

        return self.continuation in (Continuation.SERVER_MORE, Continuation.CLIENT_MORE)

    @property
    def is_single_line(self) -> bool:
        return self.continuation is Continuation.READY

    @property
    def code(self) -> int | None:
        """Numeric three-digit code, when the line starts with one."""

        head = self.line[:3]
        if len(head) == 3 and head.isascii() and head.isdigit():
            return int(head)
        return None


__all__ = ["Continuation", "StatusCode", "StatusKind"]
