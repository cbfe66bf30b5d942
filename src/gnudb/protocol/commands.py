"""Outbound command strings, newline terminated and sent verbatim."""

from __future__ import annotations

from typing import Final

from gnudb.domain.models import Match
from gnudb.domain.toc import DiscToc

QUIT_CMD: Final[str] = "quit\n"


def create_query_cmd(toc: DiscToc) -> str:
    """``cddb query <discid> <ntrks> <off1> ... <offN> <nsecs>``"""

    offsets = " ".join(str(offset) for offset in toc.offsets)
    return f"cddb query {toc.freedb_id} {toc.track_count} {offsets} {toc.total_seconds}\n"


def create_read_cmd(match: Match) -> str:
    """``cddb read <category> <discid>``"""

    return f"cddb read {match.category} {match.discid}\n"


def create_hello_cmd(hello: str) -> str:
    """``cddb hello <user> <host> <client> <version>``"""

    return f"cddb hello {hello}\n"


def create_proto_cmd(level: int) -> str:
    return f"proto {level}\n"


__all__ = [
    "QUIT_CMD",
    "create_hello_cmd",
    "create_proto_cmd",
    "create_query_cmd",
    "create_read_cmd",
]
