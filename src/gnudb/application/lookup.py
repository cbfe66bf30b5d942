"""Summary: Query-then-read orchestration shared by the CDDBP and HTTP clients.
Why: Callers usually want one record per disc, not a match list.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Protocol

from gnudb.domain.models import Disc, Match
from gnudb.domain.toc import DiscToc
from gnudb.platform.logging import logger

MatchChooser = Callable[[Sequence[Match]], int]


class LookupClient(Protocol):
    """Anything able to run ``query`` and ``read``: a connection or an HTTP endpoint."""

    def query(self, toc: DiscToc) -> list[Match]:
        ...

    def read(self, match: Match) -> Disc:
        ...


def first_match(matches: Sequence[Match]) -> int:
    return 0


def lookup_disc(
    client: LookupClient,
    toc: DiscToc,
    choose: MatchChooser = first_match,
) -> Disc | None:
    """Query ``toc`` and read the chosen match.

    Args:
        client: Connection or HTTP endpoint.
        toc: Disc layout to look up.
        choose: Returns the index of the match to read; the first by default.

    Returns:
        The record, or ``None`` when the server has no match. When the
        record carries no ``DGENRE`` the match category is used as genre.

    Raises:
        IndexError: When ``choose`` returns an index outside the match list.
    """

    matches = client.query(toc)
    if not matches:
        logger.info("No match for disc %s", toc.freedb_id)
        return None

    index = choose(matches)
    if not 0 <= index < len(matches):
        raise IndexError(f"match index {index} out of range (0..{len(matches) - 1})")
    chosen = matches[index]
    if len(matches) > 1:
        logger.info(
            "Disc %s has %d candidates; reading %s/%s",
            toc.freedb_id,
            len(matches),
            chosen.category,
            chosen.discid,
        )

    disc = client.read(chosen)
    if disc.genre is None:
        disc.genre = chosen.category
    return disc


__all__ = ["LookupClient", "MatchChooser", "first_match", "lookup_disc"]
