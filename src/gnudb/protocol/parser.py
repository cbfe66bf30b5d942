"""Where: src/gnudb/protocol/parser.py
What: Interpret framed payloads as match lists or xmcd disc records.
Why: Keep field fallback and validation policy in one place, away from I/O.
"""

from __future__ import annotations

import re
from typing import Final

from gnudb.domain.errors import ProtocolError
from gnudb.domain.models import Disc, Match, Track
from gnudb.platform.logging import logger

YEAR_MAX: Final[int] = 65535

_DIGITS_RE = re.compile(r"[0-9]+")
_LENGTH_RE = re.compile(r"#\s*Disc length:\s*(\d+)\s*seconds")
_REVISION_RE = re.compile(r"#\s*Revision:\s*(\d+)")


def _iter_lines(text: str) -> list[str]:
    """Split on ``\\n`` and drop one trailing ``\\r`` per line."""

    if not text:
        return []
    pieces = text.split("\n")
    if text.endswith("\n"):
        pieces.pop()
    return [piece[:-1] if piece.endswith("\r") else piece for piece in pieces]


def _parse_year(value: str) -> int | None:
    """Return the year when ``value`` is a plain number in 1..65535."""

    if not _DIGITS_RE.fullmatch(value):
        return None
    year = int(value)
    if not 0 < year <= YEAR_MAX:
        return None
    return year


def split_artist_title(remainder: str) -> tuple[str, str]:
    """Split ``artist / title``, falling back to the first bare ``/``."""

    if " / " in remainder:
        artist, _, title = remainder.partition(" / ")
    elif "/" in remainder:
        artist, _, title = remainder.partition("/")
    else:
        raise ProtocolError("failed to parse artist/title", raw=remainder)
    return artist.strip(), title.strip()


def parse_matches(line: str) -> Match:
    """Parse one inexact-match line: ``category discid artist / title``."""

    parts = line.split(" ", 2)
    if len(parts) < 2:
        raise ProtocolError("failed to parse id", raw=line)
    if len(parts) < 3:
        raise ProtocolError("failed to parse remainder", raw=line)
    category, discid, remainder = parts
    artist, title = split_artist_title(remainder)
    return Match(discid=discid, category=category, artist=artist, title=title)


def _parse_exact_match(line: str) -> Match:
    parts = line.split(" ", 3)
    labels = ("category", "discid", "remainder")
    if len(parts) < 4:
        missing = labels[max(len(parts) - 1, 0)]
        raise ProtocolError(f"failed to parse exact match {missing}", raw=line)
    _code, category, discid, remainder = parts
    artist, title = split_artist_title(remainder)
    return Match(discid=discid, category=category, artist=artist, title=title)


def parse_query_response(response: str) -> list[Match]:
    """Turn a ``cddb query`` payload into match candidates.

    ``200`` carries a single exact match, ``202`` means nothing was found,
    and a ``211`` header introduces a list of inexact matches.

    Raises:
        ProtocolError: When a candidate line is missing a field.
    """

    matches: list[Match] = []
    for line in _iter_lines(response):
        if line.startswith("200"):
            matches.append(_parse_exact_match(line))
            break
        if line.startswith("202"):
            break
        if line.startswith("211"):
            continue
        matches.append(parse_matches(line))
    logger.debug("query returned %d match(es)", len(matches))
    return matches


def _parse_track(line: str, artist: str) -> Track:
    rest = line.removeprefix("TTITLE")
    index_text, sep, title = rest.partition("=")
    if not sep:
        raise ProtocolError("failed to parse TTITLE value", raw=line)
    index_text = index_text.strip()
    if not _DIGITS_RE.fullmatch(index_text):
        raise ProtocolError(f"failed to parse TTITLE index: {index_text!r}", raw=line)
    # Track indices are zero based on the wire.
    return Track(number=int(index_text) + 1, title=title, artist=artist)


def _parse_extd_year(line: str) -> int | None:
    pos = line.find("YEAR:")
    if pos < 0:
        return None
    tokens = line[pos + len("YEAR:"):].split()
    if not tokens:
        raise ProtocolError("failed to parse EXTD YEAR", raw=line)
    year = _parse_year(tokens[0])
    if year is None:
        raise ProtocolError(f"failed to parse EXTD YEAR: {tokens[0]!r}", raw=line)
    return year


def parse_read_response(data: str) -> Disc:
    """Build a :class:`Disc` from a ``cddb read`` payload in xmcd format.

    Keys may appear in any order. A valid ``DYEAR`` always sets the year;
    ``EXTD`` is consulted only while no year is known. Tracks copy the
    disc artist known at the moment their ``TTITLE`` line is read.

    Raises:
        ProtocolError: On a malformed ``TTITLE`` index or ``EXTD`` year.
    """

    disc = Disc()
    for line in _iter_lines(data):
        if line.startswith("#"):
            _apply_comment(disc, line)
            continue

        if line.startswith("DTITLE="):
            value = line.removeprefix("DTITLE=")
            first, sep, rest = value.partition("/")
            if sep:
                disc.artist = first.strip()
                disc.title = rest.strip()
            else:
                disc.title = first.strip()
        elif line.startswith("DYEAR="):
            value = line.removeprefix("DYEAR=").strip()
            if value:
                year = _parse_year(value)
                if year is None:
                    logger.debug("failed to parse DYEAR %r; treating as absent", value)
                else:
                    disc.year = year
        elif line.startswith("DGENRE="):
            value = line.removeprefix("DGENRE=").strip()
            if value:
                disc.genre = value
        elif line.startswith("EXTD"):
            if disc.year is None:
                disc.year = _parse_extd_year(line)
        elif line.startswith("TTITLE"):
            disc.tracks.append(_parse_track(line, disc.artist))
    return disc


def _apply_comment(disc: Disc, line: str) -> None:
    length_match = _LENGTH_RE.match(line)
    if length_match:
        disc.length = int(length_match.group(1))
        return
    revision_match = _REVISION_RE.match(line)
    if revision_match:
        disc.revision = int(revision_match.group(1))


__all__ = [
    "YEAR_MAX",
    "parse_matches",
    "parse_query_response",
    "parse_read_response",
    "split_artist_title",
]
