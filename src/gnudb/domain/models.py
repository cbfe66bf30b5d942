"""Data structures produced by the query and read commands."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class Match:
    """One candidate album returned by ``cddb query``."""

    discid: str
    category: str
    artist: str
    title: str


@dataclass(slots=True)
class Track:
    """A single track of a disc record.

    ``artist`` is copied from the owning disc when the track is parsed so it
    can be edited independently afterwards. ``duration`` and ``composer``
    are not filled by the xmcd parser.
    """

    number: int
    title: str = ""
    artist: str = ""
    duration: int = 0
    composer: str | None = None


@dataclass(slots=True)
class Disc:
    """Album metadata returned by ``cddb read``."""

    title: str = ""
    artist: str = ""
    year: int | None = None
    genre: str | None = None
    tracks: list[Track] = field(default_factory=list)
    # Taken from the xmcd comment header when present.
    length: int | None = None
    revision: int | None = None


__all__ = ["Disc", "Match", "Track"]
