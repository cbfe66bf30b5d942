"""Where: src/gnudb/domain/toc.py
What: Disc table of contents and the classic CDDB disc id checksum.
Why: The query command needs the track layout in a fixed textual shape.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final

FRAMES_PER_SECOND: Final[int] = 75


def _digit_sum(value: int) -> int:
    total = 0
    while value > 0:
        total += value % 10
        value //= 10
    return total


@dataclass(slots=True, frozen=True)
class DiscToc:
    """Track layout of an audio disc.

    Attributes:
        first_track: Number of the first audio track (usually 1).
        last_track: Number of the last audio track.
        leadout: Frame offset of the lead-out area.
        offsets: Frame offset of every track, in track order.
    """

    first_track: int
    last_track: int
    leadout: int
    offsets: tuple[int, ...]

    def __post_init__(self) -> None:
        if self.first_track < 1 or self.last_track < self.first_track:
            raise ValueError(
                f"Invalid track range {self.first_track}..{self.last_track}"
            )
        if len(self.offsets) != self.track_count:
            raise ValueError(
                f"Expected {self.track_count} track offsets, got {len(self.offsets)}"
            )
        if any(offset < 0 for offset in self.offsets):
            raise ValueError("Track offsets must not be negative")
        if list(self.offsets) != sorted(self.offsets):
            raise ValueError("Track offsets must be ascending")
        if self.leadout <= self.offsets[-1]:
            raise ValueError("Lead-out must lie after the last track offset")

    @classmethod
    def from_offsets(cls, offsets: Sequence[int], leadout: int, *, first_track: int = 1) -> DiscToc:
        """Build a TOC from track offsets and the lead-out offset."""

        return cls(
            first_track=first_track,
            last_track=first_track + len(offsets) - 1,
            leadout=leadout,
            offsets=tuple(offsets),
        )

    @classmethod
    def from_toc_string(cls, toc: str) -> DiscToc:
        """Parse ``"first last leadout off1 ... offN"`` as printed by libdiscid."""

        parts = toc.split()
        if len(parts) < 4:
            raise ValueError(f"TOC string is too short: {toc!r}")
        try:
            numbers = [int(part) for part in parts]
        except ValueError as exc:
            raise ValueError(f"TOC string contains a non-numeric value: {toc!r}") from exc
        first, last, leadout, *offsets = numbers
        return cls(first_track=first, last_track=last, leadout=leadout, offsets=tuple(offsets))

    @property
    def track_count(self) -> int:
        return self.last_track - self.first_track + 1

    @property
    def total_seconds(self) -> int:
        """Disc length in whole seconds, measured up to the lead-out."""

        return self.leadout // FRAMES_PER_SECOND

    @property
    def freedb_id(self) -> str:
        """Return the eight hex digit CDDB/freedb disc id."""

        checksum = sum(_digit_sum(offset // FRAMES_PER_SECOND) for offset in self.offsets)
        playing = self.leadout // FRAMES_PER_SECOND - self.offsets[0] // FRAMES_PER_SECOND
        disc_id = ((checksum % 0xFF) << 24) | (playing << 8) | self.track_count
        return f"{disc_id:08x}"


__all__ = ["DiscToc", "FRAMES_PER_SECOND"]
