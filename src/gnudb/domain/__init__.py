"""Domain records, failures and the disc TOC."""

from .errors import GnuDbError, ProtocolError, TransportError
from .models import Disc, Match, Track
from .toc import DiscToc

__all__ = [
    "Disc",
    "DiscToc",
    "GnuDbError",
    "Match",
    "ProtocolError",
    "Track",
    "TransportError",
]
