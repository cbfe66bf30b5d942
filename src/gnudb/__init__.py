"""Client for CDDB-family disc metadata services such as gnudb.org.

Typical use::

    from gnudb import Connection, DiscToc

    toc = DiscToc.from_toc_string("1 9 185700 150 18051 42248 57183 75952 89333 114384 142453 163641")
    with Connection.open() as conn:
        matches = conn.query(toc)
        disc = conn.read(matches[0])
"""

from gnudb.application.lookup import lookup_disc
from gnudb.domain import (
    Disc,
    DiscToc,
    GnuDbError,
    Match,
    ProtocolError,
    Track,
    TransportError,
)
from gnudb.platform.cddbp import Connection
from gnudb.platform.http import HttpEndpoint, http_query, http_read

__version__ = "0.1.0"

__all__ = [
    "Connection",
    "Disc",
    "DiscToc",
    "GnuDbError",
    "HttpEndpoint",
    "Match",
    "ProtocolError",
    "Track",
    "TransportError",
    "http_query",
    "http_read",
    "lookup_disc",
]
