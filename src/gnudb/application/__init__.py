"""Application services composed from the protocol clients."""

from .lookup import LookupClient, first_match, lookup_disc

__all__ = ["LookupClient", "first_match", "lookup_disc"]
