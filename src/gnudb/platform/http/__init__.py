"""HTTP-tunneled CDDB commands.

This package provides the one-request-per-command transport used when the
persistent CDDBP port is unreachable.
"""

from .client import HttpEndpoint, http_query, http_read, http_request

__all__ = ["HttpEndpoint", "http_query", "http_read", "http_request"]
