"""Persistent CDDBP connection over TCP."""

from .connection import Connection

__all__ = ["Connection"]
