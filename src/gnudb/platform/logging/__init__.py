"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the shared logger, setup helper and the Rich wire handler.
Why: Provide a single canonical import path for every module.
"""

from __future__ import annotations

from .config import LOGGER_NAME, logger, setup_logger
from .handlers import WireRichHandler

__all__ = [
    "LOGGER_NAME",
    "WireRichHandler",
    "logger",
    "setup_logger",
]
