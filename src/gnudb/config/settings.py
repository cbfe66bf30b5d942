"""Where: src/gnudb/config/settings.py
What: Protocol constants and defaults derived from the configuration defaults.
Why: Give the protocol and transport layers constants without file I/O.
"""

from __future__ import annotations

from typing import Final

from gnudb.config.config import (
    CDDBP_PORT_DEFAULT,
    CLIENT_NAME_DEFAULT,
    CLIENT_VERSION_DEFAULT,
    HOST_DEFAULT,
    HTTP_PORT_DEFAULT,
    PROTO_LEVEL_DEFAULT,
    TIMEOUT_DEFAULT,
)

# Server endpoints ----------------------------------------------------------

DEFAULT_HOST: Final[str] = HOST_DEFAULT
DEFAULT_CDDBP_PORT: Final[int] = CDDBP_PORT_DEFAULT
DEFAULT_HTTP_PORT: Final[int] = HTTP_PORT_DEFAULT
HTTP_PATH: Final[str] = "/~cddb/cddb.cgi"

# Protocol ------------------------------------------------------------------

# Level 6 adds DYEAR/DGENRE to read replies and switches the charset to UTF-8.
DEFAULT_PROTO_LEVEL: Final[int] = PROTO_LEVEL_DEFAULT
WIRE_ENCODING: Final[str] = "utf-8"

# Seconds allowed for connecting and for each response line.
DEFAULT_TIMEOUT: Final[float] = TIMEOUT_DEFAULT

DEFAULT_HELLO: Final[str] = f"anonymous localhost {CLIENT_NAME_DEFAULT} {CLIENT_VERSION_DEFAULT}"


__all__ = [
    "DEFAULT_CDDBP_PORT",
    "DEFAULT_HELLO",
    "DEFAULT_HOST",
    "DEFAULT_HTTP_PORT",
    "DEFAULT_PROTO_LEVEL",
    "DEFAULT_TIMEOUT",
    "HTTP_PATH",
    "WIRE_ENCODING",
]
