"""Configuration management for gnudb."""

from __future__ import annotations

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar, Final

from gnudb.config.file_ops import write_text_file
from gnudb.config.paths import default_config_path
from gnudb.platform.logging import logger

HOST_DEFAULT: Final[str] = "gnudb.gnudb.org"
CDDBP_PORT_DEFAULT: Final[int] = 8880
HTTP_PORT_DEFAULT: Final[int] = 80
TIMEOUT_DEFAULT: Final[float] = 10.0
PROTO_LEVEL_DEFAULT: Final[int] = 6
# Lower levels answer in ISO-8859-1, which the UTF-8 decoder rejects.
PROTO_LEVEL_MIN: Final[int] = 6
CLIENT_NAME_DEFAULT: Final[str] = "gnudb-py"
CLIENT_VERSION_DEFAULT: Final[str] = "0.1.0"
TRANSPORTS: Final[tuple[str, ...]] = ("cddbp", "http")


class ConfigError(Exception):
    """Raised when the configuration file is unreadable or invalid."""


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion."""

    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Server
    host: str = HOST_DEFAULT
    cddbp_port: int = CDDBP_PORT_DEFAULT
    http_port: int = HTTP_PORT_DEFAULT
    transport: str = "cddbp"
    timeout: float = TIMEOUT_DEFAULT
    proto_level: int = PROTO_LEVEL_DEFAULT

    # Identity sent with ``cddb hello``
    hello_user: str = "anonymous"
    hello_host: str = "localhost"
    client_name: str = CLIENT_NAME_DEFAULT
    client_version: str = CLIENT_VERSION_DEFAULT

    # Log file path
    log_file: Path | None = _path_field()

    _instance: ClassVar["Config | None"] = None

    def __post_init__(self) -> None:
        """Convert string paths and validate value ranges."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

        self.validate()

    def validate(self) -> None:
        """Reject values the client cannot work with."""

        if not self.host.strip():
            raise ConfigError("host must not be empty")
        for name in ("cddbp_port", "http_port"):
            port = getattr(self, name)
            if isinstance(port, bool) or not isinstance(port, int) or not 0 < port < 65536:
                raise ConfigError(f"{name} must be a TCP port number, got {port!r}")
        if isinstance(self.timeout, bool) or not isinstance(self.timeout, (int, float)) or self.timeout <= 0:
            raise ConfigError(f"timeout must be a positive number, got {self.timeout!r}")
        if self.transport not in TRANSPORTS:
            raise ConfigError(
                f"transport must be one of {', '.join(TRANSPORTS)}, got {self.transport!r}"
            )
        level = self.proto_level
        if isinstance(level, bool) or not isinstance(level, int) or level < PROTO_LEVEL_MIN:
            raise ConfigError(
                f"proto_level must be an integer of at least {PROTO_LEVEL_MIN}, got {level!r}"
            )
        for name in ("hello_user", "hello_host", "client_name", "client_version"):
            value = getattr(self, name)
            # The hello command is space separated.
            if not value or any(ch.isspace() for ch in value):
                raise ConfigError(f"{name} must be a single non-empty word, got {value!r}")

    @property
    def hello_string(self) -> str:
        """Identity triple sent with ``cddb hello`` and the HTTP ``hello`` parameter."""

        return f"{self.hello_user} {self.hello_host} {self.client_name} {self.client_version}"

    @property
    def port(self) -> int:
        """Port of the selected transport."""

        return self.port_for(self.transport)

    def port_for(self, transport: str) -> int:
        """Port configured for ``transport``."""

        return self.http_port if transport == "http" else self.cddbp_port

    def save(self, path: Path | None = None) -> Path:
        """Save configuration to file."""

        config_dict = asdict(self)
        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        target = path or default_config_path()
        try:
            write_text_file(target, self._render_toml(config_dict))
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        logger.info("Configuration saved to %s", target)
        return target

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# gnudb Configuration File")
        lines.append("")

        lines.append("# Server host and ports")
        lines.append(f"host = {self._format_toml_value(config['host'])}")
        lines.append(f"cddbp_port = {self._format_toml_value(config['cddbp_port'])}")
        lines.append(f"http_port = {self._format_toml_value(config['http_port'])}")
        lines.append("")

        lines.append('# Transport used by the CLI: "cddbp" (persistent TCP) or "http"')
        lines.append(f"transport = {self._format_toml_value(config['transport'])}")
        lines.append("")

        lines.append("# Seconds to wait for a connection and for every response line")
        lines.append(f"timeout = {self._format_toml_value(config['timeout'])}")
        lines.append("")

        lines.append("# CDDB protocol level; 6 returns DYEAR/DGENRE and UTF-8 text")
        lines.append(f"proto_level = {self._format_toml_value(config['proto_level'])}")
        lines.append("")

        lines.append("# Identity sent with the hello handshake")
        lines.append(f"hello_user = {self._format_toml_value(config['hello_user'])}")
        lines.append(f"hello_host = {self._format_toml_value(config['hello_host'])}")
        lines.append(f"client_name = {self._format_toml_value(config['client_name'])}")
        lines.append(f"client_version = {self._format_toml_value(config['client_version'])}")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/gnudb.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """Load configuration from file, falling back to defaults.

        Args:
            path: Explicit file to read. The default location is used when omitted.

        Returns:
            Config: Loaded configuration object.
        """
        if path is None and cls._instance is not None:
            return cls._instance

        config_file = path or default_config_path()

        if not config_file.exists():
            logger.debug("No configuration file at %s; using defaults", config_file)
            instance = cls()
        else:
            try:
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.error("Failed to load configuration: %s", e)
                raise ConfigError(f"Cannot read {config_file}: {e}") from e

            known = {f.name for f in fields(cls)}
            for key in sorted(set(config_dict) - known):
                logger.warning("Ignoring unknown configuration key %r in %s", key, config_file)
                del config_dict[key]

            try:
                instance = cls(**config_dict)
            except TypeError as e:
                raise ConfigError(f"Invalid configuration in {config_file}: {e}") from e
            logger.debug("Configuration loaded from %s", config_file)

        if path is None:
            cls._instance = instance
        return instance

    @classmethod
    def reset(cls) -> None:
        """Forget the cached singleton."""

        cls._instance = None


__all__ = [
    "CDDBP_PORT_DEFAULT",
    "CLIENT_NAME_DEFAULT",
    "CLIENT_VERSION_DEFAULT",
    "Config",
    "ConfigError",
    "HOST_DEFAULT",
    "HTTP_PORT_DEFAULT",
    "PROTO_LEVEL_DEFAULT",
    "PROTO_LEVEL_MIN",
    "TIMEOUT_DEFAULT",
    "TRANSPORTS",
]
