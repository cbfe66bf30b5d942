"""Where: platform/logging/handlers.py
What: Rich console handler that renders protocol traffic distinctly.
Why: Sent commands and server replies should stand out from other log lines.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class WireRichHandler(RichHandler):
    """Rich handler that highlights records tagged with ``wire_direction``."""

    _WIRE_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "sent": ("→", "cyan"),
        "received": ("←", "green"),
    }

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _render_wire_message(self, record: logging.LogRecord) -> Text | None:
        """Render a single protocol line with its direction marker."""

        direction = getattr(record, "wire_direction", None)
        if not isinstance(direction, str):
            return None

        icon, color = self._WIRE_STYLES.get(direction, ("·", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        line = getattr(record, "wire_line", None)
        if not isinstance(line, str):
            line = record.getMessage()
        # Keep CR/LF visible; trailing whitespace matters in this protocol.
        visible = line.replace("\r", "\\r").replace("\n", "\\n")
        _ = text.append(visible, style=Style(color=color))

        command = getattr(record, "wire_command", None)
        if isinstance(command, str) and command and direction == "received":
            _ = text.append(f"  [{command.strip()}]", style=Style(color="white", dim=True))
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        wire_text = self._render_wire_message(record)
        if wire_text is not None:
            return wire_text
        return super().render_message(record, message)


__all__ = ["WireRichHandler"]
