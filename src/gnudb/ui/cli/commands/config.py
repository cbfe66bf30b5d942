"""src/gnudb/ui/cli/commands/config.py
What: Implement the ``config`` subcommand.
Why: Give users a commented starting point for the configuration file.
"""

from __future__ import annotations

from typing import final

from rich.console import Console

from gnudb.config.config import Config
from gnudb.config.paths import default_config_path
from gnudb.platform.logging import logger
from gnudb.ui.cli.args.options import ConfigArgs


@final
class ConfigCommand:
    """Write or locate the configuration file."""

    def __init__(self, args: ConfigArgs, *, console: Console | None = None) -> None:
        self._args = args
        self._console = console or Console()

    def execute(self) -> bool:
        target = self._args.path or default_config_path()

        if not self._args.init:
            state = "exists" if target.exists() else "not created yet"
            self._console.print(f"Configuration file: {target} ({state})")
            return True

        if target.exists() and not self._args.force:
            logger.error("%s already exists; pass --force to overwrite it", target)
            return False

        written = Config().save(target)
        self._console.print(f"[green]Wrote default configuration to {written}[/green]")
        return True
