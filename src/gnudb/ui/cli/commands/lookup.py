"""src/gnudb/ui/cli/commands/lookup.py
What: Implement the ``lookup`` subcommand (query, choose, read).
Why: Most users want the record for a disc, not the candidate list.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import final, override

from gnudb.application.lookup import lookup_disc
from gnudb.domain.models import Match
from gnudb.platform.logging import logger
from gnudb.ui.cli.args.options import LookupArgs
from gnudb.ui.cli.commands.executor import CommandExecutor, ServerClient


@final
class LookupCommand(CommandExecutor):
    """Query a disc layout and print the record of the selected match."""

    args: LookupArgs

    @override
    def run(self, client: ServerClient) -> bool:
        try:
            disc = lookup_disc(client, self.args.toc, choose=self._choose)
        except IndexError as e:
            logger.error("Cannot select match %d: %s", self.args.index, e)
            return False

        if disc is None:
            self.result_display.show_no_match(self.args.toc, quiet=self.args.quiet)
            return False

        self.result_display.show_disc(disc, quiet=self.args.quiet)
        return True

    def _choose(self, matches: Sequence[Match]) -> int:
        return self.args.index - 1
