"""Implement the ``read`` subcommand."""

from __future__ import annotations

from typing import final, override

from gnudb.domain.models import Match
from gnudb.ui.cli.args.options import ReadArgs
from gnudb.ui.cli.commands.executor import CommandExecutor, ServerClient


@final
class ReadCommand(CommandExecutor):
    """Fetch and print the record stored under a category and disc id."""

    args: ReadArgs

    @override
    def run(self, client: ServerClient) -> bool:
        # Artist and title are not sent with ``cddb read``.
        match = Match(discid=self.args.discid, category=self.args.category, artist="", title="")
        disc = client.read(match)
        self.result_display.show_disc(disc, quiet=self.args.quiet)
        return True
