"""Implement the ``query`` subcommand."""

from __future__ import annotations

from typing import final, override

from gnudb.ui.cli.args.options import QueryArgs
from gnudb.ui.cli.commands.executor import CommandExecutor, ServerClient


@final
class QueryCommand(CommandExecutor):
    """List every album the server associates with a disc layout."""

    args: QueryArgs

    @override
    def run(self, client: ServerClient) -> bool:
        matches = client.query(self.args.toc)
        self.result_display.show_matches(matches, self.args.toc, quiet=self.args.quiet)
        return True
