"""src/gnudb/ui/cli/display/result.py
What: Render query matches and disc records for the CLI.
Why: Keep console output formatting consistent across subcommands.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import final

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from gnudb.domain.models import Disc, Match
from gnudb.domain.toc import DiscToc


@final
class ResultDisplay:
    """Handles result display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        """Initialize result display."""
        self.console = console or Console()

    def show_matches(self, matches: Sequence[Match], toc: DiscToc, quiet: bool = False) -> None:
        """Display the candidates returned by ``cddb query``.

        Args:
            matches: Candidates in server order.
            toc: Disc layout that was queried.
            quiet: Whether to suppress non-error output.
        """
        if quiet:
            return

        if not matches:
            self.show_no_match(toc)
            return

        table = Table(
            title=f"Matches for disc {toc.freedb_id}",
            show_header=True,
            header_style="bold magenta",
            box=box.SIMPLE_HEAD,
        )
        table.add_column("#", justify="right", style="dim")
        table.add_column("Category", style="cyan")
        table.add_column("Disc ID")
        table.add_column("Artist", style="bold")
        table.add_column("Title")
        for position, match in enumerate(matches, start=1):
            table.add_row(
                str(position), match.category, match.discid, escape(match.artist), escape(match.title)
            )
        self.console.print(table)

    def show_no_match(self, toc: DiscToc, quiet: bool = False) -> None:
        if quiet:
            return
        self.console.print(f"[yellow]No match found for disc {toc.freedb_id}.[/yellow]")

    def show_disc(self, disc: Disc, quiet: bool = False) -> None:
        """Display a disc record with its track list."""

        if quiet:
            return

        self.console.print(f"[bold]{escape(disc.artist)}[/bold] / [bold cyan]{escape(disc.title)}[/bold cyan]")

        details: list[str] = []
        if disc.year is not None:
            details.append(f"Year: {disc.year}")
        if disc.genre:
            details.append(f"Genre: {escape(disc.genre)}")
        if disc.length is not None:
            minutes, seconds = divmod(disc.length, 60)
            details.append(f"Length: {minutes}:{seconds:02d}")
        if details:
            self.console.print("  ".join(details), style="dim")

        table = Table(show_header=True, header_style="bold magenta", box=box.SIMPLE_HEAD)
        table.add_column("#", justify="right", style="dim")
        table.add_column("Title")
        for track in disc.tracks:
            table.add_row(str(track.number), escape(track.title))
        self.console.print(table)
