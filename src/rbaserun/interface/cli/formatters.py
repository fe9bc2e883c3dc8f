"""
CLI formatters for launch outcomes and history.

Keeps rich display logic out of the command functions.
"""

import logging
from typing import List

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from rbaserun.application import LaunchOutcome
from rbaserun.domain.errors import UnrecognizedFormat

logger = logging.getLogger(__name__)
console = Console()
err_console = Console(stderr=True)


class OutcomeFormatter:
    """Prints launch outcomes and history listings."""

    def display_outcome(self, outcome: LaunchOutcome, dry_run: bool = False) -> None:
        if outcome.error is not None:
            prefix = "Parsing error" if isinstance(outcome.error, UnrecognizedFormat) else "Launcher error"
            err_console.print(f"[red]❌ {prefix}: {escape(str(outcome.error))}[/red]")
            return

        if dry_run:
            console.print(outcome.command.display(), markup=False, highlight=False, soft_wrap=True)
            return

        if outcome.exit_code:
            err_console.print(f"[yellow]⚠️  Starter exited with code {outcome.exit_code}[/yellow]")
        else:
            logger.debug("Launch completed")

    def display_history(self, entries: List[str]) -> None:
        if not entries:
            console.print("[yellow]No launch history[/yellow]")
            return

        table = Table(title="🕘 Launch history")
        table.add_column("#", style="cyan", justify="right")
        table.add_column("Connection string", style="green", overflow="fold")
        for index, entry in enumerate(entries, start=1):
            table.add_row(str(index), escape(entry))
        console.print(table)
