"""
Interactive picker used when no connection string is given.

Shows launch history, prompts for a connection string or a history number,
asks for Designer mode and launches. Parse errors repeat the prompt.
"""

import logging

import typer
from rich.markup import escape

from rbaserun.application import LaunchService
from rbaserun.domain.connection import ConnectionRequest
from rbaserun.domain.errors import ExitCode, UnrecognizedFormat
from rbaserun.interface.cli.formatters import OutcomeFormatter, console

logger = logging.getLogger(__name__)


class InteractivePicker:
    """Prompt loop over the launch history."""

    def __init__(self, service: LaunchService, formatter: OutcomeFormatter | None = None):
        self.service = service
        self.formatter = formatter or OutcomeFormatter()

    def resolve(self, answer: str, entries: list[str]) -> str:
        """Map a history number to its entry, anything else is taken as-is."""
        answer = answer.strip()
        if answer.isdigit() and 1 <= int(answer) <= len(entries):
            return entries[int(answer) - 1]
        return answer

    def run(self, designer: bool = False, dry_run: bool = False, record: bool = True) -> int:
        entries = self.service.history.load()
        self.formatter.display_history(entries)

        while True:
            answer = typer.prompt(
                "Base path (history number, empty to quit)",
                default="",
                show_default=False,
            )
            if not answer.strip():
                return int(ExitCode.OK)

            raw = self.resolve(answer, entries)
            if raw != answer.strip():
                console.print(f"Selected: [cyan]{escape(raw)}[/cyan]", highlight=False)

            use_designer = typer.confirm("Designer mode?", default=designer)
            outcome = self.service.launch(ConnectionRequest(raw, use_designer), dry_run=dry_run, record=record)
            self.formatter.display_outcome(outcome, dry_run=dry_run)

            if isinstance(outcome.error, UnrecognizedFormat):
                logger.debug("Prompting again after parse error")
                continue
            return int(outcome.exit_code)
