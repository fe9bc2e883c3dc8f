"""
CLI Orchestrator - Main Entry Point

Wires the single launch command: settings, logging, history actions and
either a direct launch or the interactive picker.
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from rbaserun.application import LaunchService
from rbaserun.domain.connection import ConnectionRequest
from rbaserun.domain.errors import ExitCode
from rbaserun.infrastructure.config import SettingsRepository
from rbaserun.interface.cli.formatters import OutcomeFormatter, console, err_console
from rbaserun.interface.cli.interactive import InteractivePicker
from rbaserun.utils.logger import setup_logging

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="rbaserun",
    help="🚀 Launch 1C:Enterprise information bases from a connection string",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.command()
def launch(
    connection_string: Optional[str] = typer.Argument(
        None,
        help='Connection string: host;ref, Srvr="host";Ref="ref";, File="path"; or ws="url";'
    ),
    designer: bool = typer.Option(
        False,
        "--designer",
        "-d",
        help="Launch in Designer mode"
    ),
    starter: Optional[Path] = typer.Option(
        None,
        "--starter",
        "-s",
        help="Path to 1cestart.exe (overrides settings file)"
    ),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to settings file (default: ./rbaserun.json)"
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        "-n",
        help="Print the starter command line without launching"
    ),
    no_wait: bool = typer.Option(
        False,
        "--no-wait",
        help="Do not wait for the starter to exit"
    ),
    no_history: bool = typer.Option(
        False,
        "--no-history",
        help="Do not record this launch in history"
    ),
    show_history: bool = typer.Option(
        False,
        "--history",
        help="List launch history and exit"
    ),
    clear_history: bool = typer.Option(
        False,
        "--clear-history",
        help="Delete launch history and exit"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging"
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Also write debug logging to this file"
    ),
):
    """
    Launch a 1C information base through the 1C starter.

    Without a connection string an interactive picker over the launch
    history is started.
    """
    if connection_string is not None and (show_history or clear_history):
        raise typer.BadParameter(
            "cannot be combined with --history or --clear-history",
            param_hint="CONNECTION_STRING",
        )

    level = logging.DEBUG if verbose else logging.WARNING
    setup_logging(level, log_file)

    try:
        settings = SettingsRepository(config_file).load(
            starter_path=starter,
            wait_for_exit=False if no_wait else None,
            log_file=log_file,
        )
    except ValueError as e:
        err_console.print(f"[red]❌ {escape(str(e))}[/red]", highlight=False)
        raise typer.Exit(int(ExitCode.INVALID_SETTINGS))

    if settings.log_file and not log_file:
        setup_logging(level, settings.log_file)

    service = LaunchService(settings)
    formatter = OutcomeFormatter()

    if clear_history:
        service.history.clear()
        console.print("[green]✅ History cleared[/green]")
        raise typer.Exit(int(ExitCode.OK))

    if show_history:
        formatter.display_history(service.history.load())
        raise typer.Exit(int(ExitCode.OK))

    if connection_string is None:
        code = InteractivePicker(service, formatter).run(
            designer=designer, dry_run=dry_run, record=not no_history
        )
        raise typer.Exit(int(code))

    request = ConnectionRequest(connection_string, designer)
    outcome = service.launch(request, dry_run=dry_run, record=not no_history)
    formatter.display_outcome(outcome, dry_run=dry_run)
    raise typer.Exit(int(outcome.exit_code))
