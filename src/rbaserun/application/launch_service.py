"""
Launch service for the application layer.

Orchestrates one launcher invocation: classify the connection string, build
the starter command line, spawn the starter and record the launch in history.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from rbaserun.application.command_builder import CommandBuilder
from rbaserun.domain.connection import ConnectionRequest, ConnectionStringParser, LaunchCommand
from rbaserun.domain.errors import ExitCode, LaunchError
from rbaserun.domain.settings import LauncherSettings
from rbaserun.infrastructure.history import HistoryStore
from rbaserun.infrastructure.launcher import ProcessLauncher
from rbaserun.infrastructure.results import Failure

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LaunchOutcome:
    """Result of one launch attempt."""
    command: Optional[LaunchCommand] = None
    exit_code: int = ExitCode.OK
    error: Optional[LaunchError] = None

    @property
    def success(self) -> bool:
        return self.error is None and self.exit_code == ExitCode.OK


class LaunchService:
    """
    Application service wiring parser, builder, launcher and history together.

    Collaborators are created from settings unless passed in explicitly.
    """

    def __init__(
        self,
        settings: Optional[LauncherSettings] = None,
        parser: Optional[ConnectionStringParser] = None,
        launcher: Optional[ProcessLauncher] = None,
        history: Optional[HistoryStore] = None,
    ):
        self.settings = settings or LauncherSettings()
        self.parser = parser or ConnectionStringParser()
        self.builder = CommandBuilder(self.settings.starter_path)
        self.launcher = launcher or ProcessLauncher(wait_for_exit=self.settings.wait_for_exit)
        self.history = history or HistoryStore(self.settings.history_file, self.settings.history_limit)

    def build_command(self, request: ConnectionRequest) -> LaunchOutcome:
        """Classify and build without launching."""
        parsed = self.parser.parse(request.raw)
        if isinstance(parsed, Failure):
            return LaunchOutcome(exit_code=parsed.error.exit_code, error=parsed.error)

        command = self.builder.build(parsed.value, designer=request.designer)
        logger.debug("Built command: %s", command.display())
        return LaunchOutcome(command=command)

    def launch(self, request: ConnectionRequest, dry_run: bool = False, record: bool = True) -> LaunchOutcome:
        """
        Launch the information base described by request.

        Args:
            request: Raw connection string and Designer flag
            dry_run: Build the command only, do not spawn the starter
            record: Add the connection string to history on success

        Returns:
            LaunchOutcome with the command, exit code and error if any
        """
        outcome = self.build_command(request)
        if outcome.error is not None or dry_run:
            return outcome

        launched = self.launcher.launch(outcome.command)
        if isinstance(launched, Failure):
            return LaunchOutcome(command=outcome.command, exit_code=launched.error.exit_code, error=launched.error)

        result = LaunchOutcome(command=outcome.command, exit_code=launched.value)
        if result.success and record and self.settings.history_enabled:
            self.history.add(request.raw)
        elif not result.success:
            logger.info("Starter returned non-zero exit code %s", launched.value)
        return result
