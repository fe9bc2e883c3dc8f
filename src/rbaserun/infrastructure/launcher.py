"""
Process launcher for the 1C starter executable.

Spawns the starter with a built LaunchCommand and forwards its exit code.
"""

from __future__ import annotations

import logging
import subprocess

from rbaserun.domain.connection import LaunchCommand
from rbaserun.domain.errors import ExecutableNotFound, LaunchFailed
from rbaserun.infrastructure.results import Failure, Result, Success

logger = logging.getLogger(__name__)


class ProcessLauncher:
    """
    Runs a LaunchCommand as a child process.

    Returns Success with the child's exit code, or Failure when the starter is
    missing or cannot be started.
    """

    def __init__(self, wait_for_exit: bool = True):
        self.wait_for_exit = wait_for_exit

    def launch(self, command: LaunchCommand) -> Result[int, ExecutableNotFound | LaunchFailed]:
        if not command.executable.exists():
            logger.info("Starter not found at %s", command.executable)
            return Failure(ExecutableNotFound(command.executable))

        logger.info("Launching: %s", command.display())
        try:
            process = subprocess.Popen(command.argv)
        except OSError as e:
            logger.info("Failed to start %s: %s", command.executable, e)
            return Failure(LaunchFailed(command.executable, str(e)))

        if not self.wait_for_exit:
            logger.debug("Started pid %s, not waiting for exit", process.pid)
            return Success(0, metadata={"pid": process.pid})

        exit_code = process.wait()
        logger.info("Starter exited with code %s", exit_code)
        return Success(exit_code, metadata={"pid": process.pid})
