"""
Error payloads carried by Failure results.

Each error is terminal: it is reported to the user once and the process exits
with the matching exit code.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path


class ExitCode(IntEnum):
    """Process exit codes of the launcher itself."""

    OK = 0
    UNRECOGNIZED_FORMAT = 2
    EXECUTABLE_NOT_FOUND = 3
    LAUNCH_FAILED = 4
    INVALID_SETTINGS = 5


@dataclass(frozen=True)
class UnrecognizedFormat:
    """Connection string matched none of the known patterns."""
    raw: str
    reason: str = "unrecognized connection string format"

    exit_code = ExitCode.UNRECOGNIZED_FORMAT

    def __str__(self) -> str:
        return f"Could not parse provided path: {self.raw} ({self.reason})"


@dataclass(frozen=True)
class ExecutableNotFound:
    """Starter executable is missing at the configured path."""
    path: Path

    exit_code = ExitCode.EXECUTABLE_NOT_FOUND

    def __str__(self) -> str:
        return f"Could not locate 1C starter app: '{self.path}'"


@dataclass(frozen=True)
class LaunchFailed:
    """Starter exists but the OS refused to start it."""
    path: Path
    reason: str

    exit_code = ExitCode.LAUNCH_FAILED

    def __str__(self) -> str:
        return f"Could not start '{self.path}': {self.reason}"


LaunchError = UnrecognizedFormat | ExecutableNotFound | LaunchFailed
