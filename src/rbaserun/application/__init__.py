"""
Application layer for rbaserun.

Use cases and service orchestration.
"""

from rbaserun.application.command_builder import CommandBuilder
from rbaserun.application.launch_service import LaunchOutcome, LaunchService

__all__ = ["CommandBuilder", "LaunchOutcome", "LaunchService"]
