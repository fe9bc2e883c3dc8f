"""
Launcher settings domain model.

This module defines the settings that control where the starter lives,
whether the launcher waits for it and how launch history is kept.
"""

import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)

DEFAULT_STARTER_PATH = Path(r"c:\Program Files\1cv8\common\1cestart.exe")
DEFAULT_HISTORY_FILE = Path("rbaserun_history.txt")
DEFAULT_SETTINGS_FILE = Path("rbaserun.json")


class LauncherSettings(BaseModel):
    """
    Settings for the connection-string launcher.

    Loaded from an optional JSON file and overridden by CLI options.
    """

    model_config = ConfigDict(extra="ignore")

    starter_path: Path = Field(
        default=DEFAULT_STARTER_PATH,
        description="Path to the 1C starter executable (1cestart.exe)"
    )

    wait_for_exit: bool = Field(
        default=True,
        description="Wait for the starter to exit and forward its exit code"
    )

    history_enabled: bool = Field(
        default=True,
        description="Record successfully launched connection strings"
    )

    history_file: Path = Field(
        default=DEFAULT_HISTORY_FILE,
        description="File holding launch history, one entry per line"
    )

    history_limit: int = Field(
        default=50,
        description="Maximum number of history entries kept",
        ge=1,
        le=1000
    )

    log_file: Optional[Path] = Field(
        default=None,
        description="Optional log file (always written at DEBUG level)"
    )

    @field_validator("starter_path")
    @classmethod
    def validate_starter_path(cls, v: Path) -> Path:
        """Reject empty starter paths."""
        if not str(v).strip() or str(v) == ".":
            raise ValueError("Starter path cannot be empty")
        if v.suffix.lower() not in (".exe", ""):
            logger.warning("Starter path %s does not look like an executable", v)
        return v
