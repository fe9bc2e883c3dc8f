"""
Settings repository for loading the launcher settings file.

This module provides the infrastructure layer for settings persistence.
It handles file I/O and turns parse/validation problems into ValueError.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError

from rbaserun.domain.settings import DEFAULT_SETTINGS_FILE, LauncherSettings

logger = logging.getLogger(__name__)


class SettingsRepository:
    """
    Repository for the JSON settings file.

    A missing file is not an error: defaults are used instead.
    """

    def __init__(self, settings_file: Optional[Path] = None):
        """
        Initialize the settings repository.

        Args:
            settings_file: Path to the settings file.
                           Defaults to rbaserun.json in the current working directory.
        """
        if settings_file is None:
            settings_file = Path.cwd() / DEFAULT_SETTINGS_FILE

        self.settings_file = settings_file

    def load_json_file(self) -> Dict[str, Any]:
        """
        Load the settings file as a dictionary.

        Returns:
            Parsed JSON data, or an empty dict if the file doesn't exist

        Raises:
            ValueError: If the file cannot be read or is not a JSON object
        """
        if not self.settings_file.exists():
            logger.debug("Settings file %s not found, using defaults", self.settings_file)
            return {}

        try:
            content = self.settings_file.read_text(encoding="utf-8-sig")
            data = json.loads(content)
        except (OSError, json.JSONDecodeError) as e:
            raise ValueError(f"Cannot read settings file {self.settings_file.name}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Settings file {self.settings_file.name} must contain a JSON object")

        return data

    def load(self, **overrides: Any) -> LauncherSettings:
        """
        Load settings, applying non-None overrides on top of the file values.

        Raises:
            ValueError: If the file or the resulting settings are invalid
        """
        data = self.load_json_file()
        data.update({key: value for key, value in overrides.items() if value is not None})

        try:
            settings = LauncherSettings(**data)
        except ValidationError as e:
            raise ValueError(f"Invalid settings in {self.settings_file.name}: {e}") from e

        logger.debug("Loaded settings: %s", settings.model_dump())
        return settings
