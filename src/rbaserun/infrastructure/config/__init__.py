"""Settings file infrastructure."""

from .repository import SettingsRepository

__all__ = ["SettingsRepository"]
