"""Launch history infrastructure."""

from .store import HistoryStore

__all__ = ["HistoryStore"]
