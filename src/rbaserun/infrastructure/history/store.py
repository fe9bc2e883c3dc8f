"""
Launch history store.

Keeps successfully launched connection strings in a plain text file,
one entry per line, most recent first.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

logger = logging.getLogger(__name__)


class HistoryStore:
    """File-backed list of recently launched connection strings."""

    def __init__(self, history_file: Path, limit: int = 50):
        self.history_file = history_file
        self.limit = limit

    def load(self) -> List[str]:
        if not self.history_file.exists():
            return []
        lines = self.history_file.read_text(encoding="utf-8").splitlines()
        return [line.strip() for line in lines if line.strip()][: self.limit]

    def add(self, entry: str) -> List[str]:
        """Move entry to the front (inserting it if new) and persist."""
        entry = entry.strip()
        if "\n" in entry or "\r" in entry:
            raise ValueError("History entries must be single-line")
        entries = [item for item in self.load() if item != entry]
        entries.insert(0, entry)
        entries = entries[: self.limit]
        self._save(entries)
        return entries

    def clear(self) -> None:
        if self.history_file.exists():
            self.history_file.unlink()
            logger.info("Cleared history %s", self.history_file)

    def _save(self, entries: List[str]) -> None:
        self.history_file.parent.mkdir(parents=True, exist_ok=True)
        self.history_file.write_text("".join(f"{item}\n" for item in entries), encoding="utf-8")
        logger.debug("Saved %d history entries to %s", len(entries), self.history_file)
