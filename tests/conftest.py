"""
Shared fixtures for rbaserun tests.

Every test gets an isolated starter executable, history file and settings
file under tmp_path.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import pytest

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def starter(tmp_path: Path) -> Path:
    """Placeholder 1cestart.exe that exists on disk."""
    path = tmp_path / "1cv8" / "common" / "1cestart.exe"
    path.parent.mkdir(parents=True)
    path.write_bytes(b"")
    return path


@pytest.fixture
def history_file(tmp_path: Path) -> Path:
    return tmp_path / "rbaserun_history.txt"


@pytest.fixture
def settings(starter: Path, history_file: Path):
    from rbaserun.domain.settings import LauncherSettings

    return LauncherSettings(starter_path=starter, history_file=history_file)


@pytest.fixture
def settings_file(tmp_path: Path, starter: Path, history_file: Path) -> Path:
    """rbaserun.json pointing at the placeholder starter and history file."""
    path = tmp_path / "rbaserun.json"
    path.write_text(
        json.dumps({"starter_path": str(starter), "history_file": str(history_file)}),
        encoding="utf-8",
    )
    return path


@pytest.fixture(autouse=True)
def restore_root_logging():
    """setup_logging replaces root handlers; put the originals back."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
