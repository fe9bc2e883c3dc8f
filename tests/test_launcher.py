"""
Tests for the process launcher.

subprocess.Popen is patched; the starter only has to exist on disk.
"""

from pathlib import Path
from unittest.mock import MagicMock, patch

from rbaserun.domain.connection import LaunchCommand
from rbaserun.domain.errors import ExecutableNotFound, ExitCode, LaunchFailed
from rbaserun.infrastructure.launcher import ProcessLauncher
from rbaserun.infrastructure.results import Failure, Success


def _command(starter: Path) -> LaunchCommand:
    return LaunchCommand(executable=starter, arguments=("ENTERPRISE", "/S", "s\\b"))


class TestProcessLauncher:
    """Spawning, waiting and error paths."""

    @patch("rbaserun.infrastructure.launcher.subprocess.Popen")
    def test_forwards_exit_code(self, mock_popen, starter):
        mock_popen.return_value = MagicMock(pid=42, **{"wait.return_value": 0})

        result = ProcessLauncher().launch(_command(starter))

        assert isinstance(result, Success)
        assert result.value == 0
        mock_popen.assert_called_once_with([str(starter), "ENTERPRISE", "/S", "s\\b"])

    @patch("rbaserun.infrastructure.launcher.subprocess.Popen")
    def test_forwards_non_zero_exit_code(self, mock_popen, starter):
        mock_popen.return_value = MagicMock(pid=42, **{"wait.return_value": 7})

        result = ProcessLauncher().launch(_command(starter))

        assert result.value == 7

    @patch("rbaserun.infrastructure.launcher.subprocess.Popen")
    def test_no_wait_returns_immediately(self, mock_popen, starter):
        process = MagicMock(pid=42)
        mock_popen.return_value = process

        result = ProcessLauncher(wait_for_exit=False).launch(_command(starter))

        assert result.value == 0
        assert result.metadata == {"pid": 42}
        process.wait.assert_not_called()

    @patch("rbaserun.infrastructure.launcher.subprocess.Popen")
    def test_missing_starter(self, mock_popen, tmp_path):
        missing = tmp_path / "absent" / "1cestart.exe"

        result = ProcessLauncher().launch(_command(missing))

        assert isinstance(result, Failure)
        assert isinstance(result.error, ExecutableNotFound)
        assert result.error.exit_code == ExitCode.EXECUTABLE_NOT_FOUND
        assert str(missing) in str(result.error)
        mock_popen.assert_not_called()

    @patch("rbaserun.infrastructure.launcher.subprocess.Popen")
    def test_os_error_is_launch_failure(self, mock_popen, starter):
        mock_popen.side_effect = PermissionError("access denied")

        result = ProcessLauncher().launch(_command(starter))

        assert isinstance(result, Failure)
        assert isinstance(result.error, LaunchFailed)
        assert "access denied" in result.error.reason
