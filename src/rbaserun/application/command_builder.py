"""
Command builder micro-component.
Turns a classified connection into the starter command line.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from rbaserun.domain.connection import ConnectionKind, LaunchCommand, LaunchMode, ParsedConnection

# Starter switches per connection kind
SERVER_FLAG = "/S"
FILE_FLAG = "/F"
WEB_FLAG = "/WS"


@dataclass(frozen=True)
class CommandBuilder:
    """Formats starter arguments for a fixed starter executable."""

    starter_path: Path

    def build(self, connection: ParsedConnection, designer: bool = False) -> LaunchCommand:
        mode = LaunchMode.from_flag(designer).value

        if connection.kind.is_server:
            arguments = (mode, SERVER_FLAG, f"{connection.host}\\{connection.ref_name}")
        elif connection.kind is ConnectionKind.FILE:
            arguments = (mode, FILE_FLAG, connection.path)
        else:
            arguments = (mode, WEB_FLAG, connection.url)

        return LaunchCommand(executable=self.starter_path, arguments=arguments)
