"""
Connection domain models.

This module defines the values that flow through one launcher invocation:
the raw request, the classified connection and the command built from it.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple


class ConnectionKind(Enum):
    """Kinds of 1C information base locations."""

    SIMPLE_SERVER = "simple_server"  # host;ref
    SERVER = "server"                # Srvr="host";Ref="ref";
    FILE = "file"                    # File="path";
    WEB = "web"                      # ws="url";

    @property
    def is_server(self) -> bool:
        return self in (ConnectionKind.SIMPLE_SERVER, ConnectionKind.SERVER)


class LaunchMode(Enum):
    """Starter launch modes."""

    ENTERPRISE = "ENTERPRISE"
    DESIGNER = "DESIGNER"

    @classmethod
    def from_flag(cls, designer: bool) -> "LaunchMode":
        return cls.DESIGNER if designer else cls.ENTERPRISE


@dataclass(frozen=True)
class ConnectionRequest:
    """Raw connection string plus the Designer mode flag."""
    raw: str
    designer: bool = False


@dataclass(frozen=True)
class ParsedConnection:
    """Classified connection string with the fields its kind needs."""
    kind: ConnectionKind
    host: Optional[str] = None
    ref_name: Optional[str] = None
    path: Optional[str] = None
    url: Optional[str] = None

    @classmethod
    def server(cls, host: str, ref_name: str, simple: bool = False) -> "ParsedConnection":
        kind = ConnectionKind.SIMPLE_SERVER if simple else ConnectionKind.SERVER
        return cls(kind=kind, host=host, ref_name=ref_name)

    @classmethod
    def file(cls, path: str) -> "ParsedConnection":
        return cls(kind=ConnectionKind.FILE, path=path)

    @classmethod
    def web(cls, url: str) -> "ParsedConnection":
        return cls(kind=ConnectionKind.WEB, url=url)

    @property
    def fields(self) -> Tuple[str, ...]:
        """Extracted values in a kind-dependent order."""
        if self.kind.is_server:
            return (self.host, self.ref_name)
        if self.kind is ConnectionKind.FILE:
            return (self.path,)
        return (self.url,)


@dataclass(frozen=True)
class LaunchCommand:
    """Starter executable and the arguments to pass to it."""
    executable: Path
    arguments: Tuple[str, ...]

    @property
    def argv(self) -> list[str]:
        return [str(self.executable), *self.arguments]

    @property
    def mode(self) -> LaunchMode:
        return LaunchMode(self.arguments[0])

    def display(self) -> str:
        """Command line as the starter would receive it on Windows."""
        return subprocess.list2cmdline(self.argv)
