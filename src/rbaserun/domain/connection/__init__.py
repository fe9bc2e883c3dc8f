"""
Domain Connection Package.
Connection string classification components.
"""

from rbaserun.domain.connection.models import (
    ConnectionKind,
    ConnectionRequest,
    LaunchCommand,
    LaunchMode,
    ParsedConnection,
)
from rbaserun.domain.connection.parser import ConnectionStringParser

__all__ = [
    "ConnectionKind",
    "ConnectionRequest",
    "ConnectionStringParser",
    "LaunchCommand",
    "LaunchMode",
    "ParsedConnection",
]
