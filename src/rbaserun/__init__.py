"""
rbaserun - 1C:Enterprise connection-string launcher.

Classifies a 1C information base connection string and starts 1cestart.exe
with the matching parameters.

Usage:
    # CLI
    rbaserun 'Srvr="app01";Ref="accounting";'
    rbaserun --designer 'File="D:\\bases\\demo";'

    # Programmatic
    from rbaserun import ConnectionRequest, LaunchService

    outcome = LaunchService().launch(ConnectionRequest("app01;accounting"))
"""

__version__ = "0.1.0"

from rbaserun.application import LaunchService
from rbaserun.domain.connection import ConnectionRequest

__all__ = ["ConnectionRequest", "LaunchService", "__version__"]
