"""rich-click command line shell around the tour.

Contents:
    * :func:`.main.main` - Process boundary returning an exit code
    * :data:`.root.cli` - Root command group
    * :mod:`.commands` - ``tour`` and ``info``
"""

from __future__ import annotations

from .commands import cli_info, cli_tour
from .context import TracebackSettings, enable_tracebacks
from .main import main
from .root import cli

__all__ = [
    "TracebackSettings",
    "cli",
    "cli_info",
    "cli_tour",
    "enable_tracebacks",
    "main",
]
