"""Adapters: the rich-click CLI, lib_log_rich logging, and test stand-ins.

Contents:
    * :mod:`.cli` - Command line shell around the tour
    * :mod:`.logging` - lib_log_rich startup
    * :mod:`.memory` - No-op adapters for tests
"""

from __future__ import annotations

__all__: list[str] = []
