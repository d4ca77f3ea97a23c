"""Traceback preferences shared with ``lib_cli_exit_tools``.

``lib_cli_exit_tools.config`` is process-global. The root command switches
it on for ``--traceback`` and :func:`~.main.main` puts the previous values
back when the run is over.
"""

from __future__ import annotations

from dataclasses import dataclass

import lib_cli_exit_tools


@dataclass(frozen=True, slots=True)
class TracebackSettings:
    """Snapshot of the two traceback flags in ``lib_cli_exit_tools.config``."""

    enabled: bool = False
    force_color: bool = False

    @classmethod
    def current(cls) -> TracebackSettings:
        config = lib_cli_exit_tools.config
        return cls(
            enabled=bool(getattr(config, "traceback", False)),
            force_color=bool(getattr(config, "traceback_force_color", False)),
        )

    def install(self) -> None:
        lib_cli_exit_tools.config.traceback = self.enabled
        lib_cli_exit_tools.config.traceback_force_color = self.force_color


def enable_tracebacks(enabled: bool) -> None:
    """Turn full, coloured tracebacks on or off.

    Example:
        >>> enable_tracebacks(True)
        >>> TracebackSettings.current()
        TracebackSettings(enabled=True, force_color=True)
        >>> enable_tracebacks(False)
    """
    TracebackSettings(enabled=enabled, force_color=enabled).install()


__all__ = ["TracebackSettings", "enable_tracebacks"]
