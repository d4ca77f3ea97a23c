"""Callable ports the tour and the CLI shell depend on.

Plain functions satisfy these Protocols structurally; ``list.append`` is a
valid :class:`EmitLine`, for instance.
"""

from __future__ import annotations

from typing import Protocol


class EmitLine(Protocol):
    """Write one line of tour output."""

    def __call__(self, line: str) -> None: ...


class InitLogging(Protocol):
    """Start the logging runtime; repeated calls must be harmless."""

    def __call__(self) -> None: ...


__all__ = ["EmitLine", "InitLogging"]
