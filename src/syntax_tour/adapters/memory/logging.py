"""Logging stand-in for tests that must not start lib_log_rich."""

from __future__ import annotations


def init_logging_in_memory() -> None:
    """Leave logging untouched."""


__all__ = ["init_logging_in_memory"]
