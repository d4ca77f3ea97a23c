"""Composition root: picks the adapters the CLI runs with."""

from __future__ import annotations

from dataclasses import dataclass

from ..adapters.logging import init_logging
from ..application.ports import InitLogging


@dataclass(frozen=True, slots=True)
class AppServices:
    """Adapters handed to the CLI through ``ctx.obj``."""

    init_logging: InitLogging


def build_production() -> AppServices:
    """Services for the console script and ``python -m syntax_tour``."""
    return AppServices(init_logging=init_logging)


def build_testing() -> AppServices:
    """Services that start no logging runtime."""
    from ..adapters.memory import init_logging_in_memory

    return AppServices(init_logging=init_logging_in_memory)


__all__ = ["AppServices", "build_production", "build_testing"]
