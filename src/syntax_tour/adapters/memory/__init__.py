"""In-memory adapters satisfying the application ports without side effects."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .logging import init_logging_in_memory

if TYPE_CHECKING:
    from syntax_tour.application.ports import InitLogging

    _assert_init_logging: InitLogging = init_logging_in_memory

__all__ = ["init_logging_in_memory"]
