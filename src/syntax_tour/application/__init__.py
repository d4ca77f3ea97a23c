"""Application layer: the tour use case and the ports it needs.

Contents:
    * :mod:`.ports` - :class:`EmitLine` and :class:`InitLogging`
    * :mod:`.tour` - :func:`tour_lines` and :func:`run_tour`
"""

from __future__ import annotations

from .ports import EmitLine, InitLogging
from .tour import LOOP_BOUND, run_tour, tour_lines

__all__ = [
    "LOOP_BOUND",
    "EmitLine",
    "InitLogging",
    "run_tour",
    "tour_lines",
]
