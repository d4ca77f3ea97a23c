"""A guided tour of basic syntax, plus the pieces it is built from.

Running ``syntax-tour`` (or ``python -m syntax_tour``) prints the tour; the
functions below are importable on their own.
"""

from __future__ import annotations

from .__init__conf__ import print_info
from .application.tour import run_tour, tour_lines
from .domain.behaviors import (
    CANONICAL_GREETING,
    absolute,
    add,
    build_greeting,
    max_of,
    my_name,
    order,
)
from .domain.errors import IntegerOverflowError
from .domain.models import Dog

__all__ = [
    "CANONICAL_GREETING",
    "Dog",
    "IntegerOverflowError",
    "absolute",
    "add",
    "build_greeting",
    "max_of",
    "my_name",
    "order",
    "print_info",
    "run_tour",
    "tour_lines",
]
