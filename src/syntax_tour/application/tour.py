"""The syntax tour: a fixed, ordered walk through the domain functions.

Contents:
    * :func:`tour_lines` - Yield the tour's output lines in order.
    * :func:`run_tour` - Feed every tour line to an output callable.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Final

from ..domain.behaviors import absolute, add, build_greeting
from ..domain.models import Dog
from .ports import EmitLine

logger = logging.getLogger(__name__)

#: Iterations of the counting loop (``i is: 0`` .. ``i is: 9``).
LOOP_BOUND: Final[int] = 10


def tour_lines() -> Iterator[str]:
    """Yield the tour output, one line per item, in a fixed order.

    The absolute value of ``-5`` (plus one) is computed after the last line
    but never yielded; it only shows up as a DEBUG log record.

    Example:
        >>> lines = list(tour_lines())
        >>> lines[0], lines[-1], len(lines)
        ('Hello, world!', '9', 14)
    """
    yield build_greeting()

    for i in range(LOOP_BOUND):
        yield f"i is: {i}"

    x = 0
    yield str(x)

    sparky = Dog(breed="Chihuahua", age=4)
    yield sparky.bark()

    yield str(add(4, 5))

    x = -5
    abs_value = absolute(x)
    abs_value = add(abs_value, 1)
    logger.debug("Computed absolute value", extra={"input": x, "result": abs_value})


def run_tour(emit: EmitLine) -> None:
    """Run the tour, handing each line to *emit*.

    Args:
        emit: Output callable, e.g. ``click.echo`` or ``list.append``.

    Example:
        >>> collected: list[str] = []
        >>> run_tour(collected.append)
        >>> collected[1]
        'i is: 0'
    """
    for line in tour_lines():
        emit(line)


__all__ = ["LOOP_BOUND", "run_tour", "tour_lines"]
