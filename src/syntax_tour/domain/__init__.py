"""Domain layer: the values and records the tour is built from.

Nothing here performs I/O.

Contents:
    * :mod:`.behaviors` - Greeting and 32-bit integer functions
    * :mod:`.models` - The :class:`Dog` record
    * :mod:`.errors` - :class:`IntegerOverflowError`
"""

from __future__ import annotations

from .behaviors import (
    CANONICAL_GREETING,
    INT32_MAX,
    INT32_MIN,
    MY_NAME,
    SAMPLE_NUMBERS,
    absolute,
    add,
    build_greeting,
    ensure_int32,
    max_of,
    my_name,
    order,
)
from .errors import IntegerOverflowError
from .models import BARK, Dog

__all__ = [
    "BARK",
    "CANONICAL_GREETING",
    "INT32_MAX",
    "INT32_MIN",
    "MY_NAME",
    "SAMPLE_NUMBERS",
    "Dog",
    "IntegerOverflowError",
    "absolute",
    "add",
    "build_greeting",
    "ensure_int32",
    "max_of",
    "my_name",
    "order",
]
