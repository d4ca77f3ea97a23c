"""Pure domain functions with no I/O or framework dependencies.

Integer-valued operations model 32-bit signed arithmetic: results that
leave ``[INT32_MIN, INT32_MAX]`` raise :class:`IntegerOverflowError`
instead of silently growing or wrapping.
"""

from __future__ import annotations

from typing import Final

from .errors import IntegerOverflowError

CANONICAL_GREETING: Final[str] = "Hello, world!"
MY_NAME: Final[str] = "David"

INT32_MIN: Final[int] = -(2**31)
INT32_MAX: Final[int] = 2**31 - 1

#: Fixed-size literal sequence; declared for show, never consumed by the tour.
SAMPLE_NUMBERS: Final[tuple[int, int, int, int]] = (1, 2, 3, 4)


def build_greeting() -> str:
    r"""Return the canonical greeting string.

    Returns:
        The canonical greeting string.

    Example:
        >>> build_greeting()
        'Hello, world!'
    """
    return CANONICAL_GREETING


def ensure_int32(value: int) -> int:
    """Return *value* unchanged when it fits a 32-bit signed integer.

    Args:
        value: Result of an integer computation.

    Returns:
        The same value.

    Raises:
        IntegerOverflowError: If the value is outside ``[INT32_MIN, INT32_MAX]``.

    Examples:
        >>> ensure_int32(INT32_MAX)
        2147483647
        >>> ensure_int32(INT32_MAX + 1)  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        IntegerOverflowError: 2147483648 is outside the 32-bit signed range
    """
    if value < INT32_MIN or value > INT32_MAX:
        raise IntegerOverflowError(f"{value} is outside the 32-bit signed range")
    return value


def add(a: int, b: int) -> int:
    """Return the sum of two 32-bit signed integers.

    Raises:
        IntegerOverflowError: If the true sum does not fit 32 bits.

    Examples:
        >>> add(4, 5)
        9
        >>> add(-7, 7)
        0
    """
    return ensure_int32(a + b)


def max_of(a: int, b: int) -> int:
    """Return the greater of *a* and *b*; equal inputs return *b*.

    Examples:
        >>> max_of(5, 2)
        5
        >>> max_of(2, 5)
        5
    """
    return a if a > b else b


def order(a: int, b: int) -> tuple[int, int]:
    """Return ``(low, high)``; equal inputs come back unchanged as ``(a, b)``.

    Examples:
        >>> order(5, 2)
        (2, 5)
        >>> order(2, 5)
        (2, 5)
    """
    return (b, a) if a > b else (a, b)


def my_name() -> str:
    """Return the author's name.

    Example:
        >>> my_name()
        'David'
    """
    return MY_NAME


def absolute(x: int) -> int:
    """Return the absolute value of a 32-bit signed integer.

    Raises:
        IntegerOverflowError: For ``INT32_MIN``, whose negation does not fit.

    Examples:
        >>> absolute(-5)
        5
        >>> absolute(3)
        3
    """
    return ensure_int32(-x) if x < 0 else x


__all__ = [
    "CANONICAL_GREETING",
    "INT32_MAX",
    "INT32_MIN",
    "MY_NAME",
    "SAMPLE_NUMBERS",
    "absolute",
    "add",
    "build_greeting",
    "ensure_int32",
    "max_of",
    "my_name",
    "order",
]
