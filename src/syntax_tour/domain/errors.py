"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class IntegerOverflowError(OverflowError):
    """Arithmetic result left the 32-bit signed integer range.

    Raised instead of wrapping around so that an overflow fails fast, the
    way strict fixed-width arithmetic aborts. Inherits from OverflowError so
    generic ``except OverflowError`` handlers keep working.

    Example:
        >>> from syntax_tour.domain.errors import IntegerOverflowError
        >>> err = IntegerOverflowError("2147483648 is outside the 32-bit signed range")
        >>> str(err)
        '2147483648 is outside the 32-bit signed range'
        >>> isinstance(err, OverflowError)
        True
    """


__all__ = [
    "IntegerOverflowError",
]
