"""Safe integer division returning an Option instead of raising.

``divide_safely`` is total: a zero divisor yields ``Nothing``. Its companion
``divide_with_no_remorse`` unwraps that Option, turning the recoverable
absence into a fatal :class:`~fallible.core.panic.Panic`.
"""

from __future__ import annotations

from fallible.core.option import Option, absent, present
from fallible.core.settings import get_logger

logger = get_logger(__name__)


def _truncating_quotient(a: int, b: int) -> int:
    # Python's // floors; integer division here truncates toward zero.
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def divide_safely(a: int, b: int) -> Option[int]:
    """Return ``Some(a / b)`` truncated toward zero, or ``Nothing`` if ``b == 0``.

    Examples
    --------
    >>> divide_safely(8, 3)
    Some(2)
    >>> divide_safely(-7, 2)
    Some(-3)
    >>> divide_safely(4, 0)
    Nothing
    """
    if b == 0:
        logger.debug("divide_safely(%d, 0): divisor is zero", a)
        return absent()
    return present(_truncating_quotient(a, b))


def divide_with_no_remorse(a: int, b: int) -> int:
    """Divide and unwrap; panics when ``b == 0``."""
    return divide_safely(a, b).unwrap()


__all__ = ["divide_safely", "divide_with_no_remorse"]
