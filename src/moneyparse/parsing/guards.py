"""Input and overflow guards shared by every recognizer.

Each strict recognizer validates its input with ``ensure_text()`` first and
passes its final amount through ``ensure_safe_amount()`` last.

Provides TypeIs-based type guards for narrowing recognizer results.

Python 3.13+ with TypeIs support (PEP 742).

Note: Guards accept None and return False, so a tolerant ``match_*`` result
can be checked directly:

Example:
    >>> from moneyparse.parsing import match_plain_number
    >>> from moneyparse.parsing.guards import is_safe_amount
    >>> value = match_plain_number("order 42 shipped")
    >>> if is_safe_amount(value):
    ...     total = value * 2
"""

import logging
from decimal import Decimal
from typing import TypeIs

from moneyparse.constants import MAX_SAFE_INTEGER
from moneyparse.diagnostics import ErrorTemplate, InputError, ValueOverflowError

__all__ = [
    "Amount",
    "ensure_safe_amount",
    "ensure_text",
    "is_safe_amount",
]

logger = logging.getLogger(__name__)

type Amount = int | Decimal
"""Exact monetary amount: int for whole numerals, Decimal when a decimal point was given."""


def ensure_text(value: object) -> str:
    """Reject anything that is not a non-blank string.

    Args:
        value: Raw recognizer input

    Returns:
        The input unchanged

    Raises:
        InputError: If value is not a str, or is empty or whitespace-only
    """
    if not isinstance(value, str) or not value.strip():
        raise InputError(
            ErrorTemplate.input_invalid(value),
            input_value=value if isinstance(value, str) else "",
        )
    return value


def ensure_safe_amount[T: (int, Decimal)](value: T) -> T:
    """Enforce the exact-integer bound on a computed amount.

    The bound itself is accepted; anything greater is rejected.

    Args:
        value: Computed amount

    Returns:
        The value unchanged

    Raises:
        ValueOverflowError: If value exceeds MAX_SAFE_INTEGER
    """
    if value > MAX_SAFE_INTEGER:
        logger.debug("Amount %s rejected: above %d", value, MAX_SAFE_INTEGER)
        raise ValueOverflowError(ErrorTemplate.amount_overflow(value, MAX_SAFE_INTEGER), value)
    return value


def is_safe_amount(value: object) -> TypeIs[int | Decimal]:
    """Type guard: Check if value is a finite, non-negative, in-range amount.

    Returns False for None, bool, float, NaN/Infinity Decimals, negatives,
    and values above MAX_SAFE_INTEGER.

    Args:
        value: Result of a recognizer (may be None)

    Returns:
        True if value is a usable Amount
    """
    if isinstance(value, bool) or not isinstance(value, (int, Decimal)):
        return False
    if isinstance(value, Decimal) and not value.is_finite():
        return False
    return 0 <= value <= MAX_SAFE_INTEGER
