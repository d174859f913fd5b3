"""Plain and comma-separated number recognizers.

- parse_plain_number() / parse_separated_number() raise on malformed input
- match_plain_number() / match_separated_number() return None instead

Amounts are exact: numerals without a decimal point become int, numerals
with one become Decimal. Digits are ASCII only.

Thread-safe. Compiled patterns are module-level and stateless.

Python 3.13+.
"""

import logging
import re
from decimal import Decimal

from moneyparse.diagnostics import ErrorTemplate, FormatError, MoneyError

from .guards import Amount, ensure_safe_amount, ensure_text

__all__ = [
    "AMOUNT_PATTERN",
    "match_plain_number",
    "match_separated_number",
    "parse_plain_number",
    "parse_separated_number",
    "to_amount",
]

logger = logging.getLogger(__name__)

_PLAIN_STRICT = re.compile(r"^\d+$", re.ASCII)
_PLAIN_SEARCH = re.compile(r"\b\d+\b", re.ASCII)

_SEPARATED_STRICT = re.compile(
    r"^(?:\d{1,3}(?:,\d{3})*(?:\.\d+)?|\d+\.\d+|\d+)$",
    re.ASCII,
)
# Only grouped or decimal numbers; bare digit runs belong to the plain recognizer.
_SEPARATED_SEARCH = re.compile(
    r"\b(\d{1,3}(?:,\d{3})+(?:\.\d+)?|\d+\.\d+)\b",
    re.ASCII,
)


# Number grammar embedded in the symbol and abbreviation patterns.
# Spelled with [0-9] so it stays ASCII inside patterns compiled without re.ASCII.
AMOUNT_PATTERN = r"[0-9]{1,3}(?:,[0-9]{3})+(?:\.[0-9]+)?|[0-9]+(?:\.[0-9]+)?"


def to_amount(numeral: str) -> Amount:
    """Convert a validated numeral to an exact amount.

    Args:
        numeral: ASCII digits with at most one decimal point, no separators

    Returns:
        int when there is no decimal point, Decimal otherwise

    Example:
        >>> to_amount("007")
        7
        >>> to_amount("12.50")
        Decimal('12.50')
    """
    if "." in numeral:
        return Decimal(numeral)
    return int(numeral)


def parse_plain_number(text: str) -> int:
    """Parse a bare run of ASCII digits.

    Surrounding whitespace is ignored, as are leading zeros.

    Args:
        text: Input such as "100" or "  0042 "

    Returns:
        The integer value

    Raises:
        InputError: If text is not a non-empty string
        FormatError: If text has signs, separators, decimals or other marks
        ValueOverflowError: If the value exceeds MAX_SAFE_INTEGER
    """
    trimmed = ensure_text(text).strip()
    if not _PLAIN_STRICT.match(trimmed):
        raise FormatError(
            ErrorTemplate.number_format_invalid(trimmed, "plain_number"),
            input_value=text,
        )
    return ensure_safe_amount(int(trimmed))


def match_plain_number(text: str) -> int | None:
    """Find the first digit run in free text.

    A decimal numeral yields its integer part: "12.50" matches 12.
    """
    try:
        found = _PLAIN_SEARCH.search(ensure_text(text))
        if found is None:
            return None
        return parse_plain_number(found.group(0))
    except MoneyError as e:
        logger.debug("match_plain_number(%r) failed: %s", text, e)
        return None


def parse_separated_number(text: str) -> Amount:
    """Parse a number with optional comma grouping and decimal part.

    Grouping must be in threes after a one-to-three digit head
    ("1,234,567.89"); ungrouped decimals ("1234.5") and bare digits are
    also accepted.

    Args:
        text: Input such as "1,234.56"

    Returns:
        int without a decimal point, Decimal with one

    Raises:
        InputError: If text is not a non-empty string
        FormatError: If grouping is malformed or extra marks are present
        ValueOverflowError: If the value exceeds MAX_SAFE_INTEGER
    """
    trimmed = ensure_text(text).strip()
    if not _SEPARATED_STRICT.match(trimmed):
        raise FormatError(
            ErrorTemplate.number_format_invalid(trimmed, "separated_number"),
            input_value=text,
        )
    return ensure_safe_amount(to_amount(trimmed.replace(",", "")))


def match_separated_number(text: str) -> Amount | None:
    """Find the first grouped or decimal number in free text."""
    try:
        found = _SEPARATED_SEARCH.search(ensure_text(text))
        if found is None:
            return None
        return parse_separated_number(found.group(1))
    except MoneyError as e:
        logger.debug("match_separated_number(%r) failed: %s", text, e)
        return None
