"""Magnitude shorthand recognizer ("10k", "2.5m", "2bn").

The suffix table is closed: k, m, b and bn, case-insensitive. Any other
alphabetic suffix is a format error rather than being ignored.

Python 3.13+.
"""

import logging
import re
from dataclasses import dataclass
from types import MappingProxyType

from moneyparse.diagnostics import ErrorTemplate, FormatError, MoneyError

from .guards import Amount, ensure_safe_amount, ensure_text
from .numbers import to_amount
from .words import normalize_text

__all__ = [
    "MAGNITUDE_MULTIPLIERS",
    "MagnitudeMatch",
    "match_magnitude",
    "parse_magnitude",
]

logger = logging.getLogger(__name__)

MAGNITUDE_MULTIPLIERS: MappingProxyType[str, int] = MappingProxyType({
    "k": 10**3,
    "m": 10**6,
    "b": 10**9,
    "bn": 10**9,
})

_MAGNITUDE_STRICT = re.compile(r"^(\d+(?:\.\d+)?)([a-z]+)$", re.ASCII)
# "bn" before "b" so the two-letter suffix wins. No match inside "1,500k".
_MAGNITUDE_SEARCH = re.compile(
    r"(?<![\d.,])\b(\d+(?:\.\d+)?(?:bn|[kmb]))\b",
    re.ASCII | re.IGNORECASE,
)


@dataclass(frozen=True, slots=True)
class MagnitudeMatch:
    """Magnitude shorthand found in free text.

    Attributes:
        value: Number times the suffix multiplier
        raw: Literal substring consumed, e.g. '2.5M'
    """

    value: Amount
    raw: str


def parse_magnitude(text: str) -> Amount:
    """Parse a number with a magnitude suffix.

    Args:
        text: Input such as "10k" or "2.5M" (no space before the suffix)

    Returns:
        The expanded amount (Decimal when the number had a decimal point)

    Raises:
        InputError: If text is not a non-empty string
        FormatError: If the suffix is missing, unknown, or the shape is wrong
        ValueOverflowError: If the value exceeds MAX_SAFE_INTEGER

    Examples:
        >>> parse_magnitude("10k")
        10000
        >>> parse_magnitude("2bn")
        2000000000
    """
    normalized = normalize_text(ensure_text(text))
    found = _MAGNITUDE_STRICT.match(normalized)
    if found is None:
        raise FormatError(ErrorTemplate.magnitude_format_invalid(normalized), input_value=text)

    number, suffix = found.groups()
    multiplier = MAGNITUDE_MULTIPLIERS.get(suffix)
    if multiplier is None:
        raise FormatError(
            ErrorTemplate.magnitude_suffix_unknown(suffix, normalized),
            input_value=text,
        )
    return ensure_safe_amount(to_amount(number) * multiplier)


def match_magnitude(text: str) -> MagnitudeMatch | None:
    """Find the first magnitude shorthand in free text.

    Returns:
        MagnitudeMatch with the literal span, or None
    """
    try:
        found = _MAGNITUDE_SEARCH.search(ensure_text(text))
        if found is None:
            return None
        raw = found.group(1)
        return MagnitudeMatch(value=parse_magnitude(raw), raw=raw)
    except MoneyError as e:
        logger.debug("match_magnitude(%r) failed: %s", text, e)
        return None
