"""ISO 4217 code recognizer ("USD 100", "250.50 eur").

The code alternation is generated from the currency catalog rather than a
fixed list, so the recognizer follows whatever Babel and the numeric-code
table know. Codes must stand as whole words and be separated from the
amount by whitespace.

Thread-safe. Pattern compiled on first use and cached until
``clear_catalog_cache()``.

Python 3.13+.
"""

import functools
import logging
import re
from dataclasses import dataclass

from moneyparse.catalog import get_currency, list_currencies
from moneyparse.diagnostics import (
    ErrorTemplate,
    FormatError,
    MoneyError,
    UnknownCurrencyError,
)

from .guards import Amount, ensure_safe_amount, ensure_text
from .numbers import AMOUNT_PATTERN, to_amount

__all__ = [
    "AbbreviationMatch",
    "match_abbreviation",
    "parse_abbreviation",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AbbreviationMatch:
    """Amount written with an ISO 4217 code.

    Attributes:
        amount: Parsed amount (commas removed)
        currency_code: Upper-cased ISO 4217 code
        abbreviation: Code as it appears in the input
        raw: Literal substring consumed, e.g. 'usd 1,000'
    """

    amount: Amount
    currency_code: str
    abbreviation: str
    raw: str


@functools.cache
def _get_abbreviation_pattern() -> re.Pattern[str]:
    """Lazy-compile the code detection regex from the catalog.

    Thread-safe via functools.cache internal locking. Cleared by
    ``moneyparse.catalog.clear_catalog_cache()``.
    """
    codes = "|".join(info.code for info in list_currencies())
    pattern = (
        rf"\b(?P<code_before>{codes})\s+(?P<amount_after>{AMOUNT_PATTERN})"
        rf"|(?P<amount_before>{AMOUNT_PATTERN})\s+(?P<code_after>{codes})\b"
    )
    logger.debug("Abbreviation pattern compiled from catalog codes")
    return re.compile(pattern, re.IGNORECASE)


def parse_abbreviation(text: str) -> AbbreviationMatch:
    """Parse an amount written with an ISO 4217 code.

    Args:
        text: Input such as "USD 100" or "1,000 jpy"

    Returns:
        AbbreviationMatch with the amount, code and raw span

    Raises:
        InputError: If text is not a non-empty string
        FormatError: If no code/amount pair is present
        UnknownCurrencyError: If the code is not in the catalog
        ValueOverflowError: If the amount exceeds MAX_SAFE_INTEGER
    """
    trimmed = ensure_text(text).strip()
    found = _get_abbreviation_pattern().search(trimmed)
    if found is None:
        raise FormatError(ErrorTemplate.abbreviation_pattern_not_found(trimmed), input_value=text)

    abbreviation = found.group("code_before") or found.group("code_after")
    amount_text = found.group("amount_after") or found.group("amount_before")

    amount = ensure_safe_amount(to_amount(amount_text.replace(",", "")))
    code = abbreviation.upper()
    if get_currency(code) is None:
        raise UnknownCurrencyError(
            ErrorTemplate.currency_code_unknown(code, trimmed),
            input_value=text,
        )

    return AbbreviationMatch(
        amount=amount,
        currency_code=code,
        abbreviation=abbreviation,
        raw=found.group(0),
    )


def match_abbreviation(text: str) -> AbbreviationMatch | None:
    """Find an ISO-code amount in free text."""
    try:
        return parse_abbreviation(text)
    except MoneyError as e:
        logger.debug("match_abbreviation(%r) failed: %s", text, e)
        return None
