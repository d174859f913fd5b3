"""Monetary slang recognizer ("a buck", "5 quid", "three fivers").

The first slang token in the input fixes the currency and unit value; up to
QUANTITY_WINDOW_SIZE tokens immediately before it form the quantity window,
resolved by ``resolve_quantity()``.

Python 3.13+.
"""

import logging
import re
from dataclasses import dataclass
from types import MappingProxyType

from moneyparse.constants import QUANTITY_WINDOW_SIZE
from moneyparse.diagnostics import ErrorTemplate, FormatError, MoneyError

from .guards import Amount, ensure_safe_amount, ensure_text
from .words import TEEN_WORDS, TENS_WORDS, UNIT_WORDS, resolve_quantity

__all__ = [
    "SLANG_UNITS",
    "SlangMatch",
    "SlangUnit",
    "match_slang_term",
    "parse_slang_term",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SlangUnit:
    """What one slang token is worth.

    Attributes:
        currency: ISO 4217 code
        unit: Value of a single token ("fiver" = 5)
    """

    currency: str
    unit: int


SLANG_UNITS: MappingProxyType[str, SlangUnit] = MappingProxyType({
    "buck": SlangUnit("USD", 1),
    "bucks": SlangUnit("USD", 1),
    "quid": SlangUnit("GBP", 1),
    "quids": SlangUnit("GBP", 1),
    "fiver": SlangUnit("GBP", 5),
    "fivers": SlangUnit("GBP", 5),
    "tenner": SlangUnit("GBP", 10),
    "tenners": SlangUnit("GBP", 10),
})


@dataclass(frozen=True, slots=True)
class SlangMatch:
    """Amount expressed with monetary slang.

    Attributes:
        value: Quantity times the slang unit value
        currency: ISO 4217 code of the slang term
        raw: Literal input span from the first quantity token to the slang token
    """

    value: Amount
    currency: str
    raw: str


_TOKEN = re.compile(r"\S+")


def _build_slang_pattern() -> re.Pattern[str]:
    # Closed quantity vocabulary: numerals, articles, one..twenty, the tens,
    # hundred, thousand.
    words = [
        *(w for w in UNIT_WORDS if w != "zero"),
        *TEEN_WORDS,
        *TENS_WORDS,
        "hundred",
        "thousand",
        "a",
        "an",
    ]
    quantity = "|".join([r"\d+(?:\.\d+)?", *sorted(words, key=len, reverse=True)])
    slang = "|".join(sorted(SLANG_UNITS, key=len, reverse=True))
    return re.compile(
        rf"(?<![\d.,])\b((?:(?:{quantity})\s+){{0,{QUANTITY_WINDOW_SIZE}}}(?:{slang}))\b",
        re.IGNORECASE,
    )


_SLANG_SEARCH = _build_slang_pattern()


def parse_slang_term(text: str) -> SlangMatch:
    """Parse a slang money expression.

    Args:
        text: Input such as "buck", "two bucks", "5 quid", "three fivers"

    Returns:
        SlangMatch with value, currency and raw span

    Raises:
        InputError: If text is not a non-empty string
        FormatError: If no slang token exists or the quantity window is invalid
        ValueOverflowError: If the value exceeds MAX_SAFE_INTEGER

    Examples:
        >>> parse_slang_term("three fivers").value
        15
        >>> parse_slang_term("a buck").currency
        'USD'
    """
    source = ensure_text(text)
    found = list(_TOKEN.finditer(source))
    tokens = [m.group(0).lower() for m in found]

    slang_index = next((i for i, token in enumerate(tokens) if token in SLANG_UNITS), None)
    if slang_index is None:
        raise FormatError(ErrorTemplate.slang_term_not_found(source), input_value=text)

    slang = SLANG_UNITS[tokens[slang_index]]
    start = max(0, slang_index - QUANTITY_WINDOW_SIZE)
    quantity = resolve_quantity(tokens[start:slang_index], text=source)

    value = ensure_safe_amount(quantity * slang.unit)
    raw = source[found[start].start() : found[slang_index].end()]
    return SlangMatch(value=value, currency=slang.currency, raw=raw)


def match_slang_term(text: str) -> SlangMatch | None:
    """Find a slang money expression in free text.

    The quantity window must consist of recognized quantity words, so
    "I paid 5 bucks yesterday" yields 5 USD with raw '5 bucks'.
    """
    try:
        found = _SLANG_SEARCH.search(ensure_text(text))
        if found is None:
            return None
        return parse_slang_term(found.group(1))
    except MoneyError as e:
        logger.debug("match_slang_term(%r) failed: %s", text, e)
        return None
