"""Contextual phrase recognizer ("a hundred dollars", "10 pounds and 5 pence").

A phrase is an optional article, a major quantity (numeral or worded), a
currency designator, and an optional minor-unit clause:

    [a|an|the] <quantity> <designator> [and <quantity> <minor unit>]

The designator is a currency name from CURRENCY_NAMES (one to three words,
longest wins) or an ISO 4217 code known to the catalog. Minor units are
checked against MINOR_UNITS for the resolved currency; each minor unit is
1/MINOR_UNIT_DIVISOR of the major unit.

Python 3.13+.
"""

import functools
import logging
import re
from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType

from moneyparse.catalog import get_currency, is_valid_currency_code, list_currencies
from moneyparse.constants import MINOR_UNIT_DIVISOR
from moneyparse.diagnostics import (
    ErrorTemplate,
    FormatError,
    MinorUnitMismatchError,
    MoneyParseError,
    UnknownCurrencyError,
)

from .guards import Amount, ensure_safe_amount, ensure_text
from .words import ARTICLES, SCALE_WORDS, TEEN_WORDS, TENS_WORDS, UNIT_WORDS, resolve_quantity

__all__ = [
    "CURRENCY_NAMES",
    "MINOR_UNITS",
    "PhraseMatch",
    "match_contextual_phrase",
    "parse_contextual_phrase",
]

logger = logging.getLogger(__name__)

# fmt: off
CURRENCY_NAMES: MappingProxyType[str, str] = MappingProxyType({
    "dollar": "USD", "dollars": "USD",
    "us dollar": "USD", "us dollars": "USD",
    "canadian dollar": "CAD", "canadian dollars": "CAD",
    "australian dollar": "AUD", "australian dollars": "AUD",
    "new zealand dollar": "NZD", "new zealand dollars": "NZD",
    "hong kong dollar": "HKD", "hong kong dollars": "HKD",
    "singapore dollar": "SGD", "singapore dollars": "SGD",
    "euro": "EUR", "euros": "EUR",
    "pound": "GBP", "pounds": "GBP",
    "british pound": "GBP", "british pounds": "GBP",
    "pound sterling": "GBP", "pounds sterling": "GBP",
    "egyptian pound": "EGP", "egyptian pounds": "EGP",
    "yen": "JPY", "japanese yen": "JPY",
    "yuan": "CNY", "renminbi": "CNY", "chinese yuan": "CNY",
    "rupee": "INR", "rupees": "INR",
    "indian rupee": "INR", "indian rupees": "INR",
    "franc": "CHF", "francs": "CHF",
    "swiss franc": "CHF", "swiss francs": "CHF",
    "peso": "MXN", "pesos": "MXN",
    "mexican peso": "MXN", "mexican pesos": "MXN",
    "reais": "BRL", "brazilian real": "BRL", "brazilian reais": "BRL",
    "ruble": "RUB", "rubles": "RUB", "rouble": "RUB", "roubles": "RUB",
    "krona": "SEK", "kronor": "SEK",
    "swedish krona": "SEK", "swedish kronor": "SEK",
    "krone": "NOK", "kroner": "NOK",
    "norwegian krone": "NOK", "norwegian kroner": "NOK",
    "danish krone": "DKK", "danish kroner": "DKK",
    "rand": "ZAR", "south african rand": "ZAR",
    "lira": "TRY",
    "zloty": "PLN", "zlotys": "PLN",
    "baht": "THB",
    "shekel": "ILS", "shekels": "ILS",
    "dirham": "AED", "dirhams": "AED",
    "riyal": "SAR", "riyals": "SAR",
    "naira": "NGN",
    "hryvnia": "UAH",
    "forint": "HUF",
    "ringgit": "MYR",
    "rupiah": "IDR",
    "dong": "VND",
})

_CENTS = frozenset({"cent", "cents"})
_ORE = frozenset({"öre", "øre", "ore"})
_CENTAVOS = frozenset({"centavo", "centavos"})

MINOR_UNITS: MappingProxyType[str, frozenset[str]] = MappingProxyType({
    "USD": _CENTS, "EUR": _CENTS, "CAD": _CENTS, "AUD": _CENTS,
    "NZD": _CENTS, "HKD": _CENTS, "SGD": _CENTS, "ZAR": _CENTS,
    "GBP": frozenset({"pence", "penny", "pennies", "p"}),
    "CHF": frozenset({"centime", "centimes", "rappen"}),
    "INR": frozenset({"paise", "paisa"}),
    "MXN": _CENTAVOS, "BRL": _CENTAVOS,
    "RUB": frozenset({"kopeck", "kopecks", "kopek", "kopeks"}),
    "CNY": frozenset({"fen"}),
    "SEK": _ORE, "NOK": _ORE, "DKK": _ORE,
})
# fmt: on

_ALL_MINOR_NAMES: frozenset[str] = frozenset().union(*MINOR_UNITS.values())
_MAX_NAME_WORDS = max(len(name.split()) for name in CURRENCY_NAMES)
_LEADING_WORDS = ARTICLES | {"the"}
_AND = "and"

_TOKEN = re.compile(r"\S+")


@dataclass(frozen=True, slots=True)
class PhraseMatch:
    """Amount expressed as a phrase.

    Attributes:
        value: Major quantity plus minor quantity / MINOR_UNIT_DIVISOR
        currency: Resolved ISO 4217 code
        currency_token: Designator as it appears in the input ('Dollars', 'usd')
        raw: Literal substring consumed
    """

    value: Amount
    currency: str
    currency_token: str
    raw: str


@functools.cache
def _get_phrase_pattern() -> re.Pattern[str]:
    """Lazy-compile the phrase scanner from vocabulary, names and catalog codes.

    Currency names follow an article or a quantity. A bare ISO code is only
    a designator after a numeral ("20 usd", "a 20 usd") or after any
    quantity when written in upper case ("twenty USD"), so "a top" or
    "one cup" are not read as money.

    Thread-safe via functools.cache internal locking. Cleared by
    ``moneyparse.catalog.clear_catalog_cache()``.
    """
    number_words = [*UNIT_WORDS, *TEEN_WORDS, *TENS_WORDS, "hundred", *SCALE_WORDS]
    numeral = r"\d+(?:\.\d+)?"
    number = "|".join([numeral, *sorted(number_words, key=len, reverse=True)])
    quantity = rf"(?:{number})(?:\s+(?:{number}|and))*"

    names = [r"\s+".join(map(re.escape, name.split())) for name in CURRENCY_NAMES]
    designators = "|".join(sorted(names, key=len, reverse=True))
    codes = "|".join(info.code for info in list_currencies())
    minors = "|".join(sorted(map(re.escape, _ALL_MINOR_NAMES), key=len, reverse=True))

    pattern = (
        r"(?<![\d.,])\b(?P<phrase>"
        rf"(?:(?:an?\s+(?:{quantity}\s+)?|(?:the\s+)?{quantity}\s+)(?:{designators})"
        rf"|(?:(?:an?|the)\s+)?(?:{numeral}\s+(?:{codes})|{quantity}\s+(?-i:{codes})))"
        rf"(?:\s+and\s+{quantity}\s+(?:{minors}))?"
        r")\b"
    )
    logger.debug("Contextual phrase pattern compiled")
    return re.compile(pattern, re.IGNORECASE)


def _find_designator(tokens: list[str]) -> tuple[int, int, str] | None:
    """Locate the first currency designator.

    Returns:
        (start index, end index exclusive, ISO code), or None
    """
    for start in range(len(tokens)):
        for width in range(min(_MAX_NAME_WORDS, len(tokens) - start), 0, -1):
            code = CURRENCY_NAMES.get(" ".join(tokens[start : start + width]))
            if code is not None:
                return start, start + width, code
        if is_valid_currency_code(tokens[start]):
            return start, start + 1, tokens[start].upper()
    return None


def _major_quantity(tokens: list[str], source: str) -> Amount:
    if tokens == ["the"]:
        return 1
    if len(tokens) > 1 and tokens[0] in _LEADING_WORDS:
        tokens = tokens[1:]
    return resolve_quantity(tokens, text=source)


def parse_contextual_phrase(text: str) -> PhraseMatch:
    """Parse a phrase such as "a dollar and 23 cents".

    Args:
        text: The phrase, optionally with an article and a minor-unit clause

    Returns:
        PhraseMatch with value, currency, designator and raw span

    Raises:
        InputError: If text is not a non-empty string
        UnknownCurrencyError: If no currency name or catalog code is present
        FormatError: If a quantity is invalid or trailing text is not a
            minor-unit clause
        MinorUnitMismatchError: If the minor unit does not belong to the currency
        ValueOverflowError: If the total exceeds MAX_SAFE_INTEGER

    Examples:
        >>> parse_contextual_phrase("a hundred dollars").value
        100
        >>> parse_contextual_phrase("10 pounds and 5 pence").value
        Decimal('10.05')
    """
    source = ensure_text(text)
    spans = list(_TOKEN.finditer(source))
    tokens = [m.group(0).lower() for m in spans]

    designator = _find_designator(tokens)
    if designator is None:
        raise UnknownCurrencyError(ErrorTemplate.currency_name_unknown(source), input_value=text)
    start, end, code = designator
    if get_currency(code) is None:
        raise UnknownCurrencyError(
            ErrorTemplate.currency_code_unknown(code, source), input_value=text
        )

    value: Amount = _major_quantity(tokens[:start], source)

    rest = tokens[end:]
    if rest:
        if len(rest) < 3 or rest[0] != _AND:
            raise FormatError(
                ErrorTemplate.phrase_format_invalid(
                    source, "expected 'and <quantity> <minor unit>'"
                ),
                input_value=text,
            )
        unit = rest[-1]
        if unit not in _ALL_MINOR_NAMES:
            raise FormatError(
                ErrorTemplate.phrase_format_invalid(source, "missing minor unit"),
                input_value=text,
            )
        if unit not in MINOR_UNITS.get(code, frozenset()):
            raise MinorUnitMismatchError(
                ErrorTemplate.minor_unit_unsupported(unit, code),
                input_value=text,
            )
        minor = resolve_quantity(rest[1:-1], text=source)
        value = value + Decimal(minor) / MINOR_UNIT_DIVISOR

    value = ensure_safe_amount(value)
    return PhraseMatch(
        value=value,
        currency=code,
        currency_token=source[spans[start].start() : spans[end - 1].end()],
        raw=source[spans[0].start() : spans[-1].end()],
    )


def match_contextual_phrase(text: str) -> PhraseMatch | None:
    """Find a contextual phrase in free text.

    Requires an article or a quantity before a currency name, and a
    quantity before a bare ISO code (a numeral, or any quantity when the
    code is upper case). Quantities of any length are read whole. Currency,
    minor-unit and format failures return None; an amount above
    MAX_SAFE_INTEGER still raises ValueOverflowError because the phrase
    itself was recognized.
    """
    try:
        found = _get_phrase_pattern().search(ensure_text(text))
        if found is None:
            return None
        return parse_contextual_phrase(found.group("phrase"))
    except MoneyParseError as e:
        logger.debug("match_contextual_phrase(%r) failed: %s", text, e)
        return None
