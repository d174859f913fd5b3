"""Currency symbol recognizer ("$100", "50€", "R$ 1,200.50").

SYMBOL_TABLE maps every recognized symbol or text token to its candidate
ISO 4217 codes. Candidate order is precedence: when a symbol is shared
("$", "¥", "kr", "CFA") and no usable hint is given, the first candidate
wins.

The detection pattern is a single case-insensitive alternation of all table
keys, longest first, so "US$" is tried before "$" and "R$" before "R".
Single-letter symbols (R, K, P) are matched without word boundaries.

Thread-safe. Pattern compiled once on first use (functools.cache).

Python 3.13+.
"""

import functools
import logging
import re
from dataclasses import dataclass
from types import MappingProxyType

from moneyparse.catalog import get_currency
from moneyparse.diagnostics import (
    ErrorTemplate,
    FormatError,
    MoneyError,
    UnknownCurrencyError,
)

from .guards import Amount, ensure_safe_amount, ensure_text
from .numbers import AMOUNT_PATTERN, to_amount

__all__ = [
    "SYMBOL_TABLE",
    "SymbolMatch",
    "match_symbol",
    "parse_symbol",
    "resolve_symbol",
]

logger = logging.getLogger(__name__)

# fmt: off
SYMBOL_TABLE: MappingProxyType[str, tuple[str, ...]] = MappingProxyType({
    # Dollars
    "$": ("USD", "AUD", "CAD", "NZD", "SGD", "HKD", "MXN", "ARS", "CLP", "COP", "BRL"),
    "USD": ("USD",), "US$": ("USD",),
    "AUD": ("AUD",), "A$": ("AUD",), "AU$": ("AUD",),
    "CAD": ("CAD",), "C$": ("CAD",), "CA$": ("CAD",),
    "NZD": ("NZD",), "NZ$": ("NZD",),
    "SGD": ("SGD",), "S$": ("SGD",),
    "HKD": ("HKD",), "HK$": ("HKD",),
    "MXN": ("MXN",), "MX$": ("MXN",),
    "ARS": ("ARS",), "AR$": ("ARS",),
    "CLP": ("CLP",), "CL$": ("CLP",),
    "COP": ("COP",), "CO$": ("COP",),
    "BRL": ("BRL",), "R$": ("BRL",),
    "FJ$": ("FJD",), "FJD": ("FJD",),
    "N$": ("NAD",), "NAD": ("NAD",),
    # Euro, pound
    "€": ("EUR",), "EUR": ("EUR",),
    "£": ("GBP",), "GBP": ("GBP",),
    "E£": ("EGP",), "EGP": ("EGP",),
    "LL": ("LBP",), "LBP": ("LBP",),
    "SYP": ("SYP",),
    # Yen, yuan, won
    "¥": ("JPY", "CNY"), "JP¥": ("JPY",), "CN¥": ("CNY",), "元": ("CNY",),
    "₩": ("KRW",), "KRW": ("KRW",),
    # Rupees
    "₹": ("INR",), "Rs": ("INR",), "Rs.": ("INR",), "INR": ("INR",),
    "PKR": ("PKR",), "LKR": ("LKR",), "NPR": ("NPR",),
    "MUR": ("MUR",), "SCR": ("SCR",),
    # Europe outside the euro area
    "₽": ("RUB",), "руб": ("RUB",), "RUB": ("RUB",),
    "₺": ("TRY",), "TL": ("TRY",), "TRY": ("TRY",),
    "CHF": ("CHF",), "Fr": ("CHF",), "SFr": ("CHF",),
    "zł": ("PLN",), "PLN": ("PLN",),
    "kr": ("SEK", "NOK", "DKK", "ISK"),
    "SEK": ("SEK",), "NOK": ("NOK",), "DKK": ("DKK",), "ISK": ("ISK",),
    "Kč": ("CZK",), "CZK": ("CZK",),
    "Ft": ("HUF",), "HUF": ("HUF",),
    "₴": ("UAH",), "UAH": ("UAH",),
    "lei": ("RON",), "RON": ("RON",),
    "лв": ("BGN",), "BGN": ("BGN",),
    "kn": ("HRK",), "HRK": ("HRK",),
    # Asia
    "฿": ("THB",), "THB": ("THB",),
    "Rp": ("IDR",), "IDR": ("IDR",),
    "RM": ("MYR",), "MYR": ("MYR",),
    "₱": ("PHP",), "PHP": ("PHP",),
    "₫": ("VND",), "VND": ("VND",),
    "৳": ("BDT",), "BDT": ("BDT",),
    "₸": ("KZT",), "KZT": ("KZT",),
    "֏": ("AMD",), "AMD": ("AMD",),
    "₾": ("GEL",), "GEL": ("GEL",),
    "₼": ("AZN",), "AZN": ("AZN",),
    "UZS": ("UZS",),
    "₮": ("MNT",), "MNT": ("MNT",),
    "៛": ("KHR",), "KHR": ("KHR",),
    "₭": ("LAK",), "LAK": ("LAK",),
    "K": ("MMK",), "MMK": ("MMK",),
    "؋": ("AFN",), "AFN": ("AFN",),
    # Middle East
    "₪": ("ILS",), "ILS": ("ILS",),
    "د.إ": ("AED",), "AED": ("AED",),
    "ر.س": ("SAR",), "SAR": ("SAR",),
    "﷼": ("IRR",), "IRR": ("IRR",),
    "IQD": ("IQD",),
    "KD": ("KWD",), "KWD": ("KWD",),
    "BD": ("BHD",), "BHD": ("BHD",),
    "OMR": ("OMR",),
    "QR": ("QAR",), "QAR": ("QAR",),
    "JOD": ("JOD",),
    # Africa
    "R": ("ZAR",), "ZAR": ("ZAR",),
    "₦": ("NGN",), "NGN": ("NGN",),
    "KSh": ("KES",), "KES": ("KES",),
    "TND": ("TND",), "MAD": ("MAD",), "DZD": ("DZD",), "LYD": ("LYD",),
    "MRU": ("MRU",), "ETB": ("ETB",),
    "TSh": ("TZS",), "TZS": ("TZS",),
    "USh": ("UGX",), "UGX": ("UGX",),
    "RWF": ("RWF",), "BIF": ("BIF",),
    "GH₵": ("GHS",), "GHS": ("GHS",),
    "ZMW": ("ZMW",),
    "P": ("BWP",), "BWP": ("BWP",),
    "MGA": ("MGA",), "KMF": ("KMF",), "CVE": ("CVE",),
    "CFA": ("XOF", "XAF"), "XOF": ("XOF",), "XAF": ("XAF",),
    # Americas, Oceania
    "S/": ("PEN",), "PEN": ("PEN",),
    "$U": ("UYU",), "UYU": ("UYU",),
    "XPF": ("XPF",), "PGK": ("PGK",), "WST": ("WST",), "TOP": ("TOP",),
})
# fmt: on

# Fallback for mixed-case spellings such as "FR" or "ksh".
_CASEFOLD_INDEX: MappingProxyType[str, str] = MappingProxyType(
    {key.casefold(): key for key in SYMBOL_TABLE}
)


@dataclass(frozen=True, slots=True)
class SymbolMatch:
    """Amount written with a currency symbol.

    Attributes:
        amount: Parsed amount (commas removed)
        currency_code: Resolved ISO 4217 code
        symbol: Symbol text as it appears in the input
        raw: Literal substring consumed, e.g. 'US$ 1,000'
    """

    amount: Amount
    currency_code: str
    symbol: str
    raw: str


@functools.cache
def _get_symbol_pattern() -> re.Pattern[str]:
    """Lazy-compile the symbol detection regex on first use.

    Thread-safe via functools.cache internal locking.

    Returns:
        Compiled pattern with named groups symbol_before/amount_after for
        "<symbol><number>" and amount_before/symbol_after for
        "<number><symbol>"; whitespace between them is optional.
    """
    # Longer symbols first so "US$" is never consumed as "$"
    sorted_symbols = sorted(SYMBOL_TABLE, key=len, reverse=True)
    symbols_pattern = "|".join(re.escape(sym) for sym in sorted_symbols)

    pattern = (
        rf"(?:(?P<symbol_before>{symbols_pattern})\s*(?P<amount_after>{AMOUNT_PATTERN}))"
        rf"|(?:(?P<amount_before>{AMOUNT_PATTERN})\s*(?P<symbol_after>{symbols_pattern}))"
    )
    logger.debug("Symbol pattern compiled: %d symbols", len(sorted_symbols))
    return re.compile(pattern, re.IGNORECASE)


def _lookup_candidates(symbol: str) -> tuple[str, ...] | None:
    """Find table candidates: exact, upper-cased, lower-cased, then casefolded."""
    for key in (symbol, symbol.upper(), symbol.lower()):
        candidates = SYMBOL_TABLE.get(key)
        if candidates is not None:
            return candidates
    folded_key = _CASEFOLD_INDEX.get(symbol.casefold())
    return SYMBOL_TABLE[folded_key] if folded_key is not None else None


def resolve_symbol(symbol: str, default_currency: str | None = None) -> str:
    """Resolve a currency symbol to one ISO 4217 code.

    Resolution order:
        1. Symbol with a single candidate -> that candidate
        2. Shared symbol and the hint is among its candidates -> the hint
        3. Otherwise the first candidate in table order

    Args:
        symbol: Symbol text (e.g., '$', 'kr', 'CHF')
        default_currency: Preferred code for shared symbols (any case)

    Returns:
        ISO 4217 code present in the catalog

    Raises:
        UnknownCurrencyError: If the symbol is not in the table or its code
            is not in the catalog

    Examples:
        >>> resolve_symbol("$")
        'USD'
        >>> resolve_symbol("$", default_currency="cad")
        'CAD'
        >>> resolve_symbol("kr")
        'SEK'
    """
    candidates = _lookup_candidates(symbol)
    if not candidates:
        raise UnknownCurrencyError(
            ErrorTemplate.currency_symbol_unknown(symbol, symbol),
            input_value=symbol,
        )

    hint = default_currency.strip().upper() if default_currency else None
    if len(candidates) == 1:
        code = candidates[0]
    elif hint is not None and hint in candidates:
        code = hint
    else:
        code = candidates[0]

    if get_currency(code) is None:
        raise UnknownCurrencyError(
            ErrorTemplate.currency_code_unknown(code, symbol),
            input_value=symbol,
        )
    return code


def parse_symbol(text: str, default_currency: str | None = None) -> SymbolMatch:
    """Parse an amount written with a currency symbol.

    Args:
        text: Input such as "$100", "100 kr", "HK$ 1,250.50"
        default_currency: Preferred code when the symbol is shared

    Returns:
        SymbolMatch with the amount, resolved code, symbol and raw span

    Raises:
        InputError: If text is not a non-empty string
        FormatError: If no symbol/amount pair is present
        UnknownCurrencyError: If the symbol does not resolve to a catalog code
        ValueOverflowError: If the amount exceeds MAX_SAFE_INTEGER
    """
    trimmed = ensure_text(text).strip()
    found = _get_symbol_pattern().search(trimmed)
    if found is None:
        raise FormatError(ErrorTemplate.symbol_pattern_not_found(trimmed), input_value=text)

    symbol = found.group("symbol_before") or found.group("symbol_after")
    amount_text = found.group("amount_after") or found.group("amount_before")

    amount = ensure_safe_amount(to_amount(amount_text.replace(",", "")))
    try:
        code = resolve_symbol(symbol, default_currency)
    except UnknownCurrencyError as e:
        raise UnknownCurrencyError(
            ErrorTemplate.currency_symbol_unknown(symbol, trimmed),
            input_value=text,
        ) from e

    return SymbolMatch(amount=amount, currency_code=code, symbol=symbol, raw=found.group(0))


def match_symbol(text: str, default_currency: str | None = None) -> SymbolMatch | None:
    """Find a symbol-prefixed or symbol-suffixed amount in free text."""
    try:
        return parse_symbol(text, default_currency)
    except MoneyError as e:
        logger.debug("match_symbol(%r) failed: %s", text, e)
        return None
