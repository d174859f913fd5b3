"""Recognizers: turn free-form money text into amounts and currency codes.

Every recognizer exposes two entry points:
- parse_x() - the input must be the money expression; raises a MoneyError subclass
- match_x() - scans free text; returns None instead of raising

All recognizers share one overflow bound (MAX_SAFE_INTEGER) and validate
resolved currency codes against the catalog. All are thread-safe.

Public API:
    Numbers:
        parse_plain_number / match_plain_number - "100"
        parse_separated_number / match_separated_number - "1,234.56"
        parse_magnitude / match_magnitude - "10k", "2.5m", "2bn"

    Currency-bearing:
        parse_symbol / match_symbol - "$100", "50€", "kr 500"
        parse_abbreviation / match_abbreviation - "USD 100"
        parse_slang_term / match_slang_term - "three fivers"
        parse_contextual_phrase / match_contextual_phrase - "a dollar and 23 cents"

    Shared:
        parse_worded_number - "one thousand two hundred" -> 1200
        resolve_quantity - quantity window -> Amount
        resolve_symbol - symbol + optional hint -> ISO code
        ensure_safe_amount / ensure_text / is_safe_amount - guards

Example:
    >>> from moneyparse.parsing import match_symbol
    >>> result = match_symbol("Total: US$ 1,250.00")
    >>> result.currency_code, result.amount
    ('USD', Decimal('1250.00'))

Python 3.13+.
"""

from .abbreviations import AbbreviationMatch, match_abbreviation, parse_abbreviation
from .guards import Amount, ensure_safe_amount, ensure_text, is_safe_amount
from .magnitude import MAGNITUDE_MULTIPLIERS, MagnitudeMatch, match_magnitude, parse_magnitude
from .numbers import (
    match_plain_number,
    match_separated_number,
    parse_plain_number,
    parse_separated_number,
)
from .phrases import (
    CURRENCY_NAMES,
    MINOR_UNITS,
    PhraseMatch,
    match_contextual_phrase,
    parse_contextual_phrase,
)
from .slang import SLANG_UNITS, SlangMatch, SlangUnit, match_slang_term, parse_slang_term
from .symbols import SYMBOL_TABLE, SymbolMatch, match_symbol, parse_symbol, resolve_symbol
from .words import normalize_text, parse_worded_number, resolve_quantity

__all__ = [
    "CURRENCY_NAMES",
    "MAGNITUDE_MULTIPLIERS",
    "MINOR_UNITS",
    "SLANG_UNITS",
    "SYMBOL_TABLE",
    "AbbreviationMatch",
    "Amount",
    "MagnitudeMatch",
    "PhraseMatch",
    "SlangMatch",
    "SlangUnit",
    "SymbolMatch",
    "ensure_safe_amount",
    "ensure_text",
    "is_safe_amount",
    "match_abbreviation",
    "match_contextual_phrase",
    "match_magnitude",
    "match_plain_number",
    "match_separated_number",
    "match_slang_term",
    "match_symbol",
    "normalize_text",
    "parse_abbreviation",
    "parse_contextual_phrase",
    "parse_magnitude",
    "parse_plain_number",
    "parse_separated_number",
    "parse_slang_term",
    "parse_symbol",
    "parse_worded_number",
    "resolve_quantity",
    "resolve_symbol",
]
