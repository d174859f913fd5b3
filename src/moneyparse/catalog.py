"""ISO 4217 currency catalog via Babel CLDR data.

Provides type-safe lookup of currencies by alphabetic code, by numeric code,
and full enumeration. Every recognizer validates the currency codes it
resolves against this catalog.

All types are immutable, hashable, and thread-safe. The catalog snapshot is
built once on first use and cached; ``clear_catalog_cache()`` drops it
together with every compiled pattern derived from it.

Membership:
    A currency is in the catalog when Babel knows its English display name
    AND it has an ISO 4217 numeric code in ``ISO_4217_NUMERIC_CODES``. This
    keeps the catalog to circulating currencies (plus HRK) and excludes the
    historical codes CLDR still names.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import TypeIs

from babel import Locale
from babel.numbers import get_currency_precision

from moneyparse.constants import (
    CATALOG_LOCALE,
    ISO_4217_NUMERIC_CODES,
    ISO_CURRENCY_CODE_LENGTH,
    MAX_CATALOG_CACHE_SIZE,
)

__all__ = [
    "CurrencyCode",
    "CurrencyInfo",
    "clear_catalog_cache",
    "get_currency",
    "get_currency_by_number",
    "is_valid_currency_code",
    "list_currencies",
]

logger = logging.getLogger(__name__)

type CurrencyCode = str
"""ISO 4217 alphabetic currency code (e.g., 'USD', 'EUR', 'GBP')."""


@dataclass(frozen=True, slots=True)
class CurrencyInfo:
    """ISO 4217 currency data.

    Immutable, thread-safe, hashable. Safe for use as dict key or set member.

    Attributes:
        code: ISO 4217 alphabetic code (e.g., 'USD').
        name: English display name (e.g., 'US Dollar').
        numeric: ISO 4217 numeric code, zero-padded (e.g., '840', '036').
        decimal_digits: Minor-unit precision from CLDR (0, 2, 3 or 4).
    """

    code: CurrencyCode
    name: str
    numeric: str
    decimal_digits: int


@functools.cache
def _load_catalog() -> MappingProxyType[str, CurrencyInfo]:
    """Build the catalog snapshot from Babel (once per process).

    Thread-safe via functools.cache internal locking.
    """
    names: dict[str, str] = Locale.parse(CATALOG_LOCALE).currencies
    entries: dict[str, CurrencyInfo] = {}

    for code, numeric in ISO_4217_NUMERIC_CODES.items():
        name = names.get(code)
        if name is None:
            # Code newer than the installed CLDR data
            logger.debug("Currency %s unknown to Babel, skipped", code)
            continue
        entries[code] = CurrencyInfo(
            code=code,
            name=name,
            numeric=numeric,
            decimal_digits=get_currency_precision(code),
        )

    logger.info("Currency catalog built: %d currencies", len(entries))
    return MappingProxyType(entries)


@functools.cache
def _numeric_index() -> MappingProxyType[str, CurrencyInfo]:
    return MappingProxyType({info.numeric: info for info in _load_catalog().values()})


@lru_cache(maxsize=MAX_CATALOG_CACHE_SIZE)
def _get_currency_impl(code_upper: str) -> CurrencyInfo | None:
    """Cached lookup by normalized code."""
    return _load_catalog().get(code_upper)


def get_currency(code: str) -> CurrencyInfo | None:
    """Look up an ISO 4217 currency by alphabetic code.

    Args:
        code: ISO 4217 code (e.g., 'USD', 'eur'). Case-insensitive.

    Returns:
        CurrencyInfo if found, None if unknown code.
    """
    if not isinstance(code, str):
        return None
    return _get_currency_impl(code.strip().upper())


def get_currency_by_number(numeric: str | int) -> CurrencyInfo | None:
    """Look up an ISO 4217 currency by numeric code.

    Args:
        numeric: Numeric code as string ('840', '036', '36') or int (36).

    Returns:
        CurrencyInfo if found, None if unknown code.
    """
    if isinstance(numeric, bool):
        return None
    if isinstance(numeric, int):
        key = f"{numeric:03d}"
    elif isinstance(numeric, str) and numeric.strip().isdigit():
        key = numeric.strip().zfill(3)
    else:
        return None
    return _numeric_index().get(key)


def list_currencies() -> tuple[CurrencyInfo, ...]:
    """List all catalog currencies, sorted by code."""
    catalog = _load_catalog()
    return tuple(catalog[code] for code in sorted(catalog))


def is_valid_currency_code(value: object) -> TypeIs[CurrencyCode]:
    """Check if value is an ISO 4217 code present in the catalog.

    Args:
        value: Object to check.

    Returns:
        True if value is a 3-letter code known to the catalog (any case).
    """
    if not isinstance(value, str) or len(value) != ISO_CURRENCY_CODE_LENGTH:
        return False
    return get_currency(value) is not None


def clear_catalog_cache() -> None:
    """Clear the catalog snapshot and every pattern built from it.

    The abbreviation and contextual-phrase alternations are generated from
    catalog codes; they are rebuilt lazily on next use. Thread-safe.
    """
    # Recognizers import this module, so their caches are reached lazily.
    from moneyparse.parsing.abbreviations import _get_abbreviation_pattern  # noqa: PLC0415
    from moneyparse.parsing.phrases import _get_phrase_pattern  # noqa: PLC0415

    _load_catalog.cache_clear()
    _numeric_index.cache_clear()
    _get_currency_impl.cache_clear()
    _get_abbreviation_pattern.cache_clear()
    _get_phrase_pattern.cache_clear()
    logger.debug("Currency catalog and derived patterns cleared")
