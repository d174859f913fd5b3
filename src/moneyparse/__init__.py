"""moneyparse - Extract monetary amounts and currencies from free-form English text.

Recognizes plain and comma-grouped numbers, currency symbols, ISO 4217 codes,
magnitude shorthand (10k, 2.5m, 2bn), monetary slang (buck, quid, fiver,
tenner), and phrases such as "a dollar and 23 cents". Amounts are exact
(int or Decimal) and bounded by MAX_SAFE_INTEGER.

Public API:
    parse_money - Run the default pipeline over text
    RegexPipeline - Configurable ordered detection steps
    ParseContext - Pipeline result
    CurrencyInfo - ISO 4217 currency data (Babel CLDR)
    get_currency / get_currency_by_number / list_currencies - Catalog lookups

Exceptions:
    MoneyError - Base exception class
    MoneyParseError - Text could not be turned into an amount
    ValueOverflowError - Amount above MAX_SAFE_INTEGER

Submodules:
    moneyparse.parsing - Individual recognizers (parse_* / match_*)
    moneyparse.catalog - Currency catalog
    moneyparse.diagnostics - Diagnostic codes, templates, exceptions, formatter
    moneyparse.constants - Bounds and ISO 4217 numeric codes
"""

# Essential Public API - Minimal exports for clean namespace
from .catalog import CurrencyInfo, get_currency, get_currency_by_number, list_currencies
from .diagnostics import (
    FormatError,
    InputError,
    MinorUnitMismatchError,
    MoneyError,
    MoneyParseError,
    UnknownCurrencyError,
    ValueOverflowError,
)
from .pipeline import ParseContext, RegexPipeline, parse_money

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("moneyparse")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CurrencyInfo",
    "FormatError",
    "InputError",
    "MinorUnitMismatchError",
    "MoneyError",
    "MoneyParseError",
    "ParseContext",
    "RegexPipeline",
    "UnknownCurrencyError",
    "ValueOverflowError",
    "__version__",
    "get_currency",
    "get_currency_by_number",
    "list_currencies",
    "parse_money",
]
