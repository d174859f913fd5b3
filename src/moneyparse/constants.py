"""Shared constants for moneyparse.

This module provides centralized configuration constants used across the
recognizers, the catalog, and the pipeline. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Numeric limits: Overflow bound applied by every recognizer
- Phrase limits: Quantity window and minor-unit divisor
- Catalog: Locale, cache size, ISO 4217 numeric codes

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Numeric limits
    "MAX_SAFE_INTEGER",
    # Phrase limits
    "QUANTITY_WINDOW_SIZE",
    "MINOR_UNIT_DIVISOR",
    # Catalog
    "ISO_CURRENCY_CODE_LENGTH",
    "CATALOG_LOCALE",
    "MAX_CATALOG_CACHE_SIZE",
    "ISO_4217_NUMERIC_CODES",
]

# ============================================================================
# NUMERIC LIMITS
# ============================================================================

# Largest integer a double can hold exactly (2**53 - 1).
# Amounts are compared exactly (int/Decimal), so the bound itself is accepted
# and bound + 1 is rejected by every recognizer.
MAX_SAFE_INTEGER: int = 2**53 - 1

# ============================================================================
# PHRASE LIMITS
# ============================================================================

# Number of tokens before a slang term considered as its quantity.
QUANTITY_WINDOW_SIZE: int = 3

# Minor units per major unit. Uniform for every currency with a minor unit table.
MINOR_UNIT_DIVISOR: int = 100

# ============================================================================
# CATALOG
# ============================================================================

# ISO 4217 alphabetic codes are exactly 3 ASCII letters.
ISO_CURRENCY_CODE_LENGTH: int = 3

# Locale used for catalog display names.
CATALOG_LOCALE: str = "en"

# Bound for lru_cache on per-code catalog lookups.
MAX_CATALOG_CACHE_SIZE: int = 512

# ISO 4217 numeric codes, kept as zero-padded strings as published.
# Babel (CLDR) has no numeric mapping, so the table is maintained here and
# checked against Babel by scripts/verify_iso4217.py.
# HRK is withdrawn (2023) but still referenced by the symbol table.
ISO_4217_NUMERIC_CODES: dict[str, str] = {
    "AED": "784", "AFN": "971", "ALL": "008", "AMD": "051", "ANG": "532",
    "AOA": "973", "ARS": "032", "AUD": "036", "AWG": "533", "AZN": "944",
    "BAM": "977", "BBD": "052", "BDT": "050", "BGN": "975", "BHD": "048",
    "BIF": "108", "BMD": "060", "BND": "096", "BOB": "068", "BOV": "984",
    "BRL": "986", "BSD": "044", "BTN": "064", "BWP": "072", "BYN": "933",
    "BZD": "084", "CAD": "124", "CDF": "976", "CHE": "947", "CHF": "756",
    "CHW": "948", "CLF": "990", "CLP": "152", "CNY": "156", "COP": "170",
    "COU": "970", "CRC": "188", "CUC": "931", "CUP": "192", "CVE": "132",
    "CZK": "203", "DJF": "262", "DKK": "208", "DOP": "214", "DZD": "012",
    "EGP": "818", "ERN": "232", "ETB": "230", "EUR": "978", "FJD": "242",
    "FKP": "238", "GBP": "826", "GEL": "981", "GHS": "936", "GIP": "292",
    "GMD": "270", "GNF": "324", "GTQ": "320", "GYD": "328", "HKD": "344",
    "HNL": "340", "HRK": "191", "HTG": "332", "HUF": "348", "IDR": "360",
    "ILS": "376", "INR": "356", "IQD": "368", "IRR": "364", "ISK": "352",
    "JMD": "388", "JOD": "400", "JPY": "392", "KES": "404", "KGS": "417",
    "KHR": "116", "KMF": "174", "KPW": "408", "KRW": "410", "KWD": "414",
    "KYD": "136", "KZT": "398", "LAK": "418", "LBP": "422", "LKR": "144",
    "LRD": "430", "LSL": "426", "LYD": "434", "MAD": "504", "MDL": "498",
    "MGA": "969", "MKD": "807", "MMK": "104", "MNT": "496", "MOP": "446",
    "MRU": "929", "MUR": "480", "MVR": "462", "MWK": "454", "MXN": "484",
    "MXV": "979", "MYR": "458", "MZN": "943", "NAD": "516", "NGN": "566",
    "NIO": "558", "NOK": "578", "NPR": "524", "NZD": "554", "OMR": "512",
    "PAB": "590", "PEN": "604", "PGK": "598", "PHP": "608", "PKR": "586",
    "PLN": "985", "PYG": "600", "QAR": "634", "RON": "946", "RSD": "941",
    "RUB": "643", "RWF": "646", "SAR": "682", "SBD": "090", "SCR": "690",
    "SDG": "938", "SEK": "752", "SGD": "702", "SHP": "654", "SLE": "925",
    "SLL": "694", "SOS": "706", "SRD": "968", "SSP": "728", "STN": "930",
    "SVC": "222", "SYP": "760", "SZL": "748", "THB": "764", "TJS": "972",
    "TMT": "934", "TND": "788", "TOP": "776", "TRY": "949", "TTD": "780",
    "TWD": "901", "TZS": "834", "UAH": "980", "UGX": "800", "USD": "840",
    "USN": "997", "UYI": "940", "UYU": "858", "UYW": "927", "UZS": "860",
    "VED": "926", "VES": "928", "VND": "704", "VUV": "548", "WST": "882",
    "XAF": "950", "XAG": "961", "XAU": "959", "XBA": "955", "XBB": "956",
    "XBC": "957", "XBD": "958", "XCD": "951", "XDR": "960", "XOF": "952",
    "XPD": "964", "XPF": "953", "XPT": "962", "XSU": "994", "XUA": "965",
    "YER": "886", "ZAR": "710", "ZMW": "967", "ZWG": "924", "ZWL": "932",
}
