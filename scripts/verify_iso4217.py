#!/usr/bin/env python3
"""Verify moneyparse currency tables against Babel CLDR data.

Every ISO code that a recognizer can produce must resolve in the catalog,
and the catalog is the intersection of Babel's English currency names with
the hardcoded ISO_4217_NUMERIC_CODES table. This script reports table
entries that would silently fall out of that intersection.

Checks:
    1. Structural: Numeric-table codes not recognized by Babel.
    2. Structural: Duplicate numeric codes, or codes not three digits.
    3. Structural: Codes referenced by SYMBOL_TABLE, CURRENCY_NAMES,
       MINOR_UNITS or SLANG_UNITS that are missing from the catalog.
    4. Coverage: Babel currencies with no numeric-table entry. Most are
       historical codes CLDR still names. Shown only with --verbose.

Exit codes:
    0: All checks passed (coverage notes are informational).
    1: Structural errors (unknown codes, unresolvable table entries).

Usage:
    verify_iso4217.py [--verbose]

Python 3.13+. Requires Babel.
"""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from collections.abc import Iterable


def _check_unrecognized(
    numeric_codes: dict[str, str],
    babel_currencies: set[str],
) -> list[str]:
    """Check numeric-table currencies not recognized by Babel."""
    return [
        f"  {code}: In ISO_4217_NUMERIC_CODES but not recognized by Babel"
        for code in sorted(numeric_codes)
        if code not in babel_currencies
    ]


def _check_numeric_shape(numeric_codes: dict[str, str]) -> list[str]:
    """Check numeric codes are unique three-digit strings."""
    result = [
        f"  {code}: Numeric code {numeric!r} is not three digits"
        for code, numeric in sorted(numeric_codes.items())
        if len(numeric) != 3 or not numeric.isdigit()  # noqa: PLR2004
    ]
    counts = Counter(numeric_codes.values())
    for numeric, count in sorted(counts.items()):
        if count > 1:
            sharing = sorted(code for code, n in numeric_codes.items() if n == numeric)
            result.append(f"  {numeric}: Shared by {', '.join(sharing)}")
    return result


def _check_table_codes(table_name: str, codes: Iterable[str]) -> list[str]:
    """Check that every code a recognizer table can produce is in the catalog."""
    from moneyparse.catalog import get_currency  # noqa: PLC0415

    return [
        f"  {code}: Referenced by {table_name} but missing from the catalog"
        for code in sorted(set(codes))
        if get_currency(code) is None
    ]


def _check_coverage(
    numeric_codes: dict[str, str],
    babel_currencies: set[str],
) -> list[str]:
    """List Babel currencies with no numeric-table entry."""
    from babel.numbers import get_currency_name  # noqa: PLC0415

    return [
        f"  {code}: {get_currency_name(code, locale='en')}"
        for code in sorted(babel_currencies)
        if code not in numeric_codes
    ]


def _print_section(header: str, explanation: str, lines: list[str]) -> None:
    """Print a report section if non-empty."""
    if not lines:
        return
    print(f"{header} ({len(lines)}):")
    print(f"  ({explanation})")
    for line in lines:
        print(line)
    print()


def _print_report(
    *,
    errors: list[str],
    table_errors: list[str],
    uncovered: list[str],
    entry_count: int,
    babel_count: int,
    catalog_count: int,
    verbose: bool,
) -> None:
    """Print formatted report."""
    print("moneyparse Currency Table Verification")
    print("=" * 50)
    print(f"Numeric-table entries: {entry_count}")
    print(f"Babel currencies:      {babel_count}")
    print(f"Catalog currencies:    {catalog_count}")
    print()

    _print_section(
        "[ERROR] Numeric table errors",
        "Code unknown to Babel, malformed, or duplicated",
        errors,
    )
    _print_section(
        "[ERROR] Unresolvable recognizer codes",
        "Recognizer would raise UnknownCurrencyError for this entry",
        table_errors,
    )

    if uncovered:
        if verbose:
            _print_section(
                "[INFO] Babel currencies outside the catalog",
                "No ISO 4217 numeric code in the table; mostly historical",
                uncovered,
            )
        else:
            print(
                f"[INFO] {len(uncovered)} Babel currency(ies) outside the"
                " catalog. Use --verbose to list."
            )
            print()


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Verify moneyparse currency tables against Babel CLDR data.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="List Babel currencies that have no numeric-table entry.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run currency table verification checks."""
    args = _parse_args(argv)

    try:
        from babel.numbers import list_currencies  # noqa: PLC0415
    except ImportError:
        print("[ERROR] Babel not installed. Install with: pip install babel")
        return 1

    from moneyparse.catalog import list_currencies as list_catalog  # noqa: PLC0415
    from moneyparse.constants import ISO_4217_NUMERIC_CODES  # noqa: PLC0415
    from moneyparse.parsing import (  # noqa: PLC0415
        CURRENCY_NAMES,
        MINOR_UNITS,
        SLANG_UNITS,
        SYMBOL_TABLE,
    )

    babel_currencies = list_currencies()

    errors = _check_unrecognized(ISO_4217_NUMERIC_CODES, babel_currencies)
    errors.extend(_check_numeric_shape(ISO_4217_NUMERIC_CODES))

    table_errors = [
        *_check_table_codes(
            "SYMBOL_TABLE", (code for codes in SYMBOL_TABLE.values() for code in codes)
        ),
        *_check_table_codes("CURRENCY_NAMES", CURRENCY_NAMES.values()),
        *_check_table_codes("MINOR_UNITS", MINOR_UNITS),
        *_check_table_codes("SLANG_UNITS", (unit.currency for unit in SLANG_UNITS.values())),
    ]
    uncovered = _check_coverage(ISO_4217_NUMERIC_CODES, babel_currencies)

    _print_report(
        errors=errors,
        table_errors=table_errors,
        uncovered=uncovered,
        entry_count=len(ISO_4217_NUMERIC_CODES),
        babel_count=len(babel_currencies),
        catalog_count=len(list_catalog()),
        verbose=args.verbose,
    )

    failures = len(errors) + len(table_errors)
    if failures:
        print(f"[FAIL] {failures} structural error(s) found.")
        print("[EXIT-CODE] 1")
        return 1

    print("[PASS] All checks passed.")
    print("[EXIT-CODE] 0")
    return 0


if __name__ == "__main__":
    sys.exit(main())
