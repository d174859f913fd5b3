"""Tests for the currency symbol recognizer.

Tests cover:
- Symbol before and after the amount
- Longest-symbol precedence ("US$" before "$")
- Shared symbols and default_currency hints
- Error classification and tolerant matching
"""

from decimal import Decimal

import pytest
from hypothesis import given
from hypothesis import strategies as st

from moneyparse.catalog import get_currency
from moneyparse.constants import MAX_SAFE_INTEGER
from moneyparse.diagnostics import (
    FormatError,
    InputError,
    UnknownCurrencyError,
    ValueOverflowError,
)
from moneyparse.parsing import SYMBOL_TABLE, match_symbol, parse_symbol, resolve_symbol


class TestSymbolTable:
    """Tests for SYMBOL_TABLE contents."""

    def test_us_dollar_prefix(self) -> None:
        """'US$' maps only to USD."""
        assert SYMBOL_TABLE["US$"] == ("USD",)

    def test_dollar_precedence(self) -> None:
        """'$' lists USD first."""
        assert SYMBOL_TABLE["$"][0] == "USD"
        assert "CAD" in SYMBOL_TABLE["$"]

    def test_nordic_krona(self) -> None:
        """'kr' is shared by four Nordic currencies, SEK first."""
        assert SYMBOL_TABLE["kr"] == ("SEK", "NOK", "DKK", "ISK")

    def test_every_candidate_in_catalog(self) -> None:
        """Every table code resolves in the catalog."""
        for candidates in SYMBOL_TABLE.values():
            for code in candidates:
                assert get_currency(code) is not None, code

    def test_read_only(self) -> None:
        """The table cannot be modified."""
        with pytest.raises(TypeError):
            SYMBOL_TABLE["X"] = ("USD",)  # type: ignore[index]


class TestParseSymbol:
    """Tests for parse_symbol()."""

    @pytest.mark.parametrize(
        ("text", "amount", "code"),
        [
            ("$100", 100, "USD"),
            ("€50", 50, "EUR"),
            ("£20.50", Decimal("20.50"), "GBP"),
            ("100$", 100, "USD"),
            ("¥1000", 1000, "JPY"),
            ("元100", 100, "CNY"),
            ("₹500", 500, "INR"),
            ("د.إ500", 500, "AED"),
            ("ر.س100", 100, "SAR"),
            ("R$100", 100, "BRL"),
            ("S/100", 100, "PEN"),
            ("$U500", 500, "UYU"),
            ("A$100", 100, "AUD"),
            ("C$75", 75, "CAD"),
            ("NZ$50", 50, "NZD"),
            ("S$100", 100, "SGD"),
            ("HK$500", 500, "HKD"),
            ("MX$500", 500, "MXN"),
            ("AR$1000", 1000, "ARS"),
            ("CL$10000", 10000, "CLP"),
            ("CO$5000", 5000, "COP"),
            ("FJ$100", 100, "FJD"),
            ("N$50", 50, "NAD"),
            ("CHF 100", 100, "CHF"),
            ("SEK 500", 500, "SEK"),
            ("NOK 750", 750, "NOK"),
            ("DKK 400", 400, "DKK"),
            ("Rp10000", 10000, "IDR"),
            ("RM100", 100, "MYR"),
            ("₸5000", 5000, "KZT"),
            ("₾100", 100, "GEL"),
            ("֏1000", 1000, "AMD"),
            ("₼50", 50, "AZN"),
            ("₮5000", 5000, "MNT"),
            ("៛4000", 4000, "KHR"),
            ("₭10000", 10000, "LAK"),
            ("৳500", 500, "BDT"),
            ("GH₵20", 20, "GHS"),
            ("kn 75", 75, "HRK"),
        ],
    )
    def test_symbols(self, text: str, amount: int | Decimal, code: str) -> None:
        """Symbols resolve to their ISO code with the exact amount."""
        result = parse_symbol(text)
        assert result.amount == amount
        assert result.currency_code == code

    def test_grouped_amount(self) -> None:
        """Comma grouping is stripped from the amount."""
        result = parse_symbol("$1,234,567.89")
        assert result.amount == Decimal("1234567.89")
        assert result.raw == "$1,234,567.89"

    def test_us_dollar_beats_dollar(self) -> None:
        """'US$100' uses the longer 'US$' key."""
        result = parse_symbol("US$100")
        assert result.currency_code == "USD"
        assert result.symbol == "US$"

    def test_symbol_and_raw_fields(self) -> None:
        """symbol and raw are literal input text."""
        result = parse_symbol("  paid 100 kr today ")
        assert result.symbol == "kr"
        assert result.raw == "100 kr"

    @pytest.mark.parametrize(
        ("text", "hint", "code"),
        [
            ("$100", "CAD", "CAD"),
            ("$100", "cad", "CAD"),
            ("¥1000", "CNY", "CNY"),
            ("kr 500", "NOK", "NOK"),
            ("kr 500", None, "SEK"),
            ("$100", "EUR", "USD"),
            ("€100", "USD", "EUR"),
        ],
    )
    def test_default_currency_hint(self, text: str, hint: str | None, code: str) -> None:
        """Hints pick among shared candidates and are ignored otherwise."""
        assert parse_symbol(text, default_currency=hint).currency_code == code

    @pytest.mark.parametrize(
        ("text", "code"), [("chf 100", "CHF"), ("usd 10", "USD"), ("KR 5", "SEK")]
    )
    def test_case_insensitive(self, text: str, code: str) -> None:
        """Text symbols and codes match in any case."""
        assert parse_symbol(text).currency_code == code

    @pytest.mark.parametrize("value", ["", "   ", None, 123])
    def test_invalid_input(self, value: object) -> None:
        """Empty and non-string input raise InputError."""
        with pytest.raises(InputError, match="Input must be a non-empty string"):
            parse_symbol(value)  # type: ignore[arg-type]

    @pytest.mark.parametrize("text", ["100", "@100", "$abc"])
    def test_no_pattern(self, text: str) -> None:
        """Text without a symbol/amount pair is a format error."""
        with pytest.raises(FormatError, match="No currency symbol pattern found"):
            parse_symbol(text)

    def test_overflow_boundary(self) -> None:
        """The bound is accepted and bound + 1 rejected."""
        assert parse_symbol(f"${MAX_SAFE_INTEGER}").amount == MAX_SAFE_INTEGER
        with pytest.raises(ValueOverflowError):
            parse_symbol(f"${MAX_SAFE_INTEGER + 1}")

    def test_decimal_overflow_is_exact(self) -> None:
        """A fraction just above the bound is rejected without rounding."""
        with pytest.raises(ValueOverflowError):
            parse_symbol(f"${MAX_SAFE_INTEGER}.01")

    @given(
        st.integers(min_value=0, max_value=MAX_SAFE_INTEGER),
        st.sampled_from(["€", "£", "₹", "₩", "₺", "₪", "₫", "₱"]),
    )
    def test_unambiguous_symbols_preserve_amount(self, amount: int, symbol: str) -> None:
        """Single-candidate symbols always keep the exact amount."""
        result = parse_symbol(f"{symbol}{amount:,}")
        assert result.amount == amount
        assert result.currency_code == SYMBOL_TABLE[symbol][0]


class TestResolveSymbol:
    """Tests for resolve_symbol()."""

    def test_single_candidate(self) -> None:
        """Single-candidate symbols ignore hints."""
        assert resolve_symbol("€", default_currency="USD") == "EUR"

    def test_hint_among_candidates(self) -> None:
        """A hint among the candidates wins."""
        assert resolve_symbol("CFA", default_currency="XAF") == "XAF"

    def test_first_candidate_fallback(self) -> None:
        """Without a usable hint the first candidate wins."""
        assert resolve_symbol("CFA") == "XOF"
        assert resolve_symbol("¥", default_currency="GBP") == "JPY"

    def test_unknown_symbol(self) -> None:
        """Symbols outside the table raise UnknownCurrencyError."""
        with pytest.raises(UnknownCurrencyError):
            resolve_symbol("@")


class TestMatchSymbol:
    """Tests for match_symbol()."""

    def test_finds_in_text(self) -> None:
        """A symbol amount is found in free text."""
        result = match_symbol("I paid $10 yesterday")
        assert result is not None
        assert result.amount == 10
        assert result.currency_code == "USD"
        assert result.raw == "$10"

    def test_hint_passed_through(self) -> None:
        """The hint reaches the strict parser."""
        result = match_symbol("cost: $15", default_currency="AUD")
        assert result is not None
        assert result.currency_code == "AUD"

    @pytest.mark.parametrize("text", ["", "no money", "100", f"${MAX_SAFE_INTEGER + 1}"])
    def test_returns_none(self, text: str) -> None:
        """Failures, including overflow, yield None."""
        assert match_symbol(text) is None

    def test_idempotent(self) -> None:
        """Repeated calls give identical results."""
        text = "Total: €1,200.50 incl. VAT"
        assert match_symbol(text) == match_symbol(text)
