"""Tests for the monetary slang recognizer."""

from decimal import Decimal

import pytest
from hypothesis import given
from hypothesis import strategies as st

from moneyparse.catalog import get_currency
from moneyparse.diagnostics import FormatError, InputError, ValueOverflowError
from moneyparse.parsing import SLANG_UNITS, match_slang_term, parse_slang_term


class TestSlangUnits:
    """Tests for SLANG_UNITS contents."""

    def test_currencies_in_catalog(self) -> None:
        """Every slang currency is a catalog code."""
        for unit in SLANG_UNITS.values():
            assert get_currency(unit.currency) is not None

    def test_unit_values(self) -> None:
        """Fivers and tenners carry their face value."""
        assert SLANG_UNITS["fiver"].unit == 5
        assert SLANG_UNITS["tenners"].unit == 10
        assert SLANG_UNITS["buck"].currency == "USD"
        assert SLANG_UNITS["quid"].currency == "GBP"


class TestParseSlangTerm:
    """Tests for parse_slang_term()."""

    @pytest.mark.parametrize(
        ("text", "value", "currency"),
        [
            ("buck", 1, "USD"),
            ("a buck", 1, "USD"),
            ("5 bucks", 5, "USD"),
            ("two bucks", 2, "USD"),
            ("twenty five bucks", 25, "USD"),
            ("a hundred bucks", 100, "USD"),
            ("quid", 1, "GBP"),
            ("50 quid", 50, "GBP"),
            ("fiver", 5, "GBP"),
            ("a fiver", 5, "GBP"),
            ("three fivers", 15, "GBP"),
            ("tenner", 10, "GBP"),
            ("two tenners", 20, "GBP"),
            ("one thousand tenners", 10_000, "GBP"),
            ("2.5 quid", Decimal("2.5"), "GBP"),
            ("FIVE BUCKS", 5, "USD"),
        ],
    )
    def test_valid(self, text: str, value: int | Decimal, currency: str) -> None:
        """Quantity times unit value, in the slang term's currency."""
        result = parse_slang_term(text)
        assert result.value == value
        assert result.currency == currency

    def test_raw_keeps_original_spacing(self) -> None:
        """raw is the literal span, untrimmed inside."""
        result = parse_slang_term("  Two   Bucks  ")
        assert result.value == 2
        assert result.raw == "Two   Bucks"

    def test_first_slang_token_wins(self) -> None:
        """Only the first slang token is used."""
        result = parse_slang_term("a fiver and a tenner")
        assert result.value == 5
        assert result.raw == "a fiver"

    def test_no_slang(self) -> None:
        """Text without a slang token is a format error."""
        with pytest.raises(FormatError, match="Unrecognized slang term"):
            parse_slang_term("banana")

    @pytest.mark.parametrize("text", ["abc bucks", "five and twenty quid", "I paid 5 bucks"])
    def test_invalid_quantity(self, text: str) -> None:
        """Words before the slang token must form a quantity."""
        with pytest.raises(FormatError, match="Invalid quantity"):
            parse_slang_term(text)

    @pytest.mark.parametrize("value", ["", "   ", None])
    def test_invalid_input(self, value: object) -> None:
        """Empty and non-string input raise InputError."""
        with pytest.raises(InputError):
            parse_slang_term(value)  # type: ignore[arg-type]

    def test_overflow(self) -> None:
        """Quantities above the bound are rejected."""
        with pytest.raises(ValueOverflowError):
            parse_slang_term("10000000000000000 bucks")

    def test_overflow_after_multiplying(self) -> None:
        """The bound applies to quantity times unit value."""
        with pytest.raises(ValueOverflowError):
            parse_slang_term("1000000000000000 tenners")

    @given(st.integers(min_value=0, max_value=10**9), st.sampled_from(sorted(SLANG_UNITS)))
    def test_numeral_quantity_multiplies(self, quantity: int, term: str) -> None:
        """Numeral quantities multiply by the unit value."""
        result = parse_slang_term(f"{quantity} {term}")
        assert result.value == quantity * SLANG_UNITS[term].unit
        assert result.currency == SLANG_UNITS[term].currency


class TestMatchSlangTerm:
    """Tests for match_slang_term()."""

    def test_finds_in_text(self) -> None:
        """Only the quantity words before the slang token are used."""
        result = match_slang_term("I paid 5 bucks yesterday")
        assert result is not None
        assert result.value == 5
        assert result.currency == "USD"
        assert result.raw == "5 bucks"

    def test_worded_quantity_in_text(self) -> None:
        """Worded quantities are picked up from free text."""
        result = match_slang_term("lend me three fivers please")
        assert result is not None
        assert result.value == 15

    def test_bare_term_in_text(self) -> None:
        """A term without a quantity counts as one."""
        result = match_slang_term("it cost me a quid")
        assert result is not None
        assert result.value == 1
        assert result.raw == "a quid"

    @pytest.mark.parametrize(
        "text", ["123", "", "no slang here", "debucks", "10000000000000000 bucks"]
    )
    def test_returns_none(self, text: str) -> None:
        """Failures, including overflow, yield None."""
        assert match_slang_term(text) is None
