"""Tests for the magnitude shorthand recognizer."""

from decimal import Decimal

import pytest
from hypothesis import given
from hypothesis import strategies as st

from moneyparse.diagnostics import DiagnosticCode, FormatError, ValueOverflowError
from moneyparse.parsing import MAGNITUDE_MULTIPLIERS, match_magnitude, parse_magnitude


class TestParseMagnitude:
    """Tests for parse_magnitude()."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("10k", 10_000),
            ("1.5k", 1500),
            ("2.5m", 2_500_000),
            ("2bn", 2_000_000_000),
            ("3b", 3_000_000_000),
            ("10K", 10_000),
            ("  7M ", 7_000_000),
            ("0.5BN", 500_000_000),
        ],
    )
    def test_valid(self, text: str, expected: int) -> None:
        """Each suffix multiplies the number, case-insensitively."""
        assert parse_magnitude(text) == expected

    def test_integer_stays_int(self) -> None:
        """Whole numbers give int results."""
        assert isinstance(parse_magnitude("10k"), int)

    def test_decimal_is_exact(self) -> None:
        """Decimal numbers give exact Decimal results."""
        result = parse_magnitude("1.1k")
        assert isinstance(result, Decimal)
        assert result == Decimal("1100")

    def test_unknown_suffix(self) -> None:
        """Suffixes outside the table are a format error, not ignored."""
        with pytest.raises(FormatError, match="Unrecognized magnitude suffix 'x'") as exc_info:
            parse_magnitude("10x")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.MAGNITUDE_SUFFIX_UNKNOWN

    @pytest.mark.parametrize("text", ["10", "k", "10 k", "1,000k", "-5k", "1.2.3k", "10k!"])
    def test_invalid_shape(self, text: str) -> None:
        """Missing suffix, missing number and stray marks are rejected."""
        with pytest.raises(FormatError):
            parse_magnitude(text)

    def test_overflow(self) -> None:
        """Expanded values above the bound are rejected."""
        with pytest.raises(ValueOverflowError):
            parse_magnitude("9007200bn")

    @given(
        st.integers(min_value=0, max_value=9_000),
        st.sampled_from(sorted(MAGNITUDE_MULTIPLIERS)),
    )
    def test_value_is_number_times_multiplier(self, number: int, suffix: str) -> None:
        """The result is always number x multiplier."""
        assert parse_magnitude(f"{number}{suffix}") == number * MAGNITUDE_MULTIPLIERS[suffix]


class TestMatchMagnitude:
    """Tests for match_magnitude()."""

    def test_finds_in_text(self) -> None:
        """Shorthand is found with its literal span."""
        result = match_magnitude("Raised 2.5M in funding")
        assert result is not None
        assert result.value == 2_500_000
        assert result.raw == "2.5M"

    def test_prefers_bn_over_b(self) -> None:
        """'2bn' is read as billions with the full suffix."""
        result = match_magnitude("worth 2bn")
        assert result is not None
        assert result.raw == "2bn"
        assert result.value == 2_000_000_000

    def test_requires_word_boundary(self) -> None:
        """Suffixes glued to more letters do not match."""
        assert match_magnitude("10kg of rice") is None
        assert match_magnitude("5 km") is None

    def test_ignores_tail_of_grouped_number(self) -> None:
        """No match is made inside a comma-grouped number."""
        assert match_magnitude("1,500k") is None

    def test_overflow_returns_none(self) -> None:
        """Out-of-range shorthand yields None."""
        assert match_magnitude("about 9007200bn") is None

    def test_no_match(self) -> None:
        """Text without shorthand yields None."""
        assert match_magnitude("nothing here") is None
        assert match_magnitude("") is None
