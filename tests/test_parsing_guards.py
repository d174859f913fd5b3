"""Tests for input and overflow guards.

The overflow bound is shared by every recognizer: MAX_SAFE_INTEGER itself
is accepted and MAX_SAFE_INTEGER + 1 is rejected, in both int and Decimal.
"""

from decimal import Decimal

import pytest
from hypothesis import given
from hypothesis import strategies as st

from moneyparse.constants import MAX_SAFE_INTEGER
from moneyparse.diagnostics import DiagnosticCode, InputError, ValueOverflowError
from moneyparse.parsing.guards import ensure_safe_amount, ensure_text, is_safe_amount


class TestEnsureText:
    """Tests for ensure_text()."""

    def test_returns_input(self) -> None:
        """Valid text is returned unchanged."""
        assert ensure_text("  $100 ") == "  $100 "

    @pytest.mark.parametrize("value", ["", "   ", "\t\n", None, 123, b"100", ["100"]])
    def test_rejects(self, value: object) -> None:
        """Empty, blank and non-string input raise InputError."""
        with pytest.raises(InputError, match="Input must be a non-empty string") as exc_info:
            ensure_text(value)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.INPUT_INVALID


class TestEnsureSafeAmount:
    """Tests for ensure_safe_amount()."""

    def test_bound_accepted(self) -> None:
        """The bound itself is accepted."""
        assert ensure_safe_amount(MAX_SAFE_INTEGER) == MAX_SAFE_INTEGER

    def test_bound_plus_one_rejected(self) -> None:
        """One above the bound is rejected with the value attached."""
        with pytest.raises(ValueOverflowError) as exc_info:
            ensure_safe_amount(MAX_SAFE_INTEGER + 1)
        assert exc_info.value.value == MAX_SAFE_INTEGER + 1

    def test_decimal_just_above_bound_rejected(self) -> None:
        """A fractional amount just above the bound is rejected exactly."""
        with pytest.raises(ValueOverflowError):
            ensure_safe_amount(Decimal(MAX_SAFE_INTEGER) + Decimal("0.01"))

    def test_decimal_at_bound_accepted(self) -> None:
        """A Decimal equal to the bound is accepted."""
        value = Decimal(f"{MAX_SAFE_INTEGER}.00")
        assert ensure_safe_amount(value) == MAX_SAFE_INTEGER

    @given(st.integers(min_value=0, max_value=MAX_SAFE_INTEGER))
    def test_in_range_is_identity(self, value: int) -> None:
        """In-range values pass through unchanged."""
        assert ensure_safe_amount(value) is value

    @given(st.integers(min_value=MAX_SAFE_INTEGER + 1))
    def test_out_of_range_always_rejected(self, value: int) -> None:
        """Every value above the bound is rejected."""
        with pytest.raises(ValueOverflowError):
            ensure_safe_amount(value)


class TestIsSafeAmount:
    """Tests for is_safe_amount()."""

    @pytest.mark.parametrize("value", [0, 1, MAX_SAFE_INTEGER, Decimal("1.23")])
    def test_accepts(self, value: object) -> None:
        """Finite non-negative in-range amounts are safe."""
        assert is_safe_amount(value)

    @pytest.mark.parametrize(
        "value",
        [
            None,
            True,
            1.5,
            -1,
            MAX_SAFE_INTEGER + 1,
            Decimal("NaN"),
            Decimal("Infinity"),
            "100",
        ],
    )
    def test_rejects(self, value: object) -> None:
        """None, bools, floats, negatives, non-finite and oversized values are not."""
        assert not is_safe_amount(value)
