"""Money parsing exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.

Hierarchy:
    MoneyError
    ├── MoneyParseError
    │   ├── InputError
    │   ├── FormatError
    │   ├── UnknownCurrencyError
    │   └── MinorUnitMismatchError
    └── ValueOverflowError

Python 3.13+. Zero external dependencies.
"""

from decimal import Decimal

from .codes import Diagnostic

__all__ = [
    "FormatError",
    "InputError",
    "MinorUnitMismatchError",
    "MoneyError",
    "MoneyParseError",
    "UnknownCurrencyError",
    "ValueOverflowError",
]


class MoneyError(Exception):
    """Base exception for all moneyparse errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize MoneyError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class MoneyParseError(MoneyError):
    """Text could not be turned into an amount.

    Attributes:
        input_value: The text that failed to parse
    """

    def __init__(self, message: str | Diagnostic, *, input_value: str = "") -> None:
        """Initialize MoneyParseError.

        Args:
            message: Error message string OR Diagnostic object
            input_value: The text that failed to parse
        """
        super().__init__(message)
        self.input_value = input_value


class InputError(MoneyParseError):
    """Input is absent, empty, or not a string.

    Raised before any pattern is attempted.
    """


class FormatError(MoneyParseError):
    """Text does not have the shape a recognizer requires.

    Covers malformed grouping, unknown magnitude suffixes, missing
    quantities, multiple decimal points, signs, and stray marks.
    """


class UnknownCurrencyError(MoneyParseError):
    """A currency token does not resolve to a catalog entry."""


class MinorUnitMismatchError(MoneyParseError):
    """A minor-unit clause does not belong to the resolved currency.

    Example:
        "one yen and 5 cents"  <- yen has no minor unit
    """


class ValueOverflowError(MoneyError):
    """Amount exceeds the largest exactly representable integer.

    Attributes:
        value: The offending amount
    """

    def __init__(self, message: str | Diagnostic, value: int | Decimal | None = None) -> None:
        """Initialize ValueOverflowError.

        Args:
            message: Error message string OR Diagnostic object
            value: The amount that exceeded the bound
        """
        super().__init__(message)
        self.value = value
