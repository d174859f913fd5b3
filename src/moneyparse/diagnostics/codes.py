"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages for recognizer failures.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        4000-4099: Input and format errors (shape of the text)
        4100-4199: Currency resolution errors
        4200-4299: Minor unit errors
        4300-4399: Numeric range errors
    """

    # Input and format errors (4000-4099)
    INPUT_INVALID = 4001
    NUMBER_FORMAT_INVALID = 4002
    MAGNITUDE_FORMAT_INVALID = 4003
    MAGNITUDE_SUFFIX_UNKNOWN = 4004
    SYMBOL_PATTERN_NOT_FOUND = 4005
    ABBREVIATION_PATTERN_NOT_FOUND = 4006
    SLANG_TERM_NOT_FOUND = 4007
    QUANTITY_INVALID = 4008
    WORDED_NUMBER_INVALID = 4009
    PHRASE_FORMAT_INVALID = 4010

    # Currency resolution errors (4100-4199)
    CURRENCY_SYMBOL_UNKNOWN = 4101
    CURRENCY_CODE_UNKNOWN = 4102
    CURRENCY_NAME_UNKNOWN = 4103

    # Minor unit errors (4200-4299)
    MINOR_UNIT_UNSUPPORTED = 4201

    # Numeric range errors (4300-4399)
    AMOUNT_OVERFLOW = 4301


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the input
        recognizer: Name of the recognizer that produced the diagnostic
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    recognizer: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler message.

        Example output:
            error[MINOR_UNIT_UNSUPPORTED]: Minor unit not supported: 'cents' for JPY
              = recognizer: contextual_phrase
              = help: Check the minor unit name used with JPY

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
