"""Diagnostic system for money parsing errors.

Provides structured error diagnostics with codes, hints, and a typed
exception hierarchy shared by every recognizer.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    FormatError,
    InputError,
    MinorUnitMismatchError,
    MoneyError,
    MoneyParseError,
    UnknownCurrencyError,
    ValueOverflowError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "FormatError",
    "InputError",
    "MinorUnitMismatchError",
    "MoneyError",
    "MoneyParseError",
    "OutputFormat",
    "UnknownCurrencyError",
    "ValueOverflowError",
]
