"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from decimal import Decimal

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Recognizers raise ``SomeError(ErrorTemplate.xxx(...), input_value=...)``
    so that messages stay testable and consistent across recognizers.
    """

    @staticmethod
    def input_invalid(value: object) -> Diagnostic:
        """Input is not a non-empty string.

        Args:
            value: The rejected input

        Returns:
            Diagnostic for INPUT_INVALID
        """
        msg = f"Input must be a non-empty string, got {type(value).__name__}"
        return Diagnostic(
            code=DiagnosticCode.INPUT_INVALID,
            message=msg,
            hint="Pass the text to parse as a str",
        )

    @staticmethod
    def number_format_invalid(value: str, recognizer: str) -> Diagnostic:
        """Number text does not match the recognizer's grammar.

        Args:
            value: The input text
            recognizer: Recognizer name

        Returns:
            Diagnostic for NUMBER_FORMAT_INVALID
        """
        msg = f"Invalid number format: '{value}'"
        return Diagnostic(
            code=DiagnosticCode.NUMBER_FORMAT_INVALID,
            message=msg,
            hint="Use digits, optional comma groups of three, and at most one decimal point",
            recognizer=recognizer,
        )

    @staticmethod
    def magnitude_format_invalid(value: str) -> Diagnostic:
        """Magnitude text is not <number><suffix>.

        Args:
            value: The input text

        Returns:
            Diagnostic for MAGNITUDE_FORMAT_INVALID
        """
        msg = f"Invalid magnitude format: '{value}'"
        return Diagnostic(
            code=DiagnosticCode.MAGNITUDE_FORMAT_INVALID,
            message=msg,
            hint="Write a number directly followed by k, m, b or bn (e.g. 2.5m)",
            recognizer="magnitude",
        )

    @staticmethod
    def magnitude_suffix_unknown(suffix: str, value: str) -> Diagnostic:
        """Magnitude suffix is outside the closed table.

        Args:
            suffix: The suffix that was found
            value: The input text

        Returns:
            Diagnostic for MAGNITUDE_SUFFIX_UNKNOWN
        """
        msg = f"Unrecognized magnitude suffix '{suffix}' in '{value}'"
        return Diagnostic(
            code=DiagnosticCode.MAGNITUDE_SUFFIX_UNKNOWN,
            message=msg,
            hint="Supported suffixes: k, m, b, bn",
            recognizer="magnitude",
        )

    @staticmethod
    def symbol_pattern_not_found(value: str) -> Diagnostic:
        """No symbol/amount pair in the text.

        Args:
            value: The input text

        Returns:
            Diagnostic for SYMBOL_PATTERN_NOT_FOUND
        """
        msg = f"No currency symbol pattern found in: '{value}'"
        return Diagnostic(
            code=DiagnosticCode.SYMBOL_PATTERN_NOT_FOUND,
            message=msg,
            hint="Place a currency symbol directly before or after the amount",
            recognizer="symbol",
        )

    @staticmethod
    def abbreviation_pattern_not_found(value: str) -> Diagnostic:
        """No ISO code/amount pair in the text.

        Args:
            value: The input text

        Returns:
            Diagnostic for ABBREVIATION_PATTERN_NOT_FOUND
        """
        msg = f"No currency abbreviation pattern found in: '{value}'"
        return Diagnostic(
            code=DiagnosticCode.ABBREVIATION_PATTERN_NOT_FOUND,
            message=msg,
            hint="Separate the ISO 4217 code and the amount with a space (e.g. USD 100)",
            recognizer="abbreviation",
        )

    @staticmethod
    def slang_term_not_found(value: str) -> Diagnostic:
        """No slang token in the text.

        Args:
            value: The input text

        Returns:
            Diagnostic for SLANG_TERM_NOT_FOUND
        """
        msg = f"Unrecognized slang term in: '{value}'"
        return Diagnostic(
            code=DiagnosticCode.SLANG_TERM_NOT_FOUND,
            message=msg,
            recognizer="slang",
        )

    @staticmethod
    def quantity_invalid(quantity: str, value: str) -> Diagnostic:
        """Quantity tokens are neither numeral, article nor worded number.

        Args:
            quantity: The quantity tokens, space-joined
            value: The input text

        Returns:
            Diagnostic for QUANTITY_INVALID
        """
        msg = f"Invalid quantity '{quantity}' in: '{value}'"
        return Diagnostic(
            code=DiagnosticCode.QUANTITY_INVALID,
            message=msg,
            hint="Use a numeral, 'a'/'an', or English number words",
        )

    @staticmethod
    def worded_number_invalid(value: str, reason: str) -> Diagnostic:
        """Number words do not compose into a cardinal.

        Args:
            value: The words that failed
            reason: Which rule was broken

        Returns:
            Diagnostic for WORDED_NUMBER_INVALID
        """
        msg = f"Invalid worded number '{value}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.WORDED_NUMBER_INVALID,
            message=msg,
            recognizer="worded_number",
        )

    @staticmethod
    def phrase_format_invalid(value: str, reason: str) -> Diagnostic:
        """Contextual phrase has trailing text that is not a minor-unit clause.

        Args:
            value: The input text
            reason: What was unexpected

        Returns:
            Diagnostic for PHRASE_FORMAT_INVALID
        """
        msg = f"Invalid contextual phrase '{value}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.PHRASE_FORMAT_INVALID,
            message=msg,
            hint=(
                "Expected '<quantity> <currency>' optionally followed by "
                "'and <quantity> <minor unit>'"
            ),
            recognizer="contextual_phrase",
        )

    @staticmethod
    def currency_symbol_unknown(symbol: str, value: str) -> Diagnostic:
        """Matched symbol has no table entry or its code is not in the catalog.

        Args:
            symbol: The matched symbol
            value: The input text

        Returns:
            Diagnostic for CURRENCY_SYMBOL_UNKNOWN
        """
        msg = f"Unknown currency symbol '{symbol}' in: '{value}'"
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_SYMBOL_UNKNOWN,
            message=msg,
            recognizer="symbol",
        )

    @staticmethod
    def currency_code_unknown(code: str, value: str) -> Diagnostic:
        """ISO code is not in the catalog.

        Args:
            code: The code that was found
            value: The input text

        Returns:
            Diagnostic for CURRENCY_CODE_UNKNOWN
        """
        msg = f"Unknown currency code '{code}' in: '{value}'"
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_CODE_UNKNOWN,
            message=msg,
            hint="Use an active ISO 4217 code (USD, EUR, GBP)",
        )

    @staticmethod
    def currency_name_unknown(value: str) -> Diagnostic:
        """No currency name or code found in a phrase.

        Args:
            value: The input text

        Returns:
            Diagnostic for CURRENCY_NAME_UNKNOWN
        """
        msg = f"Unrecognized currency in: '{value}'"
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_NAME_UNKNOWN,
            message=msg,
            hint="Name the currency (dollars, euros, pounds, yen) or give its ISO code",
            recognizer="contextual_phrase",
        )

    @staticmethod
    def minor_unit_unsupported(unit: str, currency: str) -> Diagnostic:
        """Minor unit does not belong to the currency.

        Args:
            unit: The minor-unit word
            currency: The resolved ISO code

        Returns:
            Diagnostic for MINOR_UNIT_UNSUPPORTED
        """
        msg = f"Minor unit not supported: '{unit}' for {currency}"
        return Diagnostic(
            code=DiagnosticCode.MINOR_UNIT_UNSUPPORTED,
            message=msg,
            hint=f"Check the minor unit name used with {currency}",
            recognizer="contextual_phrase",
        )

    @staticmethod
    def amount_overflow(value: int | Decimal, bound: int) -> Diagnostic:
        """Amount exceeds the exact-integer bound.

        Args:
            value: The offending amount
            bound: The largest accepted amount

        Returns:
            Diagnostic for AMOUNT_OVERFLOW
        """
        msg = f"Amount {value} exceeds maximum safe integer ({bound})"
        return Diagnostic(
            code=DiagnosticCode.AMOUNT_OVERFLOW,
            message=msg,
            hint="Amounts above 2**53 - 1 cannot be represented exactly",
        )
