"""Regex parsing pipeline.

Runs text through an ordered list of steps. Each step is a pure function
``(text, context) -> context`` that returns a new ParseContext with its own
fields filled in; no step mutates the context it receives.

Default pipeline:
    1. currency_detection_step - first catalog ISO code, else $ / € / £ / ¥
    2. numeric_detection_step - first bare numeral (integer or decimal)
    3. pattern_specific_step - guarantees ``matches`` is a mapping

``RegexPipeline.extended()`` appends one step per recognizer, storing each
tolerant recognizer's result under ``context.matches[<name>]``.

Example:
    >>> from moneyparse.pipeline import RegexPipeline
    >>> result = RegexPipeline.default().run("Total: 25 USD")
    >>> result.currency, result.amount
    ('USD', 25)

Thread-safe for concurrent ``run()`` calls. ``add_step()`` mutates the
pipeline and should not race with ``run()`` on the same instance.

Python 3.13+.
"""

import logging
import re
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Self

from moneyparse.catalog import is_valid_currency_code
from moneyparse.diagnostics import ErrorTemplate, InputError, ValueOverflowError
from moneyparse.parsing import (
    match_abbreviation,
    match_contextual_phrase,
    match_magnitude,
    match_plain_number,
    match_separated_number,
    match_slang_term,
    match_symbol,
)
from moneyparse.parsing.guards import Amount, ensure_safe_amount
from moneyparse.parsing.numbers import to_amount

__all__ = [
    "PipelineStep",
    "ParseContext",
    "RegexPipeline",
    "currency_detection_step",
    "numeric_detection_step",
    "parse_money",
    "pattern_specific_step",
    "recognizer_step",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ParseContext:
    """Result accumulated by a pipeline run.

    Attributes:
        original: The input text
        currency: Detected ISO 4217 code, if any
        amount: First numeral in the text, if any
        matches: Recognizer results keyed by step name
    """

    original: str
    currency: str | None = None
    amount: Amount | None = None
    matches: Mapping[str, object] | None = None


type PipelineStep = Callable[[str, ParseContext], ParseContext]
"""Pure function from (text, context) to a new context."""

_ISO_TOKEN = re.compile(r"\b([A-Z]{3})\b")
_NUMERAL = re.compile(r"\b(\d+(?:\.\d+)?)\b", re.ASCII)

# Shortlist for bare glyphs when no ISO code is present.
_SYMBOL_SHORTLIST: MappingProxyType[str, str] = MappingProxyType({
    "$": "USD",
    "€": "EUR",
    "£": "GBP",
    "¥": "JPY",
})
_SHORTLIST_PATTERN = re.compile("|".join(re.escape(s) for s in _SYMBOL_SHORTLIST))


def currency_detection_step(text: str, context: ParseContext) -> ParseContext:
    """Set ``currency`` from the first catalog ISO code, else the symbol shortlist."""
    for found in _ISO_TOKEN.finditer(text):
        code = found.group(1)
        if is_valid_currency_code(code):
            return replace(context, currency=code)

    symbol = _SHORTLIST_PATTERN.search(text)
    if symbol is not None:
        return replace(context, currency=_SYMBOL_SHORTLIST[symbol.group(0)])
    return replace(context)


def numeric_detection_step(text: str, context: ParseContext) -> ParseContext:
    """Set ``amount`` from the first bare numeral."""
    found = _NUMERAL.search(text)
    if found is None:
        return replace(context)
    try:
        amount = ensure_safe_amount(to_amount(found.group(1)))
    except ValueOverflowError as e:
        logger.debug("Numeral skipped: %s", e)
        return replace(context)
    return replace(context, amount=amount)


def pattern_specific_step(text: str, context: ParseContext) -> ParseContext:  # noqa: ARG001
    """Extension point: guarantee ``matches`` is a (fresh) mapping."""
    return replace(context, matches=MappingProxyType(dict(context.matches or {})))


def recognizer_step(name: str, matcher: Callable[[str], object | None]) -> PipelineStep:
    """Build a step that records a tolerant recognizer's result.

    Args:
        name: Key under which the result is stored in ``matches``
        matcher: A ``match_*`` function

    Returns:
        PipelineStep adding ``matches[name]`` when the recognizer finds something

    Example:
        >>> pipeline = RegexPipeline.default().add_step(recognizer_step("slang", match_slang_term))
        >>> pipeline.run("three fivers").matches["slang"].value
        15
    """

    def step(text: str, context: ParseContext) -> ParseContext:
        try:
            result = matcher(text)
        except ValueOverflowError as e:
            # Contextual phrases report overflow instead of returning None.
            logger.debug("Recognizer %s overflowed: %s", name, e)
            result = None
        if result is None:
            return replace(context)
        matches = dict(context.matches or {})
        matches[name] = result
        return replace(context, matches=MappingProxyType(matches))

    step.__name__ = f"{name}_step"
    return step


class RegexPipeline:
    """Ordered list of detection steps.

    Args:
        steps: Initial steps, run in order (default: none)
    """

    __slots__ = ("_steps",)

    def __init__(self, steps: Iterable[PipelineStep] | None = None) -> None:
        self._steps: list[PipelineStep] = list(steps) if steps is not None else []

    @property
    def steps(self) -> tuple[PipelineStep, ...]:
        """Snapshot of the configured steps."""
        return tuple(self._steps)

    def add_step(self, step: PipelineStep) -> Self:
        """Append a step. Returns self for chaining."""
        self._steps.append(step)
        return self

    def run(self, text: str) -> ParseContext:
        """Run text through every step in order.

        Blank text runs through the steps like any other string.

        Args:
            text: Input text

        Returns:
            Context produced by the last step

        Raises:
            InputError: If text is not a string
        """
        if not isinstance(text, str):
            raise InputError(ErrorTemplate.input_invalid(text))
        context = ParseContext(original=text)
        for step in tuple(self._steps):
            logger.debug("Pipeline step %s", getattr(step, "__name__", step))
            context = step(text, context)
        return context

    @classmethod
    def default(cls) -> Self:
        """Pipeline with currency detection, numeric detection, and the matches step."""
        return cls([currency_detection_step, numeric_detection_step, pattern_specific_step])

    @classmethod
    def extended(cls) -> Self:
        """Default pipeline plus one step per recognizer."""
        pipeline = cls.default()
        for name, matcher in (
            ("symbol", match_symbol),
            ("abbreviation", match_abbreviation),
            ("magnitude", match_magnitude),
            ("slang", match_slang_term),
            ("contextual_phrase", match_contextual_phrase),
            ("separated_number", match_separated_number),
            ("plain_number", match_plain_number),
        ):
            pipeline.add_step(recognizer_step(name, matcher))
        return pipeline

    def __repr__(self) -> str:
        names = ", ".join(getattr(step, "__name__", repr(step)) for step in self._steps)
        return f"RegexPipeline([{names}])"


_DEFAULT_PIPELINE = RegexPipeline.default()


def parse_money(text: str) -> ParseContext:
    """Run text through the default pipeline.

    Example:
        >>> parse_money("Paid $10")
        ParseContext(original='Paid $10', currency='USD', amount=10, matches=mappingproxy({}))
    """
    return _DEFAULT_PIPELINE.run(text)
