"""Worded-number parsing and quantity resolution.

Shared by the slang and contextual-phrase recognizers:

- normalize_text(): lowercase, trim, collapse whitespace
- parse_worded_number(): English cardinal words -> int
- resolve_quantity(): quantity window (numeral, article or words) -> Amount

Worded numbers are parsed by a small state machine over tokens. Each token
has a kind; the kind of the previous token decides which kinds may follow:

    unit     after: start, tens, hundred, scale, and
    teen     after: start, hundred, scale, and
    tens     after: start, hundred, scale, and
    hundred  after: start, article, unit, teen, tens
    scale    after: start, article, unit, teen, tens, hundred
    and      after: hundred, scale (never last)
    article  only first, and only before hundred or scale

Scale words must strictly descend ("one million two thousand", never
"one thousand two million"). "zero" is only valid on its own.

Python 3.13+.
"""

import logging
import re
from collections.abc import Sequence
from enum import StrEnum
from types import MappingProxyType

from moneyparse.diagnostics import ErrorTemplate, FormatError

from .guards import Amount
from .numbers import to_amount

__all__ = [
    "ARTICLES",
    "SCALE_WORDS",
    "TEEN_WORDS",
    "TENS_WORDS",
    "UNIT_WORDS",
    "normalize_text",
    "parse_worded_number",
    "resolve_quantity",
]

logger = logging.getLogger(__name__)

UNIT_WORDS: MappingProxyType[str, int] = MappingProxyType({
    "zero": 0, "one": 1, "two": 2, "three": 3, "four": 4,
    "five": 5, "six": 6, "seven": 7, "eight": 8, "nine": 9,
})

TEEN_WORDS: MappingProxyType[str, int] = MappingProxyType({
    "ten": 10, "eleven": 11, "twelve": 12, "thirteen": 13, "fourteen": 14,
    "fifteen": 15, "sixteen": 16, "seventeen": 17, "eighteen": 18, "nineteen": 19,
})

TENS_WORDS: MappingProxyType[str, int] = MappingProxyType({
    "twenty": 20, "thirty": 30, "forty": 40, "fifty": 50,
    "sixty": 60, "seventy": 70, "eighty": 80, "ninety": 90,
})

SCALE_WORDS: MappingProxyType[str, int] = MappingProxyType({
    "thousand": 10**3,
    "million": 10**6,
    "billion": 10**9,
    "trillion": 10**12,
})

ARTICLES: frozenset[str] = frozenset({"a", "an"})

_HUNDRED = "hundred"
_AND = "and"

_NUMERAL = re.compile(r"^\d+(?:\.\d+)?$", re.ASCII)


class _Kind(StrEnum):
    """Token kinds of the worded-number grammar."""

    ARTICLE = "article"
    UNIT = "unit"
    TEEN = "teen"
    TENS = "tens"
    HUNDRED = "hundred"
    SCALE = "scale"
    AND = "and"


# Kinds allowed to precede each kind; None is the start state.
_ALLOWED_AFTER: MappingProxyType[_Kind, frozenset[_Kind | None]] = MappingProxyType({
    _Kind.UNIT: frozenset({None, _Kind.TENS, _Kind.HUNDRED, _Kind.SCALE, _Kind.AND}),
    _Kind.TEEN: frozenset({None, _Kind.HUNDRED, _Kind.SCALE, _Kind.AND}),
    _Kind.TENS: frozenset({None, _Kind.HUNDRED, _Kind.SCALE, _Kind.AND}),
    _Kind.HUNDRED: frozenset({None, _Kind.ARTICLE, _Kind.UNIT, _Kind.TEEN, _Kind.TENS}),
    _Kind.SCALE: frozenset(
        {None, _Kind.ARTICLE, _Kind.UNIT, _Kind.TEEN, _Kind.TENS, _Kind.HUNDRED}
    ),
    _Kind.AND: frozenset({_Kind.HUNDRED, _Kind.SCALE}),
    _Kind.ARTICLE: frozenset({None}),
})


def normalize_text(text: str) -> str:
    """Lowercase, trim, and collapse internal whitespace to single spaces."""
    return " ".join(text.lower().split())


def _classify(token: str) -> _Kind | None:
    if token in UNIT_WORDS:
        return _Kind.UNIT
    if token in TEEN_WORDS:
        return _Kind.TEEN
    if token in TENS_WORDS:
        return _Kind.TENS
    if token == _HUNDRED:
        return _Kind.HUNDRED
    if token in SCALE_WORDS:
        return _Kind.SCALE
    if token == _AND:
        return _Kind.AND
    if token in ARTICLES:
        return _Kind.ARTICLE
    return None


def _tokenize_words(text_or_tokens: str | Sequence[str]) -> list[str]:
    if isinstance(text_or_tokens, str):
        raw_tokens: Sequence[str] = text_or_tokens.split()
    else:
        raw_tokens = text_or_tokens
    tokens: list[str] = []
    for token in raw_tokens:
        # "twenty-five" -> "twenty", "five"
        tokens.extend(part for part in token.lower().split("-") if part)
    return tokens


def parse_worded_number(text_or_tokens: str | Sequence[str]) -> int:
    """Compose English cardinal number words into an integer.

    Args:
        text_or_tokens: Words as one string ("one thousand two hundred")
            or as a token sequence

    Returns:
        The integer value

    Raises:
        FormatError: If a word is not a number word or the sequence breaks
            the grammar

    Examples:
        >>> parse_worded_number("one thousand two hundred")
        1200
        >>> parse_worded_number("a hundred and five")
        105
        >>> parse_worded_number(["twenty-five"])
        25
    """
    tokens = _tokenize_words(text_or_tokens)
    display = " ".join(tokens)

    def fail(reason: str) -> FormatError:
        return FormatError(
            ErrorTemplate.worded_number_invalid(display, reason), input_value=display
        )

    if not tokens:
        raise fail("no number words")

    total = 0
    current = 0
    last_kind: _Kind | None = None
    last_scale: int | None = None

    for token in tokens:
        kind = _classify(token)
        if kind is None:
            raise fail(f"'{token}' is not a number word")
        if last_kind not in _ALLOWED_AFTER[kind]:
            raise fail(f"'{token}' cannot follow {last_kind or 'the start'}")

        match kind:
            case _Kind.UNIT:
                if token == "zero" and len(tokens) > 1:
                    raise fail("'zero' must stand alone")
                current += UNIT_WORDS[token]
            case _Kind.TEEN:
                current += TEEN_WORDS[token]
            case _Kind.TENS:
                current += TENS_WORDS[token]
            case _Kind.HUNDRED:
                if current >= 100:
                    raise fail("'hundred' cannot multiply a value of a hundred or more")
                current = (current or 1) * 100
            case _Kind.SCALE:
                scale = SCALE_WORDS[token]
                if last_scale is not None and scale >= last_scale:
                    raise fail(f"'{token}' must be smaller than the preceding scale word")
                total += (current or 1) * scale
                current = 0
                last_scale = scale
            case _Kind.AND | _Kind.ARTICLE:
                pass

        last_kind = kind

    if last_kind in (_Kind.AND, _Kind.ARTICLE):
        raise fail(f"cannot end with '{tokens[-1]}'")

    return total + current


def resolve_quantity(tokens: Sequence[str], text: str | None = None) -> Amount:
    """Resolve a quantity window to a number.

    Resolution order:
        1. empty window -> 1
        2. a sole article ("a", "an") -> 1
        3. a single numeral ("5", "2.5") -> its value
        4. otherwise the worded-number grammar

    Args:
        tokens: Lowercase tokens preceding a currency or slang term
        text: Full input, used in the error message

    Returns:
        The quantity

    Raises:
        FormatError: If the window is none of the above
    """
    if not tokens:
        return 1
    if len(tokens) == 1:
        (token,) = tokens
        if token in ARTICLES:
            return 1
        if _NUMERAL.match(token):
            return to_amount(token)

    quantity = " ".join(tokens)
    try:
        return parse_worded_number(tokens)
    except FormatError as e:
        logger.debug("Quantity %r rejected: %s", quantity, e)
        raise FormatError(
            ErrorTemplate.quantity_invalid(quantity, text if text is not None else quantity),
            input_value=text if text is not None else quantity,
        ) from e
