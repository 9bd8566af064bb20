"""
Conversion orchestrator: sign, zero, decimals and the final cleanup pass.

Flow:
  ┌──────────────┐
  │  raw value   │   int / str / Decimal / float
  └──────┬───────┘
         │
  ┌──────▼───────┐
  │  Normalizer  │   → NumericInput(is_negative, integer_part, decimal_digits)
  └──────┬───────┘
         │
  ┌──────▼───────┐
  │ Orchestrator │   zero shortcut, sign word, decimal separator
  └──────┬───────┘
         │
  ┌──────▼──────────────────┐
  │ Greedy or Segment engine │   chosen by profile.strategy
  └──────┬──────────────────┘
         │
  ┌──────▼───────┐
  │   cleanup    │   profile hook, idempotent
  └──────────────┘

Sign and decimal handling only wrap the engine output; they never reach
into the engines.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any

from .exceptions import ConfigurationError
from .greedy import GreedyEngine
from .models import DecimalMode, NumericInput, Strategy
from .normalizer import parse_numeric_value
from .profile import LanguageProfile
from .registry import get_profile
from .segment import SegmentEngine

logger = logging.getLogger(__name__)


# ─── Integer Dispatch ───────────────────────────────────────────────


def integer_to_words(n: int, profile: LanguageProfile) -> str:
    """Spell a non-negative integer with the engine the profile selects."""
    if profile.strategy is Strategy.GREEDY:
        return GreedyEngine(profile).integer_to_words(n)
    if profile.strategy is Strategy.SEGMENT:
        return SegmentEngine(profile).integer_to_words(n)
    raise ConfigurationError(
        "UNKNOWN_STRATEGY",
        f"Language profile {profile.code!r} has unknown strategy {profile.strategy!r}",
        {"profile": profile.code},
    )


# ─── Decimal Part ───────────────────────────────────────────────────


def decimal_part_to_words(decimal_digits: str, profile: LanguageProfile) -> list[str]:
    """Spell the digits after the decimal point.

    Leading zeros are always read one by one ("05" -> zero, five). The rest is
    read as one number in GROUPED mode ("14" -> fourteen) or digit by digit in
    PER_DIGIT mode ("14" -> one, four), zeros included.
    """
    stripped = decimal_digits.lstrip("0")
    words = [profile.zero_word] * (len(decimal_digits) - len(stripped))

    if not stripped:
        return words

    if profile.decimal_mode is DecimalMode.PER_DIGIT:
        words.extend(integer_to_words(int(digit), profile) for digit in stripped)
    else:
        words.append(integer_to_words(int(stripped), profile))
    return words


# ─── Orchestrator ───────────────────────────────────────────────────


def convert(
    is_negative: bool,
    integer_part: int,
    decimal_digits: str | None,
    profile: LanguageProfile,
) -> str:
    """Convert an already-normalized number into words.

    Args:
        is_negative: prepend the profile's negative word.
        integer_part: non-negative integer.
        decimal_digits: ASCII digits after the point, or ""/None.
        profile: the language to speak.

    Returns:
        The cleaned-up phrase.
    """
    if integer_part == 0 and not decimal_digits:
        return profile.zero_word

    words: list[str] = []
    if is_negative:
        words.append(profile.negative_word)

    words.append(integer_to_words(integer_part, profile))

    if decimal_digits:
        words.append(profile.decimal_separator_word)
        words.extend(decimal_part_to_words(decimal_digits, profile))

    text = profile.word_separator.join(word for word in words if word)
    return profile.cleanup(text)


class NumeralConverter:
    """Converts raw values to words in one language.

    Usage:
        converter = NumeralConverter("en")
        converter.run("-3.14")   # "minus three point fourteen"

        feminine = NumeralConverter("ru", gender="feminine")
        feminine.run(1)          # "одна"
    """

    def __init__(self, language: str | None = None, /, **options: Any):
        self.profile = get_profile(language, **options)

    @property
    def language(self) -> str:
        return self.profile.code

    def convert(self, number: NumericInput) -> str:
        return convert(
            number.is_negative,
            number.integer_part,
            number.decimal_digits,
            self.profile,
        )

    def run(self, value: int | str | Decimal | float) -> str:
        """Normalize ``value`` and convert it."""
        number = parse_numeric_value(value)
        logger.debug(
            "converting %s (negative=%s, bits=%d, decimals=%r) with %s engine",
            self.profile.code,
            number.is_negative,
            number.integer_part.bit_length(),
            number.decimal_digits,
            self.profile.strategy.value,
        )
        return self.convert(number)


def to_words(
    value: int | str | Decimal | float, language: str | None = None, /, **options: Any
) -> str:
    """One-shot helper: ``to_words(42, "en") -> "forty-two"``."""
    return NumeralConverter(language, **options).run(value)
