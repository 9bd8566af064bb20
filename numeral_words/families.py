"""
Shared hook implementations for language families.

Languages in the same family share grammar, not vocabulary. Each helper here
takes the vocabulary as arguments and returns ready-made hooks, so a language
module is just word lists plus one call:

    profile = LanguageProfile(
        code="ru", ...,
        strategy=Strategy.SEGMENT,
        **slavic_hooks("ru", ones=..., teens=..., scale_forms=...),
    )

Families covered:
  - short scale    one word per power of 1000 (thousand, million, billion)
  - long scale     "thousand + previous scale" (mil, millón, mil millones)
  - Slavic         gendered ones, three plural forms per scale word
  - South Asian    0-99 word table, thousand / lakh / crore grouping
  - Turkic         greedy merge that drops "one" before hundred / thousand
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from .greedy import join_words
from .models import Gender, WordSet
from .profile import Combine, ScaleWordForIndex
from .scale_table import lookup_scale_word, place_values

# (parts, segment, scale_index) -> segment string
CombineParts = Callable[[list[str], int, int], str]


# ─── Pluralization ──────────────────────────────────────────────────


def pluralize_slavic(n: int, forms: Sequence[str]) -> str:
    """Pick the singular / few / many form for ``n``.

    1, 21, 31 -> singular; 2-4, 22-24 -> few; everything else (including the
    11-19 range) -> many.
    """
    last_digit = n % 10
    last_two = n % 100

    if 11 <= last_two <= 19:
        return forms[2]
    if last_digit == 1:
        return forms[0]
    if 2 <= last_digit <= 4:
        return forms[1]
    return forms[2]


# ─── Short Scale ────────────────────────────────────────────────────


def short_scale_hooks(
    language: str,
    *,
    ones: Sequence[str],
    teens: Sequence[str],
    tens: Sequence[str],
    scale_words: Sequence[str],
    hundred_word: str = "",
    hundreds: Sequence[str] | None = None,
    one_before_hundred: bool = True,
    combine_parts: CombineParts | None = None,
    separator: str = " ",
) -> dict[str, Callable]:
    """Segment hooks for "N hundred, tens, ones + one scale word per 1000" languages.

    Args:
        ones: words for 0-9 (index 0 unused).
        teens: words for 10-19, indexed by the ones digit.
        tens: words for 20-90, indexed by the tens digit (0 and 1 unused).
        scale_words: scale words starting at thousand.
        hundred_word: used as "<one> <hundred>" when ``hundreds`` is not given.
        hundreds: irregular hundred words indexed 1-9; wins over ``hundred_word``.
        one_before_hundred: False means 100 is spelled as the bare hundred word.
        combine_parts: custom joiner for a segment's parts (hyphens, "and").
    """

    def hundreds_to_words(digit: int) -> str:
        if hundreds is not None:
            return hundreds[digit]
        if digit == 1 and not one_before_hundred:
            return hundred_word
        return join_words(separator, ones[digit], hundred_word)

    def segment_to_words(segment: int, scale_index: int) -> str:
        ones_digit, tens_digit, hundreds_digit = place_values(segment)
        parts: list[str] = []

        if hundreds_digit:
            parts.append(hundreds_to_words(hundreds_digit))

        if tens_digit == 1:
            parts.append(teens[ones_digit])
        else:
            if tens_digit > 1:
                parts.append(tens[tens_digit])
            if ones_digit:
                parts.append(ones[ones_digit])

        if combine_parts is not None:
            return combine_parts(parts, segment, scale_index)
        return separator.join(parts)

    def scale_word_for_index(scale_index: int, segment: int) -> str:
        return lookup_scale_word(scale_words, scale_index - 1, language)

    return {
        "segment_to_words": segment_to_words,
        "scale_word_for_index": scale_word_for_index,
    }


# ─── Long Scale (compound) ──────────────────────────────────────────


def compound_scale_word(
    language: str,
    *,
    thousand_word: str,
    singular: Sequence[str],
    plural: Sequence[str],
    separator: str = " ",
) -> ScaleWordForIndex:
    """Scale words for the long scale built from "thousand" compounds.

    scale index 1 -> thousand
    scale index 2 -> singular[0] / plural[0]   (million)
    scale index 3 -> thousand + plural[0]      (thousand million)
    scale index 4 -> singular[1] / plural[1]   (billion)
    """

    def scale_word_for_index(scale_index: int, segment: int) -> str:
        if scale_index == 1:
            return thousand_word

        if scale_index % 2 == 0:
            position = scale_index // 2 - 1
            words = plural if segment > 1 else singular
            return lookup_scale_word(words, position, language)

        position = (scale_index - 1) // 2 - 1
        return join_words(separator, thousand_word, lookup_scale_word(plural, position, language))

    return scale_word_for_index


# ─── Slavic ─────────────────────────────────────────────────────────


def slavic_hooks(
    language: str,
    *,
    ones: Sequence[str],
    ones_feminine: Sequence[str],
    teens: Sequence[str],
    tens: Sequence[str],
    hundreds: Sequence[str],
    scale_forms: Sequence[Sequence[str]],
    feminine_scales: frozenset[int] = frozenset({1}),
    gender: Gender = Gender.MASCULINE,
    omit_one_before_scale: bool = False,
    separator: str = " ",
) -> dict[str, Callable]:
    """Segment hooks for Slavic-style numerals.

    Feminine ones are used for groups whose scale word is feminine (the
    thousands in Russian: "одна тысяча", "две тысячи") and for the units
    group when the caller asked for feminine gender.
    """

    def segment_to_words(segment: int, scale_index: int) -> str:
        if omit_one_before_scale and scale_index > 0 and segment == 1:
            return ""

        ones_digit, tens_digit, hundreds_digit = place_values(segment)
        feminine = scale_index in feminine_scales or (
            gender is Gender.FEMININE and scale_index == 0
        )
        parts: list[str] = []

        if hundreds_digit:
            parts.append(hundreds[hundreds_digit])
        if tens_digit > 1:
            parts.append(tens[tens_digit])

        if tens_digit == 1:
            parts.append(teens[ones_digit])
        elif ones_digit:
            parts.append((ones_feminine if feminine else ones)[ones_digit])

        return separator.join(parts)

    def scale_word_for_index(scale_index: int, segment: int) -> str:
        forms = lookup_scale_word(scale_forms, scale_index - 1, language)
        return pluralize_slavic(segment, forms)

    return {
        "segment_to_words": segment_to_words,
        "scale_word_for_index": scale_word_for_index,
    }


# ─── South Asian ────────────────────────────────────────────────────


def south_asian_hooks(
    language: str,
    *,
    below_hundred: Sequence[str],
    hundred_word: str,
    scale_words: Sequence[str],
    separator: str = " ",
) -> dict[str, Callable]:
    """Segment hooks for lakh/crore numbering.

    ``below_hundred`` spells every number 0-99 (these languages have no
    regular tens + ones composition). ``scale_words[0]`` is the empty units
    slot, then thousand, lakh, crore, ...
    """

    def segment_to_words(segment: int, scale_index: int) -> str:
        if segment == 0:
            return ""
        if segment < 100:
            return below_hundred[segment]

        hundreds_digit, remainder = divmod(segment, 100)
        head = join_words(separator, below_hundred[hundreds_digit], hundred_word)
        if remainder:
            return join_words(separator, head, below_hundred[remainder])
        return head

    def scale_word_for_index(scale_index: int, segment: int) -> str:
        return lookup_scale_word(scale_words, scale_index, language)

    return {
        "segment_to_words": segment_to_words,
        "scale_word_for_index": scale_word_for_index,
    }


# ─── Turkic ─────────────────────────────────────────────────────────


def turkic_combine(separator: str = " ") -> Combine:
    """Greedy merge rule shared by Turkic languages.

    The leading "one" is implicit before hundred and thousand ("yüz", not
    "bir yüz") and before anything up to a hundred; millions and above keep it
    ("bir milyon").
    """

    def combine(preceding: WordSet, following: WordSet) -> WordSet:
        if preceding.value == 1 and (following.value <= 100 or following.value == 1000):
            return following

        if following.value > preceding.value:
            value = preceding.value * following.value
        else:
            value = preceding.value + following.value
        return WordSet(join_words(separator, preceding.word, following.word), value)

    return combine
