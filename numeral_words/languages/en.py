"""
English: short scale, hyphenated tens ("twenty-three") and British "and".

    123        -> one hundred and twenty-three
    1001       -> one thousand and one
    2000005    -> two million and five
"""

from __future__ import annotations

from ..families import short_scale_hooks
from ..models import ProfileOptions, Strategy
from ..profile import LanguageProfile

ONES = ["", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine"]
TEENS = [
    "ten", "eleven", "twelve", "thirteen", "fourteen",
    "fifteen", "sixteen", "seventeen", "eighteen", "nineteen",
]
TENS = ["", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety"]
HUNDRED = "hundred"
SCALE_WORDS = [
    "thousand",
    "million",
    "billion",
    "trillion",
    "quadrillion",
    "quintillion",
    "sextillion",
    "septillion",
    "octillion",
    "nonillion",
    "decillion",
    "undecillion",
    "duodecillion",
    "tredecillion",
    "quattuordecillion",
    "quindecillion",
    "sexdecillion",
    "septendecillion",
    "octodecillion",
    "novemdecillion",
    "vigintillion",
]


def _tens_ones(parts: list[str], tens_ones: int) -> str:
    if len(parts) == 2 and tens_ones > 20:
        return f"{parts[0]}-{parts[1]}"
    return " ".join(parts)


def combine_segment_parts(parts: list[str], segment: int, scale_index: int) -> str:
    """Hyphenate tens and ones, put "and" between the hundreds and the rest."""
    if not parts:
        return ""

    tens_ones = segment % 100
    if segment < 100:
        return _tens_ones(parts, tens_ones)

    rest = _tens_ones(parts[1:], tens_ones)
    if rest:
        return f"{parts[0]} and {rest}"
    return parts[0]


def join_segments(parts: list[str], value: int) -> str:
    """Insert "and" before a trailing group below a hundred.

    "one thousand and one", but "one thousand one hundred".
    """
    if len(parts) > 1 and parts[-2] in SCALE_WORDS and HUNDRED not in parts[-1]:
        return " ".join([*parts[:-1], "and", parts[-1]])
    return " ".join(parts)


def build_profile(options: ProfileOptions) -> LanguageProfile:
    return LanguageProfile(
        code="en",
        name="English",
        zero_word="zero",
        negative_word="minus",
        decimal_separator_word="point",
        strategy=Strategy.SEGMENT,
        join_segments=join_segments,
        options=options,
        **short_scale_hooks(
            "en",
            ones=ONES,
            teens=TEENS,
            tens=TENS,
            scale_words=SCALE_WORDS,
            hundred_word=HUNDRED,
            combine_parts=combine_segment_parts,
        ),
    )
