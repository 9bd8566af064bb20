"""Pytest configuration: project root importable, toy profiles shared by the suites."""

import sys
from functools import partial
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))

from numeral_words.families import short_scale_hooks  # noqa: E402
from numeral_words.greedy import default_combine  # noqa: E402
from numeral_words.models import DecimalMode, Strategy  # noqa: E402
from numeral_words.profile import LanguageProfile  # noqa: E402

TOY_SCALE_TABLE = [
    (10**9, "billion"),
    (10**6, "million"),
    (1000, "thousand"),
    (100, "hundred"),
    (90, "ninety"),
    (80, "eighty"),
    (70, "seventy"),
    (60, "sixty"),
    (50, "fifty"),
    (40, "forty"),
    (30, "thirty"),
    (20, "twenty"),
    (19, "nineteen"),
    (18, "eighteen"),
    (17, "seventeen"),
    (16, "sixteen"),
    (15, "fifteen"),
    (14, "fourteen"),
    (13, "thirteen"),
    (12, "twelve"),
    (11, "eleven"),
    (10, "ten"),
    (9, "nine"),
    (8, "eight"),
    (7, "seven"),
    (6, "six"),
    (5, "five"),
    (4, "four"),
    (3, "three"),
    (2, "two"),
    (1, "one"),
    (0, "zero"),
]

TOY_ONES = ["", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine"]
TOY_TEENS = [
    "ten", "eleven", "twelve", "thirteen", "fourteen",
    "fifteen", "sixteen", "seventeen", "eighteen", "nineteen",
]
TOY_TENS = ["", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety"]


def make_greedy_profile(**overrides) -> LanguageProfile:
    """English-like greedy profile: plain spaces, no "and", no hyphens."""
    fields = dict(
        code="toy-greedy",
        name="Toy greedy",
        zero_word="zero",
        negative_word="minus",
        decimal_separator_word="point",
        strategy=Strategy.GREEDY,
        scale_table=TOY_SCALE_TABLE,
        combine=default_combine,
    )
    fields.update(overrides)
    return LanguageProfile(**fields)


def make_segment_profile(**overrides) -> LanguageProfile:
    """English-like segment profile that reads decimals digit by digit."""
    fields = dict(
        code="toy-segment",
        name="Toy segment",
        zero_word="zero",
        negative_word="minus",
        decimal_separator_word="point",
        strategy=Strategy.SEGMENT,
        decimal_mode=DecimalMode.PER_DIGIT,
        **short_scale_hooks(
            "toy-segment",
            ones=TOY_ONES,
            teens=TOY_TEENS,
            tens=TOY_TENS,
            scale_words=["thousand", "million", "billion"],
            hundred_word="hundred",
        ),
    )
    fields.update(overrides)
    return LanguageProfile(**fields)


@pytest.fixture
def greedy_profile() -> LanguageProfile:
    return make_greedy_profile()


@pytest.fixture
def segment_profile() -> LanguageProfile:
    return make_segment_profile()


@pytest.fixture
def bare_hundred_profile() -> LanguageProfile:
    """Greedy profile that drops the implicit "one" up to a thousand."""
    return make_greedy_profile(
        code="toy-bare",
        combine=partial(default_combine, implicit_one_below=1001),
    )
