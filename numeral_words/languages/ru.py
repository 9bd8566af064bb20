"""
Russian: Slavic family with feminine thousands and three plural forms.

    1000       -> одна тысяча
    2000       -> две тысячи
    5000       -> пять тысяч
    21000      -> двадцать одна тысяча
    2000000    -> два миллиона
"""

from __future__ import annotations

from ..families import slavic_hooks
from ..models import GenderOptions, Strategy
from ..profile import LanguageProfile

ONES = ["", "один", "два", "три", "четыре", "пять", "шесть", "семь", "восемь", "девять"]
ONES_FEMININE = ["", "одна", "две", "три", "четыре", "пять", "шесть", "семь", "восемь", "девять"]
TEENS = [
    "десять", "одиннадцать", "двенадцать", "тринадцать", "четырнадцать",
    "пятнадцать", "шестнадцать", "семнадцать", "восемнадцать", "девятнадцать",
]
TENS = [
    "", "", "двадцать", "тридцать", "сорок",
    "пятьдесят", "шестьдесят", "семьдесят", "восемьдесят", "девяносто",
]
HUNDREDS = [
    "", "сто", "двести", "триста", "четыреста",
    "пятьсот", "шестьсот", "семьсот", "восемьсот", "девятьсот",
]

# (one, few, many)
SCALE_FORMS = [
    ("тысяча", "тысячи", "тысяч"),
    ("миллион", "миллиона", "миллионов"),
    ("миллиард", "миллиарда", "миллиардов"),
    ("триллион", "триллиона", "триллионов"),
    ("квадриллион", "квадриллиона", "квадриллионов"),
    ("квинтиллион", "квинтиллиона", "квинтиллионов"),
    ("секстиллион", "секстиллиона", "секстиллионов"),
    ("септиллион", "септиллиона", "септиллионов"),
    ("октиллион", "октиллиона", "октиллионов"),
    ("нониллион", "нониллиона", "нониллионов"),
]


def build_profile(options: GenderOptions) -> LanguageProfile:
    return LanguageProfile(
        code="ru",
        name="Russian",
        zero_word="ноль",
        negative_word="минус",
        decimal_separator_word="запятая",
        strategy=Strategy.SEGMENT,
        options=options,
        **slavic_hooks(
            "ru",
            ones=ONES,
            ones_feminine=ONES_FEMININE,
            teens=TEENS,
            tens=TENS,
            hundreds=HUNDREDS,
            scale_forms=SCALE_FORMS,
            gender=options.gender,
        ),
    )
