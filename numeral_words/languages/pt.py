"""
Portuguese (European): greedy decomposition with the "e" conjunction.

    101        -> cento e um
    1200       -> mil e duzentos
    1234       -> mil duzentos e trinta e quatro
    1000000    -> um milhão
    2000000    -> dois milhões

Merging always writes "e" between a number and a smaller addend; the cleanup
pass then drops the "e" between a scale word and a hundreds word when another
"e" follows ("mil e duzentos e trinta" -> "mil duzentos e trinta"). The rule
only looks at a scale word and the hundreds word right after it, so it never
reaches across "vírgula" and a second pass changes nothing.
"""

from __future__ import annotations

import re

from ..models import ProfileOptions, Strategy, WordSet
from ..profile import LanguageProfile, normalize_whitespace

SCALE_TABLE = [
    (10**24, "quatrilião"),
    (10**18, "trilião"),
    (10**12, "bilião"),
    (10**6, "milhão"),
    (1000, "mil"),
    (100, "cem"),
    (90, "noventa"),
    (80, "oitenta"),
    (70, "setenta"),
    (60, "sessenta"),
    (50, "cinquenta"),
    (40, "quarenta"),
    (30, "trinta"),
    (20, "vinte"),
    (19, "dezanove"),
    (18, "dezoito"),
    (17, "dezassete"),
    (16, "dezasseis"),
    (15, "quinze"),
    (14, "catorze"),
    (13, "treze"),
    (12, "doze"),
    (11, "onze"),
    (10, "dez"),
    (9, "nove"),
    (8, "oito"),
    (7, "sete"),
    (6, "seis"),
    (5, "cinco"),
    (4, "quatro"),
    (3, "três"),
    (2, "dois"),
    (1, "um"),
    (0, "zero"),
]

HUNDREDS = {
    1: "cento",
    2: "duzentos",
    3: "trezentos",
    4: "quatrocentos",
    5: "quinhentos",
    6: "seiscentos",
    7: "setecentos",
    8: "oitocentos",
    9: "novecentos",
}

PLURALS = {
    "milhão": "milhões",
    "bilião": "biliões",
    "trilião": "triliões",
    "quatrilião": "quatriliões",
}

_SCALE_WORDS = ["mil", *PLURALS, *PLURALS.values()]

_CONJUNCTION_BEFORE_HUNDREDS = re.compile(
    rf"\b({'|'.join(_SCALE_WORDS)}) e ({'|'.join(HUNDREDS.values())}) (?=e )"
)


def combine(preceding: WordSet, following: WordSet) -> WordSet:
    preceding_word = preceding.word
    following_word = following.word

    if preceding.value == 1:
        # "mil", "cem", "vinte", but "um milhão"
        if following.value < 1_000_000:
            return following
    elif preceding.value == 100 and following.value % 1000 != 0:
        preceding_word = "cento"

    if following.value < preceding.value:
        return WordSet(f"{preceding_word} e {following_word}", preceding.value + following.value)

    value = preceding.value * following.value
    if following.value == 100:
        return WordSet(HUNDREDS[preceding.value], value)

    if preceding.value > 1:
        following_word = PLURALS.get(following_word, following_word)
    return WordSet(f"{preceding_word} {following_word}", value)


def cleanup(text: str) -> str:
    """Drop the "e" between a scale word and a hundreds word followed by "e"."""
    return normalize_whitespace(_CONJUNCTION_BEFORE_HUNDREDS.sub(r"\1 \2 ", text))


def build_profile(options: ProfileOptions) -> LanguageProfile:
    return LanguageProfile(
        code="pt",
        name="Portuguese",
        zero_word="zero",
        negative_word="menos",
        decimal_separator_word="vírgula",
        strategy=Strategy.GREEDY,
        scale_table=SCALE_TABLE,
        combine=combine,
        cleanup=cleanup,
        options=options,
    )
