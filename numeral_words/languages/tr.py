"""
Turkish: greedy decomposition with the Turkic "one" rule.

    100        -> yüz          (not "bir yüz")
    1001       -> bin bir
    1000000    -> bir milyon

``drop_spaces=True`` writes each number as one word ("yüzyirmiüç").
"""

from __future__ import annotations

from ..families import turkic_combine
from ..models import Strategy, TurkicOptions
from ..profile import LanguageProfile

SCALE_TABLE = [
    (10**18, "kentilyon"),
    (10**15, "katrilyon"),
    (10**12, "trilyon"),
    (10**9, "milyar"),
    (10**6, "milyon"),
    (1000, "bin"),
    (100, "yüz"),
    (90, "doksan"),
    (80, "seksen"),
    (70, "yetmiş"),
    (60, "altmış"),
    (50, "elli"),
    (40, "kırk"),
    (30, "otuz"),
    (20, "yirmi"),
    (10, "on"),
    (9, "dokuz"),
    (8, "sekiz"),
    (7, "yedi"),
    (6, "altı"),
    (5, "beş"),
    (4, "dört"),
    (3, "üç"),
    (2, "iki"),
    (1, "bir"),
    (0, "sıfır"),
]


def build_profile(options: TurkicOptions) -> LanguageProfile:
    return LanguageProfile(
        code="tr",
        name="Turkish",
        zero_word="sıfır",
        negative_word="eksi",
        decimal_separator_word="virgül",
        strategy=Strategy.GREEDY,
        scale_table=SCALE_TABLE,
        combine=turkic_combine("" if options.drop_spaces else " "),
        options=options,
    )
