"""
Hindi: South Asian grouping (hazaar, lakh, crore) and digit-by-digit decimals.

    100000     -> एक लाख
    12345678   -> एक करोड़ तेईस लाख पैंतालीस हज़ार छह सौ अठहत्तर
"""

from __future__ import annotations

from ..families import south_asian_hooks
from ..models import DecimalMode, Grouping, ProfileOptions, Strategy
from ..profile import LanguageProfile

# Hindi has an irregular word for every number below a hundred.
BELOW_HUNDRED = [
    "शून्य", "एक", "दो", "तीन", "चार", "पाँच", "छह", "सात", "आठ", "नौ",
    "दस", "ग्यारह", "बारह", "तेरह", "चौदह", "पंद्रह", "सोलह", "सत्रह", "अठारह", "उन्नीस",
    "बीस", "इक्कीस", "बाईस", "तेईस", "चौबीस", "पच्चीस", "छब्बीस", "सत्ताईस", "अट्ठाईस", "उनतीस",
    "तीस", "इकतीस", "बत्तीस", "तैंतीस", "चौंतीस", "पैंतीस", "छत्तीस", "सैंतीस", "अड़तीस", "उनतालीस",
    "चालीस", "इकतालीस", "बयालीस", "तेतालीस", "चवालीस", "पैंतालीस", "छियालीस", "सैंतालीस", "अड़तालीस", "उनचास",
    "पचास", "इक्यावन", "बावन", "तिरपन", "चौवन", "पचपन", "छप्पन", "सत्तावन", "अट्ठावन", "उनसठ",
    "साठ", "इकसठ", "बासठ", "तिरसठ", "चौंसठ", "पैंसठ", "छियासठ", "सड़सठ", "अड़सठ", "उनहत्तर",
    "सत्तर", "इकहत्तर", "बहत्तर", "तिहत्तर", "चौहत्तर", "पचहत्तर", "छिहत्तर", "सतहत्तर", "अठहत्तर", "उन्यासी",
    "अस्सी", "इक्यासी", "बयासी", "तिरासी", "चौरासी", "पचासी", "छियासी", "सत्तासी", "अट्ठासी", "नवासी",
    "नब्बे", "इक्यानवे", "बानवे", "तिरानवे", "चौरानवे", "पचानवे", "छियानवे", "सत्तानवे", "अट्ठानवे", "निन्यानवे",
]
HUNDRED = "सौ"
SCALE_WORDS = ["", "हज़ार", "लाख", "करोड़", "अरब", "खरब", "नील", "पद्म", "शंख"]


def build_profile(options: ProfileOptions) -> LanguageProfile:
    return LanguageProfile(
        code="hi",
        name="Hindi",
        zero_word=BELOW_HUNDRED[0],
        negative_word="माइनस",
        decimal_separator_word="दशमलव",
        strategy=Strategy.SEGMENT,
        grouping=Grouping.SOUTH_ASIAN,
        decimal_mode=DecimalMode.PER_DIGIT,
        options=options,
        **south_asian_hooks(
            "hi",
            below_hundred=BELOW_HUNDRED,
            hundred_word=HUNDRED,
            scale_words=SCALE_WORDS,
        ),
    )
