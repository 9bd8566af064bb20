"""
Sample language profiles and the registry that builds them.

Expected strings follow each language's usual written form; where a language
has several accepted spellings the one produced here is asserted.

Run: pytest tests/ -v
"""

from __future__ import annotations

import pytest

from numeral_words.converter import NumeralConverter, to_words
from numeral_words.exceptions import (
    ConfigurationError,
    InvalidOptionsError,
    UnsupportedLanguageError,
)
from numeral_words.models import DecimalMode, Gender, Grouping, Strategy
from numeral_words.registry import (
    DEFAULT_LANGUAGE,
    LANGUAGES,
    available_languages,
    default_language,
    get_profile,
)


# ═══════════════════════════════════════════════════════════════════════
# REGISTRY
# ═══════════════════════════════════════════════════════════════════════


class TestRegistry:
    def test_available_languages_sorted(self):
        assert available_languages() == ["en", "es", "hi", "pt", "ru", "tr"]

    def test_profiles_are_cached(self):
        assert get_profile("en") is get_profile("en")
        assert get_profile("ru", gender="feminine") is get_profile("ru", gender=Gender.FEMININE)

    def test_options_change_the_profile(self):
        assert get_profile("ru") is not get_profile("ru", gender="feminine")

    def test_unknown_language(self):
        with pytest.raises(UnsupportedLanguageError) as exc_info:
            get_profile("xx")
        assert exc_info.value.code == "UNSUPPORTED_LANGUAGE"
        assert exc_info.value.details["available"] == available_languages()

    def test_unknown_option_rejected(self):
        with pytest.raises(InvalidOptionsError) as exc_info:
            get_profile("en", gender="feminine")
        assert exc_info.value.code == "INVALID_OPTIONS"
        assert exc_info.value.details["errors"][0]["type"] == "extra_forbidden"

    def test_language_as_option_rejected(self):
        with pytest.raises(InvalidOptionsError) as exc_info:
            get_profile("en", **{"language": "es"})
        assert exc_info.value.details["errors"][0]["loc"] == ("language",)
        with pytest.raises(InvalidOptionsError):
            to_words(1, "en", **{"value": 2, "language": "es"})

    def test_invalid_option_value_rejected(self):
        with pytest.raises(InvalidOptionsError):
            get_profile("es", gender="neuter")

    def test_default_language(self, monkeypatch):
        monkeypatch.delenv("NUMERAL_WORDS_DEFAULT_LANGUAGE", raising=False)
        assert default_language() == DEFAULT_LANGUAGE == "en"
        assert get_profile().code == "en"

    def test_default_language_from_environment(self, monkeypatch):
        monkeypatch.setenv("NUMERAL_WORDS_DEFAULT_LANGUAGE", "tr")
        assert NumeralConverter().language == "tr"
        assert to_words(5) == "beş"

    def test_every_profile_builds(self):
        for code in available_languages():
            profile = get_profile(code)
            assert profile.code == code
            assert profile.name == LANGUAGES[code].name

    @pytest.mark.parametrize("language", ["en", "es", "hi", "pt", "ru", "tr"])
    def test_zero_word(self, language):
        profile = get_profile(language)
        assert to_words(0, language) == profile.zero_word
        assert to_words("-0", language) == profile.zero_word


# ═══════════════════════════════════════════════════════════════════════
# ENGLISH
# ═══════════════════════════════════════════════════════════════════════


class TestEnglish:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (7, "seven"),
            (15, "fifteen"),
            (20, "twenty"),
            (21, "twenty-one"),
            (100, "one hundred"),
            (110, "one hundred and ten"),
            (123, "one hundred and twenty-three"),
            (1001, "one thousand and one"),
            (1100, "one thousand one hundred"),
            (1_000_010, "one million and ten"),
            (2_000_005, "two million and five"),
            (
                1_234_567,
                "one million two hundred and thirty-four thousand five hundred and sixty-seven",
            ),
        ],
    )
    def test_integers(self, value, expected):
        assert to_words(value, "en") == expected

    def test_decimals_are_grouped(self):
        assert get_profile("en").decimal_mode is DecimalMode.GROUPED
        assert to_words("-3.14", "en") == "minus three point fourteen"
        assert to_words("0.05", "en") == "zero point zero five"

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (10**30, "one nonillion"),
            (10**33, "one decillion"),
            (10**45, "one quattuordecillion"),
            (10**63, "one vigintillion"),
            (
                999 * 10**63 + 123 * 10**60,
                "nine hundred and ninety-nine vigintillion one hundred and twenty-three novemdecillion",
            ),
        ],
    )
    def test_long_scale_names(self, value, expected):
        assert to_words(value, "en") == expected

    def test_beyond_vigintillion(self):
        with pytest.raises(ConfigurationError) as exc_info:
            to_words(10**66, "en")
        assert exc_info.value.code == "SCALE_INDEX_OUT_OF_RANGE"


# ═══════════════════════════════════════════════════════════════════════
# SPANISH
# ═══════════════════════════════════════════════════════════════════════


class TestSpanish:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (1, "uno"),
            (16, "dieciséis"),
            (21, "veintiuno"),
            (31, "treinta y uno"),
            (100, "cien"),
            (101, "ciento uno"),
            (200, "doscientos"),
            (555, "quinientos cincuenta y cinco"),
            (1000, "mil"),
            (2000, "dos mil"),
            (100_000, "cien mil"),
            (1_000_000, "un millón"),
            (2_000_000, "dos millones"),
            (1_001_000, "un millón mil"),
            (10**9, "mil millones"),
            (2 * 10**9, "dos mil millones"),
            (10**12, "un billón"),
        ],
    )
    def test_integers(self, value, expected):
        assert to_words(value, "es") == expected

    def test_feminine(self):
        assert to_words(1, "es", gender="feminine") == "una"
        assert to_words(21, "es", gender="feminine") == "veintiuna"
        assert to_words(200, "es", gender="feminine") == "doscientas"

    def test_feminine_only_affects_units_group(self):
        assert to_words(200_000, "es", gender="feminine") == "doscientos mil"

    def test_uses_compound_long_scale(self):
        profile = get_profile("es")
        assert profile.strategy is Strategy.SEGMENT
        assert profile.scale_word_for_index(3, 2) == "mil millones"

    def test_decimal(self):
        assert to_words("-3.14", "es") == "menos tres punto catorce"


# ═══════════════════════════════════════════════════════════════════════
# HINDI
# ═══════════════════════════════════════════════════════════════════════


class TestHindi:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (5, "पाँच"),
            (99, "निन्यानवे"),
            (100, "एक सौ"),
            (1000, "एक हज़ार"),
            (100_000, "एक लाख"),
            (10_000_000, "एक करोड़"),
            (12_345_678, "एक करोड़ तेईस लाख पैंतालीस हज़ार छह सौ अठहत्तर"),
        ],
    )
    def test_integers(self, value, expected):
        assert to_words(value, "hi") == expected

    def test_south_asian_grouping(self):
        assert get_profile("hi").grouping is Grouping.SOUTH_ASIAN

    def test_decimals_read_digit_by_digit(self):
        assert get_profile("hi").decimal_mode is DecimalMode.PER_DIGIT
        assert to_words("3.14", "hi") == "तीन दशमलव एक चार"


# ═══════════════════════════════════════════════════════════════════════
# PORTUGUESE
# ═══════════════════════════════════════════════════════════════════════


class TestPortuguese:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (1, "um"),
            (21, "vinte e um"),
            (100, "cem"),
            (101, "cento e um"),
            (123, "cento e vinte e três"),
            (200, "duzentos"),
            (1097, "mil e noventa e sete"),
            (1104, "mil cento e quatro"),
            (1200, "mil e duzentos"),
            (1234, "mil duzentos e trinta e quatro"),
            (2000, "dois mil"),
            (4196, "quatro mil cento e noventa e seis"),
            (23456, "vinte e três mil quatrocentos e cinquenta e seis"),
            (100_000, "cem mil"),
            (123456, "cento e vinte e três mil quatrocentos e cinquenta e seis"),
            (1_000_000, "um milhão"),
            (1_000_001, "um milhão e um"),
            (1_234_567, "um milhão duzentos e trinta e quatro mil quinhentos e sessenta e sete"),
            (2_000_000, "dois milhões"),
            (10**9, "mil milhões"),
        ],
    )
    def test_integers(self, value, expected):
        assert to_words(value, "pt") == expected

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("0.01", "zero vírgula zero um"),
            ("1.007", "um vírgula zero zero sete"),
            ("-1.5", "menos um vírgula cinco"),
            ("17.42", "dezassete vírgula quarenta e dois"),
            ("27.312", "vinte e sete vírgula trezentos e doze"),
            ("53.486", "cinquenta e três vírgula quatrocentos e oitenta e seis"),
            ("300.42", "trezentos vírgula quarenta e dois"),
            ("4196.42", "quatro mil cento e noventa e seis vírgula quarenta e dois"),
            ("-17.42", "menos dezassete vírgula quarenta e dois"),
        ],
    )
    def test_decimals(self, value, expected):
        assert to_words(value, "pt") == expected

    def test_greedy_strategy(self):
        assert get_profile("pt").strategy is Strategy.GREEDY

    def test_cleanup_drops_conjunction_after_scale_word(self):
        cleanup = get_profile("pt").cleanup
        once = cleanup("mil e duzentos e trinta e quatro")
        assert once == "mil duzentos e trinta e quatro"
        assert cleanup(once) == once

    def test_cleanup_keeps_conjunction_without_following_e(self):
        cleanup = get_profile("pt").cleanup
        assert cleanup("mil e duzentos") == "mil e duzentos"
        assert cleanup("vinte e sete vírgula trezentos e doze") == (
            "vinte e sete vírgula trezentos e doze"
        )


# ═══════════════════════════════════════════════════════════════════════
# RUSSIAN
# ═══════════════════════════════════════════════════════════════════════


class TestRussian:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (1, "один"),
            (2, "два"),
            (11, "одиннадцать"),
            (123, "сто двадцать три"),
            (1000, "одна тысяча"),
            (2000, "две тысячи"),
            (5000, "пять тысяч"),
            (11_000, "одиннадцать тысяч"),
            (21_000, "двадцать одна тысяча"),
            (1_000_000, "один миллион"),
            (2_000_000, "два миллиона"),
            (5_000_000, "пять миллионов"),
        ],
    )
    def test_integers(self, value, expected):
        assert to_words(value, "ru") == expected

    def test_feminine_units(self):
        assert to_words(1, "ru", gender="feminine") == "одна"
        assert to_words(2, "ru", gender="feminine") == "две"
        assert to_words(2_000_001, "ru", gender="feminine") == "два миллиона одна"

    def test_decimal(self):
        assert to_words("-3.14", "ru") == "минус три запятая четырнадцать"


# ═══════════════════════════════════════════════════════════════════════
# TURKISH
# ═══════════════════════════════════════════════════════════════════════


class TestTurkish:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (1, "bir"),
            (10, "on"),
            (11, "on bir"),
            (100, "yüz"),
            (123, "yüz yirmi üç"),
            (200, "iki yüz"),
            (1000, "bin"),
            (1001, "bin bir"),
            (2000, "iki bin"),
            (1_000_000, "bir milyon"),
        ],
    )
    def test_integers(self, value, expected):
        assert to_words(value, "tr") == expected

    def test_drop_spaces(self):
        assert to_words(123, "tr", drop_spaces=True) == "yüzyirmiüç"

    def test_drop_spaces_keeps_sign_and_separator_words(self):
        assert to_words("-1.5", "tr", drop_spaces=True) == "eksi bir virgül beş"
