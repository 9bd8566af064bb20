"""
Spanish: compound long scale with grammatical gender.

    100        -> cien
    101        -> ciento uno
    1000       -> mil                 (never "uno mil")
    1000000    -> un millón
    2000000    -> dos millones
    10**9      -> mil millones

Gender only affects the units group; the groups in front of a scale word are
always masculine.
"""

from __future__ import annotations

from ..families import compound_scale_word
from ..models import Gender, GenderOptions, Strategy
from ..profile import LanguageProfile
from ..scale_table import place_values

ONES = {
    Gender.MASCULINE: ["", "uno", "dos", "tres", "cuatro", "cinco", "seis", "siete", "ocho", "nueve"],
    Gender.FEMININE: ["", "una", "dos", "tres", "cuatro", "cinco", "seis", "siete", "ocho", "nueve"],
}
TEENS = [
    "diez", "once", "doce", "trece", "catorce",
    "quince", "dieciséis", "diecisiete", "dieciocho", "diecinueve",
]
TWENTIES = {
    Gender.MASCULINE: [
        "veinte", "veintiuno", "veintidós", "veintitrés", "veinticuatro",
        "veinticinco", "veintiséis", "veintisiete", "veintiocho", "veintinueve",
    ],
    Gender.FEMININE: [
        "veinte", "veintiuna", "veintidós", "veintitrés", "veinticuatro",
        "veinticinco", "veintiséis", "veintisiete", "veintiocho", "veintinueve",
    ],
}
TENS = ["", "", "", "treinta", "cuarenta", "cincuenta", "sesenta", "setenta", "ochenta", "noventa"]
HUNDREDS = {
    Gender.MASCULINE: [
        "", "ciento", "doscientos", "trescientos", "cuatrocientos",
        "quinientos", "seiscientos", "setecientos", "ochocientos", "novecientos",
    ],
    Gender.FEMININE: [
        "", "ciento", "doscientas", "trescientas", "cuatrocientas",
        "quinientas", "seiscientas", "setecientas", "ochocientas", "novecientas",
    ],
}

THOUSAND = "mil"
SCALES = ["millón", "billón", "trillón", "cuatrillón"]
SCALES_PLURAL = ["millones", "billones", "trillones", "cuatrillones"]


def _spell(segment: int, gender: Gender) -> str:
    if segment == 100:
        return "cien"

    ones_digit, tens_digit, hundreds_digit = place_values(segment)
    tens_ones = segment % 100
    parts: list[str] = []

    if hundreds_digit:
        parts.append(HUNDREDS[gender][hundreds_digit])

    if tens_ones == 0:
        pass
    elif tens_ones < 10:
        parts.append(ONES[gender][ones_digit])
    elif tens_ones < 20:
        parts.append(TEENS[ones_digit])
    elif tens_ones < 30:
        parts.append(TWENTIES[gender][ones_digit])
    elif ones_digit == 0:
        parts.append(TENS[tens_digit])
    else:
        parts.append(f"{TENS[tens_digit]} y {ONES[gender][ones_digit]}")

    return " ".join(parts)


def build_profile(options: GenderOptions) -> LanguageProfile:
    def segment_to_words(segment: int, scale_index: int) -> str:
        if scale_index == 0:
            return _spell(segment, options.gender)
        if segment == 1:
            # "mil", "mil millones" take no article; "millón" takes "un".
            return "un" if scale_index % 2 == 0 else ""
        return _spell(segment, Gender.MASCULINE)

    return LanguageProfile(
        code="es",
        name="Spanish",
        zero_word="cero",
        negative_word="menos",
        decimal_separator_word="punto",
        strategy=Strategy.SEGMENT,
        segment_to_words=segment_to_words,
        scale_word_for_index=compound_scale_word(
            "es",
            thousand_word=THOUSAND,
            singular=SCALES,
            plural=SCALES_PLURAL,
        ),
        options=options,
    )
