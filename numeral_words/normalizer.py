"""
Turn caller input into a NumericInput (sign, integer part, decimal digits).

The engines never look at raw input. Everything they receive went through
``parse_numeric_value`` first:

    parse_numeric_value(-42)          -> (True, 42, "")
    parse_numeric_value("3.14")       -> (False, 3, "14")
    parse_numeric_value("1.50")       -> (False, 1, "50")   trailing zeros kept
    parse_numeric_value("1e21")       -> (False, 10**21, "")
    parse_numeric_value(Decimal(".5")) -> (False, 0, "5")

Strings are matched with a conservative regex and expanded through Decimal,
so scientific notation never loses digits. Floats go through ``repr`` (the
shortest string that round-trips) before the same path.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal, InvalidOperation

from .exceptions import InvalidNumberError
from .models import NumericInput

_NUMBER_PATTERN = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")

# Matches the interpreter's default int/str conversion limit.
MAX_DIGITS = 4300


def parse_numeric_value(value: int | str | Decimal | float) -> NumericInput:
    """Normalize ``value`` into a NumericInput.

    Raises:
        InvalidNumberError: unsupported type, non-finite value, a string
            that is not a plain decimal number, or more than MAX_DIGITS
            digits on either side of the point (integers are exempt).
    """
    # bool is an int subclass; True is not a number here.
    if isinstance(value, bool):
        raise _type_error(value)

    if isinstance(value, int):
        return NumericInput(is_negative=value < 0, integer_part=abs(value))

    if isinstance(value, float):
        if not math.isfinite(value):
            raise _not_finite(value)
        return _from_text(repr(value))

    if isinstance(value, Decimal):
        if not value.is_finite():
            raise _not_finite(value)
        return _from_decimal(value)

    if isinstance(value, str):
        return _from_text(value)

    raise _type_error(value)


# ─── Helpers ─────────────────────────────────────────────────────────


def _from_text(text: str) -> NumericInput:
    stripped = text.strip()
    if not _NUMBER_PATTERN.match(stripped):
        raise InvalidNumberError(
            "INVALID_NUMBER_FORMAT",
            f"Invalid number format: {text!r}",
            {"value": text},
        )

    if "e" not in stripped.lower():
        return _split(stripped)

    try:
        return _from_decimal(Decimal(stripped))
    except InvalidOperation:
        raise InvalidNumberError(
            "INVALID_NUMBER_FORMAT",
            f"Invalid number format: {text!r}",
            {"value": text},
        ) from None


def _from_decimal(value: Decimal) -> NumericInput:
    # Checked before formatting: "1e999999999" would expand to a billion digits.
    _, digits, exponent = value.as_tuple()
    _check_digit_count(max(len(digits) + exponent, 0), max(-exponent, 0))
    # "f" formatting expands exponents: Decimal("1E+3") -> "1000"
    return _split(format(value, "f"))


def _split(text: str) -> NumericInput:
    """Split an already-validated plain decimal string (no exponent)."""
    is_negative = text.startswith("-")
    unsigned = text.lstrip("+-")

    integer_digits, _, decimal_digits = unsigned.partition(".")
    _check_digit_count(len(integer_digits), len(decimal_digits))
    return NumericInput(
        is_negative=is_negative,
        integer_part=int(integer_digits or "0"),
        decimal_digits=decimal_digits,
    )


def _check_digit_count(integer_digits: int, decimal_digits: int) -> None:
    if integer_digits > MAX_DIGITS or decimal_digits > MAX_DIGITS:
        raise InvalidNumberError(
            "NUMBER_TOO_LARGE",
            (
                f"Numbers given as text may have at most {MAX_DIGITS} digits on "
                "each side of the decimal point"
            ),
            {
                "integer_digits": integer_digits,
                "decimal_digits": decimal_digits,
                "limit": MAX_DIGITS,
            },
        )


def _type_error(value: object) -> InvalidNumberError:
    return InvalidNumberError(
        "INVALID_NUMBER_TYPE",
        f"Expected int, str, Decimal or float, received {type(value).__name__}",
        {"type": type(value).__name__},
    )


def _not_finite(value: object) -> InvalidNumberError:
    return InvalidNumberError(
        "NUMBER_NOT_FINITE",
        f"Number must be finite (NaN and infinity are not supported): {value!r}",
        {"value": str(value)},
    )
