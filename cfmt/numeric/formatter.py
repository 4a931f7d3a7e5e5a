"""
Numeric formatter.

Renders a number through one of the standard format specifiers:

    d  decimal digits, zero-padded to the precision       (non-locale)
    e  scientific notation, precision fractional digits   (non-locale)
    f  fixed-point without grouping                       (locale-aware)
    g  general, precision significant digits              (non-locale)
    n  grouped number                                     (locale-aware)
    p  percent                                            (locale-aware)
    x  hexadecimal of the absolute value                  (non-locale)

A specifier is one letter optionally followed by one or two precision
digits. The letter case selects the case of the output where it matters.
"""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Dict, Optional

from .locale import CldrTableBackend, LocaleBackend, to_decimal
from ..errors import InvalidFormatError
from ..values import natural_number

SPECIFIER_RE = re.compile(r"([defgnpx])(\d{1,2})?", re.IGNORECASE | re.ASCII)

_DEFAULT_BACKEND = CldrTableBackend()

# Letter -> default precision
DEFAULT_PRECISION: Dict[str, int] = {
    "d": 0,
    "e": 6,
    "f": 2,
    "g": 15,
    "n": 2,
    "p": 2,
    "x": 0,
}


def _is_finite(number: float | int) -> bool:
    return isinstance(number, int) or math.isfinite(number)


def _decimal(number: float | int, precision: int) -> str:
    sign = "-" if number < 0 else ""
    return sign + natural_number(abs(number)).rjust(precision, "0")


def _significant(magnitude: Decimal, count: int) -> tuple[str, int]:
    """
    Rounds a positive decimal half away from zero to `count` significant digits.

    Returns the digit string and the decimal exponent of its first digit:
    (Decimal("2.5"), 1) -> ("3", 0), (Decimal("9.96"), 2) -> ("10", 1).
    """
    exponent = magnitude.adjusted()
    with localcontext() as ctx:
        ctx.prec = count + 2
        rounded = magnitude.quantize(Decimal(1).scaleb(exponent - count + 1), rounding=ROUND_HALF_UP)
    digits = "".join(map(str, rounded.as_tuple().digits))
    if len(digits) > count:
        # carried into a new leading digit: 9.96 -> 10.0
        exponent += 1
        digits = digits[:count]
    return digits, exponent


def _exponential(number: float | int, precision: int) -> str:
    if not _is_finite(number):
        return natural_number(number)
    if number == 0:
        digits, exponent = "0" * (precision + 1), 0  # no "-0"
    else:
        digits, exponent = _significant(abs(to_decimal(number)), precision + 1)
    sign = "-" if number < 0 else ""
    mantissa = digits[0] + ("." + digits[1:] if precision else "")
    return f"{sign}{mantissa}e{exponent:+d}"


def _general(number: float | int, precision: int, spec: str) -> str:
    if not _is_finite(number):
        return natural_number(number)
    if precision < 1:
        raise InvalidFormatError(spec)
    if number == 0:
        return "0" + ("." + "0" * (precision - 1) if precision > 1 else "")
    sign = "-" if number < 0 else ""
    digits, exponent = _significant(abs(to_decimal(number)), precision)
    if exponent < -6 or exponent >= precision:
        mantissa = digits[0] + ("." + digits[1:] if precision > 1 else "")
        return f"{sign}{mantissa}e{exponent:+d}"
    if exponent < 0:
        return f"{sign}0.{'0' * (-exponent - 1)}{digits}"
    whole, fraction = digits[:exponent + 1], digits[exponent + 1:]
    return sign + whole + ("." + fraction if fraction else "")


def _hexadecimal(number: float | int, precision: int, spec: str) -> str:
    if not _is_finite(number):
        return natural_number(number)
    if isinstance(number, float):
        if not number.is_integer():
            raise InvalidFormatError(spec)
        number = int(number)
    sign = "-" if number < 0 else ""
    return sign + format(abs(number), "x").rjust(precision, "0")


def _upper_if(text: str, upper: bool) -> str:
    return text.upper() if upper else text


def parse_specifier(spec: str) -> tuple[str, int]:
    """
    Splits a specifier into (lower-case letter, precision).

    Raises:
        InvalidFormatError: When the specifier does not match letter + 0-2 digits
    """
    match = SPECIFIER_RE.fullmatch(spec)
    if match is None:
        raise InvalidFormatError(spec)
    letter, digits = match.groups()
    letter = letter.lower()
    precision = int(digits) if digits else DEFAULT_PRECISION[letter]
    return letter, precision


def format_number(
        number: float | int,
        spec: str,
        locale: Optional[str] = None,
        backend: Optional[LocaleBackend] = None,
) -> str:
    """
    Formats a number according to a specifier.

    Args:
        number: Value to render
        spec: Format specifier such as "d6", "x", "N0"; empty for the natural form
        locale: Locale tag for f/n/p; None uses the backend default
        backend: Locale data provider; defaults to the built-in CLDR table

    Returns:
        Rendered text

    Raises:
        InvalidFormatError: When the specifier is not recognized
    """
    if spec == "":
        return natural_number(number)

    letter, precision = parse_specifier(spec)
    upper = spec[0].isupper()
    backend = backend or _DEFAULT_BACKEND

    if letter == "d":
        return _decimal(number, precision)
    if letter == "e":
        return _upper_if(_exponential(number, precision), upper)
    if letter == "f":
        return backend.format_decimal(
            number, locale, min_fraction=precision, max_fraction=max(precision, 3), grouping=False
        )
    if letter == "g":
        return _upper_if(_general(number, precision, spec), upper)
    if letter == "n":
        return _upper_if(
            backend.format_decimal(number, locale, min_fraction=0, max_fraction=precision, grouping=True),
            upper,
        )
    if letter == "p":
        return _upper_if(backend.format_percent(number, locale, max_fraction=precision), upper)
    if letter == "x":
        return _upper_if(_hexadecimal(number, precision, spec), upper)

    raise AssertionError(f"Unknown numeric format letter {letter!r} passed specifier validation")


__all__ = [
    "SPECIFIER_RE",
    "DEFAULT_PRECISION",
    "parse_specifier",
    "format_number",
]
