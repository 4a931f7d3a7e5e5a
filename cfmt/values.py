"""
Closed set of value kinds seen by the renderer.

Substitution sources return values of arbitrary type. They are classified
exactly once, at the boundary, into one of three variants:

- NumberValue: real numbers and Decimal (bool excluded), the only format-aware kind
- TextValue: strings
- OtherValue: everything else (None, bool, containers, user objects)

Downstream code dispatches on the variant instead of inspecting raw types.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Union


@dataclass(frozen=True)
class NumberValue:
    number: float | int


@dataclass(frozen=True)
class TextValue:
    text: str


@dataclass(frozen=True)
class OtherValue:
    value: Any


Value = Union[NumberValue, TextValue, OtherValue]

# Plain notation bounds for natural_number: at most 21 integer digits,
# at most 6 zeros after the decimal point.
_PLAIN_POINT_LIMIT = 21
_PLAIN_LEADING_ZEROS = 6


def classify(value: Any) -> Value:
    """Wraps a raw value into its variant."""
    if isinstance(value, bool):
        return OtherValue(value)
    if isinstance(value, int):
        return NumberValue(value)
    if isinstance(value, float):
        return NumberValue(value)
    if isinstance(value, numbers.Integral):
        return NumberValue(int(value))
    if isinstance(value, (numbers.Real, Decimal)):
        return NumberValue(float(value))
    if isinstance(value, str):
        return TextValue(value)
    return OtherValue(value)


def natural_number(number: float | int) -> str:
    """
    Canonical round-trip string of a number.

    No grouping and no forced precision. Floats use their shortest
    round-trip digits, laid out in plain notation for decimal exponents
    from -6 to 20 and in exponent notation (unpadded exponent) otherwise:
    1234 -> "1234", 0.5 -> "0.5", 2.0 -> "2", 1e16 -> "10000000000000000",
    1e21 -> "1e+21", 1e-7 -> "1e-7".
    """
    if isinstance(number, int):
        return str(number)
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if number == 0:
        return "0"

    sign, digit_tuple, exponent = Decimal(repr(number)).as_tuple()
    digits = "".join(map(str, digit_tuple)).rstrip("0")
    exponent += len(digit_tuple) - len(digits)
    # value = 0.<digits> * 10**point
    point = len(digits) + exponent
    prefix = "-" if sign else ""

    if len(digits) <= point <= _PLAIN_POINT_LIMIT:
        return prefix + digits + "0" * (point - len(digits))
    if 0 < point <= _PLAIN_POINT_LIMIT:
        return prefix + digits[:point] + "." + digits[point:]
    if -_PLAIN_LEADING_ZEROS < point <= 0:
        return prefix + "0." + "0" * -point + digits
    mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
    return f"{prefix}{mantissa}e{point - 1:+d}"


def natural_text(value: Value) -> str:
    """Natural string form of any variant."""
    if isinstance(value, NumberValue):
        return natural_number(value.number)
    if isinstance(value, TextValue):
        return value.text
    return str(value.value)


__all__ = [
    "NumberValue",
    "TextValue",
    "OtherValue",
    "Value",
    "classify",
    "natural_number",
    "natural_text",
]
