"""
Locale-aware number rendering backends.

The numeric formatter never reads locale data directly: it goes through a
LocaleBackend, so tests can inject a deterministic backend and applications
can plug in another data provider.
"""

from __future__ import annotations

import locale as _stdlib_locale
import logging
import math
import os
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Optional, Protocol

from .symbols import DEFAULT_LOCALE, NumberSymbols, lookup_symbols

logger = logging.getLogger(__name__)

LOCALE_ENV = "CFMT_LOCALE"


# -------------------- Locale tags --------------------

def normalize_locale(tag: str) -> str:
    """
    Brings BCP 47 and POSIX locale names to the table form.

    "de-DE" -> "de_DE", "de_DE.UTF-8" -> "de_DE", "EN-us" -> "en_US".
    """
    tag = tag.strip()
    for sep in (".", "@"):
        tag = tag.split(sep, 1)[0]
    parts = [p for p in tag.replace("-", "_").split("_") if p]
    if not parts:
        return ""
    lang = parts[0].lower()
    rest = [p.upper() if len(p) == 2 else p.title() for p in parts[1:]]
    return "_".join([lang, *rest])


def resolve_symbols(tag: Optional[str]) -> NumberSymbols:
    """
    Finds number symbols for a locale, falling back from the most
    specific tag to its language and then to the default locale.
    """
    normalized = normalize_locale(tag) if tag else ""
    if normalized:
        parts = normalized.split("_")
        # de_Latn_AT -> de_AT -> de
        candidates = [normalized]
        if len(parts) > 2:
            candidates.append(f"{parts[0]}_{parts[-1]}")
        candidates.append(parts[0])
        for candidate in candidates:
            symbols = lookup_symbols(candidate)
            if symbols is not None:
                if candidate != normalized:
                    logger.debug("Locale %r resolved to %r", tag, candidate)
                return symbols
        logger.debug("Unknown locale %r, using %r", tag, DEFAULT_LOCALE)
    symbols = lookup_symbols(DEFAULT_LOCALE)
    assert symbols is not None
    return symbols


def default_locale() -> str:
    """
    Locale used when the caller passes none.

    Priority: CFMT_LOCALE environment variable, then the process locale,
    then the built-in default.
    """
    env = os.environ.get(LOCALE_ENV)
    if env:
        return env
    try:
        tag, _encoding = _stdlib_locale.getlocale()
    except ValueError:
        tag = None
    if tag and tag not in ("C", "POSIX"):
        return tag
    return DEFAULT_LOCALE


# -------------------- Decimal rendering --------------------

def to_decimal(value: float | int) -> Decimal:
    if isinstance(value, int):
        return Decimal(value)
    # repr is the shortest round-trip form, so 1.005 stays 1.005
    return Decimal(repr(value))


def _round(value: Decimal, max_fraction: int) -> Decimal:
    with localcontext() as ctx:
        ctx.prec = max(28, value.adjusted() + max_fraction + 2)
        return value.quantize(Decimal(1).scaleb(-max_fraction), rounding=ROUND_HALF_UP)


def _group(digits: str, symbols: NumberSymbols) -> str:
    primary = symbols.group_size
    if len(digits) < primary + symbols.min_grouping_digits:
        return digits
    head, tail = digits[:-primary], digits[-primary:]
    groups = [tail]
    secondary = symbols.secondary_group_size
    while len(head) > secondary:
        groups.append(head[-secondary:])
        head = head[:-secondary]
    if head:
        groups.append(head)
    return symbols.group.join(reversed(groups))


def render_decimal(
        value: Decimal,
        symbols: NumberSymbols,
        min_fraction: int,
        max_fraction: int,
        grouping: bool,
) -> str:
    """
    Renders a finite decimal with the given symbols.

    The value is rounded half away from zero to `max_fraction` digits,
    then trailing zeros are trimmed down to `min_fraction` digits.
    """
    max_fraction = max(max_fraction, min_fraction)
    rounded = _round(value, max_fraction)
    negative = rounded < 0
    text = format(abs(rounded), "f")
    int_part, _, frac_part = text.partition(".")
    frac_part = frac_part.rstrip("0")
    if len(frac_part) < min_fraction:
        frac_part = frac_part.ljust(min_fraction, "0")
    if grouping:
        int_part = _group(int_part, symbols)
    out = int_part + (symbols.decimal + frac_part if frac_part else "")
    return (symbols.minus + out) if negative else out


def _render_non_finite(value: float, symbols: NumberSymbols) -> str:
    if math.isnan(value):
        return symbols.nan
    return (symbols.minus if value < 0 else "") + symbols.infinity


# -------------------- Backends --------------------

class LocaleBackend(Protocol):
    """Formatting capability for the locale-aware specifiers."""

    def symbols(self, locale: Optional[str]) -> NumberSymbols:
        ...

    def format_decimal(
            self,
            value: float | int,
            locale: Optional[str],
            min_fraction: int,
            max_fraction: int,
            grouping: bool,
    ) -> str:
        ...

    def format_percent(self, value: float | int, locale: Optional[str], max_fraction: int) -> str:
        ...


class _SymbolsBackend:
    """Shared rendering on top of a `symbols(locale)` lookup."""

    def symbols(self, locale: Optional[str]) -> NumberSymbols:
        raise NotImplementedError

    def format_decimal(
            self,
            value: float | int,
            locale: Optional[str],
            min_fraction: int,
            max_fraction: int,
            grouping: bool,
    ) -> str:
        symbols = self.symbols(locale)
        if isinstance(value, float) and not math.isfinite(value):
            return _render_non_finite(value, symbols)
        return render_decimal(to_decimal(value), symbols, min_fraction, max_fraction, grouping)

    def format_percent(self, value: float | int, locale: Optional[str], max_fraction: int) -> str:
        symbols = self.symbols(locale)
        if isinstance(value, float) and not math.isfinite(value):
            number = _render_non_finite(value, symbols)
        else:
            scaled = to_decimal(value).scaleb(2)
            number = render_decimal(scaled, symbols, 0, max_fraction, grouping=True)
        negative = number.startswith(symbols.minus)
        if negative:
            number = number[len(symbols.minus):]
        out = symbols.percent_pattern.replace("{n}", number)
        return (symbols.minus + out) if negative else out


class CldrTableBackend(_SymbolsBackend):
    """
    Default backend over the built-in CLDR symbols table.

    A locale of None means the process default (see default_locale()).
    """

    def symbols(self, locale: Optional[str]) -> NumberSymbols:
        return resolve_symbols(locale if locale else default_locale())


class FixedLocaleBackend(_SymbolsBackend):
    """Deterministic backend that ignores the requested locale."""

    def __init__(self, symbols: Optional[NumberSymbols] = None):
        self._symbols = symbols or NumberSymbols()

    def symbols(self, locale: Optional[str]) -> NumberSymbols:
        return self._symbols


__all__ = [
    "LOCALE_ENV",
    "LocaleBackend",
    "CldrTableBackend",
    "FixedLocaleBackend",
    "normalize_locale",
    "resolve_symbols",
    "default_locale",
    "render_decimal",
    "to_decimal",
]
