"""
Numeric formatting: standard specifiers and locale backends.
"""

from .formatter import format_number, parse_specifier
from .locale import (
    CldrTableBackend,
    FixedLocaleBackend,
    LocaleBackend,
    default_locale,
    normalize_locale,
    resolve_symbols,
)
from .symbols import NumberSymbols, known_locales

__all__ = [
    "format_number",
    "parse_specifier",
    "LocaleBackend",
    "CldrTableBackend",
    "FixedLocaleBackend",
    "NumberSymbols",
    "default_locale",
    "normalize_locale",
    "resolve_symbols",
    "known_locales",
]
