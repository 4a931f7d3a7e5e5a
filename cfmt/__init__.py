"""
Composite-string formatting: ${key[,alignment][:format]} placeholders
with standard numeric format specifiers.
"""

from __future__ import annotations

from .api import format, format_value
from .errors import (
    CFUserError,
    ConfigError,
    InvalidAlignmentError,
    InvalidFormatError,
    KeyNotFoundError,
)
from .numeric import CldrTableBackend, FixedLocaleBackend, LocaleBackend, NumberSymbols
from .template import CallbackSource, MappingSource, SubstitutionSource, TemplateFormatter

__all__ = [
    "format",
    "format_value",
    "TemplateFormatter",
    "SubstitutionSource",
    "MappingSource",
    "CallbackSource",
    "LocaleBackend",
    "CldrTableBackend",
    "FixedLocaleBackend",
    "NumberSymbols",
    "CFUserError",
    "KeyNotFoundError",
    "InvalidAlignmentError",
    "InvalidFormatError",
    "ConfigError",
]
