"""
Public operations.

    format("Hello ${name,-8}|", {"name": "Ann"})      -> "Hello Ann     |"
    format("${n:x4}", lambda key, spec: 255)          -> "00ff"
    format_value(0.5, "p0", "en")                     -> "50%"
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Optional, Union

from .numeric.locale import LocaleBackend
from .template.processor import TemplateFormatter
from .template.resolver import SubstitutionSource

Substitutions = Union[Mapping[str, Any], Callable[[str, Optional[str]], Any], SubstitutionSource]


def format(
        template: str,
        substitutions: Substitutions,
        locale: Optional[str] = None,
        *,
        backend: Optional[LocaleBackend] = None,
) -> str:
    """
    Formats a string with placeholders.

    Placeholders take the form `${key[,alignment][:format]}`.

    `alignment` is a minimum width: shorter results are padded with spaces,
    on the left for positive values and on the right for negative ones.

    `format` is a numeric specifier (see format_value). With a mapping it is
    applied to the looked-up value; with a callback it is passed to the
    callback as the second argument.

    Args:
        template: Text with placeholders
        substitutions: Mapping of keys to values, or a callback (key, format) -> value
        locale: BCP 47 locale tag for locale-aware specifiers; None for the default
        backend: Locale data provider

    Raises:
        KeyNotFoundError: A key is missing from the mapping, or the callback returned None
        InvalidAlignmentError: An alignment is not a valid integer
        InvalidFormatError: A format specifier is invalid for its value
    """
    return TemplateFormatter(locale, backend).format(template, substitutions)


def format_value(
        value: Any,
        format: str,
        locale: Optional[str] = None,
        *,
        backend: Optional[LocaleBackend] = None,
) -> str:
    """
    Formats a single value.

    Numbers accept "" or a standard specifier: d, e, f, g, n, p, x (any case),
    optionally followed by one or two precision digits. Other values accept
    only the empty specifier.

    Raises:
        InvalidFormatError: The specifier is invalid for the value
    """
    return TemplateFormatter(locale, backend).format_value(value, format)


__all__ = ["format", "format_value", "Substitutions"]
