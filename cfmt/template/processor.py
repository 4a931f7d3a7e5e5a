"""
Template processor.

Public entry point of the placeholder engine: walks the segments produced
by the lexer, resolves every placeholder through a substitution source,
renders and pads the value, and assembles the output.

Formatting is all-or-nothing: the first error aborts the whole template.
"""

from __future__ import annotations

import logging
import re
from typing import Any, List, Optional

from .lexer import PlaceholderLexer
from .resolver import ABSENT, SubstitutionSource, as_source
from .tokens import Placeholder, TextSpan
from ..errors import InvalidAlignmentError, InvalidFormatError, KeyNotFoundError
from ..numeric.formatter import format_number
from ..numeric.locale import LocaleBackend
from ..values import NumberValue, Value, classify, natural_text

logger = logging.getLogger(__name__)

# Leading signed integer; the rest of the field is ignored
_ALIGNMENT_RE = re.compile(r"\s*([+-]?\d+)", re.ASCII)


def parse_alignment(text: str) -> int:
    """
    Parses an alignment field.

    Surrounding whitespace and a leading sign are accepted, and anything
    after the leading integer is ignored (" -12" -> -12, "5px" -> 5).

    Raises:
        InvalidAlignmentError: When the field does not start with an integer
    """
    match = _ALIGNMENT_RE.match(text)
    if match is None:
        raise InvalidAlignmentError(text)
    return int(match.group(1))


def pad(text: str, alignment: int) -> str:
    """
    Pads text with U+0020 to abs(alignment) code points.

    Positive alignment pads on the left, negative on the right.
    Longer text is returned unchanged.
    """
    if alignment < 0:
        return text.ljust(-alignment)
    return text.rjust(alignment)


class TemplateFormatter:
    """
    Formats templates with ${key[,alignment][:format]} placeholders.

    Holds only immutable settings, so one instance can be shared between
    threads as long as the substitution sources themselves are safe to read.
    """

    def __init__(self, locale: Optional[str] = None, backend: Optional[LocaleBackend] = None):
        """
        Args:
            locale: Locale tag for locale-aware specifiers; None for the default
            backend: Locale data provider; None for the built-in CLDR table
        """
        self.locale = locale
        self.backend = backend

    def format(self, template: str, substitutions: Any) -> str:
        """
        Substitutes all placeholders of a template.

        Args:
            template: Text with placeholders
            substitutions: Mapping, callback or SubstitutionSource

        Returns:
            The template with every placeholder replaced

        Raises:
            KeyNotFoundError: A key has no value in the source
            InvalidAlignmentError: An alignment field is not an integer
            InvalidFormatError: A format field does not apply to its value
        """
        source = as_source(substitutions)
        parts: List[str] = []
        for segment in PlaceholderLexer(template):
            if isinstance(segment, TextSpan):
                parts.append(segment.text)
            else:
                parts.append(self.render_placeholder(segment, source))
        return "".join(parts)

    def render_placeholder(self, token: Placeholder, source: SubstitutionSource) -> str:
        """Resolves, renders and pads a single placeholder."""
        value = source.resolve(token.key, token.format)
        if value is ABSENT:
            logger.debug("No value for placeholder %r", token.raw)
            raise KeyNotFoundError(token.key)

        text = self.render(classify(value), token.format or "", strict=source.strict_format)

        # An empty alignment field means no padding
        if token.alignment:
            text = pad(text, parse_alignment(token.alignment))
        return text

    def render(self, value: Value, spec: str, strict: bool = True) -> str:
        """
        Renders a classified value.

        Numbers go through the numeric formatter. Other values take their
        natural string form and reject a non-empty specifier unless
        `strict` is False.
        """
        if isinstance(value, NumberValue):
            return format_number(value.number, spec, self.locale, self.backend)
        if spec and strict:
            raise InvalidFormatError(spec, kind="non-numeric")
        return natural_text(value)

    def format_value(self, value: Any, spec: str) -> str:
        """Formats a single raw value according to a specifier."""
        return self.render(classify(value), spec)


__all__ = ["TemplateFormatter", "parse_alignment", "pad"]
