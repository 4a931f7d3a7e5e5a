"""
Placeholder engine: lexer, substitution sources and processor.
"""

from __future__ import annotations

from .lexer import PlaceholderLexer, iter_placeholders, tokenize
from .processor import TemplateFormatter, pad, parse_alignment
from .resolver import ABSENT, CallbackSource, MappingSource, SubstitutionSource, as_source
from .tokens import Placeholder, Segment, TextSpan

__all__ = [
    "PlaceholderLexer",
    "tokenize",
    "iter_placeholders",
    "TemplateFormatter",
    "parse_alignment",
    "pad",
    "ABSENT",
    "SubstitutionSource",
    "MappingSource",
    "CallbackSource",
    "as_source",
    "Placeholder",
    "TextSpan",
    "Segment",
]
