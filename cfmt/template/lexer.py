"""
Placeholder lexer.

Splits a template into literal spans and ${...} placeholders in a single
left-to-right pass. Delimiters are not escapable: a `}` always closes the
nearest preceding `${`. Malformed placeholders (unterminated, empty key,
repeated separators) are not matched and stay in the literal text.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator, List

from .tokens import Placeholder, Segment, TextSpan

logger = logging.getLogger(__name__)

# ${key}  ${key,alignment}  ${key:format}  ${key,alignment:format}
PLACEHOLDER_RE = re.compile(r"\$\{([^,:}]+?)(?:,([^,:}]*?))?(?::([^}]*?))?\}")


class PlaceholderLexer:
    """
    Lazy, restartable tokenizer of one template.

    Every iteration starts a new pass over the template, so the same
    lexer can be walked any number of times.
    """

    def __init__(self, text: str):
        self.text = text

    def __iter__(self) -> Iterator[Segment]:
        return self.segments()

    def segments(self) -> Iterator[Segment]:
        """Yields TextSpan and Placeholder segments in template order."""
        pos = 0
        for match in PLACEHOLDER_RE.finditer(self.text):
            start, end = match.span()
            if start > pos:
                yield TextSpan(self.text[pos:start], pos, start)
            key, alignment, fmt = match.groups()
            yield Placeholder(
                key=key,
                alignment=alignment,
                format=fmt,
                start=start,
                end=end,
                raw=match.group(0),
            )
            pos = end
        if pos < len(self.text):
            yield TextSpan(self.text[pos:], pos, len(self.text))

    def placeholders(self) -> Iterator[Placeholder]:
        """Yields only placeholder segments."""
        for segment in self.segments():
            if isinstance(segment, Placeholder):
                yield segment

    def tokenize(self) -> List[Segment]:
        segments = list(self.segments())
        logger.debug("Tokenized template of length %d into %d segments", len(self.text), len(segments))
        return segments


def tokenize(text: str) -> List[Segment]:
    """
    Convenience function for tokenizing a template.

    Args:
        text: Template source text

    Returns:
        List of segments covering the whole template
    """
    return PlaceholderLexer(text).tokenize()


def iter_placeholders(text: str) -> Iterator[Placeholder]:
    return PlaceholderLexer(text).placeholders()


__all__ = ["PLACEHOLDER_RE", "PlaceholderLexer", "tokenize", "iter_placeholders"]
