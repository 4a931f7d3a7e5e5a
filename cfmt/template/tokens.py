"""
Lexical types.

A template is split into an ordered sequence of segments:
literal text spans and placeholder occurrences.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class TextSpan:
    """Literal text, copied to the output verbatim."""
    text: str
    start: int  # Offset in the source template
    end: int


@dataclass(frozen=True)
class Placeholder:
    """
    One ${key[,alignment][:format]} occurrence.

    `alignment` and `format` are None when their separator is absent,
    and an empty string when the separator is present with nothing after it.
    """
    key: str
    alignment: Optional[str]
    format: Optional[str]
    start: int
    end: int
    raw: str  # Full source text, including ${ and }

    def __repr__(self) -> str:
        return f"Placeholder({self.raw!r}, {self.start}:{self.end})"


Segment = Union[TextSpan, Placeholder]


__all__ = ["TextSpan", "Placeholder", "Segment"]
