"""
JSON report models for the CLI.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from .template.lexer import PlaceholderLexer


class PlaceholderInfo(BaseModel):
    key: str
    alignment: Optional[str] = None
    format: Optional[str] = None
    start: int
    end: int
    raw: str


class PlaceholdersReport(BaseModel):
    template_length: int
    placeholders: List[PlaceholderInfo] = Field(default_factory=list)
    keys: List[str] = Field(default_factory=list)  # unique, in order of first use


def build_placeholders_report(template: str) -> PlaceholdersReport:
    placeholders = [
        PlaceholderInfo(
            key=p.key,
            alignment=p.alignment,
            format=p.format,
            start=p.start,
            end=p.end,
            raw=p.raw,
        )
        for p in PlaceholderLexer(template).placeholders()
    ]
    keys = list(dict.fromkeys(p.key for p in placeholders))
    return PlaceholdersReport(template_length=len(template), placeholders=placeholders, keys=keys)


__all__ = ["PlaceholderInfo", "PlaceholdersReport", "build_placeholders_report"]
