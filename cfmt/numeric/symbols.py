"""
Locale number symbols.

Based on CLDR number symbols and percent patterns for the latin
numbering system of each locale.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

NBSP = "\u00a0"
NNBSP = "\u202f"


@dataclass(frozen=True)
class NumberSymbols:
    """Locale-specific number symbols."""
    decimal: str = "."
    group: str = ","
    minus: str = "-"
    percent_pattern: str = "{n}%"  # {n} is replaced by the formatted number
    infinity: str = "\u221e"
    nan: str = "NaN"
    group_size: int = 3
    secondary_group_size: int = 3
    min_grouping_digits: int = 1  # CLDR minimumGroupingDigits


_NUMBER_SYMBOLS: Dict[str, NumberSymbols] = {
    # English
    "en": NumberSymbols(),
    "en_IN": NumberSymbols(secondary_group_size=2),
    "hi": NumberSymbols(secondary_group_size=2),

    # German
    "de": NumberSymbols(decimal=",", group=".", percent_pattern="{n}" + NBSP + "%"),
    "de_AT": NumberSymbols(decimal=",", group=NBSP, percent_pattern="{n}" + NBSP + "%"),
    "de_CH": NumberSymbols(decimal=".", group="\u2019"),

    # French
    "fr": NumberSymbols(decimal=",", group=NNBSP, percent_pattern="{n}" + NNBSP + "%"),
    "fr_CH": NumberSymbols(decimal=",", group=NNBSP),

    # Spanish
    "es": NumberSymbols(decimal=",", group=".", percent_pattern="{n}" + NBSP + "%", min_grouping_digits=2),
    "es_MX": NumberSymbols(percent_pattern="{n}" + NBSP + "%"),

    # Italian
    "it": NumberSymbols(decimal=",", group="."),

    # Portuguese (CLDR "pt" is Brazilian Portuguese)
    "pt": NumberSymbols(decimal=",", group="."),
    "pt_PT": NumberSymbols(decimal=",", group=NBSP, min_grouping_digits=2),

    # Dutch
    "nl": NumberSymbols(decimal=",", group="."),

    # Nordic
    "sv": NumberSymbols(decimal=",", group=NBSP, minus="\u2212", percent_pattern="{n}" + NBSP + "%"),

    # Slavic
    "ru": NumberSymbols(decimal=",", group=NBSP, percent_pattern="{n}" + NBSP + "%"),
    "uk": NumberSymbols(decimal=",", group=NBSP),
    "pl": NumberSymbols(decimal=",", group=NBSP, min_grouping_digits=2),
    "cs": NumberSymbols(decimal=",", group=NBSP, percent_pattern="{n}" + NBSP + "%"),

    # Turkish
    "tr": NumberSymbols(decimal=",", group=".", percent_pattern="%{n}"),

    # East Asian
    "ja": NumberSymbols(),
    "zh": NumberSymbols(),
    "ko": NumberSymbols(),
}

DEFAULT_LOCALE = "en"


def known_locales() -> list[str]:
    """Locale tags of the built-in table, in BCP 47 form."""
    return sorted(tag.replace("_", "-") for tag in _NUMBER_SYMBOLS)


def lookup_symbols(tag: str) -> NumberSymbols | None:
    """Exact table lookup by normalized tag (`de_AT`), or None."""
    return _NUMBER_SYMBOLS.get(tag)


__all__ = [
    "NBSP",
    "NNBSP",
    "NumberSymbols",
    "DEFAULT_LOCALE",
    "known_locales",
    "lookup_symbols",
]
