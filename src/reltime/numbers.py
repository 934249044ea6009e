"""Locale-aware rendering of the number inside a relative time phrase.

Based on CLDR number symbols data; only what a count needs is covered
(decimal and grouping separators, grouping thresholds).
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class NumberSymbols:
    """Locale-specific number symbols.

    Attributes:
        decimal: Decimal separator
        group: Grouping separator
        minus: Minus sign
        min_grouping: Minimum number of digits in the leading group before
            grouping applies (CLDR ``minimumGroupingDigits``)
    """
    decimal: str = "."
    group: str = ","
    minus: str = "-"
    min_grouping: int = 1


_NUMBER_SYMBOLS: dict[str, NumberSymbols] = {
    "en": NumberSymbols(),
    "de": NumberSymbols(decimal=",", group="."),
    "fr": NumberSymbols(decimal=",", group=" "),
    "es": NumberSymbols(decimal=",", group=".", min_grouping=2),
    "it": NumberSymbols(decimal=",", group="."),
    "pt": NumberSymbols(decimal=",", group="."),
    "nl": NumberSymbols(decimal=",", group="."),
    "ru": NumberSymbols(decimal=",", group=" "),
    "uk": NumberSymbols(decimal=",", group=" "),
    "pl": NumberSymbols(decimal=",", group=" ", min_grouping=2),
    "cs": NumberSymbols(decimal=",", group=" "),
    "sv": NumberSymbols(decimal=",", group=" ", minus="−"),
    "nb": NumberSymbols(decimal=",", group=" ", minus="−"),
    "da": NumberSymbols(decimal=",", group="."),
    "fi": NumberSymbols(decimal=",", group=" ", minus="−"),
    "tr": NumberSymbols(decimal=",", group="."),
    "ja": NumberSymbols(),
    "ko": NumberSymbols(),
    "zh": NumberSymbols(),
    "ar": NumberSymbols(decimal="٫", group="٬"),
    "he": NumberSymbols(),
}


def get_number_symbols(language: str) -> NumberSymbols:
    """Get number symbols for a root language subtag, defaulting to English."""
    return _NUMBER_SYMBOLS.get(language.lower(), _NUMBER_SYMBOLS["en"])


def _apply_grouping(int_part: str, symbols: NumberSymbols) -> str:
    """Apply grouping separators to an integer digit string."""
    if len(int_part) < 3 + symbols.min_grouping:
        return int_part

    head = len(int_part) % 3 or 3
    groups = [int_part[:head]]
    groups.extend(int_part[i:i + 3] for i in range(head, len(int_part), 3))
    return symbols.group.join(groups)


def format_number(value: float | int, language: str) -> str:
    """Format a count for insertion into a phrase.

    Example:
        format_number(1234, "en")  # "1,234"
        format_number(1234, "de")  # "1.234"
        format_number(1234, "es")  # "1234"
    """
    symbols = get_number_symbols(language)

    if isinstance(value, float) and (math.isnan(value) or math.isinf(value)):
        return str(value)

    if isinstance(value, int) or float(value).is_integer():
        int_part = str(abs(int(value)))
        frac_part = ""
    else:
        int_part, _, frac_part = repr(abs(float(value))).partition(".")

    formatted = _apply_grouping(int_part, symbols)
    if frac_part:
        formatted = f"{formatted}{symbols.decimal}{frac_part}"
    if value < 0:
        formatted = f"{symbols.minus}{formatted}"
    return formatted
