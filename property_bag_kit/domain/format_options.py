"""
Enumerated formatting options carried by number-format property bags.

Each enum is a bounded value set: the synthesizer picks members by
``seed % len(members)`` so every member is reachable without a per-type rule.
"""

import decimal
from enum import Enum


class RoundingMode(Enum):
    """Rounding modes, valued by the matching ``decimal`` module constants."""

    UP = decimal.ROUND_UP
    DOWN = decimal.ROUND_DOWN
    CEILING = decimal.ROUND_CEILING
    FLOOR = decimal.ROUND_FLOOR
    HALF_UP = decimal.ROUND_HALF_UP
    HALF_DOWN = decimal.ROUND_HALF_DOWN
    HALF_EVEN = decimal.ROUND_HALF_EVEN
    ZERO_FIVE_UP = decimal.ROUND_05UP

    def to_decimal(self) -> str:
        """Return the ``decimal`` module rounding constant."""
        return self.value


class CompactStyle(Enum):
    """Compact notation style (e.g. "1.2K" vs "1.2 thousand")."""

    SHORT = "short"
    LONG = "long"


class CurrencyStyle(Enum):
    """How a currency is rendered next to a number."""

    SYMBOL = "symbol"
    ISO_CODE = "iso_code"
    PLURAL = "plural"


class CurrencyUsage(Enum):
    """Context that selects currency precision and rounding increment."""

    STANDARD = "standard"
    CASH = "cash"


class FormatWidth(Enum):
    """Width of unit and currency display names."""

    WIDE = "wide"
    SHORT = "short"
    NARROW = "narrow"
    NUMERIC = "numeric"


class PaddingLocation(Enum):
    """Where pad characters are inserted relative to prefix and suffix."""

    BEFORE_PREFIX = "before_prefix"
    AFTER_PREFIX = "after_prefix"
    BEFORE_SUFFIX = "before_suffix"
    AFTER_SUFFIX = "after_suffix"


class ParseMode(Enum):
    """Leniency of number parsing."""

    LENIENT = "lenient"
    STRICT = "strict"
    FAST = "fast"
