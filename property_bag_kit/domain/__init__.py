"""
Domain value types understood by the sample synthesizer out of the box.
"""

from .currency import Currency
from .currency_plural_info import CurrencyPluralInfo
from .format_options import (
    CompactStyle,
    CurrencyStyle,
    CurrencyUsage,
    FormatWidth,
    PaddingLocation,
    ParseMode,
    RoundingMode,
)
from .locale import Locale
from .math_context import MathContext
from .measure_unit import MeasureUnit

__all__ = [
    "CompactStyle",
    "Currency",
    "CurrencyPluralInfo",
    "CurrencyStyle",
    "CurrencyUsage",
    "FormatWidth",
    "Locale",
    "MathContext",
    "MeasureUnit",
    "PaddingLocation",
    "ParseMode",
    "RoundingMode",
]
