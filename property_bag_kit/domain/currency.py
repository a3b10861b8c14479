"""
Currency value object.

Provides a validated ISO 4217 currency code with a fixed, sorted set of
available currencies.
"""

import re
from dataclasses import dataclass
from typing import ClassVar

_AVAILABLE_CODES = (
    "AUD", "BRL", "CAD", "CHF", "CNY", "CZK", "DKK", "EUR", "GBP", "HKD",
    "HUF", "INR", "JPY", "KRW", "MXN", "NOK", "NZD", "PLN", "SEK", "SGD",
    "THB", "TRY", "USD", "ZAR",
)  # fmt: skip


@dataclass(frozen=True)
class Currency:
    """
    Immutable ISO 4217 currency code.

    Only the format is validated; ``available()`` is the fixed set used when
    a concrete currency has to be picked.
    """

    code: str

    _ISO_PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^[A-Z]{3}$")

    def __post_init__(self):
        """Validate currency code after initialization."""
        if not isinstance(self.code, str):
            raise TypeError(f"Currency code must be a string, got: {type(self.code)}")
        if not self._ISO_PATTERN.match(self.code):
            raise ValueError(f"Invalid ISO 4217 currency code: {self.code!r}")

    @classmethod
    def of(cls, code: str) -> "Currency":
        """Create Currency from a code in any case."""
        if not code:
            raise ValueError("Currency code cannot be empty")
        return cls(code.strip().upper())

    @staticmethod
    def available() -> tuple["Currency", ...]:
        """Return all known currencies, sorted by code."""
        return tuple(Currency(code) for code in _AVAILABLE_CODES)

    def __str__(self) -> str:
        """String representation."""
        return self.code
