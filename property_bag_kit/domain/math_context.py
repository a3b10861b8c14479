"""
MathContext value object for precision and rounding settings.

``decimal.Context`` compares by identity, so it cannot be stored in a bag
whose equality is structural. MathContext carries the same two settings as an
immutable, hashable value and converts to a ``decimal.Context`` on demand.
"""

import decimal
from dataclasses import dataclass

from .format_options import RoundingMode


@dataclass(frozen=True)
class MathContext:
    """
    Immutable precision/rounding pair.

    A precision of 0 means unlimited, matching the usual convention for
    arbitrary-precision arithmetic contexts.
    """

    precision: int
    rounding: RoundingMode = RoundingMode.HALF_UP

    def __post_init__(self):
        """Validate context after initialization."""
        if not isinstance(self.precision, int) or isinstance(self.precision, bool):
            raise TypeError(f"Precision must be an int, got: {type(self.precision)}")
        if self.precision < 0:
            raise ValueError(f"Precision cannot be negative, got: {self.precision}")
        if not isinstance(self.rounding, RoundingMode):
            raise TypeError(f"Rounding must be a RoundingMode, got: {type(self.rounding)}")

    @classmethod
    def unlimited(cls) -> "MathContext":
        """Create a context with unlimited precision."""
        return cls(0, RoundingMode.HALF_EVEN)

    def is_unlimited(self) -> bool:
        """Check whether precision is unlimited."""
        return self.precision == 0

    def to_decimal_context(self) -> decimal.Context:
        """
        Build a ``decimal.Context`` with these settings.

        Unlimited precision maps to ``decimal.MAX_PREC``.
        """
        prec = decimal.MAX_PREC if self.is_unlimited() else self.precision
        return decimal.Context(prec=prec, rounding=self.rounding.to_decimal())

    def round(self, value: decimal.Decimal) -> decimal.Decimal:
        """Round a decimal value according to this context."""
        return self.to_decimal_context().plus(value)

    def __str__(self) -> str:
        """String representation."""
        return f"precision={self.precision} rounding={self.rounding.name}"
