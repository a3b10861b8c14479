"""
MeasureUnit value object for unit-formatted numbers.
"""

from dataclasses import dataclass

_AVAILABLE_UNITS = (
    ("area", "hectare"),
    ("area", "square-meter"),
    ("digital", "byte"),
    ("digital", "megabyte"),
    ("duration", "hour"),
    ("duration", "second"),
    ("length", "kilometer"),
    ("length", "meter"),
    ("mass", "gram"),
    ("mass", "kilogram"),
    ("temperature", "celsius"),
    ("volume", "liter"),
)


@dataclass(frozen=True)
class MeasureUnit:
    """Immutable unit identifier made of a unit type and a subtype."""

    type: str
    subtype: str

    def __post_init__(self):
        """Validate unit after initialization."""
        if not self.type or not self.subtype:
            raise ValueError("Unit type and subtype cannot be empty")

    @classmethod
    def from_identifier(cls, identifier: str) -> "MeasureUnit":
        """Create MeasureUnit from ``type/subtype`` notation (e.g. 'length/meter')."""
        unit_type, sep, subtype = identifier.partition("/")
        if not sep:
            raise ValueError(f"Invalid unit identifier: {identifier!r}")
        return cls(unit_type.strip(), subtype.strip())

    @staticmethod
    def available() -> tuple["MeasureUnit", ...]:
        """Return all known units, sorted by type then subtype."""
        return tuple(MeasureUnit(t, s) for t, s in _AVAILABLE_UNITS)

    def __str__(self) -> str:
        """String representation."""
        return f"{self.type}/{self.subtype}"
