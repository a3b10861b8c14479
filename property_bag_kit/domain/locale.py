"""
Locale value object.

Provides language/region identifiers in BCP 47 style ("en", "en-US").
"""

import re
from dataclasses import dataclass
from typing import ClassVar

_AVAILABLE_TAGS = (
    "ar", "de", "de-CH", "en", "en-GB", "en-IN", "en-US", "es", "es-MX",
    "fr", "fr-CA", "hi", "it", "ja", "ko", "nl", "pl", "pt-BR", "ru", "sv",
    "tr", "zh", "zh-TW",
)  # fmt: skip


@dataclass(frozen=True)
class Locale:
    """Immutable locale made of a language and an optional region."""

    language: str
    region: str | None = None

    _LANGUAGE_PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^[a-z]{2,3}$")
    _REGION_PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^([A-Z]{2}|[0-9]{3})$")

    def __post_init__(self):
        """Validate locale after initialization."""
        if not self.language or not self._LANGUAGE_PATTERN.match(self.language):
            raise ValueError(f"Invalid language code: {self.language!r}")
        if self.region is not None and not self._REGION_PATTERN.match(self.region):
            raise ValueError(f"Invalid region code: {self.region!r}")

    @classmethod
    def from_tag(cls, tag: str) -> "Locale":
        """
        Create Locale from a language tag.

        Accepts both '-' and '_' as separator (e.g. 'en-US', 'en_US').
        """
        if not tag:
            raise ValueError("Locale tag cannot be empty")
        parts = tag.replace("_", "-").split("-")
        if len(parts) > 2:
            raise ValueError(f"Unsupported locale tag: {tag!r}")
        language = parts[0].lower()
        region = parts[1].upper() if len(parts) == 2 else None
        return cls(language, region)

    @staticmethod
    def available() -> tuple["Locale", ...]:
        """Return all known locales, sorted by tag."""
        return tuple(Locale.from_tag(tag) for tag in _AVAILABLE_TAGS)

    def to_tag(self) -> str:
        """Convert to a language tag."""
        return f"{self.language}-{self.region}" if self.region else self.language

    def __str__(self) -> str:
        """String representation."""
        return self.to_tag()
