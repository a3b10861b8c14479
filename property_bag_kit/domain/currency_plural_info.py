"""
CurrencyPluralInfo value object.

Carries the plural categories used when currency names are spelled out
("1 US dollar", "3 US dollars"). Each instance is derived from a Locale, so
the available set mirrors ``Locale.available()``.
"""

from dataclasses import dataclass

from .locale import Locale

_CATEGORIES_BY_LANGUAGE = {
    "ar": ("zero", "one", "two", "few", "many", "other"),
    "ja": ("other",),
    "ko": ("other",),
    "pl": ("one", "few", "many", "other"),
    "ru": ("one", "few", "many", "other"),
    "zh": ("other",),
}

_DEFAULT_CATEGORIES = ("one", "other")


@dataclass(frozen=True)
class CurrencyPluralInfo:
    """Immutable plural data for spelled-out currency names in one locale."""

    locale: Locale

    def __post_init__(self):
        """Validate plural info after initialization."""
        if not isinstance(self.locale, Locale):
            raise TypeError(f"Locale must be a Locale, got: {type(self.locale)}")

    @classmethod
    def for_locale(cls, locale: Locale | str) -> "CurrencyPluralInfo":
        """Create plural info from a Locale or a language tag."""
        if isinstance(locale, str):
            locale = Locale.from_tag(locale)
        return cls(locale)

    @staticmethod
    def available() -> tuple["CurrencyPluralInfo", ...]:
        """Return plural info for every known locale, in locale order."""
        return tuple(CurrencyPluralInfo(locale) for locale in Locale.available())

    @property
    def plural_categories(self) -> tuple[str, ...]:
        """Plural categories of the locale's language."""
        return _CATEGORIES_BY_LANGUAGE.get(self.locale.language, _DEFAULT_CATEGORIES)

    def __str__(self) -> str:
        """String representation."""
        return f"CurrencyPluralInfo({self.locale})"
