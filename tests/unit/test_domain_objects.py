"""
Unit tests for domain objects.

Tests for the formatting value objects carried by property bags: Currency,
Locale, MeasureUnit, MathContext and the option enums, focusing on
validation, conversion and value semantics.
"""

import decimal
from decimal import Decimal

import pytest

from property_bag_kit.domain import (
    Currency,
    CurrencyPluralInfo,
    Locale,
    MathContext,
    MeasureUnit,
    ParseMode,
    RoundingMode,
)


class TestCurrency:
    """Test cases for Currency domain object."""

    def test_valid_currency_creation(self):
        """Test creating valid currencies."""
        currency = Currency("USD")
        assert str(currency) == "USD"
        assert currency.code == "USD"

    def test_of_normalizes_case(self):
        """Test of() accepts any case and surrounding whitespace."""
        assert Currency.of(" eur ") == Currency("EUR")

    def test_invalid_currency_creation(self):
        """Test invalid codes raise errors."""
        for invalid in ["", "usd", "US", "USDT", "U5D", None]:
            with pytest.raises((ValueError, TypeError)):
                Currency(invalid)

    def test_of_rejects_empty(self):
        """Test of() rejects an empty code."""
        with pytest.raises(ValueError):
            Currency.of("")

    def test_currency_hash(self):
        """Test currencies work as dict keys and set members."""
        assert len({Currency("USD"), Currency.of("usd"), Currency("GBP")}) == 2

    def test_available_sorted_and_unique(self):
        """Test the available set is sorted with no duplicates."""
        codes = [c.code for c in Currency.available()]
        assert codes == sorted(set(codes))
        assert "USD" in codes


class TestLocale:
    """Test cases for Locale domain object."""

    def test_language_only(self):
        """Test a locale without a region."""
        locale = Locale("fr")
        assert locale.region is None
        assert str(locale) == "fr"

    @pytest.mark.parametrize("tag", ["en-US", "en_US", "EN-us"])
    def test_from_tag(self, tag):
        """Test both separators and any case are accepted."""
        assert Locale.from_tag(tag) == Locale("en", "US")

    def test_to_tag(self):
        """Test tags round out with a hyphen."""
        assert Locale("pt", "BR").to_tag() == "pt-BR"

    @pytest.mark.parametrize("language, region", [("", None), ("EN", None), ("en", "usa")])
    def test_invalid_locale(self, language, region):
        """Test malformed language and region codes are rejected."""
        with pytest.raises(ValueError):
            Locale(language, region)

    def test_from_tag_rejects_variants(self):
        """Test tags with more than two parts are rejected."""
        with pytest.raises(ValueError):
            Locale.from_tag("zh-Hant-TW")

    def test_numeric_region(self):
        """Test UN M.49 numeric regions are accepted."""
        assert Locale("es", "419").to_tag() == "es-419"

    def test_available_unique(self):
        """Test the available set has no duplicates."""
        available = Locale.available()
        assert len(set(available)) == len(available)


class TestCurrencyPluralInfo:
    """Test cases for CurrencyPluralInfo domain object."""

    def test_for_locale_accepts_tag(self):
        """Test plural info can be built from a tag or a Locale."""
        assert CurrencyPluralInfo.for_locale("en-US") == CurrencyPluralInfo(Locale("en", "US"))

    @pytest.mark.parametrize(
        "tag, categories",
        [
            ("en", ("one", "other")),
            ("ja", ("other",)),
            ("ru", ("one", "few", "many", "other")),
        ],
    )
    def test_plural_categories(self, tag, categories):
        """Test categories follow the locale language."""
        assert CurrencyPluralInfo.for_locale(tag).plural_categories == categories

    def test_requires_locale(self):
        """Test a raw string is rejected by the constructor."""
        with pytest.raises(TypeError):
            CurrencyPluralInfo("en")

    def test_available_follows_locales(self):
        """Test one entry per available locale, in locale order."""
        available = CurrencyPluralInfo.available()
        assert [info.locale for info in available] == list(Locale.available())


class TestMeasureUnit:
    """Test cases for MeasureUnit domain object."""

    def test_from_identifier(self):
        """Test parsing type/subtype notation."""
        unit = MeasureUnit.from_identifier("length/meter")
        assert unit == MeasureUnit("length", "meter")
        assert str(unit) == "length/meter"

    def test_invalid_identifier(self):
        """Test identifiers without a separator are rejected."""
        with pytest.raises(ValueError):
            MeasureUnit.from_identifier("meter")

    def test_empty_parts_rejected(self):
        """Test empty type or subtype is rejected."""
        with pytest.raises(ValueError):
            MeasureUnit("length", "")

    def test_available_sorted(self):
        """Test units are sorted by type then subtype."""
        units = [(u.type, u.subtype) for u in MeasureUnit.available()]
        assert units == sorted(units)


class TestMathContext:
    """Test cases for MathContext domain object."""

    def test_default_rounding(self):
        """Test HALF_UP is the default rounding mode."""
        assert MathContext(5).rounding is RoundingMode.HALF_UP

    def test_unlimited(self):
        """Test the unlimited context."""
        context = MathContext.unlimited()
        assert context.is_unlimited()
        assert context.to_decimal_context().prec == decimal.MAX_PREC

    def test_rounding_applied(self):
        """Test round() uses both precision and rounding mode."""
        assert MathContext(2, RoundingMode.HALF_UP).round(Decimal("1.25")) == Decimal("1.3")
        assert MathContext(2, RoundingMode.HALF_EVEN).round(Decimal("1.25")) == Decimal("1.2")

    def test_decimal_context(self):
        """Test conversion to a decimal.Context."""
        context = MathContext(7, RoundingMode.FLOOR).to_decimal_context()
        assert context.prec == 7
        assert context.rounding == decimal.ROUND_FLOOR

    def test_value_semantics(self):
        """Test equal settings compare and hash equal."""
        assert MathContext(3, RoundingMode.UP) == MathContext(3, RoundingMode.UP)
        assert hash(MathContext(3)) == hash(MathContext(3))
        assert MathContext(3) != MathContext(4)

    @pytest.mark.parametrize(
        "precision, rounding, error",
        [
            (-1, RoundingMode.UP, ValueError),
            (True, RoundingMode.UP, TypeError),
            (2.5, RoundingMode.UP, TypeError),
            (2, decimal.ROUND_UP, TypeError),
        ],
    )
    def test_invalid_context(self, precision, rounding, error):
        """Test invalid precision or rounding is rejected."""
        with pytest.raises(error):
            MathContext(precision, rounding)

    def test_immutable(self):
        """Test contexts cannot be mutated."""
        with pytest.raises(AttributeError):
            MathContext(3).precision = 4


class TestFormatOptions:
    """Test cases for the option enums."""

    def test_rounding_modes_map_to_decimal(self):
        """Test every rounding mode has a matching decimal constant."""
        for mode in RoundingMode:
            assert decimal.Context(rounding=mode.to_decimal()).rounding == mode.value
        assert len(RoundingMode) == 8

    def test_parse_modes(self):
        """Test parse modes are a fixed set."""
        assert [m.name for m in ParseMode] == ["LENIENT", "STRICT", "FAST"]
