"""
Unit tests for the sample value synthesizer.

Covers the built-in type table, the optional/absence convention, the
registration API and unsupported-type reporting.
"""

from decimal import Decimal
from enum import Enum
from typing import Optional

import pytest

from property_bag_kit.core.errors import UnsupportedTypeError
from property_bag_kit.domain import (
    CompactStyle,
    Currency,
    CurrencyPluralInfo,
    Locale,
    MathContext,
    MeasureUnit,
    ParseMode,
    RoundingMode,
)
from property_bag_kit.verification.synthesizer import (
    SampleSynthesizer,
    optional_inner,
    pick,
    synthesize,
    to_base32,
)


class Color(Enum):
    RED = 1
    GREEN = 2
    BLUE = 3


class Money:
    def __init__(self, cents: int) -> None:
        self.cents = cents

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Money) and other.cents == self.cents

    def __hash__(self) -> int:
        return hash(self.cents)


class TestBuiltInRules:
    """Test cases for the default type table."""

    def test_int_uses_multiplier(self):
        """Test int samples are seed * 1000001."""
        assert synthesize(int, 0) == 0
        assert synthesize(int, 1) == 1000001
        assert synthesize(int, 4) == 4000004

    def test_bool_alternates(self):
        """Test bool samples alternate starting with True."""
        assert [synthesize(bool, s) for s in range(4)] == [True, False, True, False]

    def test_bool_is_not_treated_as_int(self):
        """Test bool has its own rule even though it subclasses int."""
        assert synthesize(bool, 1) is False

    def test_float_uses_multiplier(self):
        """Test float samples are seed * 1000004."""
        assert synthesize(float, 2) == 2000008.0
        assert isinstance(synthesize(float, 2), float)

    def test_decimal_uses_multiplier(self):
        """Test Decimal samples are seed * 1000002."""
        assert synthesize(Decimal, 3) == Decimal(3000006)

    def test_str_is_base32(self):
        """Test str samples are base-32 renderings of seed * 1000003."""
        assert synthesize(str, 1) == to_base32(1000003)
        assert synthesize(str, 0) == "0"

    def test_math_context_varies_precision_and_rounding(self):
        """Test MathContext samples carry the seed as precision."""
        context = synthesize(MathContext, 3)
        assert context == MathContext(3, list(RoundingMode)[3])

    def test_enum_picks_by_modulo(self):
        """Test any Enum is supported through the family rule."""
        assert synthesize(Color, 0) is Color.RED
        assert synthesize(Color, 1) is Color.GREEN
        assert synthesize(Color, 4) is Color.GREEN

    def test_domain_enums_supported(self):
        """Test the bundled formatting enums."""
        assert synthesize(CompactStyle, 1) is CompactStyle.LONG
        assert synthesize(ParseMode, 2) is ParseMode.FAST

    @pytest.mark.parametrize("value_type", [Currency, CurrencyPluralInfo, MeasureUnit, Locale])
    def test_bounded_domain_types(self, value_type):
        """Test bounded domain types pick from their available set."""
        available = value_type.available()
        for seed in range(5):
            assert synthesize(value_type, seed) == available[seed % len(available)]


class TestBase32:
    """Test cases for base-32 rendering."""

    @pytest.mark.parametrize(
        "number, expected",
        [(0, "0"), (9, "9"), (10, "a"), (31, "v"), (32, "10"), (1000003, "ugi3")],
    )
    def test_to_base32(self, number, expected):
        """Test digits 0-9a-v, most significant first."""
        assert to_base32(number) == expected


class TestAbsence:
    """Test cases for optional types."""

    @pytest.mark.parametrize("value_type", [Decimal, str, Currency, RoundingMode, MathContext])
    def test_seed_zero_is_none_for_optional(self, value_type):
        """Test seed 0 yields None for X | None."""
        assert synthesize(value_type | None, 0) is None

    def test_typing_optional_supported(self):
        """Test typing.Optional behaves like the | None form."""
        assert synthesize(Optional[int], 0) is None
        assert synthesize(Optional[int], 2) == 2000002

    def test_non_zero_seeds_delegate_to_inner_type(self):
        """Test seeds above 0 produce values of the inner type."""
        assert synthesize(Decimal | None, 1) == Decimal(1000002)

    def test_optional_inner(self):
        """Test optional unwrapping."""
        assert optional_inner(int | None) is int
        assert optional_inner(int) is None

    def test_union_without_none_unsupported(self):
        """Test unions other than X | None are rejected."""
        with pytest.raises(UnsupportedTypeError):
            synthesize(int | str, 1)

    def test_multi_member_optional_unsupported(self):
        """Test X | Y | None is rejected."""
        with pytest.raises(UnsupportedTypeError):
            synthesize(int | str | None, 1)


class TestUnsupportedTypes:
    """Test cases for unknown types."""

    def test_unknown_type_names_the_type(self):
        """Test the error names the offending type."""
        with pytest.raises(UnsupportedTypeError, match="complex") as exc_info:
            synthesize(complex, 1)
        assert exc_info.value.type_hint is complex

    def test_unknown_type_fails_even_for_seed_zero_optional(self):
        """Test optional wrappers do not hide an unknown inner type behind None."""
        with pytest.raises(UnsupportedTypeError):
            synthesize(complex | None, 0)

    def test_non_class_hint_unsupported(self):
        """Test generic aliases are rejected rather than guessed."""
        with pytest.raises(UnsupportedTypeError):
            synthesize(list[int], 1)

    def test_supports(self, synthesizer):
        """Test supports() mirrors synthesize()."""
        assert synthesizer.supports(int)
        assert synthesizer.supports(Color | None)
        assert not synthesizer.supports(complex)


class TestSeedValidation:
    """Test cases for seed arguments."""

    def test_negative_seed_rejected(self):
        """Test negative seeds raise ValueError."""
        with pytest.raises(ValueError, match="non-negative"):
            synthesize(int, -1)

    def test_bool_seed_rejected(self):
        """Test bool seeds raise TypeError."""
        with pytest.raises(TypeError):
            synthesize(int, True)


class TestRegistration:
    """Test cases for extending the synthesizer."""

    def test_register_decorator(self, synthesizer):
        """Test registering a rule with the decorator."""

        @synthesizer.register(Money)
        def _money(seed: int) -> Money:
            return Money(seed * 1000005)

        assert synthesizer.synthesize(Money, 2) == Money(2000010)
        assert synthesizer.synthesize(Money | None, 0) is None

    def test_registration_is_per_instance(self, synthesizer):
        """Test registering on one synthesizer does not affect the default one."""
        synthesizer.add_rule(Money, lambda seed: Money(seed))
        assert not SampleSynthesizer().supports(Money)

    def test_exact_rule_beats_family_rule(self, synthesizer):
        """Test an exact rule overrides the Enum family rule."""
        synthesizer.add_rule(Color, lambda seed: Color.BLUE)
        assert synthesizer.synthesize(Color, 0) is Color.BLUE

    def test_add_bounded(self, synthesizer):
        """Test bounded registration wraps around."""
        synthesizer.add_bounded(Money, [Money(1), Money(2)])
        assert synthesizer.synthesize(Money, 3) == Money(2)

    def test_add_bounded_rejects_empty(self, synthesizer):
        """Test empty value sets are rejected."""
        with pytest.raises(ValueError):
            synthesizer.add_bounded(Money, [])

    def test_add_rule_requires_class(self, synthesizer):
        """Test rules are keyed by class."""
        with pytest.raises(TypeError):
            synthesizer.add_rule(int | None, lambda seed: seed)

    def test_empty_synthesizer_supports_nothing(self):
        """Test include_defaults=False starts empty."""
        assert not SampleSynthesizer(include_defaults=False).supports(int)


class TestPick:
    """Test cases for bounded selection."""

    def test_pick_wraps(self):
        """Test selection wraps around the value set."""
        assert pick("abc", 4) == "b"

    def test_pick_empty(self):
        """Test empty value sets are rejected."""
        with pytest.raises(ValueError):
            pick((), 0)
