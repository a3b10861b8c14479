"""
Sample value synthesizer.

Maps ``(type, seed)`` to a deterministic sample value of that type. Rules are
looked up by exact type first, then by type family (e.g. every Enum), so new
types are supported by registration rather than by editing a conditional
chain:

    synthesizer = SampleSynthesizer()

    @synthesizer.register(Money)
    def _money(seed: int) -> Money:
        return Money(seed * 1000005, "USD")

Seed conventions:
- seed 0 on an optional type (``X | None``) yields None
- seed 0 on a non-optional type yields the type's first canonical value
- seeds 1..4 yield pairwise-distinct values for unbounded types; bounded
  types select ``members[seed % len(members)]`` and wrap around
"""

import logging
import types
import typing
from collections.abc import Callable, Sequence
from decimal import Decimal
from enum import Enum
from typing import Any, TypeVar

from ..core.errors import UnsupportedTypeError
from ..domain import (
    Currency,
    CurrencyPluralInfo,
    Locale,
    MathContext,
    MeasureUnit,
    RoundingMode,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
Rule = Callable[[int], Any]

INT_MULTIPLIER = 1000001
DECIMAL_MULTIPLIER = 1000002
STR_MULTIPLIER = 1000003
FLOAT_MULTIPLIER = 1000004

_BASE32_DIGITS = "0123456789abcdefghijklmnopqrstuv"


def to_base32(number: int) -> str:
    """Render a non-negative integer with digits 0-9a-v."""
    if number == 0:
        return "0"
    digits = []
    while number:
        number, remainder = divmod(number, 32)
        digits.append(_BASE32_DIGITS[remainder])
    return "".join(reversed(digits))


def pick(values: Sequence[T], seed: int) -> T:
    """Select the ``seed % len(values)``-th member of a bounded value set."""
    if not values:
        raise ValueError("Cannot pick from an empty value set")
    return values[seed % len(values)]


def optional_inner(type_hint: Any) -> Any | None:
    """
    Return X for ``X | None`` / ``Optional[X]``, else None.

    Raises:
        UnsupportedTypeError: For unions other than a single type with None
    """
    origin = typing.get_origin(type_hint)
    if origin is not typing.Union and origin is not types.UnionType:
        return None
    members = [arg for arg in typing.get_args(type_hint) if arg is not type(None)]
    if len(members) != 1 or len(members) == len(typing.get_args(type_hint)):
        raise UnsupportedTypeError(type_hint)
    return members[0]


class SampleSynthesizer:
    """Registry of per-type sample rules."""

    def __init__(self, include_defaults: bool = True) -> None:
        self._rules: dict[type, Rule] = {}
        self._family_rules: list[tuple[Callable[[type], bool], Callable[[type, int], Any]]] = []
        if include_defaults:
            _install_default_rules(self)

    def register(self, type_: type) -> Callable[[Rule], Rule]:
        """Decorator registering a rule for exactly ``type_``."""

        def decorator(rule: Rule) -> Rule:
            self.add_rule(type_, rule)
            return rule

        return decorator

    def add_rule(self, type_: type, rule: Rule) -> None:
        """Register or replace the rule for exactly ``type_``."""
        if not isinstance(type_, type):
            raise TypeError(f"Rules are registered per class, got {type_!r}")
        self._rules[type_] = rule
        logger.debug(f"Registered sample rule for {type_.__qualname__}")

    def add_family_rule(
        self, predicate: Callable[[type], bool], rule: Callable[[type, int], Any]
    ) -> None:
        """Register a rule for every class matching ``predicate``."""
        self._family_rules.append((predicate, rule))

    def add_bounded(self, type_: type, values: Sequence[Any]) -> None:
        """Register a bounded type whose samples come from a fixed value set."""
        fixed = tuple(values)
        if not fixed:
            raise ValueError(f"Value set for {type_.__qualname__} cannot be empty")
        self.add_rule(type_, lambda seed: pick(fixed, seed))

    def supports(self, type_hint: Any) -> bool:
        """Check whether samples can be produced for a type."""
        try:
            self._resolve(type_hint)
        except UnsupportedTypeError:
            return False
        return True

    def synthesize(self, type_hint: Any, seed: int) -> Any:
        """
        Produce the sample value of ``type_hint`` for ``seed``.

        Raises:
            ValueError: If seed is negative
            UnsupportedTypeError: If no rule covers the type
        """
        if isinstance(seed, bool) or not isinstance(seed, int):
            raise TypeError(f"Seed must be an int, got: {type(seed)}")
        if seed < 0:
            raise ValueError(f"Seed must be non-negative, got: {seed}")

        rule = self._resolve(type_hint)
        if seed == 0 and optional_inner(type_hint) is not None:
            return None
        return rule(seed)

    def _resolve(self, type_hint: Any) -> Rule:
        inner = optional_inner(type_hint)
        if inner is not None:
            return self._resolve(inner)
        if not isinstance(type_hint, type) or typing.get_origin(type_hint) is not None:
            raise UnsupportedTypeError(type_hint)

        rule = self._rules.get(type_hint)
        if rule is not None:
            return rule
        for predicate, family_rule in self._family_rules:
            if predicate(type_hint):
                return lambda seed, _cls=type_hint, _rule=family_rule: _rule(_cls, seed)
        raise UnsupportedTypeError(type_hint)


def _is_enum(cls: type) -> bool:
    return issubclass(cls, Enum) and len(cls) > 0


def _install_default_rules(synthesizer: SampleSynthesizer) -> None:
    synthesizer.add_rule(int, lambda seed: seed * INT_MULTIPLIER)
    synthesizer.add_rule(bool, lambda seed: seed % 2 == 0)
    synthesizer.add_rule(float, lambda seed: float(seed * FLOAT_MULTIPLIER))
    synthesizer.add_rule(Decimal, lambda seed: Decimal(seed * DECIMAL_MULTIPLIER))
    synthesizer.add_rule(str, lambda seed: to_base32(seed * STR_MULTIPLIER))

    rounding_modes = tuple(RoundingMode)
    synthesizer.add_rule(
        MathContext, lambda seed: MathContext(seed, pick(rounding_modes, seed))
    )

    synthesizer.add_bounded(Currency, Currency.available())
    synthesizer.add_bounded(CurrencyPluralInfo, CurrencyPluralInfo.available())
    synthesizer.add_bounded(MeasureUnit, MeasureUnit.available())
    synthesizer.add_bounded(Locale, Locale.available())

    synthesizer.add_family_rule(_is_enum, lambda cls, seed: pick(tuple(cls), seed))


default_synthesizer = SampleSynthesizer()


def synthesize(type_hint: Any, seed: int) -> Any:
    """Produce a sample value using the default synthesizer."""
    return default_synthesizer.synthesize(type_hint, seed)
