"""
Shared types for field coverage verification.

The Verified Value Object contract is a structural protocol: any class with
the right methods qualifies, no base class is required.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from .errors import ContractViolation


@runtime_checkable
class VerifiedValueObject(Protocol):
    """Bulk operations a property bag must provide.

    Per-field accessors are not part of the protocol; they are resolved per
    field by discovery or listed explicitly in a FieldRegistry.
    """

    def __eq__(self, other: object) -> bool: ...

    def __hash__(self) -> int: ...

    def clone(self) -> Any: ...

    def copy_from(self, other: Any) -> Any: ...

    def clear(self) -> Any: ...


@dataclass(frozen=True)
class FieldDescriptor:
    """One field of a target type and the callables that access it."""

    name: str
    declared_type: Any
    getter: Callable[[Any], Any]
    setter: Callable[[Any, Any], Any]
    sampler: Callable[[int], Any] | None = None

    def read(self, instance: Any) -> Any:
        """Invoke the getter on an instance."""
        try:
            return self.getter(instance)
        except Exception as e:
            raise ContractViolation(
                f"Could not invoke getter: {e!r}", self.name, element="getter"
            ) from e

    def write(self, instance: Any, value: Any) -> Any:
        """Invoke the setter on an instance."""
        try:
            return self.setter(instance, value)
        except Exception as e:
            raise ContractViolation(
                f"Could not invoke setter with {value!r}: {e!r}", self.name, element="setter"
            ) from e


class FieldRegistry:
    """
    Explicit, ordered list of the fields of one target type.

    Built once per tested type, either by discovery or by hand:

        registry = FieldRegistry(Properties)
        registry.add("width", int, Properties.get_width, Properties.set_width)
    """

    def __init__(self, target_type: type, fields: list[FieldDescriptor] | None = None) -> None:
        self.target_type = target_type
        self._fields: dict[str, FieldDescriptor] = {}
        for descriptor in fields or []:
            self.append(descriptor)

    def add(
        self,
        name: str,
        declared_type: Any,
        getter: Callable[[Any], Any],
        setter: Callable[[Any, Any], Any],
        sampler: Callable[[int], Any] | None = None,
    ) -> FieldRegistry:
        """Register a field; returns self for chaining."""
        self.append(FieldDescriptor(name, declared_type, getter, setter, sampler))
        return self

    def append(self, descriptor: FieldDescriptor) -> None:
        """Register a prebuilt descriptor."""
        if descriptor.name in self._fields:
            raise ValueError(f"Field {descriptor.name!r} is already registered")
        self._fields[descriptor.name] = descriptor

    def get(self, name: str) -> FieldDescriptor:
        """Look up a field by name."""
        try:
            return self._fields[name]
        except KeyError:
            raise KeyError(f"No field {name!r} on {self.target_type.__name__}") from None

    def names(self) -> list[str]:
        """Field names in registration order."""
        return list(self._fields)

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    def __iter__(self) -> Iterator[FieldDescriptor]:
        return iter(self._fields.values())

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"FieldRegistry({self.target_type.__name__}, fields={self.names()})"
