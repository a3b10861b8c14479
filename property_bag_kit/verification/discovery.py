"""
Field accessor discovery.

Builds a FieldRegistry for a target type from the instance fields it declares
(class-level annotations, ``ClassVar`` excluded) and the accessor pair each
field must expose: ``get_<name>() -> T`` and ``set_<name>(value: T) -> Self``.
"""

import inspect
import logging
import typing
from typing import Any

from ..config import VerifierConfig, get_default_config
from ..core.errors import ContractViolation, describe_type
from ..core.types import FieldDescriptor, FieldRegistry

logger = logging.getLogger(__name__)

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def _is_class_var(hint: Any) -> bool:
    return hint is typing.ClassVar or typing.get_origin(hint) is typing.ClassVar


def _resolve_annotation(target_type: type, name: str, raw: Any) -> Any:
    """Resolve one annotation in the namespace of the class that declares it."""
    holder = type(
        target_type.__name__,
        (),
        {"__annotations__": {name: raw}, "__module__": target_type.__module__},
    )
    try:
        return typing.get_type_hints(holder, localns={target_type.__name__: target_type})[name]
    except Exception as e:
        raise ContractViolation(
            f"Could not resolve annotation of {target_type.__name__}.{name}: {e}",
            name,
            element="annotations",
        ) from e


def scan_fields(target_type: type) -> tuple[dict[str, Any], list[ContractViolation], list[str]]:
    """
    Resolve the instance fields declared directly on a class, one at a time.

    Returns:
        Tuple of (resolved types by name, one violation per unresolvable
        field, every field name in declaration order)
    """
    fields: dict[str, Any] = {}
    violations: list[ContractViolation] = []
    order: list[str] = []
    for name, raw in inspect.get_annotations(target_type).items():
        if _is_class_var(raw):
            continue
        try:
            hint = _resolve_annotation(target_type, name, raw)
        except ContractViolation as e:
            violations.append(e)
            order.append(name)
            continue
        if _is_class_var(hint):
            continue
        fields[name] = hint
        order.append(name)
    return fields, violations, order


def declared_fields(target_type: type) -> dict[str, Any]:
    """
    Resolved types of the instance fields declared directly on a class.

    Inherited annotations and ``ClassVar`` annotations are skipped.

    Raises:
        ContractViolation: For the first annotation that cannot be resolved
    """
    fields, violations, _ = scan_fields(target_type)
    if violations:
        raise violations[0]
    return fields


def _accessor_hints(func: Any, target_type: type, field_name: str) -> dict[str, Any]:
    try:
        return typing.get_type_hints(func, localns={target_type.__name__: target_type})
    except Exception as e:
        raise ContractViolation(
            f"Could not resolve annotations of {func.__name__}: {e}",
            field_name,
            element=func.__name__,
        ) from e


def _extra_positional(func: Any) -> tuple[int, int]:
    """Count (required, total) positional parameters after ``self``."""
    params = list(inspect.signature(func).parameters.values())[1:]
    positional = [p for p in params if p.kind in _POSITIONAL]
    required = [p for p in positional if p.default is inspect.Parameter.empty]
    has_required_keyword = any(
        p.kind is inspect.Parameter.KEYWORD_ONLY and p.default is inspect.Parameter.empty
        for p in params
    )
    return len(required) + (1 if has_required_keyword else 0), len(positional)


def _find_method(target_type: type, method_name: str, field_name: str) -> Any:
    method = inspect.getattr_static(target_type, method_name, None)
    if isinstance(method, (staticmethod, classmethod)) or not callable(method):
        raise ContractViolation(
            f"Could not find method {method_name} for field {field_name}",
            field_name,
            element=method_name,
        )
    return method


def _returns_target(hint: Any, target_type: type) -> bool:
    # setters inherited from a base class may be annotated with the base
    if isinstance(hint, type) and issubclass(target_type, hint) and hint is not object:
        return True
    return hint is getattr(typing, "Self", None)


def resolve_field(
    target_type: type, name: str, declared_type: Any, config: VerifierConfig
) -> FieldDescriptor:
    """
    Resolve and check the accessor pair for one field.

    Raises:
        ContractViolation: If an accessor is missing or has the wrong shape
    """
    getter_name = config.getter_name(name)
    setter_name = config.setter_name(name)
    getter = _find_method(target_type, getter_name, name)
    setter = _find_method(target_type, setter_name, name)

    required, _ = _extra_positional(getter)
    if required != 0:
        raise ContractViolation(
            f"Getter {getter_name} must take no arguments", name, element=getter_name
        )
    required, total = _extra_positional(setter)
    if required != 1 or total < 1:
        raise ContractViolation(
            f"Setter {setter_name} must take exactly one argument", name, element=setter_name
        )

    if config.check_accessor_types:
        getter_hints = _accessor_hints(getter, target_type, name)
        if getter_hints.get("return", inspect.Parameter.empty) != declared_type:
            raise ContractViolation(
                f"Getter {getter_name} does not return {describe_type(declared_type)}",
                name,
                element=getter_name,
            )

        setter_hints = _accessor_hints(setter, target_type, name)
        value_param = list(inspect.signature(setter).parameters)[1]
        if setter_hints.get(value_param, inspect.Parameter.empty) != declared_type:
            raise ContractViolation(
                f"Setter {setter_name} does not accept {describe_type(declared_type)}",
                name,
                element=setter_name,
            )
        if not _returns_target(setter_hints.get("return"), target_type):
            raise ContractViolation(
                f"Method {setter_name} does not return {target_type.__name__}",
                name,
                element=setter_name,
            )

    return FieldDescriptor(name=name, declared_type=declared_type, getter=getter, setter=setter)


def discover_fields(
    target_type: type, config: VerifierConfig | None = None
) -> tuple[FieldRegistry, list[ContractViolation], list[str]]:
    """
    Discover every field in one pass over the class annotations.

    Fields with violations are left out of the registry and reported in the
    returned list, one violation per field, in declaration order.

    Returns:
        Tuple of (registry, violations, every field name in declaration order)
    """
    config = config or get_default_config()
    registry = FieldRegistry(target_type)
    fields, unresolved, order = scan_fields(target_type)
    failed = {v.field_name: v for v in unresolved}

    for name, declared_type in fields.items():
        try:
            registry.append(resolve_field(target_type, name, declared_type, config))
        except ContractViolation as e:
            failed[name] = e

    violations = [failed[name] for name in order if name in failed]
    for violation in violations:
        logger.warning(f"{target_type.__name__}.{violation.field_name}: {violation.message}")

    logger.debug(
        f"Discovered {len(registry)} fields on {target_type.__name__} "
        f"({len(violations)} with contract violations)"
    )
    return registry, violations, order


def discover_all(
    target_type: type, config: VerifierConfig | None = None
) -> tuple[FieldRegistry, list[ContractViolation]]:
    """
    Discover every field, collecting contract violations instead of raising.

    Fields with violations are left out of the registry and reported in the
    returned list, one violation per field.
    """
    registry, violations, _ = discover_fields(target_type, config)
    return registry, violations


def discover(target_type: type, config: VerifierConfig | None = None) -> FieldRegistry:
    """
    Discover the fields of a target type and their accessor pairs.

    Raises:
        ContractViolation: For the first field with a missing or mismatched accessor
    """
    registry, violations = discover_all(target_type, config)
    if violations:
        raise violations[0]
    return registry
