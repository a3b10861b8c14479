"""
Verifier configuration.

Collects the naming conventions and thresholds used by discovery, the
coverage verifier and the hash auditor in one object, with environment
variable overrides for CI tuning.
"""

import os
from dataclasses import dataclass, fields, replace
from typing import Any

ENV_PREFIX = "PROPERTY_BAG_KIT_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class VerifierConfig:
    """
    Configuration for a field coverage run.

    Attributes:
        getter_prefix: Prefix of the zero-argument accessor for each field
        setter_prefix: Prefix of the one-argument mutator for each field
        clone_method: Name of the duplication method
        copy_method: Name of the bulk-copy method
        clear_method: Name of the bulk-reset method
        strip_private_prefix: Strip leading underscores from field names when
            deriving accessor names (``_width`` -> ``get_width``)
        check_accessor_types: Require accessor annotations to match the field type
        min_unique_hash_ratio: Minimum unique hash codes per discovered field
        recreate_after_failure: Replace the equality pair with fresh instances
            after a field fails, so failures do not cascade
    """

    getter_prefix: str = "get_"
    setter_prefix: str = "set_"
    clone_method: str = "clone"
    copy_method: str = "copy_from"
    clear_method: str = "clear"
    strip_private_prefix: bool = True
    check_accessor_types: bool = True
    min_unique_hash_ratio: float = 1.0
    recreate_after_failure: bool = True

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.validate()

    def validate(self) -> None:
        """Raise ValueError if any setting is unusable."""
        for name in ("getter_prefix", "setter_prefix"):
            if not getattr(self, name):
                raise ValueError(f"{name} cannot be empty")
        for name in ("clone_method", "copy_method", "clear_method"):
            value = getattr(self, name)
            if not value or not value.isidentifier():
                raise ValueError(f"{name} must be a method name, got {value!r}")
        if self.min_unique_hash_ratio < 0:
            raise ValueError(
                f"min_unique_hash_ratio cannot be negative, got {self.min_unique_hash_ratio}"
            )

    def accessor_stem(self, field_name: str) -> str:
        """Field name as used inside accessor names."""
        return field_name.lstrip("_") if self.strip_private_prefix else field_name

    def getter_name(self, field_name: str) -> str:
        """Name of the getter for a field."""
        return f"{self.getter_prefix}{self.accessor_stem(field_name)}"

    def setter_name(self, field_name: str) -> str:
        """Name of the setter for a field."""
        return f"{self.setter_prefix}{self.accessor_stem(field_name)}"

    def with_overrides(self, **overrides: Any) -> "VerifierConfig":
        """Return a copy with some settings replaced."""
        return replace(self, **overrides)

    @classmethod
    def from_environment(cls, environ: dict[str, str] | None = None) -> "VerifierConfig":
        """
        Build configuration from ``PROPERTY_BAG_KIT_*`` environment variables.

        Recognized variables: HASH_RATIO, CHECK_ACCESSOR_TYPES,
        RECREATE_AFTER_FAILURE, STRIP_PRIVATE_PREFIX. Unset variables keep
        their defaults.

        Raises:
            ValueError: If a variable has a malformed value
        """
        env = os.environ if environ is None else environ
        overrides: dict[str, Any] = {}

        ratio = env.get(f"{ENV_PREFIX}HASH_RATIO")
        if ratio is not None:
            try:
                overrides["min_unique_hash_ratio"] = float(ratio)
            except ValueError as e:
                raise ValueError(f"{ENV_PREFIX}HASH_RATIO must be a number, got {ratio!r}") from e

        for env_name, attr in (
            ("CHECK_ACCESSOR_TYPES", "check_accessor_types"),
            ("RECREATE_AFTER_FAILURE", "recreate_after_failure"),
            ("STRIP_PRIVATE_PREFIX", "strip_private_prefix"),
        ):
            raw = env.get(f"{ENV_PREFIX}{env_name}")
            if raw is not None:
                overrides[attr] = _parse_bool(f"{ENV_PREFIX}{env_name}", raw)

        return cls(**overrides)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary representation."""
        return {f.name: getattr(self, f.name) for f in fields(self)}


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


_default_config: VerifierConfig | None = None


def get_default_config() -> VerifierConfig:
    """Process-wide default configuration, read from the environment once."""
    global _default_config
    if _default_config is None:
        _default_config = VerifierConfig.from_environment()
    return _default_config


def reset_default_config() -> None:
    """Forget the cached default so the environment is read again."""
    global _default_config
    _default_config = None
