"""
Error taxonomy for field coverage verification.

Every per-field error carries the field name so it can be reported against
that field while verification of the other fields continues.
"""

from typing import Any


class FieldVerificationError(Exception):
    """Base class for errors attributed to a single field."""

    kind = "error"

    def __init__(self, message: str, field_name: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.field_name = field_name

    def for_field(self, field_name: str) -> "FieldVerificationError":
        """Attach a field name if the error was raised without one."""
        if not self.field_name:
            self.field_name = field_name
        return self

    def __str__(self) -> str:
        if self.field_name:
            return f"[{self.field_name}] {self.message}"
        return self.message


class ContractViolation(FieldVerificationError):
    """
    The target type does not satisfy the Verified Value Object contract.

    Raised for missing or mistyped accessors, missing bulk operations, and
    accessors or bulk operations that raise when invoked.
    """

    kind = "contract_violation"

    def __init__(self, message: str, field_name: str = "", element: str = "") -> None:
        super().__init__(message, field_name)
        self.element = element


class FieldAssertionFailure(FieldVerificationError):
    """An equality, hash or getter check failed at a numbered step."""

    kind = "assertion_failure"

    def __init__(self, intent: str, field_name: str = "", step: int = 0) -> None:
        super().__init__(f"step {step}: {intent}", field_name)
        self.intent = intent
        self.step = step


class UnsupportedTypeError(FieldVerificationError):
    """The sample synthesizer has no rule for a type."""

    kind = "unsupported_type"

    def __init__(self, type_hint: Any, field_name: str = "") -> None:
        self.type_hint = type_hint
        super().__init__(
            f"Don't know how to synthesize values of type {describe_type(type_hint)}; "
            f"register a rule for it with SampleSynthesizer.register()",
            field_name,
        )


class FieldCoverageError(AssertionError):
    """Raised by assert_field_coverage() when a coverage report has failures."""

    def __init__(self, report: Any) -> None:
        self.report = report
        super().__init__(report.summary())


def describe_type(type_hint: Any) -> str:
    """Readable name for a class or typing construct."""
    if isinstance(type_hint, type):
        return f"{type_hint.__module__}.{type_hint.__qualname__}"
    return repr(type_hint)
