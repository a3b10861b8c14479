"""
Result types for field coverage runs.

Provides structured pass/fail per field plus the aggregate checks that run
once per target type.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Any

from ..core.errors import FieldVerificationError


class CheckStatus(Enum):
    """Outcome of a field or aggregate check."""

    PASSED = "passed"
    FAILED = "failed"
    ERROR = "error"
    SKIPPED = "skipped"

    def is_success(self) -> bool:
        """Check if status indicates success."""
        return self == CheckStatus.PASSED

    def is_error(self) -> bool:
        """Check if status indicates a failure of any kind."""
        return self in [CheckStatus.FAILED, CheckStatus.ERROR]


@dataclass
class FieldResult:
    """Result of verifying one field."""

    field_name: str
    declared_type: Any = None
    status: CheckStatus = CheckStatus.PASSED
    failures: list[FieldVerificationError] = field(default_factory=list)
    steps_completed: int = 0

    def add_failure(self, failure: FieldVerificationError) -> None:
        """
        Record a failure against this field.

        Assertion failures mark the field FAILED; contract violations and
        unsupported types mark it ERROR since the field could not be exercised.
        """
        failure.for_field(self.field_name)
        self.failures.append(failure)
        if failure.kind == "assertion_failure":
            if self.status != CheckStatus.ERROR:
                self.status = CheckStatus.FAILED
        else:
            self.status = CheckStatus.ERROR

    def is_success(self) -> bool:
        """Check if the field passed every step."""
        return self.status.is_success()

    def get_failure_summary(self) -> str:
        """Get a summary of all failures."""
        return "; ".join(f.message for f in self.failures)

    def to_dict(self) -> dict[str, Any]:
        """Convert result to dictionary representation."""
        return {
            "field": self.field_name,
            "type": repr(self.declared_type) if self.declared_type is not None else None,
            "status": self.status.value,
            "steps_completed": self.steps_completed,
            "failures": [{"kind": f.kind, "message": f.message} for f in self.failures],
        }


@dataclass
class CheckResult:
    """Result of an aggregate check run once per target type."""

    name: str
    status: CheckStatus
    message: str = ""

    @classmethod
    def passed(cls, name: str, message: str = "") -> "CheckResult":
        """Create a passing check result."""
        return cls(name=name, status=CheckStatus.PASSED, message=message)

    @classmethod
    def failed(cls, name: str, message: str) -> "CheckResult":
        """Create a failed check result."""
        return cls(name=name, status=CheckStatus.FAILED, message=message)

    @classmethod
    def skipped(cls, name: str, reason: str) -> "CheckResult":
        """Create a skipped check result."""
        return cls(name=name, status=CheckStatus.SKIPPED, message=reason)

    def is_success(self) -> bool:
        """Check if the aggregate check passed or was skipped."""
        return not self.status.is_error()

    def to_dict(self) -> dict[str, Any]:
        """Convert result to dictionary representation."""
        return {"name": self.name, "status": self.status.value, "message": self.message}


@dataclass
class CoverageReport:
    """Everything a field coverage run found for one target type."""

    target_name: str
    field_results: list[FieldResult] = field(default_factory=list)
    checks: list[CheckResult] = field(default_factory=list)
    unique_hashes: int = 0
    hash_observations: int = 0
    execution_time: float | None = None
    timestamp: datetime | None = None

    def __post_init__(self):
        """Initialize report with timestamp if not provided."""
        if self.timestamp is None:
            self.timestamp = datetime.now(UTC)

    @property
    def passed(self) -> bool:
        """True when every field and every aggregate check passed."""
        return all(r.is_success() for r in self.field_results) and all(
            c.is_success() for c in self.checks
        )

    @property
    def field_count(self) -> int:
        """Number of fields with a result, including fields that failed discovery."""
        return len(self.field_results)

    def get_field(self, field_name: str) -> FieldResult:
        """Look up the result of one field."""
        for result in self.field_results:
            if result.field_name == field_name:
                return result
        raise KeyError(f"No result for field {field_name!r}")

    def get_check(self, name: str) -> CheckResult:
        """Look up an aggregate check by name."""
        for check in self.checks:
            if check.name == name:
                return check
        raise KeyError(f"No aggregate check named {name!r}")

    def failed_fields(self) -> list[str]:
        """Names of fields that did not pass."""
        return [r.field_name for r in self.field_results if not r.is_success()]

    def failures(self) -> list[FieldVerificationError]:
        """Every per-field failure, in field order."""
        return [f for r in self.field_results for f in r.failures]

    def failed_checks(self) -> list[CheckResult]:
        """Aggregate checks that failed."""
        return [c for c in self.checks if not c.is_success()]

    def summary(self) -> str:
        """Multi-line summary listing every failure."""
        passed_fields = sum(1 for r in self.field_results if r.is_success())
        lines = [
            f"{self.target_name}: {passed_fields}/{self.field_count} fields passed, "
            f"{self.unique_hashes} unique hash codes out of {self.hash_observations}"
        ]
        for failure in self.failures():
            lines.append(f"  {failure.kind}: {failure}")
        for check in self.failed_checks():
            lines.append(f"  {check.name}: {check.message}")
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        """Convert report to dictionary representation."""
        return {
            "target": self.target_name,
            "passed": self.passed,
            "fields": [r.to_dict() for r in self.field_results],
            "checks": [c.to_dict() for c in self.checks],
            "unique_hashes": self.unique_hashes,
            "hash_observations": self.hash_observations,
            "execution_time": self.execution_time,
            "timestamp": self.timestamp.isoformat() if self.timestamp else None,
        }

    def __str__(self) -> str:
        """String representation of the report."""
        status = "PASSED" if self.passed else "FAILED"
        return f"{status}: {self.summary()}"
