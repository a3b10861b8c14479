"""
Field coverage verification.

Drives a target type's instances through a fixed mutate/compare sequence for
every field, proving each field takes part in equality, hashing, clone(),
copy_from() and clear() without one hand-written test per field.
"""

import logging
import time
from collections.abc import Callable
from typing import Any

from ..config import VerifierConfig, get_default_config
from ..core.errors import (
    ContractViolation,
    FieldAssertionFailure,
    FieldCoverageError,
    FieldVerificationError,
)
from ..core.types import FieldDescriptor, FieldRegistry, VerifiedValueObject
from .discovery import discover_fields
from .hash_audit import HashQualityAuditor, HashRegistry
from .result import CheckResult, CoverageReport, FieldResult
from .synthesizer import SampleSynthesizer, default_synthesizer

logger = logging.getLogger(__name__)

DEFAULT_EQUALITY = "default_equality"

FINAL_STEP = 9


class FieldCoverageVerifier:
    """
    Runs the per-field verification sequence against one target type.

    Four instances live for the whole run: p1/p2 are the equality pair, p3/p4
    collect per-field divergent state for the final clear() check. Steps
    inside a field depend on the exact state left by the previous step, so
    fields are processed one at a time.
    """

    def __init__(
        self,
        target_type: type,
        registry: FieldRegistry | None = None,
        synthesizer: SampleSynthesizer | None = None,
        config: VerifierConfig | None = None,
        factory: Callable[[], VerifiedValueObject] | None = None,
    ) -> None:
        """
        Initialize verifier.

        Args:
            target_type: Class under test
            registry: Explicit field list; discovered from the class when omitted
            synthesizer: Sample source; the default synthesizer when omitted
            config: Naming conventions and thresholds
            factory: Zero-argument constructor; ``target_type`` when omitted
        """
        self.target_type = target_type
        self.registry = registry
        self.synthesizer = synthesizer or default_synthesizer
        self.config = config or get_default_config()
        self.factory = factory or target_type
        self.hash_registry = HashRegistry()
        self.auditor = HashQualityAuditor(self.config)
        self._step = 0
        self._loaded_samples = False

    def run(self) -> CoverageReport:
        """Verify every field and run the aggregate checks."""
        start_time = time.time()
        self.hash_registry.reset()
        report = CoverageReport(self.target_type.__name__)

        registry, violations, order = self._resolve_fields()
        logger.info(f"Verifying field coverage of {report.target_name} ({len(order)} fields)")

        p1, p2 = self._new_instance(), self._new_instance()
        report.checks.append(self._check_default_equality(p1, p2))
        p3, p4 = self._new_instance(), self._new_instance()

        loaded_fields = 0
        for name in order:
            if name in violations:
                result = FieldResult(name)
                result.add_failure(violations[name])
                report.field_results.append(result)
                continue

            descriptor = registry.get(name)
            result = FieldResult(name, descriptor.declared_type)
            try:
                self.verify_field(descriptor, p1, p2, p3, p4, result)
            except FieldVerificationError as e:
                result.add_failure(e)
            except Exception as e:
                result.add_failure(
                    ContractViolation(
                        f"Unexpected error at step {self._step}: {e!r}", name, element="step"
                    )
                )

            if self._loaded_samples:
                loaded_fields += 1
            if result.is_success():
                logger.info(f"Field {name}: passed")
            else:
                logger.warning(f"Field {name}: {result.get_failure_summary()}")
                if self.config.recreate_after_failure:
                    p1, p2 = self._new_instance(), self._new_instance()
            report.field_results.append(result)

        report.checks.extend(
            self.auditor.audit(p3, p4, len(registry), self.hash_registry, loaded_fields)
        )
        report.unique_hashes = self.hash_registry.unique_count
        report.hash_observations = self.hash_registry.observations
        report.execution_time = time.time() - start_time

        logger.info(
            f"Field coverage of {report.target_name}: "
            f"{'passed' if report.passed else 'failed'} in {report.execution_time:.3f}s"
        )
        return report

    def _resolve_fields(self) -> tuple[FieldRegistry, dict[str, ContractViolation], list[str]]:
        if self.registry is not None:
            return self.registry, {}, self.registry.names()
        registry, violations, order = discover_fields(self.target_type, self.config)
        return registry, {v.field_name: v for v in violations}, order

    def _new_instance(self) -> VerifiedValueObject:
        return self.factory()

    def _check_default_equality(self, p1: Any, p2: Any) -> CheckResult:
        try:
            equal = p1 == p2
        except Exception as e:
            logger.warning(f"Could not invoke __eq__() on default instances: {e!r}")
            return CheckResult.failed(DEFAULT_EQUALITY, f"Could not invoke __eq__(): {e!r}")
        if not equal:
            return CheckResult.failed(
                DEFAULT_EQUALITY, "Two default instances compare unequal"
            )
        try:
            same_hash = hash(p1) == hash(p2)
        except Exception as e:
            logger.warning(f"Could not invoke __hash__() on default instances: {e!r}")
            return CheckResult.failed(DEFAULT_EQUALITY, f"Could not invoke __hash__(): {e!r}")
        if not same_hash:
            return CheckResult.failed(
                DEFAULT_EQUALITY, "Two default instances have different hash codes"
            )
        return CheckResult.passed(DEFAULT_EQUALITY)

    def sample(self, descriptor: FieldDescriptor, seed: int) -> Any:
        """Sample value for a field, preferring the field's own sampler."""
        try:
            if descriptor.sampler is not None:
                return descriptor.sampler(seed)
            return self.synthesizer.synthesize(descriptor.declared_type, seed)
        except FieldVerificationError as e:
            raise e.for_field(descriptor.name)

    def _check(self, condition: bool, field_name: str, intent: str) -> None:
        if not condition:
            raise FieldAssertionFailure(intent, field_name, self._step)

    def _bulk(self, instance: Any, method_name: str, field_name: str, *args: Any) -> Any:
        method = getattr(instance, method_name, None)
        if not callable(method):
            raise ContractViolation(
                f"{type(instance).__name__} has no {method_name}() method",
                field_name,
                element=method_name,
            )
        try:
            return method(*args)
        except Exception as e:
            raise ContractViolation(
                f"Could not invoke {method_name}(): {e!r}", field_name, element=method_name
            ) from e

    def _equal(self, a: Any, b: Any, field_name: str) -> bool:
        try:
            return bool(a == b)
        except Exception as e:
            raise ContractViolation(
                f"Could not invoke __eq__(): {e!r}", field_name, element="__eq__"
            ) from e

    def _hash(self, instance: Any, field_name: str) -> int:
        try:
            return hash(instance)
        except Exception as e:
            raise ContractViolation(
                f"Could not invoke __hash__(): {e!r}", field_name, element="__hash__"
            ) from e

    def _record_hash(self, instance: Any, field_name: str) -> None:
        self.hash_registry.record_code(self._hash(instance, field_name))

    def _check_converged(self, d: FieldDescriptor, a: Any, b: Any, intent: str) -> None:
        self._check(self._equal(a, b, d.name), d.name, intent)
        self._check(
            self._hash(a, d.name) == self._hash(b, d.name),
            d.name,
            "Equal instances have different hash codes",
        )
        self._check(d.read(a) == d.read(b), d.name, "Getters disagree on equal instances")

    def verify_field(
        self,
        d: FieldDescriptor,
        p1: VerifiedValueObject,
        p2: VerifiedValueObject,
        p3: VerifiedValueObject,
        p4: VerifiedValueObject,
        result: FieldResult | None = None,
    ) -> None:
        """
        Run steps 1 through 9 for one field.

        Raises:
            FieldAssertionFailure: At the first failed check
            ContractViolation: If an accessor or bulk operation is missing or raises
            UnsupportedTypeError: If no sample rule covers the field type
        """
        name = d.name
        self._step = 0
        self._loaded_samples = False
        v0, v1, v2 = self.sample(d, 0), self.sample(d, 1), self.sample(d, 2)

        self._enter(1, name, result)
        self._check(v0 != v1, name, "Sample values for seeds 0 and 1 are equal")

        self._enter(2, name, result)
        d.write(p1, v0)
        d.write(p2, v0)
        self._check_converged(d, p1, p2, "Instances with equal field values compare unequal")
        self._check(d.read(p1) == v0, name, "Getter does not return the value passed to the setter")
        self._check(d.read(p2) == v0, name, "Getter does not return the value passed to the setter")
        self._check(d.read(p1) != v1, name, "Getter returns a value that was never set")
        self._record_hash(p1, name)

        self._enter(3, name, result)
        d.write(p1, v1)
        self._check(not self._equal(p1, p2, name), name, f"Field {name} is missing from equals()")
        self._check(d.read(p1) != d.read(p2), name, "Getters agree after only one instance changed")
        self._check(d.read(p1) != v0, name, "Getter still returns the previous value")
        self._check(d.read(p1) == v1, name, "Getter does not return the value passed to the setter")

        self._enter(4, name, result)
        d.write(p1, v0)
        self._check_converged(d, p1, p2, f"Field {name} setter might have side effects")

        self._enter(5, name, result)
        d.write(p1, v1)
        d.write(p2, v1)
        self._check_converged(d, p1, p2, "Instances with equal field values compare unequal")

        self._enter(6, name, result)
        d.write(p1, v2)
        d.write(p1, v1)
        self._check_converged(d, p1, p2, f"Field {name} setter might have side effects")
        self._record_hash(p1, name)

        self._enter(7, name, result)
        copy = self._bulk(p1, self.config.clone_method, name)
        self._check(copy is not p1, name, "clone() returned the same instance")
        self._check_converged(d, p1, copy, f"Field {name} did not get copied in clone()")

        self._enter(8, name, result)
        d.write(p1, v0)
        self._check(not self._equal(p1, p2, name), name, f"Field {name} is missing from equals()")
        self._check(d.read(p1) != d.read(p2), name, "Getters agree on diverged instances")
        returned = self._bulk(p2, self.config.copy_method, name, p1)
        self._check(returned is p2, name, f"{self.config.copy_method}() does not return self")
        self._check_converged(d, p1, p2, f"Field {name} is missing from copy_from()")

        self._enter(9, name, result)
        d.write(p3, self.sample(d, 3))
        self._loaded_samples = True
        self._record_hash(p3, name)
        d.write(p4, self.sample(d, 4))
        self._record_hash(p4, name)
        if result is not None:
            result.steps_completed = FINAL_STEP

    def _enter(self, step: int, field_name: str, result: FieldResult | None) -> None:
        if result is not None:
            result.steps_completed = step - 1
        self._step = step
        logger.debug(f"Field {field_name}: step {step}")


def verify_field_coverage(target_type: type, **kwargs: Any) -> CoverageReport:
    """Run a FieldCoverageVerifier and return its report."""
    return FieldCoverageVerifier(target_type, **kwargs).run()


def assert_field_coverage(target_type: type, **kwargs: Any) -> CoverageReport:
    """
    Verify field coverage and fail loudly.

    Intended to be called from a test function:

        def test_properties_field_coverage():
            assert_field_coverage(Properties)

    Raises:
        FieldCoverageError: Listing every failure if any field or aggregate check failed
    """
    report = verify_field_coverage(target_type, **kwargs)
    if not report.passed:
        raise FieldCoverageError(report)
    return report
