"""
Hash quality audit.

Runs the aggregate checks that close a coverage run: bulk-clear completeness
on the p3/p4 pair and a coarse hash diversity bound.
"""

import logging
from typing import Any

from ..config import VerifierConfig, get_default_config
from .result import CheckResult

logger = logging.getLogger(__name__)

CLEAR_PRECONDITION = "clear_precondition"
CLEAR_COMPLETENESS = "clear_completeness"
HASH_DIVERSITY = "hash_diversity"


class HashRegistry:
    """Set of hash codes observed during one run."""

    def __init__(self) -> None:
        self._codes: set[int] = set()
        self._observations = 0

    def record(self, instance: Any) -> int:
        """Hash an instance and remember the code."""
        return self.record_code(hash(instance))

    def record_code(self, code: int) -> int:
        """Remember an already computed hash code."""
        self._codes.add(code)
        self._observations += 1
        return code

    def reset(self) -> None:
        """Forget every observed code."""
        self._codes.clear()
        self._observations = 0

    @property
    def unique_count(self) -> int:
        return len(self._codes)

    @property
    def observations(self) -> int:
        return self._observations

    def __contains__(self, code: object) -> bool:
        return code in self._codes


class HashQualityAuditor:
    """
    Aggregate checks run once after every field has been processed.

    The diversity bound is deliberately loose: up to four codes are recorded
    per field and only ``field_count * min_unique_hash_ratio`` of them need
    to be unique, so it only trips on degenerate hashes (constant, or
    ignoring most fields).
    """

    def __init__(self, config: VerifierConfig | None = None) -> None:
        self.config = config or get_default_config()

    def audit(
        self,
        p3: Any,
        p4: Any,
        field_count: int,
        registry: HashRegistry,
        loaded_fields: int | None = None,
    ) -> list[CheckResult]:
        """
        Clear p3 and p4, compare them, and check hash diversity.

        Args:
            p3: Instance loaded with seed-3 samples during the run
            p4: Instance loaded with seed-4 samples during the run
            field_count: Number of discovered fields
            registry: Hash codes observed during the run
            loaded_fields: Fields that loaded samples into p3/p4; the clear
                precondition is skipped when this is 0
        """
        return [
            *self.check_clear(p3, p4, field_count if loaded_fields is None else loaded_fields),
            self.check_diversity(field_count, registry),
        ]

    def check_clear(self, p3: Any, p4: Any, loaded_fields: int) -> list[CheckResult]:
        """Check that clear() resets every field on two diverged instances."""
        results = []
        if loaded_fields > 0:
            try:
                diverged = p3 != p4
            except Exception as e:
                logger.warning(f"Could not invoke __eq__() before clear(): {e!r}")
                results.append(
                    CheckResult.failed(CLEAR_PRECONDITION, f"Could not invoke __eq__(): {e!r}")
                )
            else:
                if diverged:
                    results.append(CheckResult.passed(CLEAR_PRECONDITION))
                else:
                    results.append(
                        CheckResult.failed(
                            CLEAR_PRECONDITION,
                            "Instances loaded with different samples compare equal before clear()",
                        )
                    )
        else:
            results.append(CheckResult.skipped(CLEAR_PRECONDITION, "No field loaded samples"))

        clear_name = self.config.clear_method
        try:
            getattr(p3, clear_name)()
            getattr(p4, clear_name)()
        except Exception as e:
            logger.warning(f"Could not invoke {clear_name}(): {e!r}")
            results.append(
                CheckResult.failed(CLEAR_COMPLETENESS, f"Could not invoke {clear_name}(): {e!r}")
            )
            return results

        try:
            cleared_equal = p3 == p4
        except Exception as e:
            logger.warning(f"Could not invoke __eq__() after {clear_name}(): {e!r}")
            results.append(
                CheckResult.failed(CLEAR_COMPLETENESS, f"Could not invoke __eq__(): {e!r}")
            )
            return results

        if cleared_equal:
            results.append(CheckResult.passed(CLEAR_COMPLETENESS))
        else:
            logger.warning(f"A field is missing from the {clear_name}() function")
            results.append(
                CheckResult.failed(
                    CLEAR_COMPLETENESS, f"A field is missing from the {clear_name}() function"
                )
            )
        return results

    def check_diversity(self, field_count: int, registry: HashRegistry) -> CheckResult:
        """Check that enough distinct hash codes were observed."""
        required = field_count * self.config.min_unique_hash_ratio
        message = (
            f"{registry.unique_count} unique hash codes out of "
            f"{registry.observations} observations (need {required:g})"
        )
        if registry.unique_count >= required:
            logger.debug(f"Hash diversity ok: {message}")
            return CheckResult.passed(HASH_DIVERSITY, message)
        logger.warning(f"Too many hash code collisions: {message}")
        return CheckResult.failed(HASH_DIVERSITY, f"Too many hash code collisions: {message}")
