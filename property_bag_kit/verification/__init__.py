"""
Field coverage verification for property bag value objects.

Typical use from a test module:

    from property_bag_kit.verification import assert_field_coverage

    def test_field_coverage():
        assert_field_coverage(Properties)
"""

from .coverage import (
    FieldCoverageVerifier,
    assert_field_coverage,
    verify_field_coverage,
)
from .discovery import declared_fields, discover, discover_all, discover_fields
from .hash_audit import HashQualityAuditor, HashRegistry
from .result import CheckResult, CheckStatus, CoverageReport, FieldResult
from .synthesizer import SampleSynthesizer, default_synthesizer, synthesize

__all__ = [
    "CheckResult",
    "CheckStatus",
    "CoverageReport",
    "FieldCoverageVerifier",
    "FieldResult",
    "HashQualityAuditor",
    "HashRegistry",
    "SampleSynthesizer",
    "assert_field_coverage",
    "declared_fields",
    "default_synthesizer",
    "discover",
    "discover_all",
    "discover_fields",
    "synthesize",
    "verify_field_coverage",
]
