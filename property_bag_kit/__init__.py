"""
property-bag-kit - field coverage verification for mutable value objects.

This package provides:
- A deterministic sample value synthesizer, extensible by registration
- Discovery of fields and their get_/set_ accessor pairs
- A per-field verifier for equality, hashing, clone(), copy_from() and clear()
- A coarse hash diversity audit
"""

__version__ = "1.0.0"
__description__ = "Field coverage verification for property bag value objects"

from .config import VerifierConfig
from .core import (
    ContractViolation,
    FieldAssertionFailure,
    FieldCoverageError,
    FieldDescriptor,
    FieldRegistry,
    FieldVerificationError,
    UnsupportedTypeError,
    VerifiedValueObject,
)
from .verification import (
    CoverageReport,
    FieldCoverageVerifier,
    SampleSynthesizer,
    assert_field_coverage,
    discover,
    synthesize,
    verify_field_coverage,
)

__all__ = [
    "ContractViolation",
    "CoverageReport",
    "FieldAssertionFailure",
    "FieldCoverageError",
    "FieldCoverageVerifier",
    "FieldDescriptor",
    "FieldRegistry",
    "FieldVerificationError",
    "SampleSynthesizer",
    "UnsupportedTypeError",
    "VerifiedValueObject",
    "VerifierConfig",
    "assert_field_coverage",
    "discover",
    "synthesize",
    "verify_field_coverage",
]
