"""
Core types and error taxonomy.
"""

from .errors import (
    ContractViolation,
    FieldAssertionFailure,
    FieldCoverageError,
    FieldVerificationError,
    UnsupportedTypeError,
)
from .types import FieldDescriptor, FieldRegistry, VerifiedValueObject

__all__ = [
    "ContractViolation",
    "FieldAssertionFailure",
    "FieldCoverageError",
    "FieldDescriptor",
    "FieldRegistry",
    "FieldVerificationError",
    "UnsupportedTypeError",
    "VerifiedValueObject",
]
