"""
Test fixtures package for property-bag-kit.

Provides correct and deliberately broken property bags.
"""

from .property_bags import (
    FORMAT_FIELD_NAMES,
    BrokenClearProperties,
    BrokenCloneProperties,
    BrokenCopyProperties,
    BrokenEqualsProperties,
    ConstantHashProperties,
    FormatProperties,
    NoCloneProperties,
    RatioProperties,
    SideEffectProperties,
    WidthPrefixProperties,
)

__all__ = [
    "FORMAT_FIELD_NAMES",
    "BrokenClearProperties",
    "BrokenCloneProperties",
    "BrokenCopyProperties",
    "BrokenEqualsProperties",
    "ConstantHashProperties",
    "FormatProperties",
    "NoCloneProperties",
    "RatioProperties",
    "SideEffectProperties",
    "WidthPrefixProperties",
]
