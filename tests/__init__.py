"""
Test package for property-bag-kit.
"""

__all__ = [
    "conftest",  # Pytest configuration and fixtures
    "fixtures",  # Property bag fixtures
    "property",  # Property-based test suite
    "unit",  # Unit test suite
]
