"""
Pytest configuration and shared fixtures for property-bag-kit tests.
"""

import logging
import os

import pytest

from property_bag_kit.config import ENV_PREFIX, VerifierConfig, reset_default_config
from property_bag_kit.verification import SampleSynthesizer, discover

from .fixtures.property_bags import FormatProperties, WidthPrefixProperties


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: mark test as unit test (fast, isolated)")
    config.addinivalue_line("markers", "property: mark test as property-based (Hypothesis)")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on test location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "property" in str(item.fspath):
            item.add_marker(pytest.mark.property)


# Test isolation helpers
@pytest.fixture(autouse=True)
def isolate_config(monkeypatch):
    """Keep PROPERTY_BAG_KIT_* variables and the cached default config out of tests."""
    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key)
    reset_default_config()
    yield
    reset_default_config()


# Configuration fixtures
@pytest.fixture
def config() -> VerifierConfig:
    """Default verifier configuration."""
    return VerifierConfig()


@pytest.fixture
def synthesizer() -> SampleSynthesizer:
    """Fresh synthesizer with the default rules, safe to register into."""
    return SampleSynthesizer()


# Property bag fixtures
@pytest.fixture
def format_registry():
    """Fields of FormatProperties, shared by the Broken* variants."""
    return discover(FormatProperties)


@pytest.fixture
def width_prefix_pair() -> tuple[WidthPrefixProperties, WidthPrefixProperties]:
    """Two default WidthPrefixProperties instances."""
    return WidthPrefixProperties(), WidthPrefixProperties()


# Utility functions for tests
@pytest.fixture
def capture_logs():
    """Log capture utility."""
    from io import StringIO

    def _capture_logs(logger_name: str | None = None):
        """Capture logs for testing."""
        log_capture = StringIO()
        handler = logging.StreamHandler(log_capture)

        logger = logging.getLogger(logger_name) if logger_name else logging.getLogger()

        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)

        return log_capture, handler, logger

    return _capture_logs
