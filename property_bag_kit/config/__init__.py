"""
Configuration management for property-bag-kit.
"""

from .verifier_config import (
    ENV_PREFIX,
    VerifierConfig,
    get_default_config,
    reset_default_config,
)

__all__ = ["ENV_PREFIX", "VerifierConfig", "get_default_config", "reset_default_config"]
