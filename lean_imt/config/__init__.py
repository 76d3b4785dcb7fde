"""
Runtime Configuration Module

Provides configuration loading and management for Lean IMT.
"""

from .runtime import (
    ENV_PREFIX,
    RuntimeConfig,
    TreeConfig,
    LoggingConfig,
    get_default_config,
    set_default_config,
)

__all__ = [
    "ENV_PREFIX",
    "RuntimeConfig",
    "TreeConfig",
    "LoggingConfig",
    "get_default_config",
    "set_default_config",
]
