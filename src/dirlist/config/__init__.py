"""Configuration management for dirlist."""

from __future__ import annotations

# Models live in dirlist.config.models and are not re-exported here:
# they import dirlist.utils.formatting, which imports these exceptions.
from .exceptions import (
    ConfigError,
    ConfigLoadError,
    ConfigValidationError,
    InvalidSizeError,
    describe_validation_error,
    log_config_error,
    suggest_config_fix,
)

__all__ = [
    "ConfigError",
    "ConfigLoadError",
    "ConfigValidationError",
    "InvalidSizeError",
    "describe_validation_error",
    "log_config_error",
    "suggest_config_fix",
]
