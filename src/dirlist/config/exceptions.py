"""Error taxonomy for the configuration system.

Every error in this module is detected before any directory is listed and
aborts the whole invocation.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Base exception for all configuration-related errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:  # pyright: ignore[reportAny] # Flexible config error context
        """Initialize ConfigError.

        Args:
            message: Error message
            context: Additional context information for debugging
        """
        super().__init__(message)
        self.context: dict[str, Any] = context or {}  # pyright: ignore[reportAny] # Flexible config error context


class InvalidSizeError(ConfigError):
    """Exception raised when a magnitude string cannot be parsed."""

    def __init__(
        self,
        message: str,
        value: str,
        unit: str | None = None,
    ) -> None:
        """Initialize InvalidSizeError.

        Args:
            message: Error message
            value: The full text that failed to parse
            unit: The offending unit character, if one was present
        """
        context: dict[str, Any] = {"value": value}  # pyright: ignore[reportAny]
        if unit is not None:
            context["unit"] = unit

        super().__init__(message, context)
        self.value: str = value
        self.unit: str | None = unit


class ConfigLoadError(ConfigError):
    """Exception raised when a defaults file cannot be read or parsed."""

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        context: dict[str, Any] | None = None,  # pyright: ignore[reportAny] # Flexible config error context
    ) -> None:
        """Initialize ConfigLoadError.

        Args:
            message: Error message
            file_path: Path to the configuration file that failed to load
            context: Additional context information
        """
        full_context = context or {}
        if file_path is not None:
            full_context["file_path"] = file_path

        super().__init__(message, full_context)
        self.file_path: str | None = file_path


class ConfigValidationError(ConfigError):
    """Exception raised when configuration values fail schema validation."""

    def __init__(
        self,
        message: str,
        pydantic_error: ValidationError | None = None,
        context: dict[str, Any] | None = None,  # pyright: ignore[reportAny] # Flexible config error context
    ) -> None:
        """Initialize ConfigValidationError.

        Args:
            message: Error message
            pydantic_error: Original Pydantic ValidationError
            context: Additional context information
        """
        full_context = context or {}
        if pydantic_error is not None:
            full_context["validation_errors"] = format_validation_errors(pydantic_error)

        super().__init__(message, full_context)
        self.pydantic_error: ValidationError | None = pydantic_error


def format_validation_errors(error: ValidationError) -> list[dict[str, Any]]:  # pyright: ignore[reportAny] # Flexible error formatting
    """Flatten Pydantic validation errors into field/message pairs.

    Args:
        error: Pydantic ValidationError

    Returns:
        List of formatted error dictionaries
    """
    formatted_errors: list[dict[str, Any]] = []  # pyright: ignore[reportAny] # Flexible error formatting
    for err in error.errors():
        formatted_errors.append({
            "field": ".".join(str(loc) for loc in err["loc"]) or "<root>",
            "message": err["msg"],
            "type": err["type"],
        })
    return formatted_errors


def describe_validation_error(error: ValidationError, source: str) -> str:
    """Build a multi-line, field-level diagnostic for a validation failure.

    Args:
        error: Pydantic ValidationError
        source: Where the values came from (file path or ``"command line"``)

    Returns:
        Human-readable message listing every failing field
    """
    lines = [f"Invalid configuration in {source}:"]
    for err in format_validation_errors(error):
        lines.append(f"  {err['field']}: {err['message']}")
    return "\n".join(lines)


def suggest_config_fix(error: ConfigError) -> str | None:
    """Suggest a potential fix for a configuration error.

    Args:
        error: Configuration error

    Returns:
        Suggested fix or None if no suggestion available
    """
    if isinstance(error, InvalidSizeError):
        return "Sizes are written as a number with an optional B, K, M or G suffix, e.g. 512, 1.5K, 2G"

    if isinstance(error, ConfigLoadError):
        if error.file_path:
            return f"Check that the file exists and is readable: {error.file_path}"
        return "Check that the configuration file exists and is readable"

    if isinstance(error, ConfigValidationError) and error.pydantic_error:
        error_count = len(error.pydantic_error.errors())
        if error_count == 1:
            err = error.pydantic_error.errors()[0]
            field_path = ".".join(str(loc) for loc in err["loc"])
            return f"Fix validation error in field '{field_path}': {err['msg']}"
        return f"Fix {error_count} validation errors in the configuration"

    return None


def log_config_error(error: ConfigError, level: int = logging.DEBUG) -> None:
    """Log configuration error with its context.

    Args:
        error: Configuration error to log
        level: Logging level (default: DEBUG)
    """
    message = str(error)
    if error.context:
        context_str = ", ".join(f"{k}={v}" for k, v in error.context.items())  # pyright: ignore[reportAny] # Flexible context values
        message = f"{message} (context: {context_str})"

    logger.log(level, message)
