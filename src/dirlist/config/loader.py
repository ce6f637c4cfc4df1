"""YAML loader for the listing defaults file."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from dirlist.config.exceptions import (
    ConfigLoadError,
    ConfigValidationError,
    describe_validation_error,
)
from dirlist.config.models import ListingDefaults

logger = logging.getLogger(__name__)


def load_defaults(config_path: Path) -> ListingDefaults:
    """Load and validate listing defaults from a YAML file.

    An empty document yields the built-in defaults.

    Args:
        config_path: Path to the YAML defaults file

    Returns:
        Validated ListingDefaults instance

    Raises:
        ConfigLoadError: If the file is missing, unreadable, not valid YAML,
            or does not contain a mapping at the root
        ConfigValidationError: If the values do not match the schema

    Examples:
        >>> defaults = load_defaults(Path("dirlist.yaml"))
        >>> defaults.min_size
        10240
    """
    if not config_path.is_file():
        msg = f"Configuration file not found: {config_path}"
        raise ConfigLoadError(msg, file_path=str(config_path))

    try:
        with config_path.open("r") as f:
            raw_data: object = yaml.safe_load(f)  # pyright: ignore[reportAny]  # YAML boundary
    except yaml.YAMLError as e:
        msg = f"Failed to parse YAML configuration file: {config_path}\nYAML parsing error: {e}"
        raise ConfigLoadError(msg, file_path=str(config_path)) from e
    except OSError as e:
        msg = f"Failed to read configuration file: {config_path}\nError: {e}"
        raise ConfigLoadError(msg, file_path=str(config_path)) from e

    if raw_data is None:
        logger.debug("Configuration file %s is empty, using built-in defaults", config_path)
        return ListingDefaults()

    if not isinstance(raw_data, dict):
        msg = (
            f"Invalid configuration file format: {config_path}\n"
            f"Expected YAML dictionary at root level, got: {type(raw_data).__name__}"
        )
        raise ConfigLoadError(msg, file_path=str(config_path))

    try:
        defaults = ListingDefaults.model_validate(raw_data)
    except ValidationError as e:
        raise ConfigValidationError(
            describe_validation_error(e, str(config_path)),
            pydantic_error=e,
            context={"file_path": str(config_path)},
        ) from e

    logger.debug("Loaded listing defaults from %s", config_path)
    return defaults
