"""Command-line interface for dirlist."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

import click
from pydantic import ValidationError

from dirlist.app.runner import EXIT_CONFIG_ERROR, ApplicationRunner
from dirlist.config.exceptions import (
    ConfigError,
    ConfigValidationError,
    describe_validation_error,
    log_config_error,
    suggest_config_fix,
)
from dirlist.config.loader import load_defaults
from dirlist.config.models import DEFAULT_LOG_LEVEL, FilterConfig, ListingDefaults
from dirlist.utils.formatting import parse_size
from dirlist.utils.logging import configure_logging

try:
    __version__ = version("dirlist")
except PackageNotFoundError:
    __version__ = "unknown"

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ConfigurationFailure(click.ClickException):
    """Fatal configuration error reported before any listing starts."""

    exit_code = EXIT_CONFIG_ERROR

    def __init__(self, error: ConfigError) -> None:
        message = str(error)
        hint = suggest_config_fix(error)
        if hint:
            message = f"{message}\nHint: {hint}"
        super().__init__(message)
        self.error: ConfigError = error


def validate_log_level(
    ctx: click.Context,  # pyright: ignore[reportUnusedParameter] # required by Click callback signature
    param: click.Parameter,  # pyright: ignore[reportUnusedParameter] # required by Click callback signature
    value: str | None,
) -> str | None:
    """Validate and normalize log level.

    Args:
        ctx: Click context (required by Click callback signature)
        param: Click parameter (required by Click callback signature)
        value: Log level value to validate

    Returns:
        Normalized log level (uppercase)

    Raises:
        click.BadParameter: If validation fails
    """
    if value is None:
        return value

    normalized_value = value.upper().strip()
    if normalized_value not in VALID_LOG_LEVELS:
        raise click.BadParameter(
            f'Invalid log level "{value}". Valid options: {", ".join(sorted(VALID_LOG_LEVELS))}'
        )

    return normalized_value


def build_filter_config(
    defaults: ListingDefaults,
    *,
    recursive: bool,
    include_hidden: bool,
    min_size: str | None,
    max_size: str | None,
    max_age: int | None,
) -> FilterConfig:
    """Combine command-line values with the loaded defaults.

    Args:
        defaults: Defaults from the configuration file (or built-in)
        recursive: ``-r`` given
        include_hidden: ``-a`` given
        min_size: Raw ``-l`` magnitude string
        max_size: Raw ``-h`` magnitude string
        max_age: ``-m`` value in days

    Returns:
        Frozen filter configuration

    Raises:
        InvalidSizeError: If a size string cannot be parsed
        ConfigValidationError: If a resulting bound is out of range
    """
    try:
        return defaults.to_filter_config(
            recursive=recursive,
            include_hidden=include_hidden,
            min_size=parse_size(min_size) if min_size is not None else None,
            max_size=parse_size(max_size) if max_size is not None else None,
            max_age_days=max_age,
        )
    except ValidationError as e:
        raise ConfigValidationError(
            describe_validation_error(e, "command line"),
            pydantic_error=e,
        ) from e


@click.command(context_settings={"help_option_names": ["--help"]})
@click.option(
    '-r', '--recursive',
    is_flag=True,
    help='List subdirectories recursively'
)
@click.option(
    '-a', '--all', 'include_hidden',
    is_flag=True,
    help='Include entries whose name starts with a dot'
)
@click.option(
    '-l', '--min-size',
    metavar='SIZE',
    default=None,
    help='Only list entries of at least SIZE (e.g. 512, 10K, 2M, 1G)'
)
@click.option(
    '-h', '--max-size',
    metavar='SIZE',
    default=None,
    help='Only list entries of at most SIZE'
)
@click.option(
    '-m', '--max-age',
    type=int,
    metavar='DAYS',
    default=None,
    help='Only list entries modified within the last DAYS days'
)
@click.option(
    '-c', '--config',
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help='YAML file with default filter settings; explicit options override it'
)
@click.option(
    '--log-level',
    type=str,
    default=None,
    callback=validate_log_level,
    help='Diagnostic verbosity (DEBUG, INFO, WARNING, ERROR, CRITICAL)'
)
@click.version_option(version=__version__, prog_name='dirlist')
@click.argument('paths', nargs=-1, type=str)
@click.pass_context
def cli(
    ctx: click.Context,
    recursive: bool,
    include_hidden: bool,
    min_size: str | None,
    max_size: str | None,
    max_age: int | None,
    config: Path | None,
    log_level: str | None,
    paths: tuple[str, ...],
) -> None:
    """List PATHS with modification time, size and name.

    Prints one tab-separated line per entry: local modification time, size
    and path, with a trailing "/" for directories. Without PATHS the current
    directory is listed. Help is only available as --help because -h sets
    the maximum size.

    Examples:

        # Files changed in the last week, recursively
        dirlist -r -m 7 /var/log

        # Everything between 10K and 2M, hidden entries included
        dirlist -a -l 10K -h 2M ~
    """
    # Configured before loading so configuration failures are logged too
    configure_logging(log_level=log_level or DEFAULT_LOG_LEVEL)

    try:
        defaults = load_defaults(config) if config is not None else ListingDefaults()
        filter_config = build_filter_config(
            defaults,
            recursive=recursive,
            include_hidden=include_hidden,
            min_size=min_size,
            max_size=max_size,
            max_age=max_age,
        )
    except ConfigError as e:
        log_config_error(e)
        raise ConfigurationFailure(e) from e

    runner = ApplicationRunner(
        config=filter_config,
        roots=paths,
        log_level=log_level or defaults.log_level,
    )
    ctx.exit(runner.run())
