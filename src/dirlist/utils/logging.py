"""Logging infrastructure for diagnostics on the error stream.

Listing records are written to standard output by the application runner;
everything reported through logging goes to standard error, so the two
streams never interleave. The root path currently being listed is tracked
in a ContextVar and attached to every record for debug output.
"""

import contextvars
import logging
import sys
from typing import Final, TextIO, override

PACKAGE_LOGGER: Final[str] = "dirlist"

# Root path currently being listed, attached to log records
current_root_var: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "current_root",
    default=None,
)

# Log format constants
DIAGNOSTIC_LOG_FORMAT: Final[str] = "dirlist: %(message)s"

DEBUG_LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - [%(root_path)s] - %(message)s"


class RootPathFilter(logging.Filter):
    """Logging filter that adds the current root path to log records."""

    @override
    def filter(self, record: logging.LogRecord) -> bool:
        """Add root path to log record from ContextVar.

        Args:
            record: Log record to enhance with the root path

        Returns:
            True to allow the record to be logged
        """
        root_path = current_root_var.get()
        record.root_path = root_path if root_path is not None else "-"
        return True


class StderrHandler(logging.StreamHandler[TextIO]):
    """Stream handler that always writes to the current ``sys.stderr``.

    ``sys.stderr`` is looked up on every emit, so output follows any
    redirection installed after logging was configured.
    """

    def __init__(self, level: int = logging.NOTSET) -> None:
        logging.Handler.__init__(self, level)

    @property  # pyright: ignore[reportIncompatibleVariableOverride]
    @override
    def stream(self) -> TextIO:  # pyright: ignore[reportIncompatibleVariableOverride]
        return sys.stderr


def configure_logging(*, log_level: str = "WARNING") -> None:
    """Configure diagnostics for the dirlist package.

    Per-path access failures are logged at WARNING, so the default level
    shows them as plain ``dirlist: <path>: <reason>`` lines. At DEBUG the
    format adds timestamps, logger names and the current root path.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Example:
        >>> configure_logging(log_level="DEBUG")
        >>> logging.getLogger("dirlist.core").debug("Reading directory")
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)

    level = getattr(logging, log_level.upper(), logging.WARNING)
    package_logger.setLevel(level)

    # Remove handlers from a previous configuration to avoid duplicates
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)

    handler = StderrHandler()
    log_format = DEBUG_LOG_FORMAT if level <= logging.DEBUG else DIAGNOSTIC_LOG_FORMAT
    handler.setFormatter(logging.Formatter(log_format))
    handler.addFilter(RootPathFilter())

    package_logger.addHandler(handler)


def set_current_root(root: str | None) -> None:
    """Set the root path being listed in the current context.

    Args:
        root: Root path, or None once the listing is finished
    """
    _ = current_root_var.set(root)


def get_current_root() -> str | None:
    """Get the root path being listed in the current context."""
    return current_root_var.get()
