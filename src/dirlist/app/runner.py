"""Application runner for dirlist."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from typing import TextIO

from dirlist.config.models import FilterConfig
from dirlist.core.filesystem import DirectoryLister
from dirlist.utils.logging import configure_logging, set_current_root

logger = logging.getLogger(__name__)

DEFAULT_ROOTS: tuple[str, ...] = (".",)

# Exit codes
EXIT_SUCCESS = 0
EXIT_CONFIG_ERROR = 1


class ApplicationRunner:
    """Lists every root in turn and writes the records to an output stream."""

    def __init__(
        self,
        config: FilterConfig,
        roots: Sequence[str] = (),
        log_level: str = "WARNING",
        output: TextIO | None = None,
    ) -> None:
        """Initialize the application runner.

        Args:
            config: Filter configuration shared by every root
            roots: Root paths to list; the current directory when empty
            log_level: Logging level for diagnostics
            output: Stream for listing records (default: ``sys.stdout``)
        """
        self.config: FilterConfig = config
        self.roots: tuple[str, ...] = tuple(roots) or DEFAULT_ROOTS
        self.log_level: str = log_level
        self.output: TextIO | None = output

    def run(self) -> int:
        """List all roots sequentially.

        An inaccessible root or entry is reported on the error stream and
        does not affect the exit status.

        Returns:
            Process exit status
        """
        configure_logging(log_level=self.log_level)
        output = self.output if self.output is not None else sys.stdout
        lister = DirectoryLister(self.config)

        logger.debug("Listing %d root(s) with %s", len(self.roots), self.config)

        for root in self.roots:
            set_current_root(root)
            try:
                for record in lister.visit(root):
                    _ = output.write(record.render())
            finally:
                set_current_root(None)

            stats = lister.stats
            logger.debug(
                "Finished %s: %d record(s), %d director(ies) read, %d error(s)",
                root,
                stats.records,
                stats.directories,
                stats.errors,
            )

        output.flush()
        return EXIT_SUCCESS
