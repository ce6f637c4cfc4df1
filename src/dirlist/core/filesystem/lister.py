"""Directory lister: the traversal-and-filter engine."""

from __future__ import annotations

import logging
import os
import time
from collections.abc import Callable, Iterator
from typing import Final

from dirlist.config.models import FilterConfig

from .errors import PathAccessError
from .filters import Clock, EntryFilter
from .models import EntryMetadata, ListingStats, OutputRecord

logger = logging.getLogger(__name__)

ErrorCallback = Callable[[PathAccessError], None]

# Self and parent links are never listed nor descended into
SELF_AND_PARENT: Final[frozenset[str]] = frozenset({os.curdir, os.pardir})


def join_path(parent: str, name: str) -> str:
    """Join a directory path and a child name with exactly one separator.

    Examples:
        >>> join_path("/tmp/", "x")
        '/tmp/x'
        >>> join_path("/tmp", "x")
        '/tmp/x'
    """
    if parent.endswith(os.sep):
        return parent + name
    return parent + os.sep + name


def is_hidden(name: str) -> bool:
    """Check whether an entry name is hidden (starts with a dot)."""
    return name.startswith(".")


class DirectoryLister:
    """Lists filesystem entries under a root, applying a filter configuration.

    Traversal is depth-first pre-order: an entry's record is emitted before
    the records of its children, and a subdirectory is fully listed before
    its next sibling. Descent uses an explicit stack of pending directory
    listings, so tree depth is bounded only by memory.

    Failures to stat a path or open a directory never escape ``visit``: they
    are logged, passed to ``on_error`` and the path is skipped.
    """

    def __init__(
        self,
        config: FilterConfig,
        on_error: ErrorCallback | None = None,
        clock: Clock = time.time,
    ) -> None:
        """Initialize the lister.

        Args:
            config: Filter configuration shared by every level of traversal
            on_error: Called once for every path that could not be accessed
            clock: Source of the current time for age checks
        """
        self.config: FilterConfig = config
        self.entry_filter: EntryFilter = EntryFilter.from_config(config, clock)
        self.on_error: ErrorCallback | None = on_error
        self.stats: ListingStats = ListingStats()
        logger.debug("Lister ready with %d filter predicate(s)", self.entry_filter.get_predicate_count())

    def visit(self, path: str | os.PathLike[str]) -> Iterator[OutputRecord]:
        """Yield a record for every accessible, filter-passing entry under a root.

        A root that is not a directory yields at most its own record. A root
        directory is not listed itself, only its children.

        Args:
            path: Root path to list

        Yields:
            OutputRecord for each entry that passed the filter
        """
        root = os.fspath(path)
        self.stats = ListingStats()

        try:
            metadata = self._lookup(root)
        except PathAccessError as e:
            self._report(e)
            return

        if not metadata.is_directory:
            if self.entry_filter.matches(metadata):
                yield self._emit(metadata)
            return

        try:
            names = self._read_directory(root)
        except PathAccessError as e:
            self._report(e)
            return

        pending: list[tuple[str, Iterator[str]]] = [(root, iter(names))]

        while pending:
            parent, children = pending[-1]
            name = next(children, None)
            if name is None:
                _ = pending.pop()
                continue

            if self._should_skip(name):
                continue

            child_path = join_path(parent, name)
            try:
                metadata = self._lookup(child_path)
            except PathAccessError as e:
                self._report(e)
                continue

            if self.entry_filter.matches(metadata):
                yield self._emit(metadata)

            if metadata.is_directory and self.config.recursive:
                try:
                    child_names = self._read_directory(child_path)
                except PathAccessError as e:
                    self._report(e)
                    continue
                pending.append((child_path, iter(child_names)))

    def _should_skip(self, name: str) -> bool:
        """Check whether a child name is excluded before any lookup."""
        if name in SELF_AND_PARENT:
            return True
        return not self.config.include_hidden and is_hidden(name)

    def _lookup(self, path: str) -> EntryMetadata:
        """Fetch metadata for a path, following symlinks.

        Raises:
            PathAccessError: If the path cannot be stat-ed
        """
        try:
            st = os.stat(path)
        except OSError as e:
            raise PathAccessError(path, e, operation="stat") from e
        return EntryMetadata.from_stat(path, st)

    def _read_directory(self, path: str) -> list[str]:
        """Enumerate child names of a directory in filesystem order.

        The directory handle is closed before this returns.

        Raises:
            PathAccessError: If the directory cannot be opened or read
        """
        try:
            with os.scandir(path) as it:
                names = [entry.name for entry in it]
        except OSError as e:
            raise PathAccessError(path, e, operation="scandir") from e

        self.stats.directories += 1
        logger.debug("Read %d entries from %s", len(names), path)
        return names

    def _emit(self, metadata: EntryMetadata) -> OutputRecord:
        self.stats.records += 1
        return OutputRecord.from_metadata(metadata)

    def _report(self, error: PathAccessError) -> None:
        """Log an access failure and hand it to the error callback."""
        self.stats.errors += 1
        logger.warning(
            "%s",
            error,
            extra={"path": error.path, "operation": error.operation},
        )
        if self.on_error is not None:
            self.on_error(error)
