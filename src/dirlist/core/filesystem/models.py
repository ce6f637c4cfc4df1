"""Data models for the listing engine.

Entries are fetched fresh for every visited path and records are produced
per entry; neither is cached or mutated after creation.
"""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass

from dirlist.utils.formatting import format_mtime, format_size

DIRECTORY_SUFFIX = "/"
FILE_SUFFIX = " "


@dataclass(frozen=True, slots=True)
class EntryMetadata:
    """Filesystem metadata for one visited path."""

    path: str
    mod_time: float  # POSIX timestamp
    size_bytes: int
    is_directory: bool

    @classmethod
    def from_stat(cls, path: str, st: os.stat_result) -> EntryMetadata:
        """Build metadata from an ``os.stat`` result.

        Args:
            path: Path the stat result belongs to
            st: Result of ``os.stat(path)``

        Returns:
            EntryMetadata instance
        """
        return cls(
            path=path,
            mod_time=st.st_mtime,
            size_bytes=st.st_size,
            is_directory=stat.S_ISDIR(st.st_mode),
        )


@dataclass(frozen=True, slots=True)
class OutputRecord:
    """One line of listing output."""

    formatted_time: str
    formatted_size: str
    display_path: str
    directory_suffix: str

    @classmethod
    def from_metadata(cls, metadata: EntryMetadata) -> OutputRecord:
        """Project entry metadata onto its display fields."""
        return cls(
            formatted_time=format_mtime(metadata.mod_time),
            formatted_size=format_size(metadata.size_bytes),
            display_path=metadata.path,
            directory_suffix=DIRECTORY_SUFFIX if metadata.is_directory else FILE_SUFFIX,
        )

    def render(self) -> str:
        """Render the record as a tab-delimited line with trailing newline.

        Examples:
            >>> OutputRecord("2024-01-02 03:04", "1.5K", "./a", " ").render()
            '2024-01-02 03:04\\t1.5K\\t./a \\n'
        """
        return f"{self.formatted_time}\t{self.formatted_size}\t{self.display_path}{self.directory_suffix}\n"


@dataclass(slots=True)
class ListingStats:
    """Counters for a single traversal."""

    records: int = 0
    errors: int = 0
    directories: int = 0
