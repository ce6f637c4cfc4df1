"""Filesystem listing: traversal, filtering and output records."""

from __future__ import annotations

from .errors import PathAccessError
from .filters import EntryFilter, EntryPredicate
from .lister import DirectoryLister, join_path
from .models import EntryMetadata, ListingStats, OutputRecord

__all__ = [
    "DirectoryLister",
    "EntryFilter",
    "EntryMetadata",
    "EntryPredicate",
    "ListingStats",
    "OutputRecord",
    "PathAccessError",
    "join_path",
]
