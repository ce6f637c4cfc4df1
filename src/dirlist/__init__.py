"""dirlist - list directory entries with size and age filters.

Prints one tab-delimited line per entry (modification time, size, path) for
the given roots, optionally recursing into subdirectories.
"""

from dirlist.__main__ import main

__all__ = ["main"]
