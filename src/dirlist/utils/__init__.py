"""Shared utility modules.

This package provides pure, stateless helpers for:
- Size parsing and formatting (magnitude strings to bytes and back)
- Timestamp formatting for listing output
- Logging setup for diagnostics
"""

from dirlist.utils.formatting import (
    format_mtime,
    format_size,
    parse_size,
)

__all__ = [
    "format_mtime",
    "format_size",
    "parse_size",
]
