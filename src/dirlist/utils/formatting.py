"""Pure formatting utilities for sizes and timestamps.

This module provides stateless conversion functions shared by the listing
engine and the command-line shell. All functions are pure with no side
effects apart from raising on invalid input.
"""

import re
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Final

from dirlist.config.exceptions import InvalidSizeError

# Binary unit constants (1024-based)
_KB_INT = 1024
_MB_INT = _KB_INT * 1024  # 1,048,576
_GB_INT = _MB_INT * 1024  # 1,073,741,824

SIZE_UNITS: Final[dict[str, int]] = {
    "B": 1,
    "K": _KB_INT,
    "M": _MB_INT,
    "G": _GB_INT,
}

# Display units in escalation order; G is the largest unit ever shown
_DISPLAY_UNITS: Final[tuple[str, ...]] = ("B", "K", "M", "G")

# Leading number, then whatever follows (validated separately)
_SIZE_PATTERN: Final[re.Pattern[str]] = re.compile(r"(\d+(?:\.\d+)?)(.*)", re.DOTALL)

MTIME_FORMAT: Final[str] = "%Y-%m-%d %H:%M"

# Sizes are signed 64-bit byte counts
MAX_SIZE: Final[int] = 2**63 - 1


def parse_size(text: str) -> int:
    """Convert a magnitude string to a byte count.

    Accepts ``<number><unit>`` where unit is one of ``B``, ``K``, ``M`` or
    ``G`` (case-sensitive). A bare number is taken as bytes. The number is
    normally an integer; a decimal fraction such as ``"1.5K"`` is accepted
    so that output of ``format_size`` reads back, and the result is rounded
    to the nearest byte.

    Args:
        text: Magnitude string such as ``"10M"``, ``"512"`` or ``"2G"``

    Returns:
        Size in bytes

    Raises:
        InvalidSizeError: If the text has no leading number, carries an
            unknown unit character, has trailing characters after the unit,
            or exceeds MAX_SIZE bytes

    Examples:
        >>> parse_size("512")
        512
        >>> parse_size("10K")
        10240
        >>> parse_size("2G")
        2147483648
        >>> parse_size("1.5K")
        1536
    """
    match = _SIZE_PATTERN.fullmatch(text.strip())
    if match is None:
        raise InvalidSizeError(
            f"Invalid size: {text!r} (expected <number>[B|K|M|G])",
            value=text,
        )

    number, suffix = match.groups()
    unit = suffix[:1] or "B"
    if unit not in SIZE_UNITS:
        raise InvalidSizeError(
            f"Invalid size unit: {unit} (must be B, K, M, or G)",
            value=text,
            unit=unit,
        )

    if len(suffix) > 1:
        raise InvalidSizeError(
            f"Invalid size: {text!r} (unexpected characters after unit {unit})",
            value=text,
            unit=unit,
        )

    # Exact product: enough digits for the whole number times the unit
    with localcontext() as ctx:
        ctx.prec = len(number) + 12
        scaled = Decimal(number) * SIZE_UNITS[unit]
        size = int(scaled.to_integral_value(rounding=ROUND_HALF_UP))

    if size > MAX_SIZE:
        raise InvalidSizeError(
            f"Invalid size: {text!r} (exceeds {MAX_SIZE} bytes)",
            value=text,
            unit=unit,
        )
    return size


def format_size(size: int) -> str:
    """Convert bytes to a compact human-readable size.

    Scales through B, K, M and G until the magnitude drops below 1024,
    never going past G, and renders one decimal place.

    Args:
        size: Number of bytes to format

    Returns:
        Size string with a single-letter unit suffix

    Examples:
        >>> format_size(0)
        '0.0B'
        >>> format_size(1536)
        '1.5K'
        >>> format_size(1073741824)
        '1.0G'
        >>> format_size(2**40)
        '1024.0G'
    """
    magnitude = float(size)
    index = 0
    while magnitude >= _KB_INT and index < len(_DISPLAY_UNITS) - 1:
        magnitude /= _KB_INT
        index += 1

    return f"{magnitude:.1f}{_DISPLAY_UNITS[index]}"


def format_mtime(timestamp: float) -> str:
    """Render a POSIX timestamp as local ``YYYY-MM-DD HH:MM``."""
    return datetime.fromtimestamp(timestamp).strftime(MTIME_FORMAT)
