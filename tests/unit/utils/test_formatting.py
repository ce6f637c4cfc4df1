"""Tests for size and timestamp formatting utilities."""

from __future__ import annotations

from datetime import datetime

import pytest

from dirlist.config.exceptions import ConfigError, InvalidSizeError
from dirlist.utils.formatting import MAX_SIZE, format_mtime, format_size, parse_size


@pytest.mark.unit
class TestParseSize:
    """Test parse_size conversions and failures."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("0", 0),
            ("512", 512),
            ("512B", 512),
            ("10K", 10 * 1024),
            ("10M", 10 * 1024**2),
            ("2G", 2 * 1024**3),
            ("3000G", 3000 * 1024**3),
        ],
    )
    def test_valid_sizes(self, text: str, expected: int) -> None:
        """Test that each unit multiplies by its power of 1024."""
        assert parse_size(text) == expected

    def test_bare_integer_equals_bytes(self) -> None:
        """Test that a missing unit means bytes."""
        assert parse_size("100") == parse_size("100B") == 100

    def test_surrounding_whitespace_ignored(self) -> None:
        """Test that leading and trailing whitespace is tolerated."""
        assert parse_size("  4K\n") == 4096

    def test_decimal_magnitude(self) -> None:
        """Test that formatted sizes with a fraction read back."""
        assert parse_size("1.5K") == 1536
        assert parse_size("0.5B") == 1

    def test_invalid_unit_names_character(self) -> None:
        """Test that an unknown unit fails and names the character."""
        with pytest.raises(InvalidSizeError) as exc_info:
            _ = parse_size("5X")

        assert exc_info.value.unit == "X"
        assert "X" in str(exc_info.value)
        assert "must be B, K, M, or G" in str(exc_info.value)

    def test_units_are_case_sensitive(self) -> None:
        """Test that lowercase units are rejected."""
        with pytest.raises(InvalidSizeError) as exc_info:
            _ = parse_size("10k")

        assert exc_info.value.unit == "k"

    def test_invalid_size_is_config_error(self) -> None:
        """Test that size errors belong to the configuration error family."""
        with pytest.raises(ConfigError):
            _ = parse_size("1Q")

    @pytest.mark.parametrize("text", ["", "K", "abc", "-5", "+5K", " "])
    def test_missing_number(self, text: str) -> None:
        """Test that text without a leading non-negative number is rejected."""
        with pytest.raises(InvalidSizeError) as exc_info:
            _ = parse_size(text)

        assert exc_info.value.unit is None

    def test_trailing_characters_after_unit(self) -> None:
        """Test that characters after the unit are rejected."""
        with pytest.raises(InvalidSizeError) as exc_info:
            _ = parse_size("10MB")

        assert exc_info.value.unit == "M"
        assert "unexpected characters" in str(exc_info.value)

    def test_dangling_decimal_point(self) -> None:
        """Test that a dot without digits is reported as the unit."""
        with pytest.raises(InvalidSizeError) as exc_info:
            _ = parse_size("1.K")

        assert exc_info.value.unit == "."

    def test_largest_size_accepted(self) -> None:
        """Test that the largest signed 64-bit byte count still parses."""
        assert parse_size(str(MAX_SIZE)) == MAX_SIZE == 2**63 - 1

    @pytest.mark.parametrize("text", [str(2**63), "8589934592G", "99999999999999999999999999999999K"])
    def test_size_beyond_int64_rejected(self, text: str) -> None:
        """Test that byte counts above the signed 64-bit range are rejected."""
        with pytest.raises(InvalidSizeError) as exc_info:
            _ = parse_size(text)

        assert "exceeds" in str(exc_info.value)

    def test_long_magnitude_not_rounded(self) -> None:
        """Test that long numbers are multiplied exactly."""
        assert parse_size("1234567890.123456789012345678901K") == 1264197519486


@pytest.mark.unit
class TestFormatSize:
    """Test format_size output."""

    @pytest.mark.parametrize(
        ("size", "expected"),
        [
            (0, "0.0B"),
            (1, "1.0B"),
            (1023, "1023.0B"),
            (1024, "1.0K"),
            (1536, "1.5K"),
            (10 * 1024**2, "10.0M"),
            (1024**3, "1.0G"),
            (5 * 1024**3 // 2, "2.5G"),
        ],
    )
    def test_examples(self, size: int, expected: str) -> None:
        """Test representative sizes."""
        assert format_size(size) == expected

    def test_no_escalation_beyond_gigabytes(self) -> None:
        """Test that terabyte sizes still use G."""
        assert format_size(2**40) == "1024.0G"
        assert format_size(5 * 2**40).endswith("G")

    def test_returns_fresh_strings(self) -> None:
        """Test that earlier results are not affected by later calls."""
        first = format_size(1024)
        second = format_size(2048)

        assert first == "1.0K"
        assert second == "2.0K"


@pytest.mark.unit
class TestFormatMtime:
    """Test format_mtime output."""

    def test_local_time_minutes(self) -> None:
        """Test that timestamps render in local time to the minute."""
        timestamp = datetime(2024, 3, 9, 7, 5, 59).timestamp()

        assert format_mtime(timestamp) == "2024-03-09 07:05"

    def test_fixed_width(self) -> None:
        """Test that the rendered time is always 16 characters."""
        assert len(format_mtime(0)) == 16
