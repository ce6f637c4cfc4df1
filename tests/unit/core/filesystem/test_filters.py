"""Test suite for entry filters."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from dirlist.config.models import FilterConfig
from dirlist.core.filesystem.filters import (
    SECONDS_PER_DAY,
    EntryFilter,
    MaxAgePredicate,
    MaxSizePredicate,
    MinSizePredicate,
)
from dirlist.core.filesystem.models import EntryMetadata

NOW = 1_700_000_000.0


def entry(size: int = 0, age_seconds: float = 0.0, is_directory: bool = False) -> EntryMetadata:
    """Build metadata for an entry of the given size and age relative to NOW."""
    return EntryMetadata(
        path="./entry",
        mod_time=NOW - age_seconds,
        size_bytes=size,
        is_directory=is_directory,
    )


@pytest.mark.unit
class TestSizePredicates:
    """Test the size bounds."""

    def test_min_size_inclusive(self) -> None:
        """Test that min-size admits entries of exactly that size."""
        predicate = MinSizePredicate(1000)

        assert predicate.matches(entry(size=1000))
        assert predicate.matches(entry(size=1001))
        assert not predicate.matches(entry(size=999))

    def test_max_size_inclusive(self) -> None:
        """Test that max-size admits entries of exactly that size."""
        predicate = MaxSizePredicate(1000)

        assert predicate.matches(entry(size=1000))
        assert predicate.matches(entry(size=0))
        assert not predicate.matches(entry(size=1001))


@pytest.mark.unit
class TestMaxAgePredicate:
    """Test the age bound."""

    def test_boundary_is_inclusive(self) -> None:
        """Test that an entry exactly N days old still passes."""
        predicate = MaxAgePredicate(2, clock=lambda: NOW)

        assert predicate.matches(entry(age_seconds=2 * SECONDS_PER_DAY))
        assert not predicate.matches(entry(age_seconds=2 * SECONDS_PER_DAY + 1))

    def test_elapsed_time_not_calendar_days(self) -> None:
        """Test that age is measured in seconds, not calendar dates."""
        predicate = MaxAgePredicate(0, clock=lambda: NOW)

        assert predicate.matches(entry(age_seconds=0))
        assert not predicate.matches(entry(age_seconds=1))

    def test_future_mtime_passes(self) -> None:
        """Test that entries modified in the future have negative age."""
        predicate = MaxAgePredicate(0, clock=lambda: NOW)

        assert predicate.matches(entry(age_seconds=-3600))

    def test_clock_sampled_per_entry(self) -> None:
        """Test that the current time is read for every entry checked."""
        clock = Mock(return_value=NOW)
        predicate = MaxAgePredicate(1, clock=clock)

        for _ in range(3):
            _ = predicate.matches(entry())

        assert clock.call_count == 3


@pytest.mark.unit
class TestEntryFilter:
    """Test composition of predicates."""

    def test_empty_filter_admits_everything(self) -> None:
        """Test that no bounds means every entry passes."""
        entry_filter = EntryFilter.from_config(FilterConfig())

        assert entry_filter.get_predicate_count() == 0
        assert entry_filter.matches(entry(size=10**12, age_seconds=10**9))

    def test_one_predicate_per_bound(self) -> None:
        """Test that only configured bounds become predicates."""
        config = FilterConfig(min_size=1, max_age_days=1)

        assert EntryFilter.from_config(config).get_predicate_count() == 2

    def test_failing_min_size_excludes_regardless_of_others(self) -> None:
        """Test that a too-small entry is excluded even if age and max-size pass."""
        config = FilterConfig(min_size=1000, max_size=10**9, max_age_days=365)
        entry_filter = EntryFilter.from_config(config, clock=lambda: NOW)

        assert not entry_filter.matches(entry(size=500, age_seconds=10))

    @pytest.mark.parametrize(
        ("size", "age_days", "expected"),
        [
            (500, 1, True),
            (50, 1, False),
            (5000, 1, False),
            (500, 10, False),
            (5000, 10, False),
        ],
    )
    def test_all_bounds_must_hold(self, size: int, age_days: int, expected: bool) -> None:
        """Test that an entry is included only when every bound is satisfied."""
        config = FilterConfig(min_size=100, max_size=1000, max_age_days=5)
        entry_filter = EntryFilter.from_config(config, clock=lambda: NOW)

        assert entry_filter.matches(entry(size=size, age_seconds=age_days * SECONDS_PER_DAY)) is expected

    def test_directories_filtered_like_files(self) -> None:
        """Test that bounds apply to directory entries too."""
        entry_filter = EntryFilter.from_config(FilterConfig(min_size=10**6))

        assert not entry_filter.matches(entry(size=4096, is_directory=True))
