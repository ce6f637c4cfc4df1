"""Inclusion predicates applied to every listed entry."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from typing import override

from dirlist.config.models import FilterConfig

from .models import EntryMetadata

SECONDS_PER_DAY = 24 * 60 * 60

Clock = Callable[[], float]


class EntryPredicate(ABC):
    """Base class for a single inclusion test."""

    @abstractmethod
    def matches(self, entry: EntryMetadata) -> bool:
        """Check whether the entry passes this test.

        Args:
            entry: Metadata of the entry to check

        Returns:
            True if the entry should be listed, False otherwise
        """


class MinSizePredicate(EntryPredicate):
    """Entry is at least ``min_size`` bytes."""

    def __init__(self, min_size: int) -> None:
        self.min_size: int = min_size

    @override
    def matches(self, entry: EntryMetadata) -> bool:
        return entry.size_bytes >= self.min_size


class MaxSizePredicate(EntryPredicate):
    """Entry is at most ``max_size`` bytes."""

    def __init__(self, max_size: int) -> None:
        self.max_size: int = max_size

    @override
    def matches(self, entry: EntryMetadata) -> bool:
        return entry.size_bytes <= self.max_size


class MaxAgePredicate(EntryPredicate):
    """Entry was modified within the last ``max_age_days`` days.

    Age is elapsed wall-clock time, not a calendar-day difference. The clock
    is read again for every entry checked.
    """

    def __init__(self, max_age_days: int, clock: Clock = time.time) -> None:
        self.max_age_days: int = max_age_days
        self.clock: Clock = clock

    @override
    def matches(self, entry: EntryMetadata) -> bool:
        age = self.clock() - entry.mod_time
        return age <= self.max_age_days * SECONDS_PER_DAY


class EntryFilter:
    """AND-combination of entry predicates.

    An entry is listed only if every configured predicate passes; an empty
    filter lets everything through.
    """

    def __init__(self, predicates: Iterable[EntryPredicate] = ()) -> None:
        """Initialize the filter.

        Args:
            predicates: Predicates that must all pass
        """
        self._predicates: list[EntryPredicate] = list(predicates)

    @classmethod
    def from_config(cls, config: FilterConfig, clock: Clock = time.time) -> EntryFilter:
        """Build the filter for the bounds set in a configuration.

        Args:
            config: Filter configuration
            clock: Source of the current time for age checks

        Returns:
            EntryFilter with one predicate per configured bound
        """
        predicates: list[EntryPredicate] = []
        if config.min_size is not None:
            predicates.append(MinSizePredicate(config.min_size))
        if config.max_size is not None:
            predicates.append(MaxSizePredicate(config.max_size))
        if config.max_age_days is not None:
            predicates.append(MaxAgePredicate(config.max_age_days, clock))
        return cls(predicates)

    def matches(self, entry: EntryMetadata) -> bool:
        """Check an entry against every predicate.

        Args:
            entry: Metadata of the entry to check

        Returns:
            True if all predicates pass
        """
        return all(predicate.matches(entry) for predicate in self._predicates)

    def get_predicate_count(self) -> int:
        """Get the number of predicates configured."""
        return len(self._predicates)
