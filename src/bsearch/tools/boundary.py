"""
Boundary search over sorted sequences.

This module provides the three binary search variants used to evaluate range
queries: the first element not less than a target (``search_ge``), the last
element not greater than a target (``search_le``), and any element equal to a
target (``search_eq``). A range ``[low, high]`` maps to the closed index interval
``[search_ge(low), search_le(high)]``; when the start exceeds the end the range
holds no elements.

All searches run in O(log n) and only read the sequence through ``len()`` and
integer indexing. The sequence must be sorted consistently with the comparator;
if it is not, the returned index is unspecified. Use ``check_sorted`` (or
``SearchConfig.check_sorted``) while debugging to catch that, at O(n) per call.
"""

import logging
from typing import Any, Callable, Optional, Sequence

from ..models.config import BsearchConfig, SearchConfig
from ..models.ordering import Comparator, Ordering, natural_order


class BoundarySearchError(Exception):
    """Base class for errors raised by the boundary search tools."""
    pass


class UnsortedSequenceError(BoundarySearchError):
    """Raised by the sortedness check when two adjacent elements are out of order."""

    def __init__(self, index: int):
        self.index = index
        super().__init__(
            f"Sequence is not sorted: element {index} compares greater than element {index + 1}"
        )


def partition_point(sequence: Sequence[Any], predicate: Callable[[Any], bool]) -> int:
    """
    Find the first index where the predicate stops holding.

    The predicate must be true for a (possibly empty) prefix of the sequence and
    false for the remainder.

    Args:
        sequence: Randomly indexable sequence
        predicate: Function applied to elements

    Returns:
        Index in ``[0, len(sequence)]`` of the first element failing the predicate
    """
    low = 0
    high = len(sequence)

    while low < high:
        mid = (low + high) // 2
        if predicate(sequence[mid]):
            low = mid + 1
        else:
            high = mid

    return low


def search_ge(sequence: Sequence[Any], target: Any,
              compare: Comparator = natural_order) -> Optional[int]:
    """
    Find the index of the first element greater than or equal to the target.

    Args:
        sequence: Sorted sequence to search
        target: Value to search for
        compare: Three-way comparator called as ``compare(element, target)``

    Returns:
        Index of the first element >= target, or None if every element is < target
    """
    idx = partition_point(
        sequence, lambda element: Ordering.of(compare(element, target)) is Ordering.LESS
    )
    return idx if idx < len(sequence) else None


def search_le(sequence: Sequence[Any], target: Any,
              compare: Comparator = natural_order) -> Optional[int]:
    """
    Find the index of the last element less than or equal to the target.

    Args:
        sequence: Sorted sequence to search
        target: Value to search for
        compare: Three-way comparator called as ``compare(element, target)``

    Returns:
        Index of the last element <= target, or None if every element is > target
    """
    idx = partition_point(
        sequence, lambda element: Ordering.of(compare(element, target)) is not Ordering.GREATER
    )
    return idx - 1 if idx > 0 else None


def search_eq(sequence: Sequence[Any], target: Any,
              compare: Comparator = natural_order) -> Optional[int]:
    """
    Find the index of an element equal to the target.

    When several elements compare equal, which of them is returned is left
    unspecified. Combine ``search_ge`` and ``search_le`` to get the whole run.

    Args:
        sequence: Sorted sequence to search
        target: Value to search for
        compare: Three-way comparator called as ``compare(element, target)``

    Returns:
        Index of a matching element, or None if there is no exact match
    """
    low = 0
    high = len(sequence)

    while low < high:
        mid = (low + high) // 2
        ordering = Ordering.of(compare(sequence[mid], target))
        if ordering is Ordering.LESS:
            low = mid + 1
        elif ordering is Ordering.GREATER:
            high = mid
        else:
            return mid

    return None


def check_sorted(sequence: Sequence[Any], compare: Comparator = natural_order) -> None:
    """
    Verify that a sequence is sorted under a comparator.

    This walks every adjacent pair, so it costs O(n) and is meant for debugging
    only. Comparators built by ``by_key`` expect a key as their second argument,
    so their ``compare_elements`` attribute is used to compare two elements instead.

    Args:
        sequence: Sequence to verify
        compare: Comparator the sequence is supposed to be sorted by

    Raises:
        UnsortedSequenceError: At the first adjacent pair found out of order
    """
    compare = getattr(compare, 'compare_elements', compare)
    for idx in range(len(sequence) - 1):
        if Ordering.of(compare(sequence[idx], sequence[idx + 1])) is Ordering.GREATER:
            raise UnsortedSequenceError(idx)


class BoundarySearcher:
    """
    Configured front end over the boundary search functions.

    The searcher adds the opt-in behaviour described by a ``SearchConfig``:
    - Sortedness checking before every search
    - A DEBUG log record per search

    It keeps no state between calls, so one instance can be shared freely.
    """

    def __init__(self, config: Optional[SearchConfig] = None):
        """
        Initialize the searcher.

        Args:
            config: Search settings; defaults are used when omitted
        """
        self.config = config if config is not None else SearchConfig()
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @classmethod
    def from_config(cls, config: BsearchConfig) -> 'BoundarySearcher':
        """
        Build a searcher from a full configuration.

        Applies the logging section to the package logger, then uses the
        search section for the searcher itself.

        Args:
            config: Loaded configuration, e.g. ``load_config().config``

        Returns:
            BoundarySearcher configured by ``config.search``
        """
        config.logging.apply()
        return cls(config.search)

    def search_ge(self, sequence: Sequence[Any], target: Any,
                  compare: Comparator = natural_order) -> Optional[int]:
        """Find the first element >= target. See ``search_ge``."""
        return self._run('search_ge', search_ge, sequence, target, compare)

    def search_le(self, sequence: Sequence[Any], target: Any,
                  compare: Comparator = natural_order) -> Optional[int]:
        """Find the last element <= target. See ``search_le``."""
        return self._run('search_le', search_le, sequence, target, compare)

    def search_eq(self, sequence: Sequence[Any], target: Any,
                  compare: Comparator = natural_order) -> Optional[int]:
        """Find any element equal to target. See ``search_eq``."""
        return self._run('search_eq', search_eq, sequence, target, compare)

    def _run(self, name: str, search: Callable[..., Optional[int]],
             sequence: Sequence[Any], target: Any, compare: Comparator) -> Optional[int]:
        if self.config.check_sorted:
            check_sorted(sequence, compare)

        result = search(sequence, target, compare)

        if self.config.trace_searches:
            self.logger.debug(f"{name} over {len(sequence)} elements for {target!r} -> {result}")

        return result
