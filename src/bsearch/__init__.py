"""
bsearch - Boundary search for range queries

Binary search variants that locate the boundaries of a value range inside a
sorted sequence, parameterized by a caller-supplied three-way comparator.
"""

from .models.ordering import Ordering, natural_order, by_key, reverse_order
from .tools.boundary import (
    BoundarySearcher,
    BoundarySearchError,
    UnsortedSequenceError,
    partition_point,
    search_ge,
    search_le,
    search_eq,
    check_sorted
)

__version__ = "0.1.0"
__author__ = "bsearch Team"

__all__ = [
    'Ordering',
    'natural_order',
    'by_key',
    'reverse_order',
    'BoundarySearcher',
    'BoundarySearchError',
    'UnsortedSequenceError',
    'partition_point',
    'search_ge',
    'search_le',
    'search_eq',
    'check_sorted'
]
