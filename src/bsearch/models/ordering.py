"""
Three-way ordering primitives for bsearch.

This module defines the result type of a comparison and a handful of comparator
builders. A comparator is any callable taking ``(element, target)`` and returning
either an ``Ordering`` member or an ``int`` in the ``cmp`` convention
(negative, zero, positive), the same convention ``functools.cmp_to_key`` uses.
"""

from enum import Enum
import numbers
from typing import Any, Callable, Union


class Ordering(Enum):
    """Outcome of a three-way comparison."""
    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, value: Union['Ordering', int]) -> 'Ordering':
        """
        Normalize comparator output to an Ordering.

        Args:
            value: An Ordering member or an int whose sign gives the ordering

        Returns:
            The matching Ordering member

        Raises:
            TypeError: If value is neither an Ordering nor an int
        """
        if isinstance(value, Ordering):
            return value
        # Integral covers numpy integers; bool is never a meaningful comparison result
        if isinstance(value, numbers.Integral) and not isinstance(value, bool):
            if value < 0:
                return cls.LESS
            if value > 0:
                return cls.GREATER
            return cls.EQUAL
        raise TypeError(
            f"Comparator must return an Ordering or an int, got {type(value).__name__}"
        )

    def reverse(self) -> 'Ordering':
        """Swap LESS and GREATER, leaving EQUAL untouched."""
        return Ordering(-self.value)


Comparator = Callable[[Any, Any], Union[Ordering, int]]


def natural_order(a: Any, b: Any) -> Ordering:
    """Compare two values with their own ``<`` and ``>`` operators."""
    if a < b:
        return Ordering.LESS
    if a > b:
        return Ordering.GREATER
    return Ordering.EQUAL


def by_key(key: Callable[[Any], Any]) -> Comparator:
    """
    Build a comparator that orders elements by a derived key.

    The target handed to a search is expected to already be a key, so only the
    element side is projected. The returned comparator carries a
    ``compare_elements`` attribute that projects both sides, which is what
    ``check_sorted`` uses to compare two elements.

    Args:
        key: Function mapping an element to its sort key

    Returns:
        Comparator comparing ``key(element)`` against the target
    """
    def compare(element: Any, target: Any) -> Ordering:
        return natural_order(key(element), target)

    compare.compare_elements = lambda a, b: natural_order(key(a), key(b))
    return compare


def reverse_order(compare: Comparator = natural_order) -> Comparator:
    """
    Build a comparator for sequences sorted in descending order.

    Args:
        compare: Comparator describing the ascending order

    Returns:
        Comparator with LESS and GREATER swapped
    """
    def reversed_compare(element: Any, target: Any) -> Ordering:
        return Ordering.of(compare(element, target)).reverse()

    if hasattr(compare, 'compare_elements'):
        reversed_compare.compare_elements = reverse_order(compare.compare_elements)
    return reversed_compare
