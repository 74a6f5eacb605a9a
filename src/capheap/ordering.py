# -*- test-case-name: capheap.test.test_ordering -*-

"""
Ready-made L{Comparator}s for L{BoundedMaxHeap <capheap.heap.BoundedMaxHeap>}.
"""

from __future__ import annotations

from typing import Any, Callable

from .boundaries import Comparator, NotComparable, Prioritized


def naturalOrder(a: Prioritized, b: Prioritized) -> int:
    """
    Compare two values by their natural ordering.

    @raise NotComparable: if C{a} and C{b} cannot be ordered with respect to
        each other.
    """
    try:
        return (a > b) - (a < b)
    except TypeError as te:
        raise NotComparable(
            f"{type(a).__name__!r} and {type(b).__name__!r} have no natural"
            " ordering"
        ) from te


def reverseOrder(order: Comparator[Any] = naturalOrder) -> Comparator[Any]:
    """
    Invert C{order}, so that a max-heap using it yields its lowest values
    first.
    """

    def inverted(a: Any, b: Any) -> int:
        return order(b, a)

    return inverted


def byKey(
    key: Callable[[Any], Any], order: Comparator[Any] = naturalOrder
) -> Comparator[Any]:
    """
    Compare values by the result of calling C{key} on each of them.
    """

    def keyed(a: Any, b: Any) -> int:
        return order(key(a), key(b))

    return keyed
