"""
L{capheap.boundaries} describes the boundaries between the heap and your
application code.  It contains L{Protocol}s, L{TypeVar}s, exceptions, and
constant values, but no logic of its own.
"""

from __future__ import annotations

from typing import Any, Iterator, Protocol, TypeVar

DEFAULT_CAPACITY = 10
"""
The number of elements a L{BoundedMaxHeap <capheap.heap.BoundedMaxHeap>} can
hold when no capacity is given.
"""


class PriorityComparable(Protocol):
    """
    Protocol describing an object with a natural ordering, which may be
    stored in a heap without an explicit L{Comparator}.
    """

    def __lt__(self, other: Any) -> bool:
        """
        Is C{self} lower priority than C{other}?
        """

    def __gt__(self, other: Any) -> bool:
        """
        Is C{self} higher priority than C{other}?
        """


Prioritized = TypeVar("Prioritized", bound=PriorityComparable)
"""
A TypeVar for objects with a natural ordering.
"""

T = TypeVar("T")
"""
TypeVar for the elements stored in a heap.
"""

T_contra = TypeVar("T_contra", contravariant=True)
"""
Contravariant TypeVar for the arguments of a L{Comparator}.
"""


class Comparator(Protocol[T_contra]):
    """
    A function that establishes a total order over its arguments.
    """

    def __call__(self, a: T_contra, b: T_contra) -> int:
        """
        Compare C{a} to C{b}.

        @return: a negative number if C{a} is lower priority than C{b}, zero
            if they have the same priority, or a positive number if C{a} is
            higher priority.
        """


class BoundedPriorityQueue(Protocol[T]):
    """
    High-level specification of a priority queue with a fixed capacity that
    yields its highest-priority element first.
    """

    def insert(self, value: T) -> None:
        """
        Add a value to the queue.

        @raise QueueFull: if the queue already holds as many values as its
            capacity allows.
        """

    def remove(self) -> T:
        """
        Consume the highest-priority value from the queue.

        @raise QueueEmpty: if the queue holds no values.
        """

    def peek(self) -> T:
        """
        Examine the highest-priority value without modifying the queue.

        @raise QueueEmpty: if the queue holds no values.
        """

    def isEmpty(self) -> bool:
        """
        Does this queue hold no values?
        """

    def isFull(self) -> bool:
        """
        Does this queue hold as many values as its capacity allows?
        """

    def size(self) -> int:
        """
        How many values does this queue currently hold?
        """

    def __iter__(self) -> Iterator[T]:
        """
        Iterate all of the values in the queue, in an unspecified order.
        """


class HeapError(Exception):
    """
    Base class for every error raised by a heap.
    """


class QueueFull(HeapError):
    """
    A value was inserted into a queue that was already at capacity.  The
    queue was not modified.
    """

    def __init__(self, value: object, capacity: int) -> None:
        super().__init__(value, capacity)
        self.value = value
        self.capacity = capacity

    def __str__(self) -> str:
        return f"queue is full (capacity {self.capacity})"


class QueueEmpty(HeapError, LookupError):
    """
    A value was requested from a queue that holds none.
    """

    def __str__(self) -> str:
        return "queue is empty"


class InvalidCapacity(HeapError, ValueError):
    """
    A heap was constructed with a negative capacity.
    """

    def __init__(self, capacity: int) -> None:
        super().__init__(capacity)
        self.capacity = capacity

    def __str__(self) -> str:
        return f"capacity must not be negative, not {self.capacity}"


class NotComparable(HeapError, TypeError):
    """
    Two values had no natural ordering between them and no L{Comparator} was
    supplied to order them.
    """
