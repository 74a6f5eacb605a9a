# -*- test-case-name: capheap.test.test_heap -*-

"""
Implementation of L{BoundedPriorityQueue} as a binary max-heap over a
fixed-length, 1-indexed list.

Slot 0 of the backing list is never used, so that the parent of the element
at index C{i} is at C{i // 2} and its children are at C{2 * i} and
C{2 * i + 1}.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Iterable, Iterator, List, Optional

from twisted.logger import Logger
from typing_extensions import Self

from .boundaries import (
    DEFAULT_CAPACITY,
    BoundedPriorityQueue,
    Comparator,
    InvalidCapacity,
    QueueEmpty,
    QueueFull,
    T,
)
from .ordering import naturalOrder

log = Logger()


@dataclass
class BoundedMaxHeap(Generic[T]):
    """
    A priority queue that holds at most C{capacity} elements and always yields
    the highest-priority one first.

    Priority is decided by C{order} if one is given, otherwise by the natural
    ordering of the elements.  Equal-priority elements come out in no
    particular order.

    This is not safe to share between threads without a lock around the whole
    heap.

    Construct it as C{BoundedMaxHeap(capacity, order)}; both are fixed from
    then on.
    """

    _capacity: int = DEFAULT_CAPACITY
    _order: Optional[Comparator[T]] = None
    _storage: List[Any] = field(init=False, repr=False, default_factory=list)
    _count: int = field(init=False, default=0)
    _compare: Comparator[Any] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        capacity = self._capacity
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise TypeError(f"capacity must be an integer, not {capacity!r}")
        if capacity < 0:
            raise InvalidCapacity(capacity)
        self._storage = [None] * (capacity + 1)
        self._compare = (
            self._order if self._order is not None else naturalOrder
        )

    @property
    def capacity(self) -> int:
        """
        The maximum number of elements this heap can hold.
        """
        return self._capacity

    @property
    def order(self) -> Optional[Comparator[T]]:
        """
        The L{Comparator} supplied at construction, if any.
        """
        return self._order

    @classmethod
    def fromIterable(
        cls,
        values: Iterable[T],
        capacity: Optional[int] = None,
        order: Optional[Comparator[T]] = None,
    ) -> Self:
        """
        Build a heap holding each of C{values}.

        @param capacity: The capacity of the new heap.  If not given, it is
            large enough for C{values}, and never less than
            L{DEFAULT_CAPACITY}.

        @raise QueueFull: if C{values} do not fit in C{capacity}.
        """
        pending = list(values)
        if capacity is None:
            capacity = max(len(pending), DEFAULT_CAPACITY)
        heap = cls(capacity, order)
        for value in pending:
            heap.insert(value)
        return heap

    def _swim(self, position: int, value: Any) -> None:
        """
        Put C{value} into the empty slot at C{position}, or into the slot of
        the highest ancestor that has lower priority than it, moving each
        ancestor it passes down one level.
        """
        storage = self._storage
        compare = self._compare
        target = position
        while target > 1 and compare(storage[target // 2], value) < 0:
            target //= 2
        while position > target:
            storage[position] = storage[position // 2]
            position //= 2
        storage[target] = value

    def _sink(self, value: Any, count: int) -> None:
        """
        Put C{value} into the root slot of a heap of C{count} elements, then
        move it down past every child with higher priority, preferring the
        right child when both children have the same priority.
        """
        storage = self._storage
        compare = self._compare
        hops = []
        position = 1
        while 2 * position <= count:
            child = 2 * position
            if (
                child < count
                and compare(storage[child + 1], storage[child]) >= 0
            ):
                child += 1
            if compare(value, storage[child]) >= 0:
                break
            hops.append(child)
            position = child
        parent = 1
        for child in hops:
            storage[parent] = storage[child]
            parent = child
        storage[parent] = value

    def insert(self, value: T) -> None:
        "Implementation of L{BoundedPriorityQueue.insert}"
        if self._count == self._capacity:
            log.debug(
                "rejected {value!r}: queue is full at capacity {capacity}",
                value=value,
                capacity=self._capacity,
            )
            raise QueueFull(value, self._capacity)
        # _swim compares before it writes, so a NotComparable leaves no trace
        self._swim(self._count + 1, value)
        self._count += 1

    def remove(self) -> T:
        "Implementation of L{BoundedPriorityQueue.remove}"
        if self._count == 0:
            log.debug("remove from an empty queue")
            raise QueueEmpty()
        storage = self._storage
        count = self._count - 1
        top: T = storage[1]
        self._sink(storage[count + 1], count)
        storage[count + 1] = None
        self._count = count
        return top

    def peek(self) -> T:
        "Implementation of L{BoundedPriorityQueue.peek}"
        if self._count == 0:
            log.debug("peek at an empty queue")
            raise QueueEmpty()
        top: T = self._storage[1]
        return top

    def isEmpty(self) -> bool:
        "Implementation of L{BoundedPriorityQueue.isEmpty}"
        return self._count == 0

    def isFull(self) -> bool:
        "Implementation of L{BoundedPriorityQueue.isFull}"
        return self._count == self._capacity

    def size(self) -> int:
        "Implementation of L{BoundedPriorityQueue.size}"
        return self._count

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        "Implementation of L{BoundedPriorityQueue.__iter__}"
        return iter(self._storage[1 : self._count + 1])

    def drain(self) -> Iterator[T]:
        """
        Remove and yield every element, highest priority first, until the heap
        is empty.
        """
        while self._count:
            yield self.remove()


_HeapIsQueue: type[BoundedPriorityQueue[int]] = BoundedMaxHeap[int]
