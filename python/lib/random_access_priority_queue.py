#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
random_access_priority_queue.py
-------------------------------

A fixed‑capacity, index‑addressable min‑priority queue.

Every entry lives under a caller‑chosen integer *handle* in
``[0, capacity)``.  Because entries are addressed by handle instead of
being searched for, arbitrary removal and priority updates are O(log n),
which is what shortest‑path searches, event simulators and schedulers need.

Features
~~~~~~~~
* O(log n) enqueue, dequeue, remove and update (decrease / increase key).
* O(1) peek, membership, value / priority lookup by handle.
* Any total order: the priority comparator is injected at construction
  (see ``comparers.reverse_order`` for a max‑heap).
* ``try_peek`` / ``try_dequeue`` variants that do not raise on an empty
  queue.

Storage is a set of parallel lists allocated once: ``_elements`` and
``_priorities`` indexed by handle, ``_heap`` holding handles in heap order
(1‑based, slot 0 unused) and ``_position`` mapping each handle back to its
slot in ``_heap`` (``None`` while the handle is not queued).

Equal priorities are dequeued in no particular order.

Typical usage
~~~~~~~~~~~~~
>>> from random_access_priority_queue import RandomAccessPriorityQueue
>>> pq = RandomAccessPriorityQueue(4)
>>> pq.enqueue(0, "a", 5)
>>> pq.enqueue(1, "b", 1)
>>> pq.enqueue(2, "c", 3)
>>> pq.peek()
(1, 'b')
>>> pq.update_value(0, "a", 0)
>>> pq.dequeue()
(0, 'a')
>>> pq.remove(2)
>>> 2 in pq
False
"""

from __future__ import annotations

import logging
import operator
import warnings
from typing import (
    Any,
    Generic,
    Iterable,
    Iterator,
    List,
    Optional,
    Tuple,
    TypeVar,
)

from comparers import Comparer, natural_order

logger = logging.getLogger(__name__)

# ----------------------------------------------------------------------
#  Generic type variables
# ----------------------------------------------------------------------
T = TypeVar("T")  # type of the stored value
P = TypeVar("P")  # type of the priority (anything the comparer accepts)


# ----------------------------------------------------------------------
#  Core class
# ----------------------------------------------------------------------
class RandomAccessPriorityQueue(Generic[T, P]):
    """
    A min‑priority queue over integer handles in ``[0, capacity)``.

    Parameters
    ----------
    capacity : int
        Number of distinct handles the queue can hold.  Fixed for the
        lifetime of the instance.
    comparer : Callable[[P, P], int], default ``natural_order``
        ``cmp``‑style total order over priorities.  The entry whose priority
        compares smallest is at the front of the queue.
    """

    __slots__ = (
        "_capacity",
        "_comparer",
        "_elements",
        "_priorities",
        "_heap",
        "_position",
        "_count",
    )

    def __init__(self, capacity: int, comparer: Comparer = natural_order) -> None:
        if comparer is None or not callable(comparer):
            raise TypeError("comparer must be a callable (a, b) -> int")
        capacity = operator.index(capacity)
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")

        self._capacity = capacity
        self._comparer = comparer

        # Indexed by handle.
        self._elements: List[Optional[T]] = [None] * capacity
        self._priorities: List[Optional[P]] = [None] * capacity

        # Handles in heap order; the root is at slot 1.
        self._heap: List[int] = [0] * (capacity + 1)

        # handle -> slot in `_heap`, or None when the handle is not queued.
        self._position: List[Optional[int]] = [None] * capacity

        self._count = 0
        logger.debug("created priority queue with capacity %d", capacity)

    # ------------------------------------------------------------------
    #   Read‑only properties
    # ------------------------------------------------------------------
    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def comparer(self) -> Comparer:
        return self._comparer

    @property
    def count(self) -> int:
        """Number of handles currently queued."""
        return self._count

    @property
    def is_empty(self) -> bool:
        return self._count == 0

    # ------------------------------------------------------------------
    #   Core public API
    # ------------------------------------------------------------------
    def enqueue(self, handle: int, value: T, priority: P) -> None:
        """
        Queue *value* under *handle* with the given *priority*.

        Raises ``IndexError`` if the handle is out of range and
        ``ValueError`` if it is already queued.
        """
        handle = self._validate_handle(handle)
        if self._position[handle] is not None:
            raise ValueError(f"handle {handle} is already in the queue")

        self._elements[handle] = value
        self._priorities[handle] = priority
        self._count += 1
        self._heap[self._count] = handle
        self._position[handle] = self._count
        self._swim(self._count)

    def peek(self) -> Tuple[int, T]:
        """
        Return ``(handle, value)`` of the minimum entry without removing it.
        Raises ``IndexError`` if the queue is empty.
        """
        if self._count == 0:
            raise IndexError("peek from an empty priority queue")
        handle = self._heap[1]
        return handle, self._elements[handle]

    def dequeue(self) -> Tuple[int, T]:
        """
        Remove and return ``(handle, value)`` of the minimum entry.
        Raises ``IndexError`` if the queue is empty.
        """
        if self._count == 0:
            raise IndexError("dequeue from an empty priority queue")

        handle = self._heap[1]
        value = self._elements[handle]

        self._swap(1, self._count)
        self._count -= 1
        self._sink(1)

        self._forget(handle)
        return handle, value

    def try_peek(self) -> Tuple[bool, Optional[Tuple[int, T]]]:
        """Like ``peek`` but returns ``(False, None)`` on an empty queue."""
        if self._count == 0:
            return False, None
        return True, self.peek()

    def try_dequeue(self) -> Tuple[bool, Optional[Tuple[int, T]]]:
        """Like ``dequeue`` but returns ``(False, None)`` on an empty queue."""
        if self._count == 0:
            return False, None
        return True, self.dequeue()

    def remove(self, handle: int) -> None:
        """
        Remove *handle* from the queue, whatever its priority.

        Raises ``IndexError`` if the handle is out of range and ``KeyError``
        if it is not queued.
        """
        handle = self._validate_present(handle)
        slot = self._position[handle]

        self._swap(slot, self._count)
        self._count -= 1

        # The entry moved into `slot` may belong above or below it.
        if slot <= self._count:
            self._sink(slot)
            self._swim(slot)

        self._forget(handle)

    def update_value(self, handle: int, value: T, priority: P) -> None:
        """
        Replace the value and priority stored under *handle* and move it to
        its new place in the queue.

        Raises ``IndexError`` if the handle is out of range and ``KeyError``
        if it is not queued.
        """
        handle = self._validate_present(handle)

        comparison = self._comparer(priority, self._priorities[handle])
        self._elements[handle] = value
        self._priorities[handle] = priority

        if comparison < 0:
            self._swim(self._position[handle])
        elif comparison > 0:
            self._sink(self._position[handle])

    def contains(self, handle: int) -> bool:
        """
        Whether *handle* is queued.  Raises ``IndexError`` if it is out of
        range; use ``handle in queue`` for a check that never raises.
        """
        handle = self._validate_handle(handle)
        return self._position[handle] is not None

    def value_of(self, handle: int) -> T:
        handle = self._validate_present(handle)
        return self._elements[handle]

    def priority_of(self, handle: int) -> P:
        handle = self._validate_present(handle)
        return self._priorities[handle]

    def clear(self) -> None:
        """Dequeue everything.  Capacity and comparer are kept."""
        for handle in range(self._capacity):
            self._elements[handle] = None
            self._priorities[handle] = None
            self._position[handle] = None
        self._heap[:] = [0] * (self._capacity + 1)
        self._count = 0
        logger.debug("cleared priority queue with capacity %d", self._capacity)

    def extend(self, entries: Iterable[Tuple[int, T, P]]) -> None:
        """
        Enqueue a batch of ``(handle, value, priority)`` triples.
        Stops at the first invalid entry; earlier entries stay queued.
        """
        for handle, value, priority in entries:
            self.enqueue(handle, value, priority)

    # ------------------------------------------------------------------
    #   Python protocol support
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return self._count

    def __bool__(self) -> bool:
        return self._count > 0

    def __contains__(self, handle: Any) -> bool:
        """Membership test that is simply False for unusable handles."""
        try:
            handle = operator.index(handle)
        except TypeError:
            return False
        return 0 <= handle < self._capacity and self._position[handle] is not None

    def __iter__(self) -> Iterator[int]:
        """
        Iterate over the queued handles **in heap order** (not sorted).
        The queue must not be modified during iteration.
        """
        return iter(self._heap[1 : self._count + 1])

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(capacity={self._capacity}, "
            f"count={self._count})"
        )

    # ------------------------------------------------------------------
    #   Internal heap‑maintenance helpers
    # ------------------------------------------------------------------
    def _is_less(self, i: int, j: int) -> bool:
        """Whether the entry at slot *i* sorts strictly before slot *j*."""
        return (
            self._comparer(
                self._priorities[self._heap[i]], self._priorities[self._heap[j]]
            )
            < 0
        )

    def _swap(self, i: int, j: int) -> None:
        """Swap slots i and j and keep `_position` in sync."""
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._position[heap[i]] = i
        self._position[heap[j]] = j

    def _swim(self, slot: int) -> None:
        """Move the entry at *slot* towards the root while it beats its parent."""
        while slot > 1 and self._is_less(slot, slot // 2):
            self._swap(slot, slot // 2)
            slot //= 2

    def _sink(self, slot: int) -> None:
        """Move the entry at *slot* towards the leaves while a child beats it."""
        count = self._count
        while 2 * slot <= count:
            child = 2 * slot
            # Right child only on a strict win over the left one.
            if child < count and self._is_less(child + 1, child):
                child += 1
            if not self._is_less(child, slot):
                break
            self._swap(slot, child)
            slot = child

    def _forget(self, handle: int) -> None:
        self._elements[handle] = None
        self._priorities[handle] = None
        self._position[handle] = None

    # ------------------------------------------------------------------
    #   Validation
    # ------------------------------------------------------------------
    def _validate_handle(self, handle: Any) -> int:
        handle = operator.index(handle)
        if not 0 <= handle < self._capacity:
            raise IndexError(
                f"handle {handle} out of range for capacity {self._capacity}"
            )
        return handle

    def _validate_present(self, handle: Any) -> int:
        handle = self._validate_handle(handle)
        if self._position[handle] is None:
            raise KeyError(f"handle {handle} is not in the queue")
        return handle

    # ------------------------------------------------------------------
    #   Debug/validation helpers
    # ------------------------------------------------------------------
    def _is_valid(self) -> bool:
        """Internal sanity check – useful while debugging."""
        if not 0 <= self._count <= self._capacity:
            return False
        for slot in range(1, self._count + 1):
            handle = self._heap[slot]
            if self._position[handle] != slot:
                return False
            for child in (2 * slot, 2 * slot + 1):
                if child <= self._count and self._is_less(child, slot):
                    return False
        queued = sum(1 for position in self._position if position is not None)
        return queued == self._count


class IndexPriorityQueue(RandomAccessPriorityQueue[T, P]):
    """Deprecated name of ``RandomAccessPriorityQueue``."""

    __slots__ = ()

    def __init__(self, capacity: int, comparer: Comparer = natural_order) -> None:
        warnings.warn(
            "IndexPriorityQueue is deprecated, use RandomAccessPriorityQueue",
            DeprecationWarning,
            stacklevel=2,
        )
        super().__init__(capacity, comparer)
