#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
indexed_priority_queue.py
-------------------------

An indexed min-priority queue for graph algorithms (Dijkstra, Prim, A*).

Entries are identified by a stable integer index in ``[0, capacity)``
(typically a vertex id) instead of by the stored object, so the caller can
ask "is vertex v queued?" and "lower the distance of vertex v" directly.

Features
~~~~~~~~
* O(log n) push, pop, change_key and arbitrary erase.
* O(1) contains / top / size.
* Fixed capacity chosen at construction; no reallocation afterwards.
* ``change_key`` on an index that is not queued inserts it, so callers do
  not need to track presence themselves.
* ``validate()`` checks the heap/position invariants (useful in tests).

Typical usage
~~~~~~~~~~~~~
>>> from indexed_priority_queue import IndexedMinPriorityQueue
>>> pq = IndexedMinPriorityQueue(5)
>>> pq.push(10, 0)
>>> pq.push(3, 1)
>>> pq.push(7, 2)
>>> pq.top()
(3, 1)
>>> pq.change_key(1, 2)
>>> pq.pop()
(1, 2)
>>> pq.erase(0)
>>> 0 in pq
False
>>> len(pq)
1
"""

from __future__ import annotations

import logging
import operator
from typing import (
    Generic,
    Iterator,
    List,
    Optional,
    Tuple,
    TypeVar,
)

logger = logging.getLogger(__name__)

# ----------------------------------------------------------------------
#  Generic type variable (priorities only need to be totally ordered)
# ----------------------------------------------------------------------
P = TypeVar("P")


# ----------------------------------------------------------------------
#  Errors
# ----------------------------------------------------------------------
class QueueError(Exception):
    """Base class for every error raised by the queue."""


class EmptyQueueError(QueueError, IndexError):
    """``pop`` or ``top`` on a queue that holds no entries."""


class IndexOutOfRangeError(QueueError, IndexError):
    """An index argument outside ``[0, capacity)``."""

    def __init__(self, idx: int, capacity: int) -> None:
        super().__init__(f"index {idx!r} out of range [0, {capacity})")
        self.idx = idx
        self.capacity = capacity


# ----------------------------------------------------------------------
#  Slot arithmetic for a 1-based binary heap
# ----------------------------------------------------------------------
def _parent(slot: int) -> int:
    return slot // 2


def _left(slot: int) -> int:
    return 2 * slot


def _right(slot: int) -> int:
    return 2 * slot + 1


# ----------------------------------------------------------------------
#  Core class
# ----------------------------------------------------------------------
class IndexedMinPriorityQueue(Generic[P]):
    """
    A min-priority queue over the fixed index universe ``[0, capacity)``.

    Three lists are kept mutually consistent:

    * ``_priorities[idx]`` - priority of queued index ``idx``
    * ``_heap[slot]``      - 1-based binary heap of indices (slot 0 unused)
    * ``_position[idx]``   - slot of ``idx`` in ``_heap``, ``None`` if absent

    Occupied heap slots are exactly ``1.._size``.

    Parameters
    ----------
    capacity : int
        Number of valid indices. Must be at least 1.
    """

    __slots__ = ("_priorities", "_heap", "_position", "_size", "_capacity")

    def __init__(self, capacity: int) -> None:
        capacity = operator.index(capacity)
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")

        self._capacity: int = capacity
        self._priorities: List[Optional[P]] = [None] * capacity
        self._heap: List[Optional[int]] = [None] * (capacity + 1)
        self._position: List[Optional[int]] = [None] * capacity
        self._size: int = 0
        logger.debug("created indexed priority queue with capacity %d", capacity)

    # ------------------------------------------------------------------
    #   Size / membership
    # ------------------------------------------------------------------
    @property
    def capacity(self) -> int:
        return self._capacity

    def size(self) -> int:
        return self._size

    def empty(self) -> bool:
        return self._size == 0

    def contains(self, idx: int) -> bool:
        """Return whether *idx* is queued; ``False`` for out-of-range indices."""
        if idx < 0 or idx >= self._capacity:
            return False
        return self._position[idx] is not None

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __contains__(self, idx: object) -> bool:
        if not isinstance(idx, int):
            return False
        return self.contains(idx)

    # ------------------------------------------------------------------
    #   Core public API
    # ------------------------------------------------------------------
    def push(self, priority: P, idx: int) -> None:
        """
        Queue *idx* with *priority*.

        Pushing an index that is already queued is a no-op and does **not**
        change its priority; use ``change_key`` for that.
        Raises ``IndexOutOfRangeError`` if *idx* is outside ``[0, capacity)``.
        """
        self._check_index(idx)
        if self._position[idx] is not None:
            logger.debug("ignoring push of already queued index %d", idx)
            return
        self._insert(priority, idx)

    def pop(self) -> Tuple[P, int]:
        """
        Remove the entry with the smallest priority and return it as
        ``(priority, idx)``.
        Raises ``EmptyQueueError`` if the queue is empty.
        """
        if self._size == 0:
            raise EmptyQueueError("pop from an empty indexed priority queue")
        return self._remove_at(1)

    def erase(self, idx: int) -> None:
        """
        Remove *idx* from the queue regardless of its priority.
        Erasing an index that is not queued is a no-op.
        """
        self._check_index(idx)
        slot = self._position[idx]
        if slot is None:
            return
        self._remove_at(slot)

    def change_key(self, priority: P, idx: int) -> None:
        """
        Set the priority of *idx* to *priority*, inserting it if absent.
        Works for both decreases and increases.
        """
        self._check_index(idx)
        slot = self._position[idx]
        if slot is not None:
            self._remove_at(slot)
        self._insert(priority, idx)

    def top(self) -> Tuple[P, int]:
        """
        Return ``(priority, idx)`` of the minimum entry without removing it.
        Raises ``EmptyQueueError`` if the queue is empty.
        """
        if self._size == 0:
            raise EmptyQueueError("top of an empty indexed priority queue")
        idx = self._heap[1]
        return self._priorities[idx], idx  # type: ignore[index,return-value]

    def priority(self, idx: int) -> P:
        """Return the current priority of *idx*; ``KeyError`` if not queued."""
        self._check_index(idx)
        if self._position[idx] is None:
            raise KeyError(idx)
        return self._priorities[idx]  # type: ignore[return-value]

    def clear(self) -> None:
        """Remove every entry. Capacity is unchanged."""
        for slot in range(1, self._size + 1):
            idx = self._heap[slot]
            self._position[idx] = None  # type: ignore[index]
            self._priorities[idx] = None  # type: ignore[index]
            self._heap[slot] = None
        logger.debug("cleared %d entries", self._size)
        self._size = 0

    # ------------------------------------------------------------------
    #   Iteration
    # ------------------------------------------------------------------
    def __iter__(self) -> Iterator[int]:
        """
        Yield the queued indices in **heap order** (not sorted).
        Pop repeatedly if you need them by priority.
        """
        return (self._heap[slot] for slot in range(1, self._size + 1))  # type: ignore[misc]

    def items(self) -> List[Tuple[P, int]]:
        """Return a list of ``(priority, idx)`` pairs in heap order."""
        return [(self._priorities[idx], idx) for idx in self]  # type: ignore[misc]

    # ------------------------------------------------------------------
    #   Internal heap-maintenance helpers
    # ------------------------------------------------------------------
    def _check_index(self, idx: int) -> None:
        if idx < 0 or idx >= self._capacity:
            raise IndexOutOfRangeError(idx, self._capacity)

    def _less(self, i: int, j: int) -> bool:
        """Compare the priorities held in heap slots *i* and *j*."""
        return self._priorities[self._heap[i]] < self._priorities[self._heap[j]]  # type: ignore

    def _swap(self, i: int, j: int) -> None:
        """Swap heap slots i and j and keep `_position` in sync."""
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._position[heap[i]] = i  # type: ignore[index]
        self._position[heap[j]] = j  # type: ignore[index]

    def _insert(self, priority: P, idx: int) -> None:
        self._size += 1
        self._priorities[idx] = priority
        self._heap[self._size] = idx
        self._position[idx] = self._size
        self._swim(self._size)

    def _remove_at(self, slot: int) -> Tuple[P, int]:
        """
        Remove the entry at occupied heap *slot*, move the last entry into its
        place and restore heap order there. Returns the removed pair.
        """
        idx = self._heap[slot]
        last = self._size
        self._swap(slot, last)
        self._size -= 1

        # The entry moved into `slot` may be out of order in either direction;
        # at most one of these moves it.
        if slot <= self._size:
            self._swim(slot)
            self._sink(slot)

        priority = self._priorities[idx]  # type: ignore[index]
        self._heap[last] = None
        self._position[idx] = None  # type: ignore[index]
        self._priorities[idx] = None  # type: ignore[index]
        return priority, idx  # type: ignore[return-value]

    def _swim(self, slot: int) -> None:
        """Move the entry at *slot* up until its parent is not larger."""
        parent = _parent(slot)
        while parent > 0 and self._less(slot, parent):
            self._swap(slot, parent)
            slot = parent
            parent = _parent(slot)

    def _sink(self, slot: int) -> None:
        """Move the entry at *slot* down until neither child is smaller."""
        n = self._size
        while (left := _left(slot)) <= n:
            smallest = left
            right = _right(slot)
            if right <= n and self._less(right, left):
                smallest = right
            if not self._less(smallest, slot):
                break
            self._swap(slot, smallest)
            slot = smallest

    # ------------------------------------------------------------------
    #   Validation/checking utilities (debugging)
    # ------------------------------------------------------------------
    def validate(self) -> None:
        """
        Verify the heap, position and priority lists agree with each other.
        Raises ``AssertionError`` with a descriptive message if something is broken.
        """
        seen = set()
        for slot in range(1, self._size + 1):
            idx = self._heap[slot]
            assert idx is not None, f"Occupied slot {slot} is empty"
            assert 0 <= idx < self._capacity, f"Slot {slot} holds bad index {idx}"
            assert idx not in seen, f"Index {idx} appears twice in the heap"
            seen.add(idx)
            assert (
                self._position[idx] == slot
            ), f"Position of index {idx} is {self._position[idx]}, expected {slot}"
            if slot > 1:
                parent_idx = self._heap[_parent(slot)]
                assert not (
                    self._priorities[idx] < self._priorities[parent_idx]  # type: ignore
                ), f"Heap order violated between slot {slot} and its parent"

        # Every index with a position must be in the heap, and vice versa.
        for idx, slot in enumerate(self._position):
            if slot is not None:
                assert idx in seen, f"Index {idx} has position {slot} but is not queued"

    # ------------------------------------------------------------------
    #   Convenience string representation (for debugging)
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(capacity={self._capacity}, size={self._size})"
        )
