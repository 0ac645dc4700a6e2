"""Binary min-heap whose entries stay addressable by stable handles."""

from __future__ import annotations

import math
from itertools import count
from typing import Generic, TypeVar

T = TypeVar("T")

# Sort key of an entry being deleted; below every real (key, handle) pair
_DELETED = (-math.inf, -math.inf)


class IndexedHeap(Generic[T]):
    """Array-backed binary heap over ``(key, payload)`` pairs.

    Every pushed entry gets an integer handle. Entries live in an arena keyed
    by handle and the heap array stores handles only; ``_positions`` maps each
    live handle to its current array slot and is rewritten on every swap, so a
    handle keeps locating its entry however far sifting has moved it.

    Handles are never reused. Once an entry is popped or deleted its handle is
    dead for good and ``delete`` on it reports ``False``.

    Ordering is ascending by key, with ties going to the entry pushed last.
    ``reverse=True`` inverts the whole comparison: descending by key, with
    ties going to the entry pushed first.
    """

    def __init__(self, *, reverse: bool = False) -> None:
        self.reverse = reverse
        self._heap: list[int] = []
        self._positions: dict[int, int] = {}
        self._keys: dict[int, float] = {}
        self._payloads: dict[int, T] = {}
        self._order: dict[int, tuple[float, float]] = {}
        self._handles = count()

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __contains__(self, handle: object) -> bool:
        return handle in self._positions

    def is_empty(self) -> bool:
        return not self._heap

    def is_live(self, handle: int) -> bool:
        """True while the entry behind ``handle`` is still in the heap."""
        return handle in self._positions

    def push(self, key: float, payload: T) -> int:
        """Insert an entry and return its handle."""
        handle = next(self._handles)
        self._keys[handle] = key
        self._payloads[handle] = payload
        self._order[handle] = (-key, handle) if self.reverse else (key, -handle)
        self._heap.append(handle)
        self._positions[handle] = len(self._heap) - 1
        self._sift_up(len(self._heap) - 1)
        return handle

    def peek(self) -> tuple[float, T]:
        """Return the top entry without removing it.

        Raises:
            IndexError: If the heap is empty
        """
        if not self._heap:
            raise IndexError("peek from an empty heap")
        handle = self._heap[0]
        return self._keys[handle], self._payloads[handle]

    def peek_handle(self) -> int:
        """Return the handle of the top entry.

        Raises:
            IndexError: If the heap is empty
        """
        if not self._heap:
            raise IndexError("peek from an empty heap")
        return self._heap[0]

    def pop(self) -> tuple[float, T]:
        """Remove and return the top entry as ``(key, payload)``.

        Raises:
            IndexError: If the heap is empty
        """
        if not self._heap:
            raise IndexError("pop from an empty heap")
        handle = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._positions[last] = 0
            self._sift_down(0)
        return self._release(handle)

    def delete(self, handle: int) -> bool:
        """Remove the entry behind ``handle`` wherever it currently sits.

        The entry's sort key is dropped below every other key, sifted to the
        root and popped.

        Returns:
            False if the heap is empty or the handle is not live, True otherwise
        """
        if not self._heap or handle not in self._positions:
            return False
        self._order[handle] = _DELETED
        self._sift_up(self._positions[handle])
        self.pop()
        return True

    def key_of(self, handle: int) -> float:
        """Return the key pushed with a live handle."""
        if handle not in self._positions:
            raise KeyError(handle)
        return self._keys[handle]

    def check_positions(self) -> bool:
        """Verify that the position table and heap order agree."""
        if len(self._positions) != len(self._heap):
            return False
        for index, handle in enumerate(self._heap):
            if self._positions.get(handle) != index:
                return False
            parent = (index - 1) >> 1
            if index > 0 and self._order[handle] < self._order[self._heap[parent]]:
                return False
        return True

    def _release(self, handle: int) -> tuple[float, T]:
        del self._positions[handle]
        del self._order[handle]
        return self._keys.pop(handle), self._payloads.pop(handle)

    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._positions[heap[i]] = i
        self._positions[heap[j]] = j

    def _sift_up(self, index: int) -> None:
        order = self._order
        heap = self._heap
        while index > 0:
            parent = (index - 1) >> 1
            if order[heap[index]] < order[heap[parent]]:
                self._swap(index, parent)
                index = parent
            else:
                break

    def _sift_down(self, index: int) -> None:
        order = self._order
        heap = self._heap
        size = len(heap)
        while True:
            child = 2 * index + 1
            if child >= size:
                break
            if child + 1 < size and order[heap[child + 1]] < order[heap[child]]:
                child += 1
            if order[heap[child]] < order[heap[index]]:
                self._swap(child, index)
                index = child
            else:
                break
