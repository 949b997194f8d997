"""Bounded heap for top-k selection.

Keeps only the k best items seen so far, which costs O(n log k) instead of
the O(n log n) of a full sort when k is much smaller than n.
"""

import heapq
import itertools
import logging
from collections.abc import Callable, Iterable
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BoundedMinHeap(Generic[T]):
    """Min-heap of fixed capacity holding the highest-keyed items pushed.

    The root is always the weakest item kept, so deciding whether a new item
    belongs in the top k is a single comparison.
    """

    def __init__(self, capacity: int, key: Callable[[T], Any]) -> None:
        """Initialize an empty heap.

        Args:
            capacity: Maximum number of items retained
            key: Function mapping an item to its comparable rank

        """
        if capacity < 0:
            raise ValueError(f"Heap capacity must be >= 0, got {capacity}")
        self.capacity = capacity
        self._key = key
        self._heap: list[tuple[Any, int, T]] = []
        # Insertion counter so equal keys never fall through to comparing items
        self._counter = itertools.count()

    def push(self, item: T) -> bool:
        """Offer an item to the heap.

        Args:
            item: Candidate item

        Returns:
            True if the item was kept, False if it was rejected

        """
        if self.capacity == 0:
            return False

        entry = (self._key(item), next(self._counter), item)
        if len(self._heap) < self.capacity:
            heapq.heappush(self._heap, entry)
            return True

        # Strictly greater: on equal keys the earlier item stays
        if entry[0] > self._heap[0][0]:
            heapq.heapreplace(self._heap, entry)
            return True
        return False

    def peek_min(self) -> T:
        """Return the weakest retained item without removing it."""
        if not self._heap:
            raise IndexError("peek_min on empty heap")
        return self._heap[0][2]

    def drain_descending(self) -> list[T]:
        """Remove and return all items, best first."""
        ascending = [heapq.heappop(self._heap)[2] for _ in range(len(self._heap))]
        ascending.reverse()
        return ascending

    def __len__(self) -> int:
        return len(self._heap)


def top_k(items: Iterable[T], k: int, key: Callable[[T], Any]) -> list[T]:
    """Return the ``k`` highest-keyed items, best first.

    Args:
        items: Items to select from
        k: Number of items to keep (``k <= 0`` yields an empty list)
        key: Function mapping an item to its comparable rank

    Returns:
        Up to ``k`` items ordered by descending key

    """
    heap: BoundedMinHeap[T] = BoundedMinHeap(max(k, 0), key)
    for item in items:
        heap.push(item)
    logger.debug(f"Selected top {len(heap)} of requested {k}")
    return heap.drain_descending()
