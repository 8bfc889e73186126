from __future__ import annotations
import logging
from typing import Generic, Iterable, Iterator, List, Optional, TypeVar

from .ordering import Comparator, natural_order

T = TypeVar("T")

logger = logging.getLogger(__name__)


class BinaryHeap(Generic[T]):
    """A binary min-heap ordered by an injected three-way comparator.

    The backing list is read as a complete binary tree: the parent of index
    ``i`` is ``(i - 1) // 2`` and its children are ``2i + 1`` and ``2i + 2``.
    Pass ``reverse_order()`` (or push ``Reverse`` values) for a max-heap.
    """

    __slots__ = ("_data", "_cmp")

    def __init__(self, cmp: Optional[Comparator] = None) -> None:
        if cmp is not None and not callable(cmp):
            raise TypeError(f"cmp must be callable, got {type(cmp).__name__}")
        self._data: List[T] = []
        self._cmp: Comparator = cmp if cmp is not None else natural_order

    @classmethod
    def from_items(cls, items: Iterable[T], cmp: Optional[Comparator] = None) -> "BinaryHeap[T]":
        """Build a heap from an unordered iterable in O(n)."""
        heap: BinaryHeap[T] = cls(cmp)
        heap._data = list(items)
        heap._heapify()
        logger.debug("heapified %d items", len(heap._data))
        return heap

    # -----------------------------
    # Internal helpers
    # -----------------------------
    def _sift_up(self, idx: int) -> None:
        data, cmp = self._data, self._cmp
        while idx > 0:
            parent = (idx - 1) // 2
            # Equal keys still move up; idx strictly decreases so this ends.
            if cmp(data[idx], data[parent]) > 0:
                break
            data[parent], data[idx] = data[idx], data[parent]
            idx = parent

    def _sift_down(self, idx: int) -> None:
        data, cmp = self._data, self._cmp
        n = len(data)
        while True:
            left = 2 * idx + 1
            if left >= n:
                break
            right = left + 1
            # Left child wins ties.
            child = right if right < n and cmp(data[left], data[right]) > 0 else left
            if cmp(data[child], data[idx]) > 0:
                break
            data[idx], data[child] = data[child], data[idx]
            idx = child

    def _heapify(self) -> None:
        """Transform the current list into a heap in-place in O(n) time."""
        for i in reversed(range(len(self._data) // 2)):
            self._sift_down(i)

    # -----------------------------
    # Public API
    # -----------------------------
    def push(self, item: T) -> None:
        """Push item onto the heap (O(log n))."""
        self._data.append(item)
        self._sift_up(len(self._data) - 1)

    def pop(self) -> Optional[T]:
        """Pop and return the smallest item, or None if the heap is empty."""
        data = self._data
        if not data:
            return None
        last = data.pop()
        if not data:
            return last
        top = data[0]
        data[0] = last
        self._sift_down(0)
        return top

    def push_pop(self, item: T) -> T:
        """Push item then pop the smallest, without growing the heap.

        When the current root compares less than or equal to *item* the root
        is replaced and returned; otherwise *item* comes straight back and
        the heap is left untouched.
        """
        data = self._data
        if data and self._cmp(data[0], item) <= 0:
            item, data[0] = data[0], item
            self._sift_down(0)
        return item

    def peek(self) -> Optional[T]:
        """Return the smallest item without removing it (O(1))."""
        return self._data[0] if self._data else None

    def is_valid(self) -> bool:
        """Check the heap property: every parent is <= each of its children."""
        data, cmp = self._data, self._cmp
        return all(cmp(data[(n - 1) // 2], data[n]) <= 0 for n in range(1, len(data)))

    def copy(self) -> "BinaryHeap[T]":
        """Return an independent shallow copy sharing the comparator."""
        clone: BinaryHeap[T] = type(self)(self._cmp)
        clone._data = list(self._data)
        return clone

    def to_list(self) -> List[T]:
        return list(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return bool(self._data)

    def __iter__(self) -> Iterator[T]:
        # Heap order, not sorted order
        return iter(self._data)

    def __repr__(self) -> str:
        return f"BinaryHeap({self._data!r})"
