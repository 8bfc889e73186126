from __future__ import annotations
from dataclasses import dataclass
from functools import total_ordering
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")

# A three-way comparator: negative, zero or positive for less, equal, greater.
Comparator = Callable[[T, T], int]


def natural_order(a: Any, b: Any) -> int:
    """Compare two values by their own ordering, using only ``<``."""
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


def reverse_order(cmp: Comparator = natural_order) -> Comparator:
    """Return a comparator that inverts *cmp* (min-heap becomes max-heap)."""

    def _reversed(a: Any, b: Any) -> int:
        return cmp(b, a)

    return _reversed


@total_ordering
@dataclass(frozen=True)
class Reverse(Generic[T]):
    """Wrapper whose ordering is the inverse of the wrapped value's.

    ``Reverse(5) < Reverse(3)`` holds, so a min-heap of ``Reverse`` values
    behaves as a max-heap of the underlying values.
    """

    value: T

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Reverse):
            return NotImplemented
        return other.value < self.value

    def __repr__(self) -> str:
        return f"Reverse({self.value!r})"
