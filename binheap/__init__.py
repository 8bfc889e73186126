"""Generic binary min-heap with pluggable ordering."""

from .datastructures import BinaryHeap, Comparator, Reverse, natural_order, reverse_order

__version__ = "0.1.0"

__all__ = [
    "BinaryHeap",
    "Comparator",
    "Reverse",
    "natural_order",
    "reverse_order",
]
