from .heap import BinaryHeap
from .ordering import Comparator, Reverse, natural_order, reverse_order

__all__ = [
    "BinaryHeap",
    "Comparator",
    "Reverse",
    "natural_order",
    "reverse_order",
]
