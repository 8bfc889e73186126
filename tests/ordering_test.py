import os
import sys

# Ensure we can import from the project
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from binheap.datastructures.ordering import Reverse, natural_order, reverse_order


def test_natural_order_is_three_way():
    assert natural_order(1, 2) < 0
    assert natural_order(2, 1) > 0
    assert natural_order(2, 2) == 0
    assert natural_order("a", "b") < 0


def test_reverse_order_inverts_comparator():
    cmp = reverse_order()
    assert cmp(1, 2) > 0
    assert cmp(2, 1) < 0
    assert cmp(3, 3) == 0


def test_reverse_order_wraps_custom_comparator():
    by_len = lambda a, b: len(a) - len(b)
    cmp = reverse_order(by_len)
    assert cmp("aaa", "b") < 0
    assert cmp("b", "aaa") > 0


def test_reverse_wrapper_inverts_ordering():
    assert Reverse(5) < Reverse(3)
    assert Reverse(3) > Reverse(5)
    assert Reverse(4) <= Reverse(4)
    assert Reverse(4) == Reverse(4)
    assert Reverse(4) != Reverse(5)


def test_reverse_wrapper_sorts_descending():
    values = [Reverse(v) for v in [3, 11, 5, 8]]
    assert [r.value for r in sorted(values)] == [11, 8, 5, 3]


def test_reverse_wrapper_is_hashable_and_readable():
    assert len({Reverse(1), Reverse(1), Reverse(2)}) == 2
    assert repr(Reverse(7)) == "Reverse(7)"
