import pytest

from treelist import InOrderIterator, TreeList
from treelist.core.node import EMPTY


def test_iterator_walks_in_ascending_order():
    tree = TreeList([5, 3, 8, 1, 4, 7, 9, 2, 6, 0])
    it = iter(tree)
    seen = []
    while it.has_next():
        seen.append(it.next())
    assert seen == list(range(10))


def test_iterator_raises_stop_iteration_when_exhausted():
    it = iter(TreeList([1]))
    assert next(it) == 1
    assert not it.has_next()
    with pytest.raises(StopIteration):
        next(it)
    with pytest.raises(StopIteration):
        it.next()


def test_iterator_over_empty_tree():
    it = InOrderIterator(EMPTY)
    assert not it.has_next()
    assert list(it) == []


def test_each_iterator_is_independent_and_single_pass():
    tree = TreeList([2, 1, 3])
    first = iter(tree)
    assert next(first) == 1
    second = iter(tree)
    assert list(second) == [1, 2, 3]
    assert list(first) == [2, 3]
    assert list(first) == []


def test_iterator_yields_duplicates():
    tree = TreeList([2, 1, 2, 3, 2])
    assert list(tree) == [1, 2, 2, 2, 3]


def test_length_hint_is_a_lower_bound():
    tree = TreeList(range(31))
    it = iter(tree)
    assert 0 < it.__length_hint__() <= 31
    next(it)
    assert it.__length_hint__() <= 30
