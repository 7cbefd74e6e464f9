from __future__ import annotations

from hypothesis import given, settings, strategies as st

from treelist import TreeList
from treelist.algo import iter_nodes

_values = st.integers(min_value=-50, max_value=50)
_operations = st.lists(st.tuples(st.sampled_from(["add", "remove"]), _values), max_size=120)


def _left_count(node) -> int:
    return sum(1 for _ in iter_nodes(node.left))


def _apply(operations) -> tuple[TreeList[int], list[int]]:
    tree: TreeList[int] = TreeList()
    reference: list[int] = []
    for action, value in operations:
        if action == "add":
            tree.add(value)
            reference.append(value)
        else:
            expected = value in reference
            if expected:
                reference.remove(value)
            assert tree.remove(value) is expected
    return tree, sorted(reference)


@settings(max_examples=150)
@given(operations=_operations)
def test_invariants_hold_after_any_operation_sequence(operations) -> None:
    tree, reference = _apply(operations)
    stats = tree.validate()
    assert stats.size == len(reference)
    assert list(tree) == reference


@settings(max_examples=100)
@given(operations=_operations)
def test_rank_counts_left_subtree(operations) -> None:
    tree, _ = _apply(operations)
    for node in iter_nodes(tree._root):
        assert node.rank == _left_count(node)


@settings(max_examples=100)
@given(operations=_operations)
def test_size_matches_full_iteration(operations) -> None:
    tree, _ = _apply(operations)
    assert tree.size() == sum(1 for _ in tree)


@settings(max_examples=100)
@given(values=st.lists(_values, max_size=100))
def test_positional_lookup_matches_iteration(values) -> None:
    tree = TreeList(values)
    ordered = list(tree)
    assert [tree.get(i) for i in range(len(tree))] == ordered
    assert ordered == sorted(values)


@settings(max_examples=100)
@given(values=st.lists(_values, max_size=80), extra=_values)
def test_insert_then_remove_restores_multiset(values, extra) -> None:
    tree = TreeList(values)
    before = list(tree)
    tree.add(extra)
    assert tree.remove(extra) is True
    assert list(tree) == before
    assert len(tree) == len(before)
    tree.validate()


@settings(max_examples=100)
@given(values=st.lists(st.integers(min_value=0, max_value=20), max_size=60), missing=st.integers(min_value=21, max_value=40))
def test_removing_absent_value_is_a_no_op(values, missing) -> None:
    tree = TreeList(values)
    before = list(tree)
    assert tree.remove(missing) is False
    assert list(tree) == before
    assert len(tree) == len(values)


@settings(max_examples=100)
@given(values=st.lists(_values, max_size=80), probe=_values)
def test_contains_agrees_with_reference(values, probe) -> None:
    tree = TreeList(values)
    assert tree.contains(probe) == (probe in values)
