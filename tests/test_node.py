import copy

import pytest

from treelist.core.node import EMPTY, Balance, Empty, Node, copy_subtree
from tests.utils import build_node, in_order_nodes


def test_empty_marker_reads_like_a_balanced_leaf():
    assert EMPTY.rank == 0
    assert EMPTY.balance is Balance.SAME
    assert not EMPTY


def test_empty_marker_is_immutable_and_shared():
    with pytest.raises(AttributeError):
        EMPTY.rank = 3
    with pytest.raises(AttributeError):
        EMPTY.left = Node(1)
    assert copy.deepcopy(EMPTY) is EMPTY
    assert copy.copy(EMPTY) is EMPTY
    assert isinstance(EMPTY, Empty)


def test_new_node_has_empty_children():
    node = Node("x")
    assert node.left is EMPTY
    assert node.right is EMPTY
    assert node.rank == 0
    assert node.balance is Balance.SAME


def test_copy_subtree_preserves_shape_with_fresh_nodes():
    root = build_node(2, build_node(1), build_node(4, build_node(3)), balance=Balance.RIGHT)
    root.right.balance = Balance.LEFT

    clone = copy_subtree(root)

    original = in_order_nodes(root)
    copied = in_order_nodes(clone)
    assert [n.value for n in copied] == [1, 2, 3, 4]
    assert [n.rank for n in copied] == [n.rank for n in original]
    assert [n.balance for n in copied] == [n.balance for n in original]
    assert all(a is not b for a, b in zip(original, copied))
    assert clone.right.left.right is EMPTY
