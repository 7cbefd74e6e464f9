from __future__ import annotations

from typing import Any, Tuple

from treelist.core.node import EMPTY, Balance, Node, Tree
from treelist.core.rotations import rotate_left, rotate_left_right, rotate_right, rotate_right_left

from .lookup import get_node


def _left_shrank(node: Node) -> Tuple[Node, bool]:
    if node.balance is Balance.LEFT:
        node.balance = Balance.SAME
        return node, True
    if node.balance is Balance.SAME:
        node.balance = Balance.RIGHT
        return node, False
    sibling = node.right.balance
    if sibling is Balance.RIGHT:
        return rotate_left(node), True
    if sibling is Balance.SAME:
        return rotate_left(node, partial=True), False
    return rotate_right_left(node), True


def _right_shrank(node: Node) -> Tuple[Node, bool]:
    if node.balance is Balance.RIGHT:
        node.balance = Balance.SAME
        return node, True
    if node.balance is Balance.SAME:
        node.balance = Balance.LEFT
        return node, False
    sibling = node.left.balance
    if sibling is Balance.LEFT:
        return rotate_right(node), True
    if sibling is Balance.SAME:
        return rotate_right(node, partial=True), False
    return rotate_left_right(node), True


def _remove_leftmost(node: Node) -> Tuple[Tree, bool]:
    # The leftmost node has no left child, so it is spliced out by its right.
    if node.left is EMPTY:
        return node.right, True
    node.left, shrank = _remove_leftmost(node.left)
    node.rank -= 1
    return _left_shrank(node) if shrank else (node, False)


def _unlink(node: Node) -> Tuple[Tree, bool]:
    if node.left is EMPTY:
        return node.right, True
    if node.right is EMPTY:
        return node.left, True
    # Two children: keep this node in place and take over the successor's value.
    node.value = get_node(node.right, 0).value
    node.right, shrank = _remove_leftmost(node.right)
    return _right_shrank(node) if shrank else (node, False)


def remove(node: Tree, value: Any) -> Tuple[Tree, bool, bool]:
    """Remove one element equal to ``value`` below ``node``.

    Returns ``(new_root, shrank, removed)``. When nothing compares equal the
    subtree is returned untouched with ``removed`` false.
    """

    if node is EMPTY:
        return node, False, False
    if value < node.value:
        node.left, shrank, removed = remove(node.left, value)
        if removed:
            node.rank -= 1
        if shrank:
            node, shrank = _left_shrank(node)
        return node, shrank, removed
    if node.value < value:
        node.right, shrank, removed = remove(node.right, value)
        if shrank:
            node, shrank = _right_shrank(node)
        return node, shrank, removed
    node, shrank = _unlink(node)
    return node, shrank, True


__all__ = ["remove"]
