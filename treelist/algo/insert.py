from __future__ import annotations

from typing import Any, Tuple

from treelist.core.node import EMPTY, Balance, Node, Tree
from treelist.core.rotations import rotate_left, rotate_left_right, rotate_right, rotate_right_left


def _left_grew(node: Node) -> Tuple[Node, bool]:
    if node.balance is Balance.SAME:
        node.balance = Balance.LEFT
        return node, True
    if node.balance is Balance.RIGHT:
        node.balance = Balance.SAME
        return node, False
    if node.left.balance is Balance.RIGHT:
        return rotate_left_right(node), False
    return rotate_right(node), False


def _right_grew(node: Node) -> Tuple[Node, bool]:
    if node.balance is Balance.SAME:
        node.balance = Balance.RIGHT
        return node, True
    if node.balance is Balance.LEFT:
        node.balance = Balance.SAME
        return node, False
    if node.right.balance is Balance.LEFT:
        return rotate_right_left(node), False
    return rotate_left(node), False


def insert(node: Tree, value: Any) -> Tuple[Node, bool]:
    """Insert ``value`` below ``node`` and return ``(new_root, grew)``.

    ``grew`` reports whether the subtree height increased, which tells the
    caller whether its own balance tag still needs adjusting. Values comparing
    equal to a node are placed in its left subtree.
    """

    if node is EMPTY:
        return Node(value), True
    if node.value < value:
        node.right, grew = insert(node.right, value)
        return _right_grew(node) if grew else (node, False)
    node.left, grew = insert(node.left, value)
    node.rank += 1
    return _left_grew(node) if grew else (node, False)


__all__ = ["insert"]
