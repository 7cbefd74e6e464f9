from __future__ import annotations

from typing import Any

from treelist.core.node import EMPTY, Node, Tree


def get_node(node: Tree, pos: int) -> Node:
    """Return the node at in-order position ``pos`` of the subtree ``node``.

    The caller guarantees ``0 <= pos < len(subtree)``.
    """

    if pos == node.rank:
        return node
    if pos < node.rank:
        return get_node(node.left, pos)
    return get_node(node.right, pos - node.rank - 1)


def contains(node: Tree, value: Any) -> bool:
    if node is EMPTY:
        return False
    if value < node.value:
        return contains(node.left, value)
    if node.value < value:
        return contains(node.right, value)
    return True


__all__ = ["contains", "get_node"]
