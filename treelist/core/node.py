"""Node representation for the rank-augmented AVL tree."""

from __future__ import annotations

import enum
from typing import Any, Union


class Balance(enum.Enum):
    """Sign of ``height(right) - height(left)`` for a node."""

    LEFT = -1
    SAME = 0
    RIGHT = 1


class Empty:
    """Marker for an absent subtree.

    A single instance, :data:`EMPTY`, is shared by every tree. It carries the
    read-only ``rank`` and ``balance`` a leaf child would report, so rebalancing
    code can inspect a child's tag without checking for its presence first.
    """

    __slots__ = ()

    rank = 0
    balance = Balance.SAME

    def __repr__(self) -> str:
        return "EMPTY"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "Empty":
        return self

    def __deepcopy__(self, memo: dict) -> "Empty":
        return self


EMPTY = Empty()


class Node:
    """A value plus exclusive ownership of its two subtrees.

    ``rank`` is the number of nodes in the left subtree, which makes it the
    node's in-order position relative to the subtree it roots.
    """

    __slots__ = ("value", "left", "right", "rank", "balance")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.left: Tree = EMPTY
        self.right: Tree = EMPTY
        self.rank = 0
        self.balance = Balance.SAME

    def __repr__(self) -> str:
        return f"Node(value={self.value!r}, rank={self.rank}, balance={self.balance.name})"


Tree = Union[Node, Empty]


def copy_subtree(node: Tree) -> Tree:
    """Return a node-for-node copy of ``node`` with the same shape and tags."""

    if node is EMPTY:
        return EMPTY
    clone = Node(node.value)
    clone.rank = node.rank
    clone.balance = node.balance
    clone.left = copy_subtree(node.left)
    clone.right = copy_subtree(node.right)
    return clone


__all__ = ["Balance", "Empty", "EMPTY", "Node", "Tree", "copy_subtree"]
