"""AVL rotation primitives.

Each rotation takes the root of the unbalanced subtree and returns the new
root. Ranks are patched in place: only the node that gains or loses a left
subtree needs its rank corrected. Balance tags of the rotated nodes are reset
to ``SAME`` unless noted otherwise; callers decide whether the subtree height
changed.
"""

from __future__ import annotations

from .node import Balance, Node


def rotate_right(parent: Node, *, partial: bool = False) -> Node:
    """Lift ``parent.left`` above ``parent``.

    With ``partial`` set the rotation leaves the subtree one level taller on
    the new root's right. This happens only when a deletion shrank the right
    side while the left child was balanced.
    """

    child = parent.left
    parent.left = child.right
    child.right = parent
    if partial:
        parent.balance = Balance.LEFT
        child.balance = Balance.RIGHT
    else:
        parent.balance = Balance.SAME
        child.balance = Balance.SAME
    parent.rank -= child.rank + 1
    return child


def rotate_left(parent: Node, *, partial: bool = False) -> Node:
    """Lift ``parent.right`` above ``parent``; mirror of :func:`rotate_right`."""

    child = parent.right
    parent.right = child.left
    child.left = parent
    if partial:
        parent.balance = Balance.RIGHT
        child.balance = Balance.LEFT
    else:
        parent.balance = Balance.SAME
        child.balance = Balance.SAME
    child.rank += parent.rank + 1
    return child


def _patch_double(root: Node, grandchild_balance: Balance) -> Node:
    if grandchild_balance is Balance.RIGHT:
        root.left.balance = Balance.LEFT
    elif grandchild_balance is Balance.LEFT:
        root.right.balance = Balance.RIGHT
    return root


def rotate_left_right(parent: Node) -> Node:
    """Double right rotation: rotate ``parent.left`` left, then ``parent`` right."""

    grandchild_balance = parent.left.right.balance
    parent.left = rotate_left(parent.left)
    return _patch_double(rotate_right(parent), grandchild_balance)


def rotate_right_left(parent: Node) -> Node:
    """Double left rotation: rotate ``parent.right`` right, then ``parent`` left."""

    grandchild_balance = parent.right.left.balance
    parent.right = rotate_right(parent.right)
    return _patch_double(rotate_left(parent), grandchild_balance)


__all__ = ["rotate_left", "rotate_right", "rotate_left_right", "rotate_right_left"]
