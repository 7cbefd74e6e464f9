from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Tuple

from treelist.core.node import EMPTY, Balance, Node, Tree
from treelist.exceptions import InvariantError


@dataclass(frozen=True)
class TreeStats:
    """Structural summary of a tree computed by a full walk."""

    size: int
    height: int

    @property
    def height_bound(self) -> float:
        """Worst-case AVL height for ``size`` nodes, ``1.4405 * log2(size + 2) - 0.3277``."""

        return 1.4405 * math.log2(self.size + 2) - 0.3277


def height(node: Tree) -> int:
    if node is EMPTY:
        return 0
    return 1 + max(height(node.left), height(node.right))


def _expected_balance(left_height: int, right_height: int) -> Balance:
    if right_height > left_height:
        return Balance.RIGHT
    if left_height > right_height:
        return Balance.LEFT
    return Balance.SAME


def _check(node: Tree, lower: Any, upper: Any, bounded: Tuple[bool, bool]) -> Tuple[int, int]:
    """Return ``(size, height)`` of ``node`` after checking its subtree."""

    if node is EMPTY:
        return 0, 0
    has_lower, has_upper = bounded
    if has_lower and node.value < lower:
        raise InvariantError(f"{node!r} sorts before its in-order predecessor bound {lower!r}")
    if has_upper and upper < node.value:
        raise InvariantError(f"{node!r} sorts after its in-order successor bound {upper!r}")
    left_size, left_height = _check(node.left, lower, node.value, (has_lower, True))
    right_size, right_height = _check(node.right, node.value, upper, (True, has_upper))
    if abs(left_height - right_height) > 1:
        raise InvariantError(
            f"{node!r} is unbalanced: left height {left_height}, right height {right_height}"
        )
    expected = _expected_balance(left_height, right_height)
    if node.balance is not expected:
        raise InvariantError(f"{node!r} carries tag {node.balance.name}, expected {expected.name}")
    if node.rank != left_size:
        raise InvariantError(f"{node!r} has rank {node.rank} but {left_size} nodes on its left")
    return left_size + right_size + 1, max(left_height, right_height) + 1


def check_invariants(root: Tree, size: int | None = None) -> TreeStats:
    """Verify ordering, AVL balance, balance tags and ranks below ``root``.

    ``size``, when given, must match the number of reachable nodes. Raises
    :class:`InvariantError` on the first violation found.
    """

    counted, tree_height = _check(root, None, None, (False, False))
    if size is not None and counted != size:
        raise InvariantError(f"recorded size {size} but {counted} nodes are reachable")
    return TreeStats(size=counted, height=tree_height)


__all__ = ["TreeStats", "check_invariants", "height"]
