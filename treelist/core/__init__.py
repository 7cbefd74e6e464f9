"""Core data structures and rotation primitives for the tree list."""

from .node import EMPTY, Balance, Empty, Node, Tree, copy_subtree
from .rotations import rotate_left, rotate_left_right, rotate_right, rotate_right_left

__all__ = [
    "EMPTY",
    "Balance",
    "Empty",
    "Node",
    "Tree",
    "copy_subtree",
    "rotate_left",
    "rotate_right",
    "rotate_left_right",
    "rotate_right_left",
]
