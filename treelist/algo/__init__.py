"""Recursive kernels for insertion, removal, lookup, traversal and validation."""

from .delete import remove
from .insert import insert
from .lookup import contains, get_node
from .traverse import InOrderIterator, iter_nodes
from .validate import TreeStats, check_invariants, height

__all__ = [
    "insert",
    "remove",
    "contains",
    "get_node",
    "InOrderIterator",
    "iter_nodes",
    "TreeStats",
    "check_invariants",
    "height",
]
