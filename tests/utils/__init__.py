"""Shared test utilities for treelist."""

from .trees import Keyed, build_node, in_order_nodes

__all__ = ["Keyed", "build_node", "in_order_nodes"]
