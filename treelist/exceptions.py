"""Error taxonomy for tree lists."""

from __future__ import annotations


class TreeListError(Exception):
    """Base class for every error raised by ``treelist``."""


class PositionError(TreeListError, IndexError):
    """Raised when a sorted position lies outside ``[0, size)``."""

    def __init__(self, pos: int, size: int) -> None:
        super().__init__(f"position {pos} out of range for tree list of size {size}")
        self.pos = pos
        self.size = size


class ElementTypeError(TreeListError, TypeError):
    """Raised when a value cannot be ordered against the stored elements."""


class InvariantError(TreeListError, AssertionError):
    """Raised by validation when a structural invariant does not hold."""
