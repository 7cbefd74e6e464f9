"""Public sorted-list container backed by a rank-augmented AVL tree."""

from __future__ import annotations

from typing import Any, Generic, Iterable, List, Optional, TypeVar

import numpy as np

from treelist import config as tl_config
from treelist.algo import InOrderIterator, TreeStats, check_invariants, contains, get_node, insert, remove
from treelist.algo.validate import height as _subtree_height
from treelist.core.node import EMPTY, Tree, copy_subtree
from treelist.exceptions import ElementTypeError, PositionError
from treelist.logging import get_logger

T = TypeVar("T")

LOGGER = get_logger("api")


class TreeList(Generic[T]):
    """A sorted list that permits duplicates and supports positional access.

    Elements are kept in ascending order under ``<``. ``add``, ``remove``,
    ``contains`` and ``get`` run in time proportional to the tree height, which
    is logarithmic in the number of elements.

    Iterators returned by :meth:`__iter__` are invalidated by any mutation of
    the list; continuing to use one afterwards gives unspecified results.
    Instances are not safe for concurrent mutation.
    """

    __slots__ = ("_root", "_size")

    def __init__(self, iterable: Optional[Iterable[T]] = None) -> None:
        self._root: Tree = EMPTY
        self._size = 0
        if iterable is not None:
            self.add_all(iterable)

    # ------------------------------------------------------------------
    # Core operations

    def add(self, value: T) -> bool:
        """Insert ``value`` at its sorted position. Always returns ``True``."""

        self._check_comparable(value)
        self._root, _ = insert(self._root, value)
        self._size += 1
        self._after_mutation()
        return True

    def remove(self, value: T) -> bool:
        """Remove one element equal to ``value``; ``False`` if none exists."""

        if self._root is EMPTY:
            return False
        self._check_comparable(value)
        self._root, _, removed = remove(self._root, value)
        if not removed:
            LOGGER.debug("remove(%r): no equal element stored", value)
            return False
        self._size -= 1
        self._after_mutation()
        return True

    def get(self, pos: int) -> T:
        """Return the element at ascending position ``pos``."""

        if pos < 0 or pos >= self._size:
            raise PositionError(pos, self._size)
        return get_node(self._root, pos).value

    def contains(self, value: Any) -> bool:
        if self._root is EMPTY:
            return False
        self._check_comparable(value)
        return contains(self._root, value)

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        LOGGER.debug("Clearing tree list of %d elements", self._size)
        self._root = EMPTY
        self._size = 0

    # ------------------------------------------------------------------
    # Python protocols

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def __getitem__(self, pos: int) -> T:
        if not isinstance(pos, int):
            raise TypeError(f"tree list positions must be integers, not {type(pos).__name__}")
        return self.get(pos)

    def __iter__(self) -> InOrderIterator[T]:
        return InOrderIterator(self._root)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TreeList):
            return NotImplemented
        if self._size != other._size:
            return False
        return all(mine == theirs for mine, theirs in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return "[" + ", ".join(repr(value) for value in self) + "]"

    __str__ = __repr__

    # ------------------------------------------------------------------
    # Collection helpers

    def add_all(self, values: Iterable[T]) -> bool:
        """Insert every element of ``values``; ``True`` if any was added."""

        added = 0
        for value in values:
            self.add(value)
            added += 1
        LOGGER.debug("add_all inserted %d elements (size now %d)", added, self._size)
        return added > 0

    def contains_all(self, values: Iterable[Any]) -> bool:
        return all(self.contains(value) for value in values)

    def to_list(self) -> List[T]:
        return list(self)

    def to_numpy(self, dtype: Any = None) -> np.ndarray:
        """Export the elements in ascending order as a 1-D NumPy array."""

        if dtype is None:
            return np.asarray(self.to_list())
        return np.fromiter(self, dtype=dtype, count=self._size)

    def copy(self) -> "TreeList[T]":
        """Return a structural copy: same shape, new nodes, shared elements."""

        clone: TreeList[T] = TreeList()
        clone._root = copy_subtree(self._root)
        clone._size = self._size
        LOGGER.debug("Copied tree list of %d elements", self._size)
        return clone

    __copy__ = copy

    # ------------------------------------------------------------------
    # Diagnostics

    @property
    def height(self) -> int:
        return _subtree_height(self._root)

    def stats(self) -> TreeStats:
        return self.validate()

    def validate(self) -> TreeStats:
        """Check every structural invariant; raises ``InvariantError`` if broken."""

        return check_invariants(self._root, self._size)

    # ------------------------------------------------------------------
    # Internals

    def _check_comparable(self, value: Any) -> None:
        # An empty list has no stored type yet; the value must still order against itself.
        stored = value if self._root is EMPTY else self._root.value
        try:
            _ = value < stored
            _ = stored < value
        except TypeError as exc:
            raise ElementTypeError(
                f"{type(value).__name__} value {value!r} cannot be ordered against "
                f"stored {type(stored).__name__} elements"
            ) from exc

    def _after_mutation(self) -> None:
        if tl_config.runtime_config().validate:
            self.validate()


__all__ = ["TreeList"]
