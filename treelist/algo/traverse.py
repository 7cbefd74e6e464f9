from __future__ import annotations

from typing import Any, Generic, Iterator, List, TypeVar

from treelist.core.node import EMPTY, Node, Tree

T = TypeVar("T")


class InOrderIterator(Generic[T]):
    """Lazy ascending walk over a tree using an explicit stack.

    The stack holds ancestors whose value and right subtree are still pending.
    Mutating the tree while an iterator over it is live is not supported: the
    iterator neither detects it nor recovers from it.
    """

    __slots__ = ("_stack", "_current")

    def __init__(self, root: Tree) -> None:
        self._stack: List[Node] = []
        self._current: Tree = root

    def __iter__(self) -> Iterator[T]:
        return self

    def has_next(self) -> bool:
        return self._current is not EMPTY or bool(self._stack)

    def __next__(self) -> T:
        if not self.has_next():
            raise StopIteration
        while self._current is not EMPTY:
            self._stack.append(self._current)
            self._current = self._current.left
        node = self._stack.pop()
        self._current = node.right
        return node.value

    def next(self) -> T:
        return self.__next__()

    def __length_hint__(self) -> int:
        # Lower bound: every pending ancestor still has its own value to yield.
        return len(self._stack) + (0 if self._current is EMPTY else 1)


def iter_nodes(root: Tree) -> Iterator[Node]:
    """Yield nodes in order; used by validation and structural helpers."""

    stack: List[Node] = []
    current = root
    while current is not EMPTY or stack:
        while current is not EMPTY:
            stack.append(current)
            current = current.left
        node = stack.pop()
        yield node
        current = node.right


__all__ = ["InOrderIterator", "iter_nodes"]
