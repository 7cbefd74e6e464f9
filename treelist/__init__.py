"""treelist: a sorted, index-addressable list backed by a rank-augmented AVL tree.

Quick Start
-----------
>>> from treelist import TreeList
>>>
>>> values = TreeList([5, 3, 8, 1])
>>> values.add(4)
True
>>> values.get(0), values[2], len(values)
(1, 4, 5)
>>> values.remove(3)
True
>>> list(values)
[1, 4, 5, 8]

Classes
-------
TreeList : Sorted list container permitting duplicates and positional access.
InOrderIterator : Lazy ascending cursor over a tree list.
RuntimeConfig : Environment-derived settings (log level, validation, seed).
"""

from importlib.metadata import version as _pkg_version

try:
    __version__ = _pkg_version("treelist")
except Exception:  # pragma: no cover - best effort during local development
    __version__ = "0.0.1"

from .api import TreeList
from .algo import InOrderIterator, TreeStats
from .config import RuntimeConfig, reset_runtime_config_cache, runtime_config
from .exceptions import ElementTypeError, InvariantError, PositionError, TreeListError
from .logging import get_logger

__all__ = [
    "__version__",
    "TreeList",
    "InOrderIterator",
    "TreeStats",
    "RuntimeConfig",
    "runtime_config",
    "reset_runtime_config_cache",
    "get_logger",
    "TreeListError",
    "PositionError",
    "ElementTypeError",
    "InvariantError",
]
