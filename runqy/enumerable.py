from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.grouping import GroupingAccessor
from .extensions.utility import UtilityAccessor
from .extensions.terminal import TerminalAccessor

# --- abstract base class ---

class IEnumerable(ABC, Generic[T]):
    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        """start a fresh traversal of the sequence"""
        pass

# --- base enumerable implementation ---

class _BaseEnumerable(IEnumerable[T]):
    def __init__(self, iterator_func: Callable[[], Iterable[T]]):
        """init with a function that returns a fresh iterable when called"""
        self._iterator_func = iterator_func

    def __iter__(self) -> Iterator[T]:
        # no caching: every traversal asks the factory again
        return iter(self._iterator_func())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._iterator_func!r})"

# --- main enumerable class ---

class Enumerable(
    _BaseEnumerable[T],
    _CoreOperations[T]
):
    """a lazy, restartable, linq-inspired enumerable for python iterables."""
    def __init__(self, iterator_func: Callable[[], Iterable[T]]):
        super().__init__(iterator_func)
        # --- initialize accessors ---
        self.group = GroupingAccessor(self)
        self.util = UtilityAccessor(self)
        self.to = TerminalAccessor(self)
