from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

_MISSING = object()

class TerminalAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def list(self) -> List[T]:
        """materialize to list"""
        return list(self._enumerable)

    def tuple(self) -> Tuple[T, ...]:
        """materialize to tuple"""
        return tuple(self._enumerable)

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(list(self._enumerable))

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(list(self._enumerable))

    def df(self) -> pd.DataFrame:
        """
        convert to pandas dataframe. handy after a result_selector that builds
        dicts, e.g. one row per consecutive run.
        """
        return pd.DataFrame(list(self._enumerable))

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        if predicate is None: return sum(1 for _ in self._enumerable)
        return sum(1 for x in self._enumerable if predicate(x))

    def any(self, predicate: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition, stopping at the first match"""
        if predicate is None:
            return next(iter(self._enumerable), _MISSING) is not _MISSING
        return any(predicate(x) for x in self._enumerable)

    def all(self, predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition"""
        return all(predicate(x) for x in self._enumerable)

    def first(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get first element"""
        if predicate is None:
            item = next(iter(self._enumerable), _MISSING)
            if item is _MISSING: raise ValueError("sequence contains no elements")
            return item
        for item in self._enumerable:
            if predicate(item): return item
        raise ValueError("no element satisfies the condition")

    def first_or_default(self, predicate: Optional[Predicate[T]] = None,
                         default: Optional[T] = None) -> Optional[T]:
        """get first element or default"""
        try: return self.first(predicate)
        except ValueError: return default
