from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')
E = TypeVar('E')
R = TypeVar('R')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
KeyComparer = Callable[[K, K], bool]
ResultSelector = Callable[[K, List[E]], R]
Action = Callable[[T], Any]


class Grouping(Generic[K, E]):
    """a key plus the ordered, non-empty run of elements that produced it"""

    __slots__ = ('_key', '_elements')

    def __init__(self, key: K, elements: Iterable[E]):
        self._key = key
        self._elements = tuple(elements)

    @classmethod
    def from_key_elements(cls, key: K, elements: Iterable[E]) -> 'Grouping[K, E]':
        return cls(key, elements)

    @property
    def key(self) -> K: return self._key

    @property
    def elements(self) -> Tuple[E, ...]: return self._elements

    def __iter__(self) -> Iterator[E]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __getitem__(self, index):
        return self._elements[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grouping):
            return NotImplemented
        return self._key == other._key and self._elements == other._elements

    def __hash__(self) -> int:
        return hash((self._key, self._elements))

    def __repr__(self) -> str:
        return f"Grouping(key={self._key!r}, elements={list(self._elements)!r})"
