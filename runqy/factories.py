import typing
from itertools import count as itertools_count, repeat as itertools_repeat
from .types import *

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable

def from_iterable(data: Iterable[T]) -> 'Enumerable[T]':
    """
    wrap an iterable without copying it. each traversal re-iterates `data`,
    so a one-shot iterator (e.g. a generator object) is exhausted after the first.
    """
    from .enumerable import Enumerable
    if data is None:
        raise ValueError("data must not be None")
    return Enumerable(lambda: data)

def from_range(start: int, count: Optional[int] = None) -> 'Enumerable[int]':
    """create enumerable from range; unbounded when count is None"""
    from .enumerable import Enumerable
    if count is None:
        return Enumerable(lambda: itertools_count(start))
    return Enumerable(lambda: range(start, start + count))

def repeat(item: T, count: Optional[int] = None) -> 'Enumerable[T]':
    """create enumerable with repeated item; unbounded when count is None"""
    from .enumerable import Enumerable
    if count is None:
        return Enumerable(lambda: itertools_repeat(item))
    return Enumerable(lambda: itertools_repeat(item, count))

def empty() -> 'Enumerable[Any]':
    """create empty enumerable"""
    from .enumerable import Enumerable
    return Enumerable(lambda: ())

def generate(generator_func: Callable[[], T], count: Optional[int] = None) -> 'Enumerable[T]':
    """generate sequence by calling a function on demand"""
    from .enumerable import Enumerable
    def generate_items():
        produced = 0
        while count is None or produced < count:
            yield generator_func()
            produced += 1
    return Enumerable(generate_items)

# --- aliases ---
P = from_iterable
p = from_iterable
