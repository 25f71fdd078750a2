from __future__ import annotations
import logging
import typing
from ..types import *
from .grouping import _close_source

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

logger = logging.getLogger(__name__)


def do(source: Iterable[T], action: Action[T]) -> 'Enumerable[T]':
    """
    passes `source` through unchanged, calling `action(item)` for each element
    at the moment it is pulled. lazy: nothing runs before the first element is requested.
    example: do(records, print).where(...)
    """
    from ..enumerable import Enumerable
    if source is None:
        raise ValueError("source must not be None")
    if action is None:
        raise ValueError("action must not be None")
    if not callable(action):
        raise TypeError(f"action must be callable, got {type(action).__name__}")

    def side_effect_data():
        iterator = iter(source)
        seen = 0
        failed = False
        try:
            for item in iterator:
                action(item)
                seen += 1
                yield item
        except BaseException:
            failed = True
            raise
        finally:
            _close_source(iterator, failed)
            logger.debug(f"do: passed through {seen} elements")

    return Enumerable(side_effect_data)


class UtilityAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def do(self, action: Action[T]) -> 'Enumerable[T]':
        """lazy side-effect passthrough; see the module-level `do`"""
        return do(self._enumerable, action)

    def for_each(self, action: Action[T]) -> 'Enumerable[T]':
        """
        performs the specified action on each element of a sequence for side-effects.
        this is an EAGER operation that executes immediately.
        returns the original enumerable to allow chaining.
        """
        for item in self._enumerable:
            action(item)
        return self._enumerable

    def run_length_encode(self) -> 'Enumerable[Tuple[T, int]]':
        """
        consecutive equal elements are collapsed into (element, count) tuples.
        """
        from .grouping import group_consecutives_by
        return group_consecutives_by(self._enumerable, lambda item: item,
                                     result_selector=lambda key, items: (key, len(items)))

    def pipe(self, func: Callable[..., U], *args, **kwargs) -> U:
        """
        pipes the enumerable object into an external function. enables custom, chainable operations.
        example: .pipe(my_custom_plot_function, title='my data')
        """
        return func(self._enumerable, *args, **kwargs)
