from __future__ import annotations
import logging
import operator
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

logger = logging.getLogger(__name__)


def _identity(value):
    return value


def group_consecutives_by(source: Iterable[T],
                          key_selector: KeySelector[T, K],
                          element_selector: Optional[Selector[T, E]] = None,
                          result_selector: Optional[ResultSelector[K, E, R]] = None,
                          key_comparer: Optional[KeyComparer[K]] = None) -> 'Enumerable[R]':
    """
    groups consecutive elements of `source` whose keys compare equal.

    each run of adjacent elements with equal keys becomes one result, built by
    `result_selector(key, elements)` (a `Grouping` by default). the key of a run is
    the key of its first element. elements are projected through `element_selector`
    (identity by default) and keys are compared with `key_comparer(next_key, run_key)`
    (`==` by default).

    the returned enumerable is lazy and restartable: nothing is evaluated until it is
    iterated, and each traversal re-iterates `source` from the start. selectors are
    called exactly once per element, in source order; errors they raise surface when
    the consumer pulls the affected group.
    """
    from ..enumerable import Enumerable
    # reject bad arguments now rather than on first iteration
    if source is None:
        raise ValueError("source must not be None")
    if key_selector is None:
        raise ValueError("key_selector must not be None")
    for name, func in (('key_selector', key_selector), ('element_selector', element_selector),
                       ('result_selector', result_selector), ('key_comparer', key_comparer)):
        if func is not None and not callable(func):
            raise TypeError(f"{name} must be callable, got {type(func).__name__}")

    elem_sel = element_selector if element_selector is not None else _identity
    res_sel = result_selector if result_selector is not None else Grouping.from_key_elements
    comparer = key_comparer if key_comparer is not None else operator.eq

    return Enumerable(lambda: _consecutive_runs(source, key_selector, elem_sel, res_sel, comparer))


def _close_source(iterator, error_in_flight: bool = False):
    close = getattr(iterator, "close", None)
    if not callable(close):
        return
    if not error_in_flight:
        close()
        return
    # an error is already propagating: a failing close must not replace it
    try:
        close()
    except Exception:
        logger.warning("closing the source failed while another error was propagating", exc_info=True)


def _consecutive_runs(source, key_selector, element_selector, result_selector, key_comparer):
    iterator = iter(source)
    emitted = 0
    finished = False
    failed = False
    try:
        try:
            first = next(iterator)
        except StopIteration:
            finished = True
            return

        run_key = key_selector(first)
        run = [element_selector(first)]

        for item in iterator:
            next_key = key_selector(item)
            if key_comparer(next_key, run_key):
                run.append(element_selector(item))
            else:
                result = result_selector(run_key, run)
                emitted += 1
                yield result
                # a fresh list per run: the previous one now belongs to its result
                run_key, run = next_key, [element_selector(item)]

        result = result_selector(run_key, run)
        emitted += 1
        finished = True
        yield result
    except BaseException:
        failed = True
        raise
    finally:
        # release the source cursor however the traversal ends
        _close_source(iterator, failed)
        if finished:
            logger.debug(f"consecutive grouping finished: {emitted} groups emitted")
        else:
            logger.debug(f"consecutive grouping stopped early after {emitted} groups")


class GroupingAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def consecutives_by(self, key_selector: KeySelector[T, K],
                        element_selector: Optional[Selector[T, E]] = None,
                        result_selector: Optional[ResultSelector[K, E, R]] = None,
                        key_comparer: Optional[KeyComparer[K]] = None) -> 'Enumerable[R]':
        """group consecutive elements with equal keys; see `group_consecutives_by`"""
        return group_consecutives_by(self._enumerable, key_selector,
                                     element_selector=element_selector,
                                     result_selector=result_selector,
                                     key_comparer=key_comparer)

    def batch_by(self, key_selector: KeySelector[T, K],
                 key_comparer: Optional[KeyComparer[K]] = None) -> 'Enumerable[List[T]]':
        """batch consecutive elements with same key into plain lists"""
        return self.consecutives_by(key_selector,
                                    result_selector=lambda key, items: items,
                                    key_comparer=key_comparer)

    def pairwise(self) -> 'Enumerable[Tuple[T, T]]':
        """return consecutive pairs, lazily"""
        from ..enumerable import Enumerable
        def pairwise_data():
            iterator = iter(self._enumerable)
            previous = next(iterator, _MISSING)
            if previous is _MISSING:
                return
            for item in iterator:
                yield previous, item
                previous = item
        return Enumerable(pairwise_data)


_MISSING = object()
