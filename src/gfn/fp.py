"""Functional primitives.

Eager counterparts of ``map``/``filter``/``functools.reduce`` that always
return lists, plus keyed variants that walk a mapping. No laziness and no
short-circuiting: every element is visited exactly once.
"""

from collections.abc import Callable, Hashable, Iterable, Mapping
from typing import TypeVar

from .maps import select

T = TypeVar("T")
R = TypeVar("R")
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def map_(seq: Iterable[T], fn: Callable[[T], R]) -> list[R]:
    """Return a new list with ``fn`` applied to each element.

    Example:
        >>> map_([1, 2, 3], str)
        ['1', '2', '3']
    """
    return [fn(item) for item in seq]


def filter_(seq: Iterable[T], predicate: Callable[[T], bool]) -> list[T]:
    """Return the elements satisfying ``predicate``, in order."""
    return [item for item in seq if predicate(item)]


def filter_kv(m: Mapping[K, V], predicate: Callable[[K, V], bool]) -> dict[K, V]:
    """Return the entries of ``m`` for which ``predicate(key, value)`` holds.

    Same as :func:`gfn.maps.select`.
    """
    return select(m, predicate)


def reduce(seq: Iterable[T], initial: R, reducer: Callable[[R, T], R]) -> R:
    """Fold ``seq`` from the left, starting at ``initial``.

    Example:
        >>> reduce([1, 2, 3], 0, lambda acc, x: acc + x)
        6
    """
    result = initial
    for item in seq:
        result = reducer(result, item)
    return result


def reduce_kv(
    m: Mapping[K, V], initial: R, reducer: Callable[[R, K, V], R]
) -> R:
    """Fold the entries of ``m``, calling ``reducer(acc, key, value)``.

    Entries are visited in the mapping's iteration order, so ``reducer``
    should not depend on it.
    """
    result = initial
    for key, value in m.items():
        result = reducer(result, key, value)
    return result
