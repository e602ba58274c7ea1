"""Mapping utilities.

Functions here take mappings (``dict`` or any ``Mapping``). Results that are
lists of keys, values or items follow the mapping's own iteration order,
which for ``dict`` is insertion order; callers should treat that order as
implementation-defined and sort before comparing.

:func:`clear`, :func:`update` and :func:`delete_by` mutate their first
argument in place; everything else returns a new object.
"""

from collections.abc import Callable, Hashable, Mapping, MutableMapping
from typing import Any, TypeVar

from ._validation import require_non_negative
from .pair import Pair

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")
V1 = TypeVar("V1")
V2 = TypeVar("V2")
HV = TypeVar("HV", bound=Hashable)

# ============================================================================
#                               Comparison
# ============================================================================


def equal_kv(a: Mapping[K, V], b: Mapping[K, V]) -> bool:
    """Return True if both mappings hold the same keys with equal values."""
    return equal_kv_by(a, b, lambda _key, x, y: x == y)


def equal_kv_by(
    a: Mapping[K, V1], b: Mapping[K, V2], fn: Callable[[K, V1, V2], bool]
) -> bool:
    """Return True if both mappings share their keys and ``fn`` holds for each.

    Args:
        a: First mapping.
        b: Second mapping.
        fn: Called as ``fn(key, a[key], b[key])``.

    Example:
        >>> equal_kv_by({1: "a"}, {1: "e"}, lambda k, x, y: len(x) == len(y))
        True
    """
    if len(a) != len(b):
        return False
    for key, value in a.items():
        if key not in b or not fn(key, value, b[key]):
            return False
    return True


def is_disjoint(m1: Mapping[K, Any], m2: Mapping[K, Any]) -> bool:
    """Return True if the mappings have no key in common.

    Mostly useful to check whether two sets (mappings used as sets) are
    disjoint. The sizes of the mappings do not matter.
    """
    smaller, larger = (m1, m2) if len(m1) <= len(m2) else (m2, m1)
    return not any(key in larger for key in smaller)


# ============================================================================
#                               Extraction
# ============================================================================


def keys(m: Mapping[K, V]) -> list[K]:
    """Return the keys of ``m``."""
    return list(m.keys())


def values(m: Mapping[K, V]) -> list[V]:
    """Return the values of ``m``."""
    return list(m.values())


def items(m: Mapping[K, V]) -> list[Pair[K, V]]:
    """Return the entries of ``m`` as key/value pairs."""
    return [Pair(key, value) for key, value in m.items()]


def get_or_default(m: Mapping[K, V], key: K, default: V) -> V:
    """Return ``m[key]`` if present, otherwise ``default``."""
    if key in m:
        return m[key]
    return default


def intersect_keys(*ms: Mapping[K, Any]) -> list[K]:
    """Return the keys of the first mapping that are present in all others.

    Without arguments the result is empty; with a single mapping it is that
    mapping's keys.

    Example:
        >>> intersect_keys({1: "a", 2: "b", 3: "c"}, {1: "a", 2: "b"}, {2: "b"})
        [2]
    """
    if not ms:
        return []
    return [key for key in ms[0] if all(key in m for m in ms[1:])]


def different_keys(*ms: Mapping[K, Any]) -> list[K]:
    """Return the keys of the first mapping that are in none of the others.

    Only keys are considered, never values. Without arguments the result is
    empty; with a single mapping it is that mapping's keys.
    """
    if not ms:
        return []
    return [key for key in ms[0] if not any(key in m for m in ms[1:])]


# ============================================================================
#                               Construction
# ============================================================================


def invert(m: Mapping[K, HV]) -> dict[HV, K]:
    """Return a mapping with keys and values swapped.

    When several keys share a value, the key iterated last wins.
    """
    return {value: key for key, value in m.items()}


def clone(m: Mapping[K, V]) -> dict[K, V]:
    """Return a shallow copy of ``m``."""
    return dict(m)


def select(m: Mapping[K, V], predicate: Callable[[K, V], bool]) -> dict[K, V]:
    """Return the entries of ``m`` for which ``predicate(key, value)`` holds.

    Example:
        >>> select({1: "a", 2: "b", 3: "c"}, lambda k, v: k == 1 or v == "c")
        {1: 'a', 3: 'c'}
    """
    return {key: value for key, value in m.items() if predicate(key, value)}


def reject(m: Mapping[K, V], predicate: Callable[[K, V], bool]) -> dict[K, V]:
    """Return the entries of ``m`` for which ``predicate(key, value)`` does not hold."""
    return {key: value for key, value in m.items() if not predicate(key, value)}


def to_kv(n: int, fn: Callable[[int], tuple[K, V]]) -> dict[K, V]:
    """Build a mapping from ``fn(i) -> (key, value)`` for ``i`` in ``range(n)``.

    Raises:
        InvalidArgumentError: If ``n`` is negative.
    """
    require_non_negative(n, "to_kv", "n")
    result: dict[K, V] = {}
    for i in range(n):
        key, value = fn(i)
        result[key] = value
    return result


# ============================================================================
#                               In-place updates
# ============================================================================


def clear(m: MutableMapping[K, V]) -> None:
    """Remove every entry from ``m``."""
    m.clear()


def update(m: MutableMapping[K, V], *others: Mapping[K, V]) -> None:
    """Copy the entries of ``others`` into ``m``; later mappings win.

    Example:
        >>> m = {1: "a", 2: "b", 3: "c"}
        >>> update(m, {1: "d", 2: "e"}, {1: "f"})
        >>> m
        {1: 'f', 2: 'e', 3: 'c'}
    """
    for other in others:
        m.update(other)


def delete_by(m: MutableMapping[K, V], predicate: Callable[[K, V], bool]) -> None:
    """Delete the entries of ``m`` for which ``predicate(key, value)`` holds."""
    for key in [key for key, value in m.items() if predicate(key, value)]:
        del m[key]


def for_each_kv(m: Mapping[K, V], fn: Callable[[K, V], object]) -> None:
    """Call ``fn(key, value)`` for each entry of ``m``."""
    for key, value in m.items():
        fn(key, value)
