"""Math and statistics utilities.

NaN policy
----------
:func:`max_`, :func:`min_`, :func:`min_max` and their ``*_by`` variants take a
keyword ``skip_nan`` (default True):

* ``skip_nan=True``: NaN values are ignored.
* ``skip_nan=False``: any NaN forces the result to be NaN (for ``*_by``
  variants, the first element whose key is NaN).

All-NaN input yields NaN either way. :func:`sum_` and :func:`sum_by` default
to ``skip_nan=False`` and let NaN/Inf propagate through ``+`` untouched.

NaN is detected with :func:`gfn.constraints.is_nan`, so integers and strings
are never treated as NaN. Reductions raise :class:`~gfn.errors.EmptyInputError`
on empty input.
"""

import operator
from collections.abc import Callable, Hashable, Iterable, Sequence
from typing import Any, TypeVar

from ._validation import fail, require_non_empty
from .constraints import AddableT, OrderedT, SupportsFloat, is_nan
from .errors import DivideByZeroError

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)
N = TypeVar("N", int, float)

# ============================================================================
#                               Extremes
# ============================================================================


def max_(values: Iterable[OrderedT], *, skip_nan: bool = True) -> OrderedT:
    """Return the largest value.

    Args:
        values: Numbers or strings.
        skip_nan: Ignore NaN values when True; return NaN on any NaN when False.

    Raises:
        EmptyInputError: If ``values`` is empty.

    Example:
        >>> max_([1.1, float("nan"), 2.2])
        2.2
        >>> max_(["ab", "cd", "e"])
        'e'
    """
    return _extreme("max", list(values), _identity, operator.gt, skip_nan)


def min_(values: Iterable[OrderedT], *, skip_nan: bool = True) -> OrderedT:
    """Return the smallest value.

    Same NaN policy and errors as :func:`max_`.
    """
    return _extreme("min", list(values), _identity, operator.lt, skip_nan)


def max_by(
    values: Iterable[T], key: Callable[[T], Any], *, skip_nan: bool = True
) -> T:
    """Return the element with the largest ``key``; the first one wins on ties.

    Example:
        >>> max_by([("apple", 10), ("orange", 30)], lambda p: p[1])
        ('orange', 30)
    """
    return _extreme("max_by", list(values), key, operator.gt, skip_nan)


def min_by(
    values: Iterable[T], key: Callable[[T], Any], *, skip_nan: bool = True
) -> T:
    """Return the element with the smallest ``key``; the first one wins on ties."""
    return _extreme("min_by", list(values), key, operator.lt, skip_nan)


def min_max(
    values: Iterable[OrderedT], *, skip_nan: bool = True
) -> tuple[OrderedT, OrderedT]:
    """Return ``(minimum, maximum)`` computed in a single pass.

    Same NaN policy and errors as :func:`max_`.

    Example:
        >>> min_max([float("nan"), 1.85, 2.2])
        (1.85, 2.2)
    """
    return _min_max("min_max", list(values), _identity, skip_nan)


def min_max_by(
    values: Iterable[T], key: Callable[[T], Any], *, skip_nan: bool = True
) -> tuple[T, T]:
    """Return the elements with the smallest and largest ``key`` in a single pass."""
    return _min_max("min_max_by", list(values), key, skip_nan)


def _extreme(
    operation: str,
    values: Sequence[T],
    key: Callable[[T], Any],
    better: Callable[[Any, Any], bool],
    skip_nan: bool,
) -> T:
    require_non_empty(values, operation)
    best = values[0]
    best_key = key(best)
    for item in values:
        current = key(item)
        if is_nan(current):
            if skip_nan:
                continue
            return item
        if is_nan(best_key) or better(current, best_key):
            best, best_key = item, current
    return best


def _min_max(
    operation: str, values: Sequence[T], key: Callable[[T], Any], skip_nan: bool
) -> tuple[T, T]:
    require_non_empty(values, operation)
    low = high = values[0]
    low_key = high_key = key(low)
    for item in values:
        current = key(item)
        if is_nan(current):
            if skip_nan:
                continue
            return item, item
        if is_nan(low_key) or current < low_key:
            low, low_key = item, current
        if is_nan(high_key) or current > high_key:
            high, high_key = item, current
    return low, high


def _identity(value: T) -> T:
    return value


# ============================================================================
#                               Sums & means
# ============================================================================


def sum_(values: Iterable[AddableT], *, skip_nan: bool = False) -> AddableT:
    """Return the left fold of ``values`` with ``+``.

    Unlike the builtin ``sum`` this works for strings (concatenation) and
    keeps the element type (no implicit ``0`` start value). NaN and Inf
    propagate as IEEE 754 dictates: ``sum_([nan, 0.5])`` and
    ``sum_([inf, -inf])`` are both NaN.

    Args:
        values: Numbers, strings or anything closed under ``+``.
        skip_nan: Leave NaN values out of the fold. All-NaN input still yields NaN.

    Raises:
        EmptyInputError: If ``values`` is empty.

    Example:
        >>> sum_(["ab", "cd", "e"])
        'abcde'
    """
    items = list(values)
    require_non_empty(items, "sum")
    if skip_nan:
        items = [v for v in items if not is_nan(v)] or items[:1]
    result = items[0]
    for v in items[1:]:
        result = result + v
    return result


def sum_by(
    values: Iterable[T], fn: Callable[[T], AddableT], *, skip_nan: bool = False
) -> AddableT:
    """Return the sum of ``fn(element)`` over ``values``.

    Same NaN policy and errors as :func:`sum_`.
    """
    items = list(values)
    require_non_empty(items, "sum_by")
    return sum_([fn(v) for v in items], skip_nan=skip_nan)


def mean(values: Iterable[SupportsFloat]) -> float:
    """Return the arithmetic mean as a float, whatever the input number type.

    Raises:
        EmptyInputError: If ``values`` is empty.

    Example:
        >>> mean([1, 2, 3, 4])
        2.5
    """
    items = list(values)
    require_non_empty(items, "mean")
    total = 0.0
    for v in items:
        total += float(v)
    return total / len(items)


def mean_by(values: Iterable[T], fn: Callable[[T], SupportsFloat]) -> float:
    """Return the mean of ``fn(element)`` over ``values``."""
    items = list(values)
    require_non_empty(items, "mean_by")
    return mean(fn(v) for v in items)


# ============================================================================
#                                   Mode
# ============================================================================


def mode(values: Iterable[K]) -> K:
    """Return the most frequent value.

    On ties the value that first reaches the highest count during a
    left-to-right scan wins.

    Raises:
        EmptyInputError: If ``values`` is empty.

    Example:
        >>> mode([1, 1, 5, 5, 5, 2, 2])
        5
    """
    return _mode("mode", list(values), _identity)


def mode_by(values: Iterable[T], key: Callable[[T], Hashable]) -> T:
    """Return the element at which the most frequent key first reaches its count.

    Example:
        >>> mode_by([("banana", 20), ("cherry", 20), ("apple", 10)], lambda p: p[1])
        ('cherry', 20)
    """
    return _mode("mode_by", list(values), key)


def _mode(operation: str, values: Sequence[T], key: Callable[[T], Hashable]) -> T:
    require_non_empty(values, operation)
    result = values[0]
    best = 1
    seen: dict[Hashable, int] = {}
    for item in values:
        k = key(item)
        seen[k] = seen.get(k, 0) + 1
        if seen[k] > best:
            result, best = item, seen[k]
    return result


# ============================================================================
#                               Arithmetic
# ============================================================================


def abs_(x: N) -> N:
    """Return the absolute value of ``x``.

    NaN stays NaN and both infinities map to ``+inf``.
    """
    if x < 0:
        return -x
    return x


def divmod_(a: int, b: int) -> tuple[int, int]:
    """Return the truncating quotient and remainder of ``a / b``.

    Unlike the builtin ``divmod``, which floors, the quotient is rounded
    toward zero and the remainder takes the sign of the dividend, so
    ``a == b * q + r`` and ``abs(r) < abs(b)``.

    Raises:
        DivideByZeroError: If ``b`` is zero.

    Example:
        >>> divmod_(-13, 3)
        (-4, -1)
    """
    if b == 0:
        fail(DivideByZeroError(a))
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return q, a - b * q
