"""Sequence utilities.

Functions here take sequences (lists, tuples, ranges, any ``Sequence``) and
return new lists, leaving their inputs untouched. The exceptions are
:func:`shuffle`, :func:`fill` and :func:`reverse`, which mutate their first
argument in place and return None, like ``list.sort``.

Set-like helpers (:func:`uniq`, :func:`union`, :func:`intersection`,
:func:`difference` and their ``*_by`` variants) rely on hashing, so elements,
or the keys extracted from them, must be hashable. Every one of them keeps
first-occurrence order.
"""

import random
from collections import Counter
from collections.abc import Callable, Hashable, Iterable, MutableSequence, Sequence
from typing import TypeVar

from ._validation import fail, require_non_negative
from .config import get_rng
from .errors import InvalidArgumentError, SampleSizeExceededError
from .pair import Pair

T = TypeVar("T")
U = TypeVar("U")
K = TypeVar("K", bound=Hashable)
H = TypeVar("H", bound=Hashable)

# ============================================================================
#                           Membership & lookup
# ============================================================================


def contains(seq: Iterable[T], value: T) -> bool:
    """Return True if ``seq`` contains ``value``.

    Elements are compared with ``==``. Objects that do not define ``__eq__``
    therefore match by identity only.

    Example:
        >>> contains([1, 2, 3], 2)
        True
    """
    for item in seq:
        if item == value:
            return True
    return False


def index_of(seq: Sequence[T], value: T) -> int:
    """Return the index of the first occurrence of ``value``, or -1."""
    for i, item in enumerate(seq):
        if item == value:
            return i
    return -1


def last_index_of(seq: Sequence[T], value: T) -> int:
    """Return the index of the last occurrence of ``value``, or -1."""
    for i in range(len(seq) - 1, -1, -1):
        if seq[i] == value:
            return i
    return -1


def find(seq: Sequence[T], predicate: Callable[[T], bool]) -> tuple[T | None, int]:
    """Return the first element satisfying ``predicate`` and its index.

    Returns:
        ``(element, index)``, or ``(None, -1)`` when no element matches.

    Example:
        >>> find(["a", "ab", "abc"], lambda s: len(s) > 1)
        ('ab', 1)
    """
    for i, item in enumerate(seq):
        if predicate(item):
            return item, i
    return None, -1


def find_last(seq: Sequence[T], predicate: Callable[[T], bool]) -> tuple[T | None, int]:
    """Return the last element satisfying ``predicate`` and its index.

    Returns:
        ``(element, index)``, or ``(None, -1)`` when no element matches.
    """
    for i in range(len(seq) - 1, -1, -1):
        if predicate(seq[i]):
            return seq[i], i
    return None, -1


# ============================================================================
#                               Construction
# ============================================================================


def range_(start: int, end: int) -> list[int]:
    """Return the integers from ``start`` (inclusive) to ``end`` (exclusive).

    The result is empty when ``start >= end``.

    Example:
        >>> range_(-3, 2)
        [-3, -2, -1, 0, 1]
    """
    return list(range(start, end))


def range_by(start: int, end: int, step: int) -> list[int]:
    """Return the integers from ``start`` towards ``end`` (exclusive) by ``step``.

    The result is non-empty only when the sign of ``step`` matches the
    direction from ``start`` to ``end``; every other combination yields an
    empty list.

    Args:
        start: First value.
        end: Bound that is never reached.
        step: Increment, positive for ascending and negative for descending.

    Returns:
        The generated integers.

    Raises:
        InvalidArgumentError: If ``step`` is zero.

    Example:
        >>> range_by(10, 0, -2)
        [10, 8, 6, 4, 2]
        >>> range_by(0, 5, -2)
        []
    """
    if step == 0:
        fail(InvalidArgumentError("range_by", "step", step, "step must not be zero"))
    return list(range(start, end, step))


def repeat(seq: Sequence[T], n: int) -> list[T]:
    """Return ``seq`` concatenated with itself ``n`` times.

    Raises:
        InvalidArgumentError: If ``n`` is negative.
    """
    require_non_negative(n, "repeat", "n")
    return list(seq) * n


def concat(*seqs: Iterable[T]) -> list[T]:
    """Return the elements of all sequences, in argument order."""
    result: list[T] = []
    for seq in seqs:
        result.extend(seq)
    return result


def copy(seq: Iterable[T]) -> list[T]:
    """Return a shallow copy of ``seq`` as a new list."""
    return list(seq)


def fill(seq: MutableSequence[T], value: T) -> None:
    """Set every slot of ``seq`` to ``value`` in place."""
    for i in range(len(seq)):
        seq[i] = value


def reverse(seq: MutableSequence[T]) -> None:
    """Reverse ``seq`` in place."""
    i, j = 0, len(seq) - 1
    while i < j:
        seq[i], seq[j] = seq[j], seq[i]
        i += 1
        j -= 1


def chunk(seq: Sequence[T], size: int) -> list[list[T]]:
    """Split ``seq`` into consecutive chunks of ``size`` elements.

    The last chunk holds the remainder and may be shorter.

    Raises:
        InvalidArgumentError: If ``size`` is not positive.

    Example:
        >>> chunk([1, 2, 3, 4, 5, 6, 7, 8], 3)
        [[1, 2, 3], [4, 5, 6], [7, 8]]
    """
    if size <= 0:
        fail(InvalidArgumentError("chunk", "size", size, "size must be positive"))
    return [list(seq[i : i + size]) for i in range(0, len(seq), size)]


# ============================================================================
#                               Randomness
# ============================================================================


def shuffle(seq: MutableSequence[T], rng: random.Random | None = None) -> None:
    """Shuffle ``seq`` in place with the Fisher-Yates algorithm.

    For each index ``i`` a position ``j`` is drawn uniformly from ``[0, i]``
    and the two slots are swapped, which yields a uniform permutation.

    Args:
        seq: The sequence to permute.
        rng: Random source. Defaults to :func:`gfn.config.get_rng`.
    """
    if rng is None:
        rng = get_rng()
    for i in range(len(seq)):
        j = rng.randint(0, i)
        seq[i], seq[j] = seq[j], seq[i]


def sample(seq: Sequence[T], n: int, rng: random.Random | None = None) -> list[T]:
    """Return ``n`` elements drawn from distinct random positions of ``seq``.

    An index range is shuffled and its first ``n`` positions are taken, so
    no position is picked twice.

    Args:
        seq: The population.
        n: Number of elements to draw.
        rng: Random source. Defaults to :func:`gfn.config.get_rng`.

    Returns:
        The sampled elements, in random order.

    Raises:
        InvalidArgumentError: If ``n`` is negative.
        SampleSizeExceededError: If ``n`` is larger than ``len(seq)``.
    """
    require_non_negative(n, "sample", "n")
    if n > len(seq):
        fail(SampleSizeExceededError(n, len(seq)))
    indexes = range_(0, len(seq))
    shuffle(indexes, rng)
    return [seq[i] for i in indexes[:n]]


# ============================================================================
#                           Comparison & ordering
# ============================================================================


def equal(a: Sequence[T], b: Sequence[T]) -> bool:
    """Return True if both sequences have the same elements in the same order."""
    if len(a) != len(b):
        return False
    return all(x == y for x, y in zip(a, b))


def equal_by(a: Sequence[T], b: Sequence[U], fn: Callable[[T, U], bool]) -> bool:
    """Return True if both sequences have the same length and ``fn`` holds pairwise."""
    if len(a) != len(b):
        return False
    return all(fn(x, y) for x, y in zip(a, b))


def is_sorted(seq: Sequence[T]) -> bool:
    """Return True if ``seq`` is in non-decreasing order."""
    for i in range(1, len(seq)):
        if seq[i - 1] > seq[i]:  # type: ignore[operator]
            return False
    return True


def is_sorted_by(seq: Sequence[T], fn: Callable[[T, T], bool]) -> bool:
    """Return True if ``fn(previous, current)`` holds for every adjacent pair.

    Example:
        >>> is_sorted_by([3, 2, 2, 1], lambda a, b: a >= b)
        True
    """
    for i in range(1, len(seq)):
        if not fn(seq[i - 1], seq[i]):
            return False
    return True


# ============================================================================
#                           Set-like operations
# ============================================================================


def to_set(seq: Iterable[H]) -> set[H]:
    """Return the distinct elements of ``seq`` as a set."""
    return set(seq)


def uniq(seq: Iterable[H]) -> list[H]:
    """Return ``seq`` without duplicates, keeping first occurrences in order.

    Example:
        >>> uniq([3, 1, 3, 2, 1])
        [3, 1, 2]
    """
    return list(dict.fromkeys(seq))


def uniq_by(seq: Iterable[T], key: Callable[[T], K]) -> list[T]:
    """Return ``seq`` keeping only the first element seen for each ``key``."""
    seen: set[K] = set()
    result: list[T] = []
    for item in seq:
        k = key(item)
        if k not in seen:
            seen.add(k)
            result.append(item)
    return result


def union(*seqs: Iterable[H]) -> list[H]:
    """Return the distinct elements of all sequences in first-seen order.

    Example:
        >>> union([1, 2, 2, 3], [2, 3, 4], [5, 4])
        [1, 2, 3, 4, 5]
    """
    return uniq(concat(*seqs))


def union_by(key: Callable[[T], K], *seqs: Iterable[T]) -> list[T]:
    """Return the union of ``seqs``, comparing elements by ``key``."""
    return uniq_by(concat(*seqs), key)


def intersection(*seqs: Iterable[H]) -> list[H]:
    """Return the elements present in every sequence.

    The result follows the first-occurrence order of the first sequence and
    holds no duplicates.

    Raises:
        InvalidArgumentError: If fewer than two sequences are given.

    Example:
        >>> intersection([1, 2, 3, 4, 5], [2, 3, 4, 5, 6], [5, 4, 3, 2], [2, 3])
        [2, 3]
    """
    return _intersect("intersection", _identity, seqs)


def intersection_by(key: Callable[[T], K], *seqs: Iterable[T]) -> list[T]:
    """Return the elements whose ``key`` is present in every sequence.

    For each key the first element of the first sequence is retained.

    Raises:
        InvalidArgumentError: If fewer than two sequences are given.
    """
    return _intersect("intersection_by", key, seqs)


def _intersect(
    operation: str, key: Callable[[T], K], seqs: tuple[Iterable[T], ...]
) -> list[T]:
    if len(seqs) < 2:
        fail(
            InvalidArgumentError(
                operation, "seqs", len(seqs), "at least 2 sequences are required"
            )
        )
    result = uniq_by(seqs[0], key)
    for other in seqs[1:]:
        present = {key(item) for item in other}
        result = [item for item in result if key(item) in present]
    return result


def difference(seq: Iterable[H], *others: Iterable[H]) -> list[H]:
    """Return ``seq`` without the elements found in any of ``others``.

    Duplicates of ``seq`` that survive are kept, in their original order.

    Example:
        >>> difference([1, 2, 3, 4, 5, 6, 7], [2, 4, 6])
        [1, 3, 5, 7]
    """
    return difference_by(_identity, seq, *others)


def difference_by(
    key: Callable[[T], K], seq: Iterable[T], *others: Iterable[T]
) -> list[T]:
    """Return ``seq`` without the elements whose ``key`` occurs in any of ``others``."""
    excluded = {key(item) for other in others for item in other}
    return [item for item in seq if key(item) not in excluded]


def remove(seq: Iterable[H], *values: H) -> list[H]:
    """Return a new list with every occurrence of ``values`` removed."""
    excluded = set(values)
    return [item for item in seq if item not in excluded]


def _identity(value: T) -> T:
    return value


# ============================================================================
#                           Grouping & counting
# ============================================================================


def group_by(seq: Iterable[T], key: Callable[[T], K]) -> dict[K, list[T]]:
    """Partition ``seq`` into lists keyed by ``key(element)``.

    Groups appear in the order their key is first seen, and each group keeps
    the relative order of its elements.

    Example:
        >>> group_by([1, 2, 3, 4], lambda i: "even" if i % 2 == 0 else "odd")
        {'odd': [1, 3], 'even': [2, 4]}
    """
    groups: dict[K, list[T]] = {}
    for item in seq:
        groups.setdefault(key(item), []).append(item)
    return groups


def counter(seq: Iterable[H]) -> Counter[H]:
    """Return a mapping from each element to its number of occurrences."""
    return Counter(seq)


distribution = counter


def counter_by(seq: Iterable[T], key: Callable[[T], K]) -> Counter[K]:
    """Return a mapping from each ``key(element)`` to its number of occurrences."""
    return Counter(key(item) for item in seq)


def count(seq: Iterable[T], value: T) -> int:
    """Return the number of elements equal to ``value``."""
    return sum(1 for item in seq if item == value)


def count_by(seq: Iterable[T], predicate: Callable[[T], bool]) -> int:
    """Return the number of elements satisfying ``predicate``."""
    return sum(1 for item in seq if predicate(item))


# ============================================================================
#                               Iteration
# ============================================================================


def all_(seq: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """Return True if every element satisfies ``predicate``."""
    for item in seq:
        if not predicate(item):
            return False
    return True


def any_(seq: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """Return True if at least one element satisfies ``predicate``."""
    for item in seq:
        if predicate(item):
            return True
    return False


def for_each(seq: Iterable[T], fn: Callable[[T], object]) -> None:
    """Call ``fn`` on each element."""
    for item in seq:
        fn(item)


# ============================================================================
#                                   Pairs
# ============================================================================


def zip_(a: Iterable[T], b: Iterable[U]) -> list[Pair[T, U]]:
    """Pair up elements of ``a`` and ``b``, stopping at the shorter one.

    Example:
        >>> zip_([1, 2], ["a", "b", "c"])
        [Pair(first=1, second='a'), Pair(first=2, second='b')]
    """
    return [Pair(x, y) for x, y in zip(a, b)]


def unzip(n: int, fn: Callable[[int], tuple[T, U]]) -> tuple[list[T], list[U]]:
    """Build two parallel lists from ``fn(i)`` for ``i`` in ``range(n)``.

    Args:
        n: Number of pairs to produce.
        fn: Called with each index, returns a ``(first, second)`` 2-tuple or a Pair.

    Returns:
        ``(firsts, seconds)``.

    Raises:
        InvalidArgumentError: If ``n`` is negative.
    """
    require_non_negative(n, "unzip", "n")
    firsts: list[T] = []
    seconds: list[U] = []
    for i in range(n):
        first, second = fn(i)
        firsts.append(first)
        seconds.append(second)
    return firsts, seconds
