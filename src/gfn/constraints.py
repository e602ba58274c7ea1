"""Capability protocols standing in for numeric type sets.

Functions in :mod:`gfn.numeric` and the ordering helpers in :mod:`gfn.array`
are bounded by these protocols instead of concrete types, so builtin numbers,
``Decimal``/``Fraction``, numpy scalars and strings all work as long as they
support the operators the algorithm needs.
"""

from decimal import Decimal
from typing import Any, Protocol, TypeVar

# pylint: disable=too-few-public-methods


class SupportsOrdering(Protocol):
    """Values comparable with ``<`` and ``>``."""

    def __lt__(self, other: Any, /) -> bool: ...

    def __gt__(self, other: Any, /) -> bool: ...


class SupportsAdd(Protocol):
    """Values closed under ``+`` (numbers, strings, complex)."""

    def __add__(self, other: Any, /) -> Any: ...


class SupportsFloat(Protocol):
    """Values convertible to ``float`` (used by mean computations)."""

    def __float__(self) -> float: ...


OrderedT = TypeVar("OrderedT", bound=SupportsOrdering)
AddableT = TypeVar("AddableT", bound=SupportsAdd)


def is_nan(value: object) -> bool:
    """Report whether ``value`` is an IEEE 754 "not-a-number".

    Only NaN is unequal to itself, so this works for builtin floats, numpy
    floating scalars and any other IEEE 754 type, and is always False for
    integers and strings. ``Decimal`` is asked directly, since comparing a
    signalling NaN raises ``InvalidOperation``.
    """
    if isinstance(value, Decimal):
        return value.is_nan()
    return bool(value != value)  # pylint: disable=comparison-with-itself
