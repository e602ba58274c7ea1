"""Pair value object used by zip/unzip and mapping item helpers."""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

A = TypeVar("A")
B = TypeVar("B")


@dataclass(frozen=True, slots=True)
class Pair(Generic[A, B]):
    """Immutable ordered pair ``(first, second)``.

    Pairs unpack like a 2-tuple, so ``key, value = pair`` works.
    """

    first: A
    second: B

    def __iter__(self) -> Iterator[A | B]:
        yield self.first
        yield self.second

    def to_tuple(self) -> tuple[A, B]:
        """Return the pair as a plain tuple."""
        return (self.first, self.second)
