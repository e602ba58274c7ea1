"""Unit tests for the Pair value object."""

import dataclasses

import pytest

from gfn.pair import Pair


def test_fields_and_unpacking():
    """Pairs expose first/second and unpack like a 2-tuple."""
    pair = Pair(1, "a")
    assert pair.first == 1
    assert pair.second == "a"
    first, second = pair
    assert (first, second) == (1, "a")
    assert pair.to_tuple() == (1, "a")


def test_value_equality_and_hashing():
    """Equal pairs compare and hash equal."""
    assert Pair(1, "a") == Pair(1, "a")
    assert Pair(1, "a") != Pair("a", 1)
    assert len({Pair(1, "a"), Pair(1, "a"), Pair(2, "b")}) == 2


def test_immutable():
    """Fields cannot be reassigned."""
    pair = Pair(1, "a")
    with pytest.raises(dataclasses.FrozenInstanceError):
        pair.first = 2  # type: ignore[misc]
