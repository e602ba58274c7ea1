"""Non-mutating helpers must leave their arguments as they found them.

Only shuffle, fill, reverse, clear, update and delete_by work in place;
everything else returns a new object.
"""

import copy
import random

import pytest

from gfn import array, fp, maps, numeric

# pylint: disable=magic-value-comparison

NAN = float("nan")


def _seq():
    return [5, 3, 3, 1, 4, 1, 2]


def _other():
    return [3, 4, 9]


def _mapping():
    return {"a": 1, "b": 2, "c": 3}


CASES = [
    ("copy", lambda s, o, m: array.copy(s)),
    ("repeat", lambda s, o, m: array.repeat(s, 2)),
    ("concat", lambda s, o, m: array.concat(s, o)),
    ("chunk", lambda s, o, m: array.chunk(s, 3)),
    ("sample", lambda s, o, m: array.sample(s, 4, random.Random(1))),
    ("uniq", lambda s, o, m: array.uniq(s)),
    ("uniq_by", lambda s, o, m: array.uniq_by(s, lambda v: v % 2)),
    ("union", lambda s, o, m: array.union(s, o)),
    ("intersection", lambda s, o, m: array.intersection(s, o)),
    ("difference", lambda s, o, m: array.difference(s, o)),
    ("remove", lambda s, o, m: array.remove(s, 3)),
    ("group_by", lambda s, o, m: array.group_by(s, lambda v: v % 2)),
    ("zip", lambda s, o, m: array.zip_(s, o)),
    ("max", lambda s, o, m: numeric.max_(s)),
    ("min_max", lambda s, o, m: numeric.min_max(s)),
    ("mode", lambda s, o, m: numeric.mode(s)),
    ("map", lambda s, o, m: fp.map_(s, str)),
    ("filter", lambda s, o, m: fp.filter_(s, lambda v: v > 2)),
    ("select", lambda s, o, m: maps.select(m, lambda k, v: v > 1)),
    ("reject", lambda s, o, m: maps.reject(m, lambda k, v: v > 1)),
    ("invert", lambda s, o, m: maps.invert(m)),
    ("clone", lambda s, o, m: maps.clone(m)),
    ("items", lambda s, o, m: maps.items(m)),
    ("intersect_keys", lambda s, o, m: maps.intersect_keys(m, {"a": 0})),
    ("filter_kv", lambda s, o, m: fp.filter_kv(m, lambda k, v: k != "a")),
]


@pytest.mark.parametrize("call", [c for _, c in CASES], ids=[n for n, _ in CASES])
def test_arguments_unchanged(call):
    """The call leaves every argument equal to its snapshot."""
    seq, other, mapping = _seq(), _other(), _mapping()
    snapshot = copy.deepcopy((seq, other, mapping))
    call(seq, other, mapping)
    assert (seq, other, mapping) == snapshot


def test_sample_does_not_reorder_population():
    """Drawing every element leaves the population in its original order."""
    population = list(range(50))
    picked = array.sample(population, 50, random.Random(3))
    assert population == list(range(50))
    assert sorted(picked) == population
    assert picked is not population


def test_sum_skip_nan_keeps_input():
    """Skipping NaN does not drop it from the caller's list."""
    values = [1.0, NAN, 2.0]
    assert numeric.sum_(values, skip_nan=True) == 3.0
    assert len(values) == 3
    assert values[1] is NAN


@pytest.mark.parametrize(
    "call",
    [array.copy, array.uniq, lambda s: array.difference(s), lambda s: fp.map_(s, int)],
    ids=["copy", "uniq", "difference", "map"],
)
def test_returns_new_list(call):
    """Even when nothing changes, the result is a distinct list."""
    values = [1, 2, 3]
    result = call(values)
    assert result == values
    assert result is not values


def test_clone_returns_new_mapping():
    """clone() and select() never hand back the source mapping."""
    m = _mapping()
    assert maps.clone(m) is not m
    assert maps.select(m, lambda k, v: True) is not m
