"""Global pytest fixtures for gfn."""

from __future__ import annotations

import random
from collections.abc import Iterator

import pytest

from gfn.config import RANDOM_SEED_ENV, get_rng

SEED = 20240601


@pytest.fixture
def rng() -> random.Random:
    """Return a freshly seeded random source for deterministic tests."""
    return random.Random(SEED)


@pytest.fixture(autouse=True)
def isolated_default_rng(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Pin the package default random source for the duration of a test.

    Tests that call ``shuffle``/``sample`` without an explicit ``rng`` get a
    generator seeded with ``SEED``; the cache is cleared afterwards so no
    state leaks between tests.
    """
    monkeypatch.setenv(RANDOM_SEED_ENV, str(SEED))
    get_rng.cache_clear()
    yield
    get_rng.cache_clear()
