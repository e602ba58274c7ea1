"""Configuration utilities for gfn.

Settings are read from the environment so applications and test suites can
pin behaviour without code changes:

- ``GFN_RANDOM_SEED``: integer seed for the default random source used by
  :func:`gfn.array.shuffle` and :func:`gfn.array.sample`.
- ``GFN_LOG_LEVEL``: level name used by :func:`gfn.logging.configure_logging`.
"""

import logging
import os
import random
from functools import lru_cache

from .errors import GfnError

RANDOM_SEED_ENV = "GFN_RANDOM_SEED"
LOG_LEVEL_ENV = "GFN_LOG_LEVEL"
DEFAULT_LOG_LEVEL = logging.WARNING

logger = logging.getLogger(__name__)


class InvalidConfigError(GfnError):
    """Raised when an environment setting cannot be parsed."""

    def __init__(self, name: str, value: str, reason: str) -> None:
        super().__init__(f"Invalid value for {name}: {value!r} ({reason})")
        self.name = name
        self.value = value


def get_random_seed() -> int | None:
    """Get the random seed from the environment.

    Returns:
        The integer value of ``GFN_RANDOM_SEED``, or None when it is unset or empty.

    Raises:
        InvalidConfigError: If the variable is set but is not an integer.
    """
    if not (raw := os.environ.get(RANDOM_SEED_ENV, "").strip()):
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise InvalidConfigError(RANDOM_SEED_ENV, raw, "expected an integer") from e


def get_log_level() -> int:
    """Get the numeric log level from the environment.

    Returns:
        The level named by ``GFN_LOG_LEVEL`` (case-insensitive), or WARNING if unset.

    Raises:
        InvalidConfigError: If the name is not a standard logging level.
    """
    if not (raw := os.environ.get(LOG_LEVEL_ENV, "").strip()):
        return DEFAULT_LOG_LEVEL
    level = logging.getLevelName(raw.upper())
    if not isinstance(level, int):
        raise InvalidConfigError(LOG_LEVEL_ENV, raw, "unknown log level")
    return level


@lru_cache(maxsize=1)
def get_rng() -> random.Random:
    """Return the process-wide default random source.

    The generator is created on first use and seeded from ``GFN_RANDOM_SEED``
    when set. Call ``get_rng.cache_clear()`` to pick up a changed seed.
    """
    seed = get_random_seed()
    if seed is not None:
        logger.debug("Seeding default random source with %s=%d", RANDOM_SEED_ENV, seed)
    return random.Random(seed)
