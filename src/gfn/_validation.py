"""Argument checks shared by the collection modules."""

import logging
from collections.abc import Sized
from typing import NoReturn

from .errors import EmptyInputError, GfnError, InvalidArgumentError

logger = logging.getLogger(__name__)


def fail(error: GfnError) -> NoReturn:
    """Log a contract violation at DEBUG and raise it."""
    logger.debug("Contract violation: %s", error)
    raise error


def require_non_empty(values: Sized, operation: str) -> None:
    """Raise EmptyInputError when ``values`` holds no element."""
    if len(values) == 0:
        fail(EmptyInputError(operation))


def require_non_negative(value: int, operation: str, argument: str) -> None:
    """Raise InvalidArgumentError when ``value`` is negative."""
    if value < 0:
        fail(
            InvalidArgumentError(
                operation, argument, value, "must be greater than or equal to zero"
            )
        )
