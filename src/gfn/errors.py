"""Error definitions for gfn.

Every failure raised by the library is a contract violation detected while
validating arguments. Errors are raised immediately and never caught inside
the package; no partial result is returned alongside an error.
"""

# ============================================================================
#                               Base error
# ============================================================================


class GfnError(Exception):
    """Base class for all gfn errors."""


# ============================================================================
#                           Argument validation errors
# ============================================================================


class EmptyInputError(GfnError, ValueError):
    """Raised when a reduction that needs at least one element gets none."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"{operation}() requires at least one element")
        self.operation = operation


class InvalidArgumentError(GfnError, ValueError):
    """Raised when an argument violates the contract of an operation."""

    def __init__(
        self, operation: str, argument: str, value: object, reason: str
    ) -> None:
        super().__init__(f"{operation}(): invalid {argument}={value!r}, {reason}")
        self.operation = operation
        self.argument = argument
        self.value = value


class SampleSizeExceededError(InvalidArgumentError):
    """Raised when more samples are requested than the population holds."""

    def __init__(self, size: int, population: int) -> None:
        super().__init__(
            "sample",
            "n",
            size,
            f"sample size exceeds population size {population}",
        )
        self.size = size
        self.population = population


# ============================================================================
#                               Arithmetic errors
# ============================================================================


class DivideByZeroError(GfnError, ZeroDivisionError):
    """Raised when an integer division is requested with a zero divisor."""

    def __init__(self, dividend: object) -> None:
        super().__init__(f"cannot divide {dividend!r} by zero")
        self.dividend = dividend
