"""
Calculation Errors

Every engine failure is raised to the immediate caller. Nothing in the
engine substitutes a default value for a failed computation.
"""

from typing import Optional


class CalculationError(ValueError):
    """Base class for all financial calculation failures."""


class InvalidInputError(CalculationError):
    """An argument violates a precondition (non-positive, non-finite, empty...)."""


class ConvergenceError(CalculationError):
    """Newton-Raphson iteration could not reach a root."""

    def __init__(
        self,
        message: str,
        iterations: int = 0,
        rate: Optional[float] = None,
    ):
        super().__init__(message)
        self.iterations = iterations
        self.rate = rate


class RangeViolationError(CalculationError):
    """A token purchase falls outside the allowed bounds."""

    def __init__(self, message: str, bound: str, value: float, limit: float):
        super().__init__(message)
        self.bound = bound
        self.value = value
        self.limit = limit
