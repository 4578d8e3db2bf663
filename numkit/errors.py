"""Exception types raised by the numeric routines."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """An argument violates a documented precondition.

    Subclasses ``ValueError`` so callers that already guard numeric input with
    ``except ValueError`` keep working.
    """


class ConvergenceError(RuntimeError):
    """An iterative method exhausted its iteration budget.

    Attributes:
        estimate: Last estimate reached before giving up (a float, or an
            array for vectorised solvers).
        iterations: Number of updates performed.
    """

    def __init__(self, message: str, estimate, iterations: int):
        super().__init__(message)
        self.estimate = estimate
        self.iterations = iterations
