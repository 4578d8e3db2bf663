"""
Small numeric utilities: Fibonacci terms, a timing wrapper and Newton square roots.

Modules:
    - sequences: Fibonacci terms computed iteratively and recursively.
    - instrumentation: Function factory that times any callable.
    - solvers: Newton's-method square root with an explicit tolerance model.
    - benchmark: Timing comparison of the Fibonacci forms as DataFrames.
    - plotting: Log-scale timing figures.
    - stats: Least-squares regression used by the benchmark.
"""

__version__ = "1.0.0"

from .errors import ConvergenceError, InvalidArgumentError
from .instrumentation import TimedResult, instrument
from .sequences import MAX_RECURSIVE_TERM, fib_iterative, fib_recursive, fib_sequence
from .solvers import NewtonConfig, newton_iterates, sqrt_newton, sqrt_newton_array

__all__ = [
    # Errors
    "InvalidArgumentError",
    "ConvergenceError",
    # Sequences
    "MAX_RECURSIVE_TERM",
    "fib_iterative",
    "fib_recursive",
    "fib_sequence",
    # Instrumentation
    "TimedResult",
    "instrument",
    # Solvers
    "NewtonConfig",
    "newton_iterates",
    "sqrt_newton",
    "sqrt_newton_array",
]
