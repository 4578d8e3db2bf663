"""Fibonacci terms computed iteratively and recursively.

Convention: f(0) = 0, f(1) = 1 and f(n) = f(n - 1) + f(n - 2) for n >= 2.

The iterative form is the one to use. The recursive form is a literal
transcription of the recurrence and takes O(2^n) time; it is kept to show the
exponential blow-up next to the iterative form and is therefore limited to
``n <= MAX_RECURSIVE_TERM``.
"""

from __future__ import annotations

import logging
import operator
from typing import List

from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)

MAX_RECURSIVE_TERM: int = 40


def _check_index(n: int, name: str = "n") -> int:
    # bool is an int subclass but True/False are not term indices
    if isinstance(n, bool):
        raise InvalidArgumentError(f"{name} must be an integer, got {n!r}.")
    try:
        n = operator.index(n)
    except TypeError as exc:
        raise InvalidArgumentError(f"{name} must be an integer, got {n!r}.") from exc
    if n < 0:
        raise InvalidArgumentError(f"{name} must be non-negative, got {n}.")
    return n


def fib_iterative(n: int) -> int:
    """Return the nth Fibonacci number using two rolling accumulators.

    Args:
        n (int): Term index, ``n >= 0``.

    Returns:
        int: f(n). Python integers do not overflow, so large ``n`` is exact.

    Raises:
        InvalidArgumentError: If ``n`` is negative or not an integer.
    """
    n = _check_index(n)
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def fib_recursive(n: int) -> int:
    """Return the nth Fibonacci number by direct recursion.

    Args:
        n (int): Term index, ``0 <= n <= MAX_RECURSIVE_TERM``.

    Returns:
        int: f(n), identical to :func:`fib_iterative`.

    Raises:
        InvalidArgumentError: If ``n`` is negative, not an integer, or larger
            than ``MAX_RECURSIVE_TERM``.

    Note:
        Without the ``n < 0`` check the base case ``n <= 1`` would still stop
        negative input, but the common textbook variant ``n == 1 or n == 2``
        recurses forever on ``n <= 0``. Arguments are validated once here, not
        on every recursive call.
    """
    n = _check_index(n)
    if n > MAX_RECURSIVE_TERM:
        raise InvalidArgumentError(
            f"n={n} exceeds MAX_RECURSIVE_TERM={MAX_RECURSIVE_TERM}; "
            "use fib_iterative for large terms."
        )
    return _fib_recursive(n)


def _fib_recursive(n: int) -> int:
    if n <= 1:
        return n
    return _fib_recursive(n - 1) + _fib_recursive(n - 2)


def fib_sequence(count: int) -> List[int]:
    """Return the first ``count`` terms, f(0) through f(count - 1)."""
    count = _check_index(count, name="count")
    terms: List[int] = []
    a, b = 0, 1
    for _ in range(count):
        terms.append(a)
        a, b = b, a + b
    logger.debug("Generated %d Fibonacci terms", count)
    return terms
