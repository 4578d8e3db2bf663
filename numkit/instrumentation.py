"""Timing wrapper for arbitrary callables.

``instrument`` is a function factory: it takes any callable and returns a new
callable that forwards its arguments untouched, times the call, and returns
the original result bundled with the elapsed wall-clock time.
"""

from __future__ import annotations

import functools
import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class TimedResult(Generic[T]):
    """Return value of an instrumented call.

    Attributes:
        value: Whatever the wrapped callable returned.
        elapsed: Wall-clock duration of the call in seconds, measured with
            ``time.perf_counter`` (monotonic, so never negative).
    """

    value: T
    elapsed: float


def instrument(func: Callable[..., T]) -> Callable[..., TimedResult[T]]:
    """Wrap ``func`` so each call returns a :class:`TimedResult`.

    Args:
        func (Callable): Any callable. Its signature does not need to be known;
            positional and keyword arguments are passed through unchanged.

    Returns:
        Callable: A wrapper that calls ``func`` exactly once per invocation.
        The wrapper keeps ``func``'s name and docstring and exposes it as
        ``__wrapped__``.

    Note:
        Exceptions raised by ``func`` propagate unchanged and no
        ``TimedResult`` is produced for the failed call.

    Examples:
        >>> import math
        >>> instrument(math.sqrt)(16).value
        4.0
    """
    name = getattr(func, "__qualname__", repr(func))

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> TimedResult[T]:
        start = time.perf_counter()
        value = func(*args, **kwargs)
        elapsed = time.perf_counter() - start
        logger.debug("%s completed in %.6f s", name, elapsed)
        return TimedResult(value=value, elapsed=elapsed)

    return wrapper
