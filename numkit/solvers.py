"""Square roots by Newton's fixed-point iteration.

The update rule is ``x <- 0.5 * (x + a / x)``, repeated until
``|x**2 - a| <= eps``. The tolerance therefore bounds the absolute error of
the *squared* estimate, not of the estimate itself: near ``sqrt(a)`` the
error in ``x`` is roughly ``eps / (2 * sqrt(a))``, which is tighter than
``eps`` for ``a > 0.25`` and looser below it.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterator, Optional

import numpy as np

from .errors import ConvergenceError, InvalidArgumentError

logger = logging.getLogger(__name__)


def _positive_float(name: str, value) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(
            f"{name} must be a real number, got {value!r}."
        ) from exc
    if not math.isfinite(number) or number <= 0:
        raise InvalidArgumentError(f"{name} must be finite and > 0, got {value!r}.")
    return number


@dataclass(frozen=True)
class NewtonConfig:
    """Parameters of the Newton square-root iteration.

    Attributes:
        init: Starting estimate. Must be finite and strictly positive.
            Defaults to ``1.0``.
        eps: Absolute tolerance on ``|x**2 - a|``. Must be positive.
            Defaults to ``0.01``.
        max_iter: Maximum number of updates before giving up with
            :class:`ConvergenceError`. Defaults to ``1000``.
    """

    init: float = 1.0
    eps: float = 0.01
    max_iter: int = 1000

    def __post_init__(self) -> None:
        # frozen, so normalised values are stored with object.__setattr__
        object.__setattr__(self, "init", _positive_float("init", self.init))
        object.__setattr__(self, "eps", _positive_float("eps", self.eps))
        if isinstance(self.max_iter, bool) or not isinstance(self.max_iter, int):
            raise InvalidArgumentError(
                f"max_iter must be an integer, got {self.max_iter!r}."
            )
        if self.max_iter < 1:
            raise InvalidArgumentError(f"max_iter must be >= 1, got {self.max_iter}.")


DEFAULT_CONFIG = NewtonConfig()


def _check_radicand(a: float) -> float:
    try:
        value = float(a)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"a must be a real number, got {a!r}.") from exc
    if not math.isfinite(value):
        raise InvalidArgumentError(f"a must be finite, got {a!r}.")
    if value < 0:
        raise InvalidArgumentError(f"a must be non-negative, got {a!r}.")
    return value


def newton_iterates(a: float, config: Optional[NewtonConfig] = None) -> Iterator[float]:
    """Yield every estimate from ``config.init`` up to the converged value.

    Arguments are validated before the iterator is returned. For ``a == 0``
    the only estimate is ``0.0``.

    Raises:
        InvalidArgumentError: If ``a`` is negative or not finite.
        ConvergenceError: While iterating, once ``config.max_iter`` updates
            have not met the tolerance or the estimate stops changing.
    """
    cfg = config if config is not None else DEFAULT_CONFIG
    value = _check_radicand(a)
    return _iterate(value, cfg)


def _iterate(a: float, cfg: NewtonConfig) -> Iterator[float]:
    if a == 0.0:
        yield 0.0
        return

    x = float(cfg.init)
    yield x
    previous = None
    iterations = 0
    while abs(x * x - a) > cfg.eps:
        if iterations >= cfg.max_iter:
            raise ConvergenceError(
                f"No convergence for a={a!r} after {iterations} iterations "
                f"(last estimate {x!r}, eps={cfg.eps!r}).",
                estimate=x,
                iterations=iterations,
            )
        following = 0.5 * (x + a / x)
        # fixed point or two-cycle in float arithmetic
        if following == x or following == previous:
            raise ConvergenceError(
                f"No convergence for a={a!r}: estimate stopped changing at {x!r} "
                f"after {iterations} iterations; eps={cfg.eps!r} is finer than "
                "the float resolution of x**2.",
                estimate=x,
                iterations=iterations,
            )
        previous, x = x, following
        iterations += 1
        yield x


def sqrt_newton(
    a: float,
    init: float = 1.0,
    eps: float = 0.01,
    *,
    max_iter: int = 1000,
    config: Optional[NewtonConfig] = None,
) -> float:
    """Approximate ``sqrt(a)`` with Newton's method.

    Args:
        a (float): Radicand, finite and ``>= 0``.
        init (float, optional): Starting estimate. Defaults to ``1.0``.
        eps (float, optional): Tolerance on the squared estimate: iteration
            stops once ``|x**2 - a| <= eps``. This is not a bound on
            ``|x - sqrt(a)|``. Defaults to ``0.01``.
        max_iter (int, optional): Iteration cap. Defaults to ``1000``.
        config (NewtonConfig, optional): Complete parameter set. When given,
            ``init``, ``eps`` and ``max_iter`` are ignored.

    Returns:
        float: The first estimate meeting the tolerance. ``sqrt_newton(0)`` is
        ``0.0`` without iterating.

    Raises:
        InvalidArgumentError: If ``a < 0``, ``a`` is not finite, or a
            parameter is out of range.
        ConvergenceError: If ``max_iter`` updates do not meet the tolerance,
            or as soon as the estimate stops changing because ``eps`` is
            below the float resolution of ``x**2`` at ``a``.
    """
    cfg = config if config is not None else NewtonConfig(init, eps, max_iter)
    estimate = 0.0
    steps = -1
    for estimate in newton_iterates(a, cfg):
        steps += 1
    logger.debug("sqrt_newton(%r) = %r after %d iterations", a, estimate, steps)
    return estimate


def sqrt_newton_array(values, config: Optional[NewtonConfig] = None) -> np.ndarray:
    """Vectorised :func:`sqrt_newton` over an array of radicands.

    Each element iterates until its own tolerance is met, using the same
    update as the scalar routine, so element results match
    ``sqrt_newton(value, config=config)``.

    Args:
        values (array-like): Non-negative finite radicands of any shape.
        config (NewtonConfig, optional): Iteration parameters.

    Returns:
        numpy.ndarray: Float array with the same shape as ``values``.

    Raises:
        InvalidArgumentError: If any value is negative or not finite.
        ConvergenceError: If some element misses the tolerance after
            ``config.max_iter`` updates or stops changing before meeting it.
            ``estimate`` holds the whole array.
    """
    cfg = config if config is not None else DEFAULT_CONFIG
    arr = np.asarray(values, dtype=float)
    flat = arr.reshape(-1)
    if not np.all(np.isfinite(flat)):
        raise InvalidArgumentError("All values must be finite.")
    if np.any(flat < 0):
        raise InvalidArgumentError("All values must be non-negative.")

    x = np.full(flat.shape, float(cfg.init))
    x[flat == 0] = 0.0
    previous = np.full(flat.shape, np.nan)
    active = np.abs(x * x - flat) > cfg.eps
    iterations = 0
    while np.any(active):
        if iterations >= cfg.max_iter:
            raise ConvergenceError(
                f"{int(np.sum(active))} of {flat.size} values did not converge "
                f"after {iterations} iterations (eps={cfg.eps!r}).",
                estimate=x.reshape(arr.shape),
                iterations=iterations,
            )
        following = 0.5 * (x[active] + flat[active] / x[active])
        stalled = (following == x[active]) | (following == previous[active])
        if np.any(stalled):
            raise ConvergenceError(
                f"{int(np.sum(stalled))} of {flat.size} values stopped changing "
                f"after {iterations} iterations; eps={cfg.eps!r} is finer than "
                "the float resolution of x**2.",
                estimate=x.reshape(arr.shape),
                iterations=iterations,
            )
        previous[active] = x[active]
        x[active] = following
        active = np.abs(x * x - flat) > cfg.eps
        iterations += 1

    logger.debug(
        "sqrt_newton_array converged for %d values in %d iterations",
        flat.size,
        iterations,
    )
    return x.reshape(arr.shape)
