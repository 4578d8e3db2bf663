"""Straight-line least-squares fits used by the timing benchmark.

``numkit.benchmark.estimate_growth_rate`` fits ``ln(mean time)`` against the
term index ``n``. It exponentiates the slope ``m`` to get the per-term growth
factor and ``m +/- ci95_m`` to get its interval, so it needs the slope and
its Student-t half-width. Timing rows with non-positive means turn into
non-finite logarithms, which the finite-pair mask drops here.
"""

from __future__ import annotations

import importlib.util
import math
from typing import Dict

import numpy as np

HAVE_SCIPY = importlib.util.find_spec("scipy") is not None
if HAVE_SCIPY:
    from scipy.stats import t as student_t


def linear_regression(
    x: np.ndarray, y: np.ndarray, min_points: int = 3
) -> Dict[str, float]:
    """Fit an ordinary least-squares straight line to finite data pairs.

    Args:
        x (numpy.ndarray): Independent variable array.
        y (numpy.ndarray): Dependent variable array.
        min_points (int, optional): Minimum number of finite paired
            observations required. Defaults to ``3``.

    Returns:
        dict[str, float]: Regression diagnostics with keys ``m`` (slope),
        ``b`` (intercept), ``r2``, ``se_m``, ``se_b``, ``ci95_m``, ``ci95_b``
        (95% half-widths), ``p_m`` (two-sided p-value for the slope), ``n``
        and ``dof``.

    Raises:
        ValueError: If there are insufficient valid points or insufficient x/y
            variance.

    Note:
        ``ci95_*`` and ``p_m`` are NaN when scipy is not installed or when
        there are no residual degrees of freedom.
    """
    x_arr = np.asarray(x, dtype=float)
    y_arr = np.asarray(y, dtype=float)
    mask = np.isfinite(x_arr) & np.isfinite(y_arr)
    x_arr = x_arr[mask]
    y_arr = y_arr[mask]
    n = int(len(x_arr))
    if n < min_points:
        raise ValueError("Insufficient valid data for regression.")

    xbar = float(np.mean(x_arr))
    ssxx = float(np.sum((x_arr - xbar) ** 2))
    if ssxx <= 0:
        raise ValueError("Insufficient x variance for regression.")

    m, b = np.polyfit(x_arr, y_arr, 1)
    resid = y_arr - (m * x_arr + b)

    sse = float(np.sum(resid**2))
    sst = float(np.sum((y_arr - y_arr.mean()) ** 2))
    if sst <= 0:
        raise ValueError("Insufficient y variance for regression.")
    r2 = 1.0 - sse / sst

    dof = n - 2
    mse = sse / dof if dof > 0 else math.inf

    se_m = math.nan
    se_b = math.nan
    ci95_m = math.nan
    ci95_b = math.nan
    p_m = math.nan

    if dof > 0:
        se_m = float(np.sqrt(mse / ssxx))
        se_b = float(np.sqrt(mse * (1.0 / n + (xbar**2) / ssxx)))

        if HAVE_SCIPY:
            t_crit = float(student_t.ppf(0.975, dof))
            ci95_m = t_crit * se_m
            ci95_b = t_crit * se_b
            if se_m > 0:
                p_m = float(2 * student_t.sf(abs(m / se_m), dof))
            else:
                p_m = 0.0

    return {
        "m": float(m),
        "b": float(b),
        "r2": float(r2),
        "se_m": se_m,
        "se_b": se_b,
        "ci95_m": ci95_m,
        "ci95_b": ci95_b,
        "p_m": p_m,
        "n": n,
        "dof": dof,
    }
