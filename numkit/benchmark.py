"""Compare the iterative and recursive Fibonacci forms with ``instrument``.

The recursive form makes f(n + 1) calls to compute f(n), so its running time
grows by roughly the golden ratio per term. ``estimate_growth_rate`` recovers
that factor from measured timings.
"""

from __future__ import annotations

import logging
import math
from typing import Callable, Dict, Iterable, Sequence

import numpy as np
import pandas as pd

from .errors import InvalidArgumentError
from .instrumentation import instrument
from .schema import COLUMNS
from .sequences import fib_iterative, fib_recursive
from .stats.regression import linear_regression

logger = logging.getLogger(__name__)

FIB_METHODS: Dict[str, Callable[[int], int]] = {
    "iterative": fib_iterative,
    "recursive": fib_recursive,
}

GOLDEN_RATIO: float = (1.0 + math.sqrt(5.0)) / 2.0


def time_fibonacci(
    ns: Iterable[int],
    repeats: int = 3,
    methods: Sequence[str] = ("iterative", "recursive"),
) -> pd.DataFrame:
    """Time each method on each term index.

    Args:
        ns (Iterable[int]): Term indices to evaluate.
        repeats (int, optional): Calls per ``(method, n)`` cell. Defaults to
            ``3``.
        methods (Sequence[str], optional): Keys of ``FIB_METHODS``.

    Returns:
        pandas.DataFrame: One row per call with columns ``n``, ``method``,
        ``repeat``, ``value`` and ``elapsed_s``.

    Raises:
        InvalidArgumentError: For an unknown method, ``repeats < 1`` or an
            index the method rejects.
    """
    if repeats < 1:
        raise InvalidArgumentError(f"repeats must be >= 1, got {repeats}.")
    unknown = [m for m in methods if m not in FIB_METHODS]
    if unknown:
        raise InvalidArgumentError(
            f"Unknown method(s) {unknown}; expected one of {sorted(FIB_METHODS)}."
        )

    ns = list(ns)
    rows = []
    for method in methods:
        timed = instrument(FIB_METHODS[method])
        for n in ns:
            for r in range(repeats):
                result = timed(n)
                rows.append(
                    {
                        COLUMNS.n: n,
                        COLUMNS.method: method,
                        COLUMNS.repeat: r,
                        COLUMNS.value: result.value,
                        COLUMNS.elapsed: result.elapsed,
                    }
                )
        logger.info("Timed %s method on %d term indices", method, len(ns))

    return pd.DataFrame(
        rows,
        columns=[
            COLUMNS.n,
            COLUMNS.method,
            COLUMNS.repeat,
            COLUMNS.value,
            COLUMNS.elapsed,
        ],
    )


def methods_agree(timings_df: pd.DataFrame) -> bool:
    """Return True when every method produced the same value for each ``n``."""
    if timings_df.empty:
        return True
    distinct = timings_df.groupby(COLUMNS.n)[COLUMNS.value].nunique()
    return bool((distinct == 1).all())


def summarize_timings(timings_df: pd.DataFrame) -> pd.DataFrame:
    """Aggregate raw timings to mean, SD and run count per ``(method, n)``."""
    if timings_df.empty:
        return pd.DataFrame(
            columns=[COLUMNS.method, COLUMNS.n, COLUMNS.mean, COLUMNS.sd, COLUMNS.runs]
        )

    rows = []
    for (method, n), group in timings_df.groupby([COLUMNS.method, COLUMNS.n]):
        vals = pd.to_numeric(group[COLUMNS.elapsed], errors="coerce").to_numpy(
            dtype=float
        )
        vals = vals[np.isfinite(vals)]
        runs = int(len(vals))
        rows.append(
            {
                COLUMNS.method: method,
                COLUMNS.n: int(n),
                COLUMNS.mean: float(np.mean(vals)) if runs else np.nan,
                COLUMNS.sd: float(np.std(vals, ddof=1)) if runs >= 2 else np.nan,
                COLUMNS.runs: runs,
            }
        )

    return (
        pd.DataFrame.from_records(rows)
        .sort_values([COLUMNS.method, COLUMNS.n])
        .reset_index(drop=True)
    )


def estimate_growth_rate(
    summary_df: pd.DataFrame, method: str = "recursive", min_n: int = 10
) -> Dict[str, float]:
    """Estimate the per-term growth factor of a method's mean running time.

    Fits ``ln(mean_s) = m * n + b`` over rows with ``n >= min_n`` and a
    positive mean; the growth factor is ``exp(m)``. Small indices are
    excluded because fixed call overhead dominates there.

    Returns:
        dict[str, float]: ``growth_factor``, ``growth_low`` and
        ``growth_high`` (95% interval, NaN without scipy), ``r2`` and ``n``
        (number of points fitted).

    Raises:
        ValueError: If fewer than three usable points remain.
    """
    subset = summary_df[
        (summary_df[COLUMNS.method] == method) & (summary_df[COLUMNS.n] >= min_n)
    ]
    means = subset[COLUMNS.mean].to_numpy(dtype=float)
    keep = np.isfinite(means) & (means > 0)
    fit = linear_regression(
        subset[COLUMNS.n].to_numpy(dtype=float)[keep], np.log(means[keep])
    )
    return {
        "growth_factor": float(math.exp(fit["m"])),
        "growth_low": float(math.exp(fit["m"] - fit["ci95_m"])),
        "growth_high": float(math.exp(fit["m"] + fit["ci95_m"])),
        "r2": fit["r2"],
        "n": fit["n"],
    }


def print_summary(summary_df: pd.DataFrame) -> None:
    print("\nFibonacci timing summary:")
    if summary_df.empty:
        print("  (no data)")
        return

    for method, group in summary_df.groupby(COLUMNS.method):
        print(f" - {method}:")
        for _, row in group.iterrows():
            sd = row[COLUMNS.sd]
            if pd.notna(sd):
                print(
                    f"     n={int(row[COLUMNS.n]):>3}: {row[COLUMNS.mean] * 1e3:.4f} ms "
                    f"± {sd * 1e3:.4f} ms (runs={int(row[COLUMNS.runs])})"
                )
            else:
                print(
                    f"     n={int(row[COLUMNS.n]):>3}: {row[COLUMNS.mean] * 1e3:.4f} ms "
                    f"(runs={int(row[COLUMNS.runs])})"
                )
