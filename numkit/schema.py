"""Define standardized column names for timing DataFrames."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TimingColumns:
    """Container for standardized column labels.

    Raw timing tables are long-format, one row per instrumented call; summary
    tables have one row per ``(method, n)`` pair.

    Attributes:
        n: Fibonacci term index passed to the method.
        method: Implementation name, ``"iterative"`` or ``"recursive"``.
        repeat: Zero-based repetition counter within one ``(method, n)`` cell.
        value: Term returned by the call. Used to cross-check methods.
        elapsed: Wall-clock seconds reported by ``instrument``.
        mean: Mean of ``elapsed`` over repeats.
        sd: Sample standard deviation of ``elapsed`` (NaN for a single run).
        runs: Number of repeats summarised.
    """

    n: str = "n"
    method: str = "method"
    repeat: str = "repeat"
    value: str = "value"
    elapsed: str = "elapsed_s"
    mean: str = "mean_s"
    sd: str = "sd_s"
    runs: str = "runs"


COLUMNS = TimingColumns()
