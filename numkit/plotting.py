"""Render Fibonacci timing comparisons.

Plotting functions receive precomputed summary tables from
``numkit.benchmark.summarize_timings`` and do no timing themselves.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from .schema import COLUMNS


@dataclass(frozen=True)
class StyleConfig:
    BASE_FONTSIZE: float = 11.0
    TITLE_FONTSIZE: float = 13.0
    LINEWIDTH: float = 1.8
    MARKERSIZE: float = 5.0
    ALPHA_BAND: float = 0.15
    GRID_ALPHA: float = 0.25
    FIGSIZE: tuple[float, float] = (7.0, 4.2)
    DPI: int = 150


STYLE = StyleConfig()

METHOD_COLORS = {
    "iterative": "#1f77b4",
    "recursive": "#d62728",
}


def setup_plot_style() -> None:
    """Apply the project matplotlib ``rcParams`` in place."""
    plt.rcParams.update(
        {
            "font.size": STYLE.BASE_FONTSIZE,
            "axes.titlesize": STYLE.TITLE_FONTSIZE,
            "axes.spines.top": False,
            "axes.spines.right": False,
            "lines.linewidth": STYLE.LINEWIDTH,
            "lines.markersize": STYLE.MARKERSIZE,
            "savefig.dpi": STYLE.DPI,
        }
    )


def plot_timing_curves(
    summary_df: pd.DataFrame,
    output_dir: str = "output",
    filename: str = "fibonacci_timings.png",
) -> str:
    """Plot mean call time against term index for each method.

    The y axis is logarithmic, so exponential growth appears as a straight
    line. A shaded band shows mean ± one SD where more than one run exists.

    Args:
        summary_df (pandas.DataFrame): Output of ``summarize_timings``.
        output_dir (str, optional): Directory for the figure. Defaults to
            ``"output"``.
        filename (str, optional): PNG file name.

    Returns:
        str: Path to the saved PNG file.

    Raises:
        KeyError: If required columns are missing from ``summary_df``.
    """
    required = {COLUMNS.method, COLUMNS.n, COLUMNS.mean, COLUMNS.sd}
    missing = required - set(summary_df.columns)
    if missing:
        raise KeyError(f"summary_df missing required columns: {missing}")

    setup_plot_style()
    os.makedirs(output_dir, exist_ok=True)

    fig, ax = plt.subplots(figsize=STYLE.FIGSIZE)
    for method, group in summary_df.groupby(COLUMNS.method):
        group = group.sort_values(COLUMNS.n)
        n = group[COLUMNS.n].to_numpy(dtype=float)
        mean = group[COLUMNS.mean].to_numpy(dtype=float)
        sd = group[COLUMNS.sd].to_numpy(dtype=float)
        positive = np.isfinite(mean) & (mean > 0)
        color = METHOD_COLORS.get(method)
        ax.plot(n[positive], mean[positive], marker="o", color=color, label=method)

        band = positive & np.isfinite(sd)
        if np.any(band):
            # log axis cannot show non-positive lower bounds
            lower = np.clip(mean[band] - sd[band], mean[band] * 0.1, None)
            ax.fill_between(
                n[band],
                lower,
                mean[band] + sd[band],
                color=color,
                alpha=STYLE.ALPHA_BAND,
                linewidth=0,
            )

    ax.set_yscale("log")
    ax.set_xlabel("Term index n")
    ax.set_ylabel("Mean call time (s)")
    ax.set_title("Fibonacci: iterative vs recursive")
    ax.grid(True, which="major", alpha=STYLE.GRID_ALPHA)
    if ax.get_legend_handles_labels()[0]:
        ax.legend(frameon=False)

    path = os.path.join(output_dir, filename)
    fig.tight_layout()
    fig.savefig(path)
    plt.close(fig)
    return path
