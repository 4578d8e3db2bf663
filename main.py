#!/usr/bin/env python3
"""
Main script for running the Fibonacci timing comparison.
"""

# Pipeline overview:
# 1) Time the iterative and recursive Fibonacci forms through `instrument`
#    for every term index up to MAX_N, several repeats each.
# 2) Cross-check that both forms returned the same terms.
# 3) Summarise mean and SD per (method, n) and fit ln(time) against n for the
#    recursive form to estimate its per-term growth factor.
# 4) Export raw and summary CSVs and a log-scale timing figure.

import logging
import os
import sys
import time

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    handlers=[
        logging.StreamHandler(sys.stdout),
        logging.FileHandler("fibonacci_timing.log", mode="w"),
    ],
)

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from numkit.benchmark import (
    GOLDEN_RATIO,
    estimate_growth_rate,
    methods_agree,
    print_summary,
    summarize_timings,
    time_fibonacci,
)
from numkit.plotting import plot_timing_curves

MAX_N = 27
REPEATS = 5
FIT_MIN_N = 12


def main():
    """Main execution function with step timing logged."""

    start_time = time.time()
    logging.info("Initializing Fibonacci timing pipeline")
    logging.info("Configured term indices 0..%d with %d repeats", MAX_N, REPEATS)

    step_start = time.time()
    timings_df = time_fibonacci(range(MAX_N + 1), repeats=REPEATS)
    step_duration = time.time() - step_start
    logging.info("Timing runs completed in %.2f seconds", step_duration)
    logging.info("Timing DataFrame shape: %s", timings_df.shape)

    if not methods_agree(timings_df):
        logging.error("Iterative and recursive results disagree. Terminating execution.")
        return 1

    summary_df = summarize_timings(timings_df)
    print_summary(summary_df)

    try:
        growth = estimate_growth_rate(summary_df, min_n=FIT_MIN_N)
    except ValueError as exc:
        logging.warning("Growth factor not estimated: %s", exc)
    else:
        logging.info(
            "Recursive growth factor per term: %.3f (95%% CI %.3f-%.3f, r2=%.3f); "
            "golden ratio is %.3f",
            growth["growth_factor"],
            growth["growth_low"],
            growth["growth_high"],
            growth["r2"],
            GOLDEN_RATIO,
        )

    output_dir = "output"
    os.makedirs(output_dir, exist_ok=True)
    logging.info("Output directory ensured: %s", output_dir)

    raw_csv = os.path.join(output_dir, "fibonacci_timings_raw.csv")
    summary_csv = os.path.join(output_dir, "fibonacci_timings_summary.csv")
    timings_df.to_csv(raw_csv, index=False)
    summary_df.to_csv(summary_csv, index=False)
    plot_path = plot_timing_curves(summary_df, output_dir)

    total_duration = time.time() - start_time
    logging.info("Total execution time: %.2f seconds", total_duration)

    logging.info("Timing pipeline completed successfully")
    logging.info("Generated output files:")
    logging.info("  - Raw timings CSV: %s", raw_csv)
    logging.info("  - Summary CSV: %s", summary_csv)
    logging.info("  - Timing figure: %s", plot_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
