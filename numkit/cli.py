"""Command-line entry point: ``numkit fib|sqrt|bench``."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Callable

from .benchmark import (
    estimate_growth_rate,
    methods_agree,
    print_summary,
    summarize_timings,
    time_fibonacci,
)
from .errors import ConvergenceError, InvalidArgumentError
from .instrumentation import instrument
from .plotting import plot_timing_curves
from .sequences import fib_iterative, fib_recursive
from .solvers import NewtonConfig, sqrt_newton

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NO_CONVERGENCE = 1
EXIT_RESULTS_DISAGREE = 1
EXIT_INVALID_ARGUMENT = 2

DEFAULT_OUTPUT_DIR = "output"


def _call(func: Callable, args: argparse.Namespace, *call_args, **call_kwargs):
    if not args.time:
        print(func(*call_args, **call_kwargs))
        return
    result = instrument(func)(*call_args, **call_kwargs)
    print(result.value)
    print(f"elapsed: {result.elapsed:.6f} s")


def _run_fib(args: argparse.Namespace) -> int:
    func = fib_recursive if args.method == "recursive" else fib_iterative
    _call(func, args, args.n)
    return EXIT_OK


def _run_sqrt(args: argparse.Namespace) -> int:
    config = NewtonConfig(init=args.init, eps=args.eps, max_iter=args.max_iter)
    _call(sqrt_newton, args, args.a, config=config)
    return EXIT_OK


def _run_bench(args: argparse.Namespace) -> int:
    if args.max_n < 0:
        raise InvalidArgumentError(f"--max-n must be non-negative, got {args.max_n}.")
    timings_df = time_fibonacci(range(args.max_n + 1), repeats=args.repeats)
    if not methods_agree(timings_df):
        logger.error("Iterative and recursive results disagree")
        print(
            "numkit: error: iterative and recursive results disagree",
            file=sys.stderr,
        )
        return EXIT_RESULTS_DISAGREE
    summary_df = summarize_timings(timings_df)
    print_summary(summary_df)

    try:
        growth = estimate_growth_rate(summary_df, min_n=args.fit_min_n)
    except ValueError as exc:
        logger.warning("Growth factor not estimated: %s", exc)
    else:
        print(
            f"\nRecursive growth factor per term: {growth['growth_factor']:.3f} "
            f"(95% CI {growth['growth_low']:.3f}-{growth['growth_high']:.3f}, "
            f"r2={growth['r2']:.3f})"
        )

    os.makedirs(args.outdir, exist_ok=True)
    raw_csv = os.path.join(args.outdir, "fibonacci_timings_raw.csv")
    summary_csv = os.path.join(args.outdir, "fibonacci_timings_summary.csv")
    timings_df.to_csv(raw_csv, index=False)
    summary_df.to_csv(summary_csv, index=False)
    print(f"Wrote {raw_csv}")
    print(f"Wrote {summary_csv}")
    if not args.no_plot:
        print(f"Wrote {plot_timing_curves(summary_df, args.outdir)}")
    return EXIT_OK


def _build_arg_parser() -> argparse.ArgumentParser:
    """Build command-line parser for module execution."""
    parser = argparse.ArgumentParser(
        prog="numkit",
        description="Fibonacci terms, Newton square roots and timing comparisons.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING).",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    fib = sub.add_parser("fib", help="Print the nth Fibonacci number.")
    fib.add_argument("n", type=int, help="Term index (n >= 0).")
    fib.add_argument(
        "--method",
        choices=["iterative", "recursive"],
        default="iterative",
        help="Implementation to use (default: iterative).",
    )
    fib.add_argument("--time", action="store_true", help="Also print elapsed time.")
    fib.set_defaults(handler=_run_fib)

    sqrt = sub.add_parser("sqrt", help="Print a Newton's-method square root.")
    sqrt.add_argument("a", type=float, help="Radicand (a >= 0).")
    sqrt.add_argument(
        "--init", type=float, default=1.0, help="Starting estimate (default: 1.0)."
    )
    sqrt.add_argument(
        "--eps",
        type=float,
        default=0.01,
        help="Tolerance on |x^2 - a|, not on x itself (default: 0.01).",
    )
    sqrt.add_argument(
        "--max-iter",
        type=int,
        default=1000,
        help="Iteration cap (default: 1000).",
    )
    sqrt.add_argument("--time", action="store_true", help="Also print elapsed time.")
    sqrt.set_defaults(handler=_run_sqrt)

    bench = sub.add_parser(
        "bench", help="Time iterative against recursive Fibonacci."
    )
    bench.add_argument(
        "--max-n", type=int, default=25, help="Largest term index (default: 25)."
    )
    bench.add_argument(
        "--repeats", type=int, default=3, help="Calls per cell (default: 3)."
    )
    bench.add_argument(
        "--fit-min-n",
        type=int,
        default=10,
        help="Smallest n used for the growth fit (default: 10).",
    )
    bench.add_argument(
        "--outdir",
        default=DEFAULT_OUTPUT_DIR,
        help=f"Output directory (default: {DEFAULT_OUTPUT_DIR}).",
    )
    bench.add_argument("--no-plot", action="store_true", help="Skip the figure.")
    bench.set_defaults(handler=_run_bench)
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint. Returns the process exit code."""
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        return args.handler(args)
    except InvalidArgumentError as exc:
        print(f"numkit: error: {exc}", file=sys.stderr)
        return EXIT_INVALID_ARGUMENT
    except ConvergenceError as exc:
        print(f"numkit: error: {exc}", file=sys.stderr)
        return EXIT_NO_CONVERGENCE


if __name__ == "__main__":
    raise SystemExit(main())
