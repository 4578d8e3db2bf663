"""
Statistical helpers for timing analysis.

Modules:
    regression:
        Ordinary least-squares straight-line fit with standard errors and
        Student-t confidence half-widths. Used to turn log-scale timings into
        a per-term growth factor.

Design Principle:
    This subpackage has no dependencies on the sequence, solver or plotting
    modules and operates on arrays only.
"""

from .regression import linear_regression

__all__ = ["linear_regression"]
