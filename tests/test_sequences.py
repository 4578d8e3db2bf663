"""Fibonacci term tests.

Recursive and iterative forms are compared for n = 0..25 on every run. The
remaining indices up to MAX_RECURSIVE_TERM take minutes and carry the ``slow``
marker, which the default options deselect; run ``pytest -m slow`` to cover
the full 0..40 range.
"""

import numpy as np
import pytest

from numkit import InvalidArgumentError
from numkit.sequences import (
    MAX_RECURSIVE_TERM,
    fib_iterative,
    fib_recursive,
    fib_sequence,
)


def test_base_terms_and_tenth_term():
    assert fib_iterative(0) == 0
    assert fib_iterative(1) == 1
    assert fib_iterative(2) == 1
    assert fib_iterative(10) == 55


@pytest.mark.parametrize("n", range(0, 26))
def test_recursive_matches_iterative(n):
    assert fib_recursive(n) == fib_iterative(n)


@pytest.mark.slow
@pytest.mark.parametrize("n", range(26, MAX_RECURSIVE_TERM + 1))
def test_recursive_matches_iterative_up_to_guard(n):
    assert fib_recursive(n) == fib_iterative(n)


def test_term_at_recursive_guard_limit():
    assert MAX_RECURSIVE_TERM == 40
    assert fib_iterative(MAX_RECURSIVE_TERM) == 102334155


def test_iterative_is_exact_beyond_int64():
    # f(100) does not fit in 64 bits
    assert fib_iterative(100) == 354224848179261915075
    assert fib_iterative(93) > 2**63


@pytest.mark.parametrize("func", [fib_iterative, fib_recursive, fib_sequence])
def test_negative_index_raises(func):
    with pytest.raises(InvalidArgumentError):
        func(-1)


@pytest.mark.parametrize("bad", [2.0, "3", True, None])
def test_non_integer_index_raises(bad):
    with pytest.raises(InvalidArgumentError):
        fib_iterative(bad)


def test_invalid_argument_is_value_error():
    with pytest.raises(ValueError):
        fib_recursive(-5)


def test_recursive_guard_above_limit():
    with pytest.raises(InvalidArgumentError, match="MAX_RECURSIVE_TERM"):
        fib_recursive(MAX_RECURSIVE_TERM + 1)


def test_fib_sequence_prefix():
    assert fib_sequence(0) == []
    assert fib_sequence(1) == [0]
    assert fib_sequence(10) == [0, 1, 1, 2, 3, 5, 8, 13, 21, 34]


def test_fib_sequence_consistent_with_terms():
    terms = fib_sequence(30)
    assert terms == [fib_iterative(n) for n in range(30)]


def test_numpy_integer_index_accepted():
    assert fib_iterative(np.int64(10)) == 55
    assert fib_recursive(np.int32(12)) == 144
    assert fib_sequence(np.int64(5)) == [0, 1, 1, 2, 3]
    assert type(fib_iterative(np.int64(10))) is int


def test_numpy_float_and_negative_index_rejected():
    with pytest.raises(InvalidArgumentError):
        fib_iterative(np.float64(3.0))
    with pytest.raises(InvalidArgumentError):
        fib_iterative(np.int64(-1))
