import math

import numpy as np
import pytest

from numkit import ConvergenceError, InvalidArgumentError
from numkit.solvers import NewtonConfig, newton_iterates, sqrt_newton, sqrt_newton_array


def test_sqrt_of_sixteen_within_default_tolerance():
    root = sqrt_newton(16)
    assert abs(root * root - 16) <= 0.01
    assert root == pytest.approx(4.0, abs=0.01)


def test_sqrt_of_zero_returns_zero_without_iterating():
    assert sqrt_newton(0) == 0
    assert list(newton_iterates(0)) == [0.0]


@pytest.mark.parametrize("a", [-1, -1e-9, float("nan"), float("inf")])
def test_invalid_radicand_raises(a):
    with pytest.raises(InvalidArgumentError):
        sqrt_newton(a)


def test_non_numeric_radicand_raises():
    with pytest.raises(InvalidArgumentError):
        sqrt_newton("four")


def test_tolerance_applies_to_squared_estimate():
    eps = 0.5
    root = sqrt_newton(100, eps=eps)
    assert abs(root * root - 100) <= eps
    # the estimate itself is much closer than eps
    assert abs(root - 10) < eps / 10


def test_tighter_tolerance_gives_closer_result():
    loose = sqrt_newton(2, eps=0.1)
    tight = sqrt_newton(2, eps=1e-12)
    assert abs(tight - math.sqrt(2)) <= abs(loose - math.sqrt(2))
    assert tight == pytest.approx(math.sqrt(2), rel=1e-12)


def test_initial_estimate_already_converged_is_returned():
    assert sqrt_newton(9, init=3.0) == 3.0
    assert list(newton_iterates(9, NewtonConfig(init=3.0))) == [3.0]


def test_iterates_follow_update_rule():
    estimates = list(newton_iterates(16))
    assert estimates[0] == 1.0
    assert estimates[1] == pytest.approx(8.5)
    for prev, nxt in zip(estimates, estimates[1:]):
        assert nxt == pytest.approx(0.5 * (prev + 16 / prev))
    assert estimates[-1] == sqrt_newton(16)


def test_small_radicand():
    root = sqrt_newton(0.0001, eps=1e-12)
    assert root == pytest.approx(0.01, rel=1e-4)


def test_config_object_overrides_keywords():
    cfg = NewtonConfig(init=2.0, eps=1e-10, max_iter=50)
    root = sqrt_newton(49, init=1000.0, eps=10.0, config=cfg)
    assert abs(root * root - 49) <= 1e-10


def test_iteration_cap_raises_convergence_error():
    with pytest.raises(ConvergenceError) as info:
        sqrt_newton(1e6, max_iter=2)
    assert info.value.iterations == 2
    assert info.value.estimate > 0


def test_unreachable_tolerance_terminates():
    # no double squares to exactly 2.0, so |x*x - 2| never reaches 1e-300
    with pytest.raises(ConvergenceError) as info:
        sqrt_newton(2, eps=1e-300, max_iter=100)
    assert info.value.estimate == pytest.approx(math.sqrt(2))


@pytest.mark.parametrize(
    "kwargs",
    [
        {"init": 0.0},
        {"init": -1.0},
        {"init": float("inf")},
        {"eps": 0.0},
        {"eps": -0.1},
        {"max_iter": 0},
        {"max_iter": 2.5},
    ],
)
def test_invalid_config_raises(kwargs):
    with pytest.raises(InvalidArgumentError):
        NewtonConfig(**kwargs)


def test_config_defaults():
    cfg = NewtonConfig()
    assert (cfg.init, cfg.eps, cfg.max_iter) == (1.0, 0.01, 1000)


def test_array_matches_scalar():
    values = [16.0, 2.0, 0.0, 1e4, 0.25]
    roots = sqrt_newton_array(values)
    expected = [sqrt_newton(v) for v in values]
    assert np.allclose(roots, expected)
    assert roots[2] == 0.0


def test_array_preserves_shape():
    values = np.array([[1.0, 4.0], [9.0, 16.0]])
    cfg = NewtonConfig(eps=1e-10)
    roots = sqrt_newton_array(values, cfg)
    assert roots.shape == (2, 2)
    assert np.allclose(roots, np.sqrt(values))


def test_array_rejects_negative_and_non_finite():
    with pytest.raises(InvalidArgumentError):
        sqrt_newton_array([1.0, -4.0])
    with pytest.raises(InvalidArgumentError):
        sqrt_newton_array([1.0, np.nan])


def test_array_iteration_cap():
    with pytest.raises(ConvergenceError) as info:
        sqrt_newton_array([1e6, 4.0], NewtonConfig(max_iter=1))
    assert info.value.estimate.shape == (2,)


@pytest.mark.parametrize(
    "kwargs", [{"init": None}, {"eps": "tight"}, {"init": "1.0x"}]
)
def test_non_numeric_config_raises(kwargs):
    with pytest.raises(InvalidArgumentError):
        sqrt_newton(4, **kwargs)


def test_numeric_config_values_normalised_to_float():
    cfg = NewtonConfig(init=2, eps=1)
    assert isinstance(cfg.init, float)
    assert isinstance(cfg.eps, float)


def test_stalled_estimate_fails_before_iteration_cap():
    # the square of the settled estimate never lands within 0.01 of 2e15 + 1
    with pytest.raises(ConvergenceError, match="stopped changing") as info:
        sqrt_newton(2e15 + 1)
    assert info.value.iterations < 100
    assert info.value.estimate == pytest.approx(math.sqrt(2e15 + 1))


def test_array_stalled_estimate_fails_before_iteration_cap():
    with pytest.raises(ConvergenceError, match="stopped changing") as info:
        sqrt_newton_array([4.0, 2e15 + 1])
    assert info.value.iterations < 100
