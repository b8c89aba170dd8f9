import math

from algokit.optimize import maximize_unimodal


def test_finds_maximum_to_the_right():
    value, x = maximize_unimodal(0.0, lambda t: -(t - 3) ** 2, 10.0)
    assert math.isclose(x, 3, abs_tol=1e-6)
    assert value <= 0


def test_finds_maximum_to_the_left():
    value, x = maximize_unimodal(5.0, lambda t: -(t + 7) ** 2, 100.0)
    assert math.isclose(x, -7, abs_tol=1e-6)


def test_value_matches_argument():
    f = lambda t: -abs(t - 1.5) + 2  # noqa: E731
    value, x = maximize_unimodal(-4.0, f, 8.0)
    assert value == f(x)


def test_start_already_optimal():
    value, x = maximize_unimodal(0.0, lambda t: -t * t, 4.0)
    assert x == 0.0
    assert value == 0.0


def test_sine_peak():
    value, x = maximize_unimodal(0.5, math.sin, 1.0)
    assert math.isclose(x, math.pi / 2, abs_tol=1e-6)
    assert math.isclose(value, 1.0)