import pytest

from liftmath.errors import InvalidValueError
from liftmath.numeric.calculus import (
    const_integral_bound,
    derivative,
    double_integral,
    integral,
)

POINTS = [3, 5, 11]


def test_derivative_horizontal_line():
    f = derivative(lambda x: 1, 0.01)
    assert f(0) == 0
    assert f(-1) == 0
    assert f(1) == 0


def test_derivative_line():
    f = derivative(lambda x: x, 0.01)
    for x in (0, 1, -1):
        assert abs(1 - f(x)) < 1e-6


def test_derivative_quadratic():
    f = derivative(lambda x: x * x, 0.1)
    assert f(0) == pytest.approx(0, abs=1e-12)
    assert abs(1 - f(0.5)) < 1e-6
    assert abs(-1 - f(-0.5)) < 1e-6
    assert abs(2 - f(1)) < 1e-6
    assert abs(-2 - f(-1)) < 1e-6


@pytest.mark.parametrize("n", POINTS)
def test_integral_horizontal_line(n):
    assert integral(lambda x: 1)(0, 1, n) == pytest.approx(1)


@pytest.mark.parametrize("n", POINTS)
def test_integral_diagonal_line(n):
    assert integral(lambda x: x)(0, 2, n) == pytest.approx(2)


@pytest.mark.parametrize("n", POINTS)
def test_integral_quadratic(n):
    assert integral(lambda x: x * x)(0, 3, n) == pytest.approx(9)


@pytest.mark.parametrize("n", [4, 1, 0, 2])
def test_integral_rejects_bad_point_counts(n):
    with pytest.raises(InvalidValueError):
        integral(lambda x: x)(0, 1, n)


@pytest.mark.parametrize("start,end", [(1, 1), (2, 1)])
def test_integral_rejects_bad_bounds(start, end):
    with pytest.raises(InvalidValueError):
        integral(lambda x: x)(start, end, 3)


@pytest.mark.parametrize("n", POINTS)
def test_double_integral_horizontal_plane(n):
    f = double_integral(lambda x1, x2: 1)
    val = f(0, 1, const_integral_bound(0), const_integral_bound(1), n)
    assert val == pytest.approx(1)


@pytest.mark.parametrize("n", POINTS)
def test_double_integral_diagonal_plane(n):
    f = double_integral(lambda x1, x2: x1 + x2)
    val = f(0, 2, const_integral_bound(0), const_integral_bound(2), n)
    assert abs(8 - val) < 1e-6


@pytest.mark.parametrize("n", POINTS)
def test_double_integral_quadratic(n):
    f = double_integral(lambda x1, x2: x1 * x1 + x2 * x2)
    val = f(0, 3, const_integral_bound(0), const_integral_bound(3), n)
    assert abs(54 - val) < 1e-6


@pytest.mark.parametrize("n", POINTS)
def test_double_integral_quadratic_triangle(n):
    f = double_integral(lambda x1, x2: x1 * x1 + x2 * x2)
    val = f(0, 3, const_integral_bound(0), lambda x: x, n)
    assert val == pytest.approx(27)


def test_double_integral_rejects_bad_input():
    f = double_integral(lambda x1, x2: 1)
    with pytest.raises(InvalidValueError):
        f(1, 0, const_integral_bound(0), const_integral_bound(1), 3)
    with pytest.raises(InvalidValueError):
        f(0, 1, const_integral_bound(0), const_integral_bound(1), 6)


def test_const_integral_bound():
    bound = const_integral_bound(4)
    assert bound(-10) == 4
    assert bound(99) == 4