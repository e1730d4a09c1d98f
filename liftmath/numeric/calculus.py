"""Numeric differentiation and Simpson's-rule integration."""

from __future__ import annotations

from typing import Callable, Iterator

from liftmath.errors import InvalidValueError

Func = Callable[[float], float]
Func2 = Callable[[float, float], float]


def derivative(f: Func, h: float) -> Func:
    """Return a five-point central difference approximation of ``f'``."""

    def df(x: float) -> float:
        return (-f(x + 2 * h) + 8 * f(x + h) - 8 * f(x - h) + f(x - 2 * h)) / (12 * h)

    return df


def _simpson_weights(num_pnts: int) -> Iterator[int]:
    last = num_pnts - 1
    for i in range(num_pnts):
        if i == 0 or i == last:
            yield 1
        elif i % 2 == 0:
            yield 2
        else:
            yield 4


def _simpson(g: Func, start: float, end: float, num_pnts: int) -> float:
    span = end - start
    total = sum(
        weight * g(span * i / (num_pnts - 1) + start)
        for i, weight in enumerate(_simpson_weights(num_pnts))
    )
    return span / ((num_pnts - 1) * 3) * total


def _check_points(num_pnts: int) -> None:
    if num_pnts % 2 == 0 or num_pnts < 3:
        raise InvalidValueError("NumPnts must be an odd value >=3.")


def integral(f: Func) -> Callable[[float, float, int], float]:
    """Return a function integrating ``f`` over [start, end] with Simpson's rule."""

    def integrate(start: float, end: float, num_pnts: int) -> float:
        if end <= start:
            raise InvalidValueError("End must be >start to run integration.")
        _check_points(num_pnts)
        return _simpson(f, start, end, num_pnts)

    return integrate


def const_integral_bound(c: float) -> Func:
    """Return a bound function that is always ``c``."""
    return lambda x: c


def double_integral(
    f: Func2,
) -> Callable[[float, float, Func, Func, int], float]:
    """Return a function integrating ``f(x1, x2)`` over a region.

    The outer variable runs over [start_x1, end_x1]; the inner one over
    [start_x2(x1), end_x2(x1)].
    """

    def integrate(
        start_x1: float,
        end_x1: float,
        start_x2: Func,
        end_x2: Func,
        num_pnts: int,
    ) -> float:
        if end_x1 <= start_x1:
            raise InvalidValueError("EndX1 must be >startX1 to run integration.")
        _check_points(num_pnts)

        def inner(x1: float) -> float:
            return _simpson(lambda x2: f(x1, x2), start_x2(x1), end_x2(x1), num_pnts)

        return _simpson(inner, start_x1, end_x1, num_pnts)

    return integrate