"""Basic numeric helpers and reducer operations."""

from __future__ import annotations

import math
from typing import Iterator, Sequence

from liftmath.errors import DimensionsDoNotAgreeError, DivByZeroError

WORKING_PRECISION = 1e-16

Constraint = tuple[float, float]


def maximum(*args):
    """Return the largest of the given values."""
    return max(args)


def minimum(*args):
    """Return the smallest of the given values."""
    return min(args)


def absolute(v):
    """Return the absolute value of ``v``."""
    return -v if v < 0 else v


def sq_err(act: Sequence, given: Sequence) -> list:
    """Return the element-wise squared errors of two equal-length sequences."""
    if len(act) != len(given):
        raise DimensionsDoNotAgreeError("MSE requires lists of equal length.")
    return [(a - g) * (a - g) for a, g in zip(act, given)]


def mean_sq_err(act: Sequence, given: Sequence):
    """Return the mean squared error; zero for empty input."""
    errs = sq_err(act, given)
    if not errs:
        return 0
    return sum(errs) / len(errs)


def no_op_constraint() -> Constraint:
    """A constraint that lets every value through."""
    return (-math.inf, math.inf)


def positive_constraint() -> Constraint:
    """A constraint clamping values to be non-negative."""
    return (0, math.inf)


def negative_constraint() -> Constraint:
    """A constraint clamping values to be non-positive."""
    return (-math.inf, 0)


def constrain(given, min_max: Constraint):
    """Clamp ``given`` into the inclusive range ``(low, high)``."""
    low, high = min_max
    if given < low:
        return low
    if given > high:
        return high
    return given


def num_range(start, stop, step) -> Iterator:
    """Yield ``start + k*step`` while it stays strictly short of ``stop``.

    A zero step yields nothing.
    """
    count = 0
    while True:
        value = step * count + start
        if (step > 0 and value < stop) or (step < 0 and value > stop):
            yield value
            count += 1
        else:
            return


def add(accum, value):
    """Reducer: ``accum + value``."""
    return accum + value


def sub(accum, value):
    """Reducer: ``accum - value``."""
    return accum - value


def mul(accum, value):
    """Reducer: ``accum * value``."""
    return accum * value


def div(accum, value):
    """Reducer: ``accum / value``, raising DivByZeroError on a zero divisor."""
    if value == 0:
        raise DivByZeroError(f"{accum}/{value}")
    return accum / value