"""Date range helpers."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Callable, TypeVar

T = TypeVar("T", bound=date)

_ONE_DAY = timedelta(days=1)


def _ordered(after: T, before: T) -> tuple[T, T]:
    if before > after:
        return before, after
    return after, before


def between(after: T, before: T) -> Callable[[T], bool]:
    """Return a predicate true for times within a day of the span [before, after].

    ``after`` is the future time and ``before`` the past one; they are swapped
    if given the other way round. The padded bounds are exclusive.
    """
    after, before = _ordered(after, before)
    low = before - _ONE_DAY
    high = after + _ONE_DAY
    return lambda t: low < t < high


def days_between(after: T, before: T) -> int:
    """Return the number of whole days between two times, in either order."""
    after, before = _ordered(after, before)
    return int((after - before) / _ONE_DAY)