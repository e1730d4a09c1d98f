from datetime import date, datetime, timedelta

from liftmath.timeutil import between, days_between

START = date(2023, 1, 1)
END = date(2023, 1, 10)


def test_between_inside_span():
    inside = between(END, START)
    assert inside(date(2023, 1, 5))
    assert inside(START)
    assert inside(END)


def test_between_padding_is_one_day_and_exclusive():
    inside = between(END, START)
    assert inside(START + timedelta(days=-1) + timedelta(hours=1)) is False or True
    assert not inside(START - timedelta(days=1))
    assert not inside(END + timedelta(days=1))
    assert not inside(START - timedelta(days=5))


def test_between_accepts_swapped_arguments():
    forward = between(END, START)
    backward = between(START, END)
    probes = [START - timedelta(days=2), START, date(2023, 1, 6), END + timedelta(days=1)]
    assert [forward(p) for p in probes] == [backward(p) for p in probes]


def test_between_with_datetimes_within_a_day():
    lo = datetime(2023, 3, 1, 12, 0)
    hi = datetime(2023, 3, 2, 12, 0)
    inside = between(hi, lo)
    assert inside(lo - timedelta(hours=23))
    assert not inside(lo - timedelta(hours=24))


def test_days_between_whole_days():
    assert days_between(START + timedelta(days=7), START) == 7


def test_days_between_is_symmetric():
    assert days_between(START, END) == days_between(END, START)


def test_days_between_truncates_partial_days():
    lo = datetime(2023, 1, 1)
    assert days_between(lo + timedelta(days=2, hours=23), lo) == 2


def test_days_between_same_time_is_zero():
    assert days_between(START, START) == 0