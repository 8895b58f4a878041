"""Tests for bound replacement, translation and resizing."""

from datetime import datetime, timedelta

import pytest
from dateutil.relativedelta import relativedelta

from calperiod import DAY, MONTH, Interval, InvalidRange


def jan(day: int) -> datetime:
    return datetime(2015, 1, day)


def ivl(start: int, end: int) -> Interval:
    return Interval(start=jan(start), end=jan(end))


def test_starting_on_replaces_start() -> None:
    assert ivl(1, 10).starting_on(jan(3)) == ivl(3, 10)


def test_ending_on_replaces_end() -> None:
    assert ivl(1, 10).ending_on(jan(3)) == ivl(1, 3)


def test_unchanged_bound_returns_same_instance() -> None:
    interval = ivl(1, 10)

    assert interval.starting_on(jan(1)) is interval
    assert interval.ending_on(jan(10)) is interval
    assert interval.move(timedelta(0)) is interval
    assert interval.expand(timedelta(0)) is interval
    assert interval.move_start_date(relativedelta()) is interval


def test_crossing_bounds_is_rejected() -> None:
    with pytest.raises(InvalidRange):
        ivl(1, 10).starting_on(jan(11))

    with pytest.raises(InvalidRange):
        ivl(5, 10).ending_on(jan(4))


def test_with_duration_after_start() -> None:
    assert ivl(1, 10).with_duration_after_start(timedelta(days=3)) == ivl(1, 4)


def test_with_duration_before_end() -> None:
    assert ivl(1, 10).with_duration_before_end(timedelta(days=3)) == ivl(7, 10)


def test_with_negative_duration_is_rejected() -> None:
    with pytest.raises(InvalidRange):
        ivl(1, 10).with_duration_after_start(-DAY)


def test_move_start_and_end_dates() -> None:
    assert ivl(5, 10).move_start_date(-DAY) == ivl(4, 10)
    assert ivl(5, 10).move_end_date(DAY) == ivl(5, 11)

    with pytest.raises(InvalidRange):
        ivl(5, 10).move_start_date(timedelta(days=6))


def test_move_keeps_duration() -> None:
    interval = ivl(1, 10)
    moved = interval.move(timedelta(days=5))

    assert moved == ivl(6, 15)
    assert moved.duration_equals(interval)


def test_move_by_calendar_unit() -> None:
    moved = ivl(1, 10).move(MONTH)

    assert moved == Interval(start=datetime(2015, 2, 1), end=datetime(2015, 2, 10))


def test_expand_grows_both_sides() -> None:
    assert ivl(5, 10).expand(DAY) == ivl(4, 11)


def test_expand_with_negative_duration_shrinks() -> None:
    assert ivl(5, 10).expand(-DAY) == ivl(6, 9)


def test_expand_crossing_bounds_is_rejected() -> None:
    with pytest.raises(InvalidRange):
        ivl(5, 10).expand(timedelta(days=-3))


def test_resizing_leaves_original_untouched() -> None:
    interval = ivl(5, 10)
    interval.expand(DAY)
    interval.move(DAY)
    interval.starting_on(jan(6))

    assert interval == ivl(5, 10)


def test_resizing_rejects_non_duration() -> None:
    with pytest.raises(TypeError, match="timedelta or relativedelta"):
        ivl(1, 10).move(3)  # type: ignore[arg-type]
