from __future__ import annotations

import datetime as dt

import pytest

from clinicalendar.clock import fixed_clock
from clinicalendar.date_math import (
    date_range_text,
    days_in_month,
    end_of_month,
    end_of_week,
    format_date,
    get_today,
    is_in_current_month,
    is_in_current_week,
    is_same_day,
    next_period,
    previous_period,
    start_of_month,
    start_of_week,
    week_number,
)


def test_week_boundaries_for_a_sunday() -> None:
    d = dt.datetime(2025, 6, 15, 14, 0)

    assert start_of_week(d) == dt.datetime(2025, 6, 15, 0, 0, 0, 0)
    assert end_of_week(d) == dt.datetime(2025, 6, 21, 23, 59, 59, 999000)


@pytest.mark.parametrize("day", range(1, 31))
def test_week_contains_date_and_spans_six_days_and_a_bit(day: int) -> None:
    d = dt.datetime(2025, 6, day, 9, 45, 12)

    start, end = start_of_week(d), end_of_week(d)
    assert start <= d <= end
    assert start.weekday() == 6  # Sunday
    assert end - start == dt.timedelta(days=6, hours=23, minutes=59, seconds=59, milliseconds=999)


def test_week_boundaries_accept_plain_dates() -> None:
    assert start_of_week(dt.date(2025, 7, 1)) == dt.datetime(2025, 6, 29)
    assert end_of_week(dt.date(2025, 7, 1)) == dt.datetime(2025, 7, 5, 23, 59, 59, 999000)


def test_month_boundaries() -> None:
    d = dt.datetime(2024, 2, 10, 8, 30)

    assert start_of_month(d) == dt.date(2024, 2, 1)
    assert end_of_month(d) == dt.date(2024, 2, 29)
    assert days_in_month(d) == 29
    assert days_in_month(dt.date(2025, 2, 1)) == 28
    assert days_in_month(dt.date(2025, 12, 31)) == 31


def test_is_same_day_ignores_time_of_day() -> None:
    a = dt.datetime(2025, 6, 15, 14, 0)
    b = dt.date(2025, 6, 15)

    assert is_same_day(a, a)
    assert is_same_day(a, b) and is_same_day(b, a)
    assert not is_same_day(a, dt.date(2025, 6, 16))
    assert not is_same_day(a, dt.date(2024, 6, 15))


@pytest.mark.parametrize(
    "view, expected_prev, expected_next",
    [
        ("day", dt.datetime(2025, 6, 14, 10, 30), dt.datetime(2025, 6, 16, 10, 30)),
        ("week", dt.datetime(2025, 6, 8, 10, 30), dt.datetime(2025, 6, 22, 10, 30)),
        ("month", dt.datetime(2025, 5, 15, 10, 30), dt.datetime(2025, 7, 15, 10, 30)),
    ],
)
def test_period_navigation_keeps_time_of_day(view: str, expected_prev: dt.datetime, expected_next: dt.datetime) -> None:
    d = dt.datetime(2025, 6, 15, 10, 30)

    assert previous_period(d, view) == expected_prev
    assert next_period(d, view) == expected_next


def test_month_navigation_clamps_to_last_day() -> None:
    assert next_period(dt.date(2025, 1, 31), "month") == dt.date(2025, 2, 28)
    assert next_period(dt.date(2024, 1, 31), "month") == dt.date(2024, 2, 29)
    assert previous_period(dt.date(2025, 3, 31), "month") == dt.date(2025, 2, 28)
    assert next_period(dt.date(2025, 12, 15), "month") == dt.date(2026, 1, 15)


@pytest.mark.parametrize("view", ["day", "week"])
def test_day_and_week_navigation_round_trips(view: str) -> None:
    d = dt.date(2025, 1, 1)
    for _ in range(400):
        assert next_period(previous_period(d, view), view) == d
        d += dt.timedelta(days=1)


def test_month_round_trip_breaks_only_on_overflowing_days() -> None:
    assert next_period(previous_period(dt.date(2025, 6, 28), "month"), "month") == dt.date(2025, 6, 28)
    # May 31 -> Apr 30 -> May 30
    assert next_period(previous_period(dt.date(2025, 5, 31), "month"), "month") == dt.date(2025, 5, 30)


def test_unknown_view_is_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown calendar view"):
        next_period(dt.date(2025, 6, 15), "year")
    with pytest.raises(ValueError, match="Unknown calendar view"):
        date_range_text(dt.date(2025, 6, 15), "fortnight")


def test_date_range_text() -> None:
    assert date_range_text(dt.date(2025, 6, 15), "day") == "Sunday, June 15, 2025"
    assert date_range_text(dt.date(2025, 6, 17), "week") == "Jun 15 - 21, 2025"
    assert date_range_text(dt.date(2025, 7, 1), "week") == "Jun 29 - Jul 5, 2025"
    assert date_range_text(dt.date(2025, 12, 31), "week") == "Dec 28 - Jan 3, 2025"
    assert date_range_text(dt.date(2025, 6, 17), "month") == "June 2025"


def test_format_date_styles() -> None:
    d = dt.date(2025, 9, 3)

    assert format_date(d, "short") == "Sep 3"
    assert format_date(d) == "Sep 3, 2025"
    assert format_date(d, "long") == "Wednesday, September 3, 2025"


def test_current_week_and_month_use_the_injected_clock() -> None:
    clock = fixed_clock(dt.datetime(2025, 6, 18, 12, 0))

    assert get_today(clock) == dt.datetime(2025, 6, 18, 12, 0)
    assert is_in_current_week(dt.date(2025, 6, 15), clock=clock)
    assert is_in_current_week(dt.datetime(2025, 6, 21, 23, 0), clock=clock)
    assert not is_in_current_week(dt.date(2025, 6, 22), clock=clock)

    assert is_in_current_month(dt.date(2025, 6, 1), clock=clock)
    assert not is_in_current_month(dt.date(2024, 6, 1), clock=clock)
    assert is_in_current_month(dt.date(2024, 6, 1), dt.date(2024, 6, 30))


def test_week_number_is_sunday_based() -> None:
    # 2025-01-01 is a Wednesday.
    assert week_number(dt.date(2025, 1, 1)) == 1
    assert week_number(dt.date(2025, 1, 4)) == 1
    assert week_number(dt.date(2025, 1, 5)) == 2
    assert week_number(dt.date(2025, 12, 31)) == 53
