from __future__ import annotations

import datetime as dt

from clinicalendar.clock import Clock, system_clock
from clinicalendar.date_math import (
    day_name,
    get_today,
    is_in_current_month,
    is_same_day,
    month_name,
    month_name_short,
    start_of_month,
    start_of_week,
)
from clinicalendar.domain import CalendarDate, DateLike

WEEKS_PER_GRID = 6
DAYS_PER_WEEK = 7


def _as_date(d: DateLike) -> dt.date:
    return d.date() if isinstance(d, dt.datetime) else d


def get_calendar_date(day: DateLike, reference: DateLike | None = None, *, clock: Clock = system_clock) -> CalendarDate:
    today = get_today(clock)
    ref = reference if reference is not None else today

    return CalendarDate(
        date=_as_date(day),
        day=day.day,
        month=day.month,
        year=day.year,
        is_today=is_same_day(day, today),
        is_current_month=is_in_current_month(day, ref),
        day_name=day_name(day),
        day_name_short=day_name(day)[:3].upper(),
        month_name=month_name(day),
        month_name_short=month_name_short(day),
    )


def get_week_days(d: DateLike, *, clock: Clock = system_clock) -> list[CalendarDate]:
    first = start_of_week(d).date()
    return [get_calendar_date(first + dt.timedelta(days=i), d, clock=clock) for i in range(DAYS_PER_WEEK)]


def get_month_calendar(d: DateLike, *, clock: Clock = system_clock) -> list[list[CalendarDate]]:
    """Six full weeks starting on the Sunday on or before the 1st of ``d``'s month.

    Always 42 cells; leading and trailing days of the neighbouring months are
    marked with ``is_current_month=False``.
    """
    first = start_of_week(start_of_month(d)).date()

    weeks: list[list[CalendarDate]] = []
    for week in range(WEEKS_PER_GRID):
        weeks.append(
            [
                get_calendar_date(first + dt.timedelta(days=week * DAYS_PER_WEEK + day), d, clock=clock)
                for day in range(DAYS_PER_WEEK)
            ]
        )
    return weeks
