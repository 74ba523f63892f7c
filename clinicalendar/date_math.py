from __future__ import annotations

import datetime as dt
import math

from dateutil.relativedelta import relativedelta

from clinicalendar.clock import Clock, system_clock
from clinicalendar.domain import DateLike

# en-US names, independent of the process locale.
DAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def _as_datetime(d: DateLike) -> dt.datetime:
    if isinstance(d, dt.datetime):
        return d
    return dt.datetime.combine(d, dt.time())


def sunday_index(d: DateLike) -> int:
    """Day of week with Sunday as 0 and Saturday as 6."""
    return (d.weekday() + 1) % 7


def day_name(d: DateLike) -> str:
    return DAY_NAMES[sunday_index(d)]


def month_name(d: DateLike) -> str:
    return MONTH_NAMES[d.month - 1]


def month_name_short(d: DateLike) -> str:
    return month_name(d)[:3]


def get_today(clock: Clock = system_clock) -> dt.datetime:
    return clock()


def format_date(d: DateLike, style: str = "medium") -> str:
    if style == "short":
        return f"{month_name_short(d)} {d.day}"
    if style == "medium":
        return f"{month_name_short(d)} {d.day}, {d.year}"
    if style == "long":
        return f"{day_name(d)}, {month_name(d)} {d.day}, {d.year}"
    raise ValueError(f"Unknown date format style: {style!r}")


def is_same_day(a: DateLike, b: DateLike) -> bool:
    return a.day == b.day and a.month == b.month and a.year == b.year


def start_of_week(d: DateLike) -> dt.datetime:
    start = _as_datetime(d) - dt.timedelta(days=sunday_index(d))
    return start.replace(hour=0, minute=0, second=0, microsecond=0)


def end_of_week(d: DateLike) -> dt.datetime:
    end = _as_datetime(d) + dt.timedelta(days=6 - sunday_index(d))
    return end.replace(hour=23, minute=59, second=59, microsecond=999000)


def start_of_month(d: DateLike) -> dt.date:
    return dt.date(d.year, d.month, 1)


def end_of_month(d: DateLike) -> dt.date:
    return start_of_month(d) + relativedelta(months=1, days=-1)


def days_in_month(d: DateLike) -> int:
    return end_of_month(d).day


def _period_delta(view: str) -> dt.timedelta | relativedelta:
    if view == "day":
        return dt.timedelta(days=1)
    if view == "week":
        return dt.timedelta(days=7)
    if view == "month":
        # relativedelta clamps to the last valid day: Jan 31 -> Feb 28/29.
        return relativedelta(months=1)
    raise ValueError(f"Unknown calendar view: {view!r}")


def previous_period(d: DateLike, view: str) -> DateLike:
    return d - _period_delta(view)


def next_period(d: DateLike, view: str) -> DateLike:
    return d + _period_delta(view)


def date_range_text(d: DateLike, view: str) -> str:
    if view == "day":
        return format_date(d, "long")
    if view == "week":
        start = start_of_week(d)
        end = end_of_week(d)
        if start.month == end.month:
            return f"{month_name_short(start)} {start.day} - {end.day}, {d.year}"
        return f"{month_name_short(start)} {start.day} - {month_name_short(end)} {end.day}, {d.year}"
    if view == "month":
        return f"{month_name(d)} {d.year}"
    raise ValueError(f"Unknown calendar view: {view!r}")


def is_in_current_week(d: DateLike, reference: DateLike | None = None, *, clock: Clock = system_clock) -> bool:
    ref = reference if reference is not None else get_today(clock)
    return start_of_week(ref) <= _as_datetime(d) <= end_of_week(ref)


def is_in_current_month(d: DateLike, reference: DateLike | None = None, *, clock: Clock = system_clock) -> bool:
    ref = reference if reference is not None else get_today(clock)
    return d.month == ref.month and d.year == ref.year


def week_number(d: DateLike) -> int:
    """Sunday-based week of the year; the week holding January 1st is week 1."""
    start_of_year = dt.datetime(d.year, 1, 1)
    past_days = (_as_datetime(d) - start_of_year).total_seconds() / 86400
    return math.ceil((past_days + sunday_index(start_of_year) + 1) / 7)
