from __future__ import annotations

from clinicalendar.clock import Clock, system_clock
from clinicalendar.date_math import date_range_text, get_today, next_period, previous_period
from clinicalendar.domain import VIEWS, DateLike


def parse_view(raw: str) -> str:
    view = raw.strip().lower()
    if view not in VIEWS:
        raise ValueError(f"Unknown calendar view: {raw!r}. Expected one of: {', '.join(VIEWS)}")
    return view


def previous_anchor(anchor: DateLike, view: str) -> DateLike:
    return previous_period(anchor, view)


def next_anchor(anchor: DateLike, view: str) -> DateLike:
    return next_period(anchor, view)


def shift_anchor(anchor: DateLike, view: str, steps: int) -> DateLike:
    """Apply ``steps`` single-period moves (negative goes back).

    Month moves clamp at every step, so Jan 31 shifted +2 months lands on
    Mar 28/29 rather than Mar 31.
    """
    step = next_period if steps >= 0 else previous_period
    for _ in range(abs(steps)):
        anchor = step(anchor, view)
    return anchor


def today_anchor(clock: Clock = system_clock) -> DateLike:
    return get_today(clock).date()


def range_label(anchor: DateLike, view: str) -> str:
    return date_range_text(anchor, view)
