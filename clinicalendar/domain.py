from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Literal, Union

CalendarView = Literal["day", "week", "month"]

VIEWS: tuple[str, ...] = ("day", "week", "month")

# Anything with year/month/day; time-of-day is ignored for day matching.
DateLike = Union[dt.date, dt.datetime]


@dataclass(frozen=True)
class CalendarDate:
    """A single cell of a week strip or month grid.

    ``is_today`` depends on the clock the cell was built with; everything else
    is a pure function of (date, reference date).
    """

    date: dt.date
    day: int
    month: int
    year: int
    is_today: bool
    is_current_month: bool
    day_name: str
    day_name_short: str
    month_name: str
    month_name_short: str


@dataclass(frozen=True, order=True)
class TimeSlot:
    hour: int
    minute: int

    @property
    def key(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"

    @property
    def display24(self) -> str:
        return self.key

    @property
    def display12(self) -> str:
        # Presentation only; never compare it.
        hour12 = 12 if self.hour == 0 else self.hour - 12 if self.hour > 12 else self.hour
        period = "AM" if self.hour < 12 else "PM"
        return f"{hour12}:{self.minute:02d} {period}"

    @property
    def minutes(self) -> int:
        return self.hour * 60 + self.minute


@dataclass(frozen=True)
class Appointment:
    """A read-only snapshot of one appointment.

    ``time`` must already be the canonical zero-padded ``"HH:MM"`` key; see
    ``clinicalendar.adapter`` for the conversion from service records.
    """

    id: str
    date: DateLike
    time: str
    patient: str
    type: str
    duration: int  # minutes
    total_duration: int | None = None
    color: str | None = None
    audiologist: str | None = None
    phone_number: str | None = None
    email: str | None = None
    notes: str | None = None


class AppointmentFormatError(ValueError):
    """An appointment-service record that cannot be turned into an Appointment."""
