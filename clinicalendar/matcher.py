from __future__ import annotations

from typing import Iterable

from clinicalendar.date_math import is_same_day
from clinicalendar.domain import Appointment, DateLike, TimeSlot


def appointments_for_date(appointments: Iterable[Appointment], day: DateLike) -> list[Appointment]:
    return [a for a in appointments if is_same_day(a.date, day)]


def appointments_for_time_slot(
    appointments: Iterable[Appointment],
    day: DateLike,
    slot: str | TimeSlot,
) -> list[Appointment]:
    # Exact key equality: "9:30" or "9:30 AM" never match the "09:30" slot.
    key = slot.key if isinstance(slot, TimeSlot) else slot
    return [a for a in appointments if is_same_day(a.date, day) and a.time == key]
