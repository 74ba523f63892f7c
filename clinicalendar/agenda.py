from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Sequence

from clinicalendar.clock import Clock, system_clock
from clinicalendar.domain import Appointment, CalendarDate, DateLike, TimeSlot
from clinicalendar.grid import get_calendar_date, get_month_calendar, get_week_days
from clinicalendar.matcher import appointments_for_date, appointments_for_time_slot
from clinicalendar.navigator import range_label
from clinicalendar.time_slots import generate_time_slots

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SlotRow:
    slot: TimeSlot
    appointments: tuple[Appointment, ...]


@dataclass(frozen=True)
class DayAgenda:
    day: CalendarDate
    appointments: tuple[Appointment, ...]
    # Empty in month view; the month grid lists appointments per day only.
    slots: tuple[SlotRow, ...] = ()
    # Appointments of this day whose time key matches none of the slots.
    unslotted: tuple[Appointment, ...] = ()


@dataclass(frozen=True)
class Agenda:
    view: str
    anchor: DateLike
    label: str
    weeks: tuple[tuple[DayAgenda, ...], ...]

    @property
    def days(self) -> list[DayAgenda]:
        return [d for week in self.weeks for d in week]


def _visible_weeks(anchor: DateLike, view: str, clock: Clock) -> list[list[CalendarDate]]:
    if view == "day":
        return [[get_calendar_date(anchor, anchor, clock=clock)]]
    if view == "week":
        return [get_week_days(anchor, clock=clock)]
    if view == "month":
        return get_month_calendar(anchor, clock=clock)
    raise ValueError(f"Unknown calendar view: {view!r}")


def _day_agenda(day: CalendarDate, appointments: Sequence[Appointment], slots: Sequence[TimeSlot]) -> DayAgenda:
    day_appointments = appointments_for_date(appointments, day.date)
    if not slots:
        return DayAgenda(day=day, appointments=tuple(day_appointments))

    rows = tuple(
        SlotRow(slot=slot, appointments=tuple(appointments_for_time_slot(day_appointments, day.date, slot)))
        for slot in slots
    )
    keys = {slot.key for slot in slots}
    unslotted = tuple(a for a in day_appointments if a.time not in keys)
    for a in unslotted:
        logger.warning("Appointment %s on %s at %r matches no time slot", a.id, day.date.isoformat(), a.time)

    return DayAgenda(day=day, appointments=tuple(day_appointments), slots=rows, unslotted=unslotted)


def build_agenda(
    anchor: DateLike,
    view: str,
    appointments: Iterable[Appointment],
    *,
    start_hour: int = 8,
    end_hour: int = 23,
    interval_minutes: int = 30,
    clock: Clock = system_clock,
) -> Agenda:
    snapshot = list(appointments)
    slots = generate_time_slots(start_hour, end_hour, interval_minutes) if view != "month" else []

    weeks = tuple(
        tuple(_day_agenda(day, snapshot, slots) for day in week) for week in _visible_weeks(anchor, view, clock)
    )
    return Agenda(view=view, anchor=anchor, label=range_label(anchor, view), weeks=weeks)


def _format_appointment(a: Appointment) -> str:
    who = f" with {a.audiologist}" if a.audiologist else ""
    kind = a.type or "Appointment"
    return f"{a.time} {a.patient}: {kind} ({a.duration} min){who}"


def format_agenda(agenda: Agenda) -> str:
    lines = [agenda.label]
    for day in agenda.days:
        if agenda.view == "month" and not day.day.is_current_month:
            continue
        if not day.appointments:
            continue
        marker = " (today)" if day.day.is_today else ""
        lines.append("")
        lines.append(f"{day.day.day_name_short} {day.day.month_name_short} {day.day.day}{marker}")
        # Canonical keys sort chronologically as strings.
        by_time = sorted(day.appointments, key=lambda a: a.time)
        lines.extend(f"• {_format_appointment(a)}" for a in by_time)

    if len(lines) == 1:
        lines.append("No appointments.")
    return "\n".join(lines)
