from __future__ import annotations

import re

from clinicalendar.domain import TimeSlot

DEFAULT_START_HOUR = 8
DEFAULT_END_HOUR = 23
DEFAULT_INTERVAL_MINUTES = 30

_KEY_RE = re.compile(r"^(\d{1,2}):(\d{2})$")
_TIME12_RE = re.compile(r"^(\d{1,2}):(\d{2})\s*([AaPp][Mm])$")


def generate_time_slots(
    start_hour: int = DEFAULT_START_HOUR,
    end_hour: int = DEFAULT_END_HOUR,
    interval_minutes: int = DEFAULT_INTERVAL_MINUTES,
) -> list[TimeSlot]:
    """Slots for every hour in [start_hour, end_hour] at each interval boundary below 60.

    Returns a fresh list on every call. No validation: ``start_hour > end_hour``
    gives an empty list and a zero or non-integer interval fails in ``range``.
    """
    return [
        TimeSlot(hour=hour, minute=minute)
        for hour in range(start_hour, end_hour + 1)
        for minute in range(0, 60, interval_minutes)
    ]


def slot_key(hour: int, minute: int) -> str:
    return f"{hour:02d}:{minute:02d}"


def parse_slot_key(key: str) -> TimeSlot:
    m = _KEY_RE.match(key.strip())
    if not m:
        raise ValueError(f"Invalid time key: {key!r}. Expected HH:MM")

    hour, minute = int(m.group(1)), int(m.group(2))
    if hour > 23 or minute > 59:
        raise ValueError(f"Invalid time key: {key!r}. Out of range")
    return TimeSlot(hour=hour, minute=minute)


def convert_to_24_hour(time12: str) -> str:
    """'2:30 PM' -> '14:30', '12:05 AM' -> '00:05'."""
    m = _TIME12_RE.match(time12.strip())
    if not m:
        raise ValueError(f"Invalid 12-hour time: {time12!r}")

    hours, minutes, period = int(m.group(1)), int(m.group(2)), m.group(3).upper()
    if not 1 <= hours <= 12 or minutes > 59:
        raise ValueError(f"Invalid 12-hour time: {time12!r}")

    if period == "PM" and hours != 12:
        hours += 12
    elif period == "AM" and hours == 12:
        hours = 0
    return slot_key(hours, minutes)


def convert_to_12_hour(time24: str) -> str:
    return parse_slot_key(time24).display12


def is_12_hour(value: str) -> bool:
    return _TIME12_RE.match(value.strip()) is not None
