from __future__ import annotations

import datetime as dt
import logging
from typing import Any, Mapping

from dateutil.parser import isoparse

from clinicalendar.domain import Appointment, AppointmentFormatError
from clinicalendar.time_slots import convert_to_24_hour, is_12_hour, parse_slot_key, slot_key

logger = logging.getLogger(__name__)

WALK_IN_TYPE = "Walk-in Appointment"


def _require(record: Mapping[str, Any], name: str) -> Any:
    value = record.get(name)
    if value is None or value == "":
        raise AppointmentFormatError(f"Appointment record {record.get('id')!r} is missing {name!r}")
    return value


def _optional_int(value: Any) -> int | None:
    if value is None or value == "":
        return None
    return int(value)


def normalize_date(raw: str | dt.date, *, tz: dt.tzinfo | None = None) -> dt.date:
    """ISO-8601 timestamp -> calendar day in the local (or given) zone."""
    if isinstance(raw, dt.datetime):
        parsed = raw
    elif isinstance(raw, dt.date):
        return raw
    else:
        try:
            parsed = isoparse(raw)
        except (TypeError, ValueError) as e:
            raise AppointmentFormatError(f"Invalid appointment date: {raw!r}") from e

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(tz)
    return parsed.date()


def normalize_time(raw: str) -> str:
    """Any time representation the service emits -> canonical "HH:MM" key.

    Accepts "9:30", "09:30", "9:30 AM" and ISO timestamps such as
    "1970-01-01T10:30:00.000Z" (time-of-day read in UTC).
    """
    try:
        value = raw.strip()
        if is_12_hour(value):
            return convert_to_24_hour(value)
        if "T" not in value:
            # "HH:MM" or "HH:MM:SS"
            return parse_slot_key(":".join(value.split(":")[:2])).key
        parsed = isoparse(value)
    except (AttributeError, TypeError, ValueError) as e:
        raise AppointmentFormatError(f"Invalid appointment time: {raw!r}") from e

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(dt.timezone.utc)
    return slot_key(parsed.hour, parsed.minute)


def _procedures(raw: Any) -> str:
    if isinstance(raw, (list, tuple)):
        return ", ".join(str(p) for p in raw if p)
    return str(raw) if raw else ""


def appointment_from_record(record: Mapping[str, Any], *, tz: dt.tzinfo | None = None) -> Appointment:
    if not isinstance(record, Mapping):
        raise AppointmentFormatError(f"Appointment record must be an object, got {type(record).__name__}")

    user = record.get("user") or {}
    audiologist = record.get("audiologist") or {}
    if not isinstance(user, Mapping):
        raise AppointmentFormatError(f"Appointment record {record.get('id')!r} has a malformed 'user'")
    if not isinstance(audiologist, Mapping):
        raise AppointmentFormatError(f"Appointment record {record.get('id')!r} has a malformed 'audiologist'")

    patient = user.get("fullname") or record.get("patient")
    if not patient:
        raise AppointmentFormatError(f"Appointment record {record.get('id')!r} has no patient name")

    raw_duration = record.get("appointmentDuration")
    if raw_duration is None or raw_duration == "":
        logger.warning("Appointment record %r has no appointmentDuration, using 0 minutes", record.get("id"))
        raw_duration = 0

    try:
        duration = int(raw_duration)
        total_duration = _optional_int(record.get("totalDuration"))
    except (TypeError, ValueError) as e:
        raise AppointmentFormatError(f"Appointment record {record.get('id')!r} has a non-numeric duration") from e

    return Appointment(
        id=str(_require(record, "id")),
        date=normalize_date(_require(record, "appointmentDate"), tz=tz),
        time=normalize_time(str(_require(record, "appointmentTime"))),
        patient=str(patient),
        type=_procedures(record.get("procedures")),
        duration=duration,
        total_duration=total_duration,
        color=record.get("color"),
        audiologist=audiologist.get("name"),
        phone_number=user.get("phoneNumber"),
        email=user.get("email"),
        notes=record.get("notes"),
    )


def appointments_from_records(records: list[Mapping[str, Any]], *, tz: dt.tzinfo | None = None) -> list[Appointment]:
    result: list[Appointment] = []
    for record in records:
        try:
            result.append(appointment_from_record(record, tz=tz))
        except AppointmentFormatError as e:
            # One broken record shouldn't hide the whole calendar.
            logger.warning("Skipping appointment record (%s)", e)
    return result


def walk_in_appointment(
    *,
    id: str,
    date: dt.date | dt.datetime,
    time: str,
    patient: str,
    duration: int,
    type: str | None = None,
    total_duration: int | None = None,
    audiologist: str | None = None,
    phone_number: str | None = None,
    email: str | None = None,
    notes: str | None = None,
) -> Appointment:
    day = date.date() if isinstance(date, dt.datetime) else date
    return Appointment(
        id=id,
        date=day,
        time=normalize_time(time),
        patient=patient,
        type=type or WALK_IN_TYPE,
        duration=duration,
        total_duration=total_duration,
        audiologist=audiologist,
        phone_number=phone_number,
        email=email,
        notes=notes,
    )
