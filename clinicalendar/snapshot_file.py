from __future__ import annotations

import datetime as dt
import json
import logging
import os
import tempfile
from typing import Any, Iterable

from clinicalendar.adapter import appointments_from_records
from clinicalendar.domain import Appointment

logger = logging.getLogger(__name__)


def load_appointments(path: str, *, tz: dt.tzinfo | None = None) -> list[Appointment]:
    """Read an appointment-service export: ``{"appointments": [...]}``, ``{"data": {"appointments": [...]}}`` or a bare list."""
    if not os.path.exists(path):
        logger.info("No appointments file at %s, starting with an empty calendar", path)
        return []

    with open(path, "r", encoding="utf-8") as f:
        raw = json.load(f)

    if isinstance(raw, dict):
        data = raw.get("data", raw)
        records = data.get("appointments") if isinstance(data, dict) else data
    else:
        records = raw

    if not isinstance(records, list):
        logger.warning("No appointment list found in %s (got %s), starting with an empty calendar", path, type(records).__name__)
        records = []

    appointments = appointments_from_records(records, tz=tz)
    logger.info("Loaded %d of %d appointment records from %s", len(appointments), len(records), path)
    return appointments


def _to_record(a: Appointment) -> dict[str, Any]:
    day = a.date.date() if isinstance(a.date, dt.datetime) else a.date
    return {
        "id": a.id,
        "appointmentDate": day.isoformat(),
        "appointmentTime": a.time,
        "appointmentDuration": a.duration,
        "totalDuration": a.total_duration,
        "procedures": a.type,
        "color": a.color,
        "notes": a.notes,
        "user": {"fullname": a.patient, "phoneNumber": a.phone_number, "email": a.email},
        "audiologist": {"name": a.audiologist} if a.audiologist else None,
    }


def save_appointments(path: str, appointments: Iterable[Appointment]) -> None:
    """Write a normalized snapshot that ``load_appointments`` reads back unchanged."""
    data = {
        "appointments": [_to_record(a) for a in appointments],
    }

    folder = os.path.dirname(os.path.abspath(path))
    if folder and not os.path.exists(folder):
        os.makedirs(folder, exist_ok=True)

    # Atomic write
    with tempfile.NamedTemporaryFile("w", delete=False, encoding="utf-8", dir=folder, suffix=".tmp") as tf:
        json.dump(data, tf, ensure_ascii=False, indent=2)
        tmp_name = tf.name

    os.replace(tmp_name, path)
