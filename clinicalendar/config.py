from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from clinicalendar.domain import VIEWS


@dataclass(frozen=True)
class Settings:
    # Bookable day: hours are inclusive on both ends.
    start_hour: int = 8
    end_hour: int = 23
    slot_interval_minutes: int = 30

    default_view: str = "week"

    # appointment-service export read by the CLI
    appointments_file: str = "appointments.json"


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, str(default)).strip()
    try:
        return int(raw)
    except ValueError as e:
        raise RuntimeError(f"Invalid {name} value: {raw!r}. Expected integer.") from e


def load_settings(dotenv_path: str | None = None) -> Settings:
    # Prefer .env in repo root; dotenv_path allows overriding in tests.
    load_dotenv(dotenv_path=dotenv_path, override=False)

    start_hour = _int_env("CALENDAR_START_HOUR", 8)
    end_hour = _int_env("CALENDAR_END_HOUR", 23)
    if not 0 <= start_hour <= 23 or not 0 <= end_hour <= 23:
        raise RuntimeError("CALENDAR_START_HOUR and CALENDAR_END_HOUR must be within 0..23")
    if start_hour > end_hour:
        raise RuntimeError("CALENDAR_START_HOUR must be <= CALENDAR_END_HOUR")

    slot_interval_minutes = _int_env("CALENDAR_SLOT_INTERVAL_MINUTES", 30)
    if not 1 <= slot_interval_minutes <= 60:
        raise RuntimeError("CALENDAR_SLOT_INTERVAL_MINUTES must be within 1..60")

    default_view = os.getenv("CALENDAR_DEFAULT_VIEW", "week").strip().lower()
    if default_view not in VIEWS:
        raise RuntimeError(f"Invalid CALENDAR_DEFAULT_VIEW value: {default_view!r}. Expected one of: {', '.join(VIEWS)}")

    return Settings(
        start_hour=start_hour,
        end_hour=end_hour,
        slot_interval_minutes=slot_interval_minutes,
        default_view=default_view,
        appointments_file=os.getenv("APPOINTMENTS_FILE", "appointments.json"),
    )
