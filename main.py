import argparse
import datetime as dt
import logging

from clinicalendar.agenda import build_agenda, format_agenda
from clinicalendar.config import load_settings
from clinicalendar.navigator import parse_view, shift_anchor, today_anchor
from clinicalendar.snapshot_file import load_appointments, save_appointments


def _setup_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )


def _parse_anchor(raw: str) -> dt.date:
    try:
        return dt.date.fromisoformat(raw)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid date {raw!r}, expected YYYY-MM-DD") from e


def _parse_view_arg(raw: str) -> str:
    try:
        return parse_view(raw)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def main() -> int:
    parser = argparse.ArgumentParser(description="Clinic calendar: appointment agenda for a day, week or month")
    parser.add_argument("--date", type=_parse_anchor, default=None, help="Anchor date (YYYY-MM-DD), default today")
    parser.add_argument("--view", type=_parse_view_arg, default=None, help="day, week or month (default from CALENDAR_DEFAULT_VIEW)")
    parser.add_argument("--shift", type=int, default=0, help="Move the anchor N periods forward (negative: back)")
    parser.add_argument("--appointments", default=None, help="Appointment export JSON (default from APPOINTMENTS_FILE)")
    parser.add_argument("--export", default=None, help="Write the normalized appointment snapshot to this path")
    args = parser.parse_args()

    _setup_logging()
    settings = load_settings()
    logger = logging.getLogger(__name__)

    view = args.view or settings.default_view
    anchor = args.date or today_anchor()
    if args.shift:
        anchor = shift_anchor(anchor, view, args.shift)

    appointments = load_appointments(args.appointments or settings.appointments_file)

    agenda = build_agenda(
        anchor,
        view,
        appointments,
        start_hour=settings.start_hour,
        end_hour=settings.end_hour,
        interval_minutes=settings.slot_interval_minutes,
    )
    print(format_agenda(agenda))

    if args.export:
        save_appointments(args.export, appointments)
        logger.info("Normalized snapshot saved to %s", args.export)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
