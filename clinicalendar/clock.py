from __future__ import annotations

import datetime as dt
from typing import Callable

Clock = Callable[[], dt.datetime]


def system_clock() -> dt.datetime:
    # Local wall-clock time, naive.
    return dt.datetime.now()


def fixed_clock(moment: dt.datetime | dt.date) -> Clock:
    if not isinstance(moment, dt.datetime):
        moment = dt.datetime.combine(moment, dt.time())

    def _now() -> dt.datetime:
        return moment

    return _now
