from __future__ import annotations

from datetime import date, datetime, time
from zoneinfo import ZoneInfo


def now_local(tz_name: str | None = None) -> datetime:
    """Current time in the reference timezone (naive, wall-clock).

    Note: Wrapped so tests can patch/mocked easier.
    """
    if not tz_name:
        return datetime.now()
    return datetime.now(ZoneInfo(tz_name)).replace(tzinfo=None)


def month_bounds(day: date) -> tuple[datetime, datetime]:
    """Half-open ``[start, end)`` covering the calendar month of ``day``.

    ``end`` is midnight of the first day of the next month, so every instant of
    the last day (23:59:59.999...) is inside and nothing from the next month is.
    """
    start = datetime.combine(day.replace(day=1), time.min)
    if day.month == 12:
        end = datetime.combine(date(day.year + 1, 1, 1), time.min)
    else:
        end = datetime.combine(date(day.year, day.month + 1, 1), time.min)
    return start, end
