from __future__ import annotations

from collections.abc import Iterator, Sequence
from datetime import date, datetime, time, timedelta
from zoneinfo import ZoneInfo

from app.domain.entities.slot import Slot

DAYS_IN_WEEK = 7


def week_start(reference_date: date) -> date:
    """Sunday of the week containing reference_date."""
    days_since_sunday = (reference_date.weekday() + 1) % 7
    return reference_date - timedelta(days=days_since_sunday)


def week_dates(reference_date: date, week_offset: int = 0) -> list[date]:
    sunday = week_start(reference_date) + timedelta(days=week_offset * DAYS_IN_WEEK)
    return [sunday + timedelta(days=i) for i in range(DAYS_IN_WEEK)]


def slot_start(day: date, hour: int, timezone: ZoneInfo) -> datetime:
    return datetime.combine(day, time(hour=hour), tzinfo=timezone)


def enumerate_slots(
    week_offset: int,
    working_hours: Sequence[int],
    timezone: ZoneInfo,
    today: date,
) -> Iterator[Slot]:
    """
    Yield the candidate hourly slots of the week `week_offset` weeks after the
    week containing `today`, Sunday first, hours ascending within each day.
    """
    for day in week_dates(today, week_offset):
        for hour in working_hours:
            yield Slot(day=day, hour=hour, start=slot_start(day, hour, timezone))
