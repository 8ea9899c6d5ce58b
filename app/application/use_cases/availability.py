from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from datetime import date, datetime
from zoneinfo import ZoneInfo

from app.application.exceptions import ValidationError
from app.application.ports.schedule_store import ScheduleStorePort
from app.application.utils.intervals import overlaps
from app.application.utils.week import enumerate_slots
from app.domain.entities.blocked_time import BlockedTime
from app.domain.entities.booking import Booking
from app.domain.entities.slot import Slot, SlotStatus


def find_booking(slot: Slot, bookings: Iterable[Booking]) -> Booking | None:
    for booking in bookings:
        if booking.date_time == slot.start:
            return booking
    return None


def is_blocked(start: datetime, end: datetime, blocked_times: Iterable[BlockedTime]) -> bool:
    return any(overlaps(start, end, b.start_time, b.end_time) for b in blocked_times)


def classify(
    slot: Slot,
    bookings: Iterable[Booking],
    blocked_times: Iterable[BlockedTime],
    now: datetime,
) -> SlotStatus:
    """Label a slot; first match wins: past, booked, blocked, available."""
    if slot.start < now:
        return SlotStatus.past
    if find_booking(slot, bookings) is not None:
        return SlotStatus.booked
    if is_blocked(slot.start, slot.end, blocked_times):
        return SlotStatus.blocked
    return SlotStatus.available


@dataclass(frozen=True)
class SlotView:
    slot: Slot
    status: SlotStatus
    booking: Booking | None = None

    @property
    def reservable(self) -> bool:
        return self.status is SlotStatus.available


@dataclass(frozen=True)
class WeekAvailability:
    week_offset: int
    days: list[date]
    slots: list[SlotView]


class AvailabilityUseCase:
    def __init__(
        self,
        store: ScheduleStorePort,
        timezone: ZoneInfo,
        working_hours: Sequence[int],
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._store = store
        self._timezone = timezone
        self._working_hours = list(working_hours)
        self._clock = clock or (lambda: datetime.now(timezone))
        self._logger = logging.getLogger(__name__)

    def get_week(self, week_offset: int, max_week_offset: int) -> WeekAvailability:
        if week_offset < 0 or week_offset > max_week_offset:
            raise ValidationError(f"week must be between 0 and {max_week_offset}")

        now = self._clock()
        slots = list(
            enumerate_slots(week_offset, self._working_hours, self._timezone, now.astimezone(self._timezone).date())
        )
        window_start = slots[0].start
        window_end = slots[-1].end

        # Always re-read: no cached view of bookings or blocks.
        bookings = self._store.list_bookings(window_start, window_end)
        blocked_times = self._store.list_blocked_times(window_start, window_end)

        views = [
            SlotView(
                slot=slot,
                status=classify(slot, bookings, blocked_times, now),
                booking=find_booking(slot, bookings),
            )
            for slot in slots
        ]
        days = sorted({slot.day for slot in slots})
        self._logger.debug("Week availability computed", extra={"week_offset": week_offset})
        return WeekAvailability(week_offset=week_offset, days=days, slots=views)
