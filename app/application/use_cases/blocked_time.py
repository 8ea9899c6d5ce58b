from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

from app.application.exceptions import NotFoundError, ValidationError
from app.application.ports.schedule_store import ScheduleStorePort
from app.application.utils.week import slot_start, week_start
from app.domain.entities.block_request import BlockRequest, SingleSlotBlock, WholeDayBlock, WholeWeekBlock
from app.domain.entities.blocked_time import BlockedTime

DAY_START_HOUR = 8
DAY_END_HOUR = 17


def derive_block_range(
    request: BlockRequest,
    timezone: ZoneInfo,
    day_start_hour: int = DAY_START_HOUR,
    day_end_hour: int = DAY_END_HOUR,
) -> tuple[datetime, datetime]:
    """Resolve a block request into its [start, end) interval."""
    if isinstance(request, SingleSlotBlock):
        start, end = request.start, request.end
        if start.tzinfo is None:
            start = start.replace(tzinfo=timezone)
        if end.tzinfo is None:
            end = end.replace(tzinfo=timezone)
        return start, end

    if isinstance(request, WholeDayBlock):
        return slot_start(request.day, day_start_hour, timezone), slot_start(request.day, day_end_hour, timezone)

    if isinstance(request, WholeWeekBlock):
        sunday: date = week_start(request.anchor)
        saturday = sunday + timedelta(days=6)
        return slot_start(sunday, day_start_hour, timezone), slot_start(saturday, day_end_hour, timezone)

    raise ValidationError(f"Unsupported block type: {type(request).__name__}")


class BlockedTimeUseCase:
    def __init__(
        self,
        store: ScheduleStorePort,
        timezone: ZoneInfo,
        day_start_hour: int = DAY_START_HOUR,
        day_end_hour: int = DAY_END_HOUR,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._store = store
        self._timezone = timezone
        self._day_start_hour = day_start_hour
        self._day_end_hour = day_end_hour
        self._clock = clock or (lambda: datetime.now(timezone))
        self._logger = logging.getLogger(__name__)

    def list_blocked_times(self) -> list[BlockedTime]:
        return self._store.list_blocked_times()

    def create(self, request: BlockRequest) -> BlockedTime:
        # Existing bookings inside the range are left alone; the admin cancels them by hand.
        start, end = derive_block_range(request, self._timezone, self._day_start_hour, self._day_end_hour)
        if not start < end:
            raise ValidationError("End time must be after start time")

        reason = (request.reason or "").strip() or None
        blocked = self._store.add_blocked_time(
            start_time=start,
            end_time=end,
            reason=reason,
            created_at=self._clock(),
        )
        self._logger.info(
            "Blocked time created",
            extra={"blocked_time_id": blocked.id, "reason": type(request).__name__},
        )
        return blocked

    def delete(self, blocked_time_id: int) -> None:
        if not self._store.delete_blocked_time(blocked_time_id):
            raise NotFoundError("Blocked time not found")
        self._logger.info("Blocked time deleted", extra={"blocked_time_id": blocked_time_id})
