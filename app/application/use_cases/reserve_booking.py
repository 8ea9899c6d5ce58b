from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import datetime
from zoneinfo import ZoneInfo

from app.application.exceptions import ConflictError, ValidationError
from app.application.ports.schedule_store import ScheduleStorePort
from app.application.use_cases.availability import is_blocked
from app.application.utils.instants import parse_instant
from app.domain.entities.booking import Booking
from app.domain.entities.slot import SLOT_LENGTH


@dataclass(frozen=True)
class ReservationRequest:
    client_name: str | None
    email: str | None
    phone: str | None
    reason: str | None
    date_time: str | datetime | None


class ReserveBookingUseCase:
    def __init__(
        self,
        store: ScheduleStorePort,
        timezone: ZoneInfo,
        working_hours: Sequence[int],
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._store = store
        self._timezone = timezone
        self._working_hours = set(working_hours)
        self._clock = clock or (lambda: datetime.now(timezone))
        self._logger = logging.getLogger(__name__)

    def execute(self, request: ReservationRequest) -> Booking:
        """
        Validate and persist a booking.

        Order: required fields, slot alignment, past, already booked, blocked.
        The store's unique-instant constraint decides races between the
        booked check and the insert.
        """
        fields = {
            "clientName": request.client_name,
            "email": request.email,
            "phone": request.phone,
            "reason": request.reason,
        }
        values = {name: (value or "").strip() for name, value in fields.items()}
        if not all(values.values()) or request.date_time in (None, ""):
            raise ValidationError("All fields are required")

        date_time = parse_instant(request.date_time, self._timezone)
        self._check_slot_alignment(date_time)

        now = self._clock()
        if date_time < now:
            raise ValidationError("slot is in the past")

        if self._store.find_booking_at(date_time) is not None:
            self._logger.info("Reservation rejected", extra={"date_time": date_time.isoformat(), "reason": "booked"})
            raise ConflictError("slot already booked")

        slot_end = date_time + SLOT_LENGTH
        if is_blocked(date_time, slot_end, self._store.list_blocked_times(date_time, slot_end)):
            self._logger.info("Reservation rejected", extra={"date_time": date_time.isoformat(), "reason": "blocked"})
            raise ConflictError("slot unavailable")

        booking = self._store.add_booking(
            client_name=values["clientName"],
            email=values["email"],
            phone=values["phone"],
            reason=values["reason"],
            date_time=date_time,
            created_at=now,
        )
        self._logger.info(
            "Booking created",
            extra={"booking_id": booking.id, "date_time": date_time.isoformat()},
        )
        return booking

    def _check_slot_alignment(self, date_time: datetime) -> None:
        if (date_time.minute, date_time.second, date_time.microsecond) != (0, 0, 0):
            raise ValidationError("dateTime must be at the top of an hour")
        if date_time.hour not in self._working_hours:
            raise ValidationError("dateTime is outside working hours")
