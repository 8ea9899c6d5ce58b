from __future__ import annotations

import threading
from dataclasses import replace
from datetime import datetime

from app.application.exceptions import ConflictError
from app.application.ports.schedule_store import ScheduleStorePort
from app.application.utils.instants import as_utc
from app.application.utils.intervals import overlaps
from app.domain.entities.blocked_time import BlockedTime
from app.domain.entities.booking import Booking


class MemoryScheduleStore(ScheduleStorePort):
    def __init__(self) -> None:
        self._bookings: dict[int, Booking] = {}
        self._booking_ids_by_instant: dict[datetime, int] = {}
        self._blocked_times: dict[int, BlockedTime] = {}
        self._next_booking_id = 1
        self._next_blocked_time_id = 1
        self._lock = threading.Lock()

    def list_bookings(self, start: datetime | None = None, end: datetime | None = None) -> list[Booking]:
        with self._lock:
            bookings = list(self._bookings.values())
        if start is not None:
            bookings = [b for b in bookings if b.date_time >= start]
        if end is not None:
            bookings = [b for b in bookings if b.date_time < end]
        return sorted(bookings, key=lambda b: b.date_time)

    def get_booking(self, booking_id: int) -> Booking | None:
        with self._lock:
            return self._bookings.get(booking_id)

    def find_booking_at(self, date_time: datetime) -> Booking | None:
        with self._lock:
            booking_id = self._booking_ids_by_instant.get(as_utc(date_time))
            return self._bookings.get(booking_id) if booking_id is not None else None

    def add_booking(
        self,
        client_name: str,
        email: str,
        phone: str,
        reason: str,
        date_time: datetime,
        created_at: datetime,
    ) -> Booking:
        key = as_utc(date_time)
        with self._lock:
            if key in self._booking_ids_by_instant:
                raise ConflictError("slot already booked")
            booking = Booking(
                id=self._next_booking_id,
                client_name=client_name,
                email=email,
                phone=phone,
                reason=reason,
                date_time=key,
                created_at=as_utc(created_at),
            )
            self._next_booking_id += 1
            self._bookings[booking.id] = booking
            self._booking_ids_by_instant[key] = booking.id
            return booking

    def update_booking_notes(self, booking_id: int, notes: str | None) -> Booking | None:
        with self._lock:
            booking = self._bookings.get(booking_id)
            if booking is None:
                return None
            updated = replace(booking, notes=notes)
            self._bookings[booking_id] = updated
            return updated

    def delete_booking(self, booking_id: int) -> bool:
        with self._lock:
            booking = self._bookings.pop(booking_id, None)
            if booking is None:
                return False
            self._booking_ids_by_instant.pop(as_utc(booking.date_time), None)
            return True

    def list_blocked_times(self, start: datetime | None = None, end: datetime | None = None) -> list[BlockedTime]:
        with self._lock:
            blocked = list(self._blocked_times.values())
        if start is not None and end is not None:
            blocked = [b for b in blocked if overlaps(b.start_time, b.end_time, start, end)]
        elif start is not None:
            blocked = [b for b in blocked if b.end_time > start]
        elif end is not None:
            blocked = [b for b in blocked if b.start_time < end]
        return sorted(blocked, key=lambda b: b.start_time)

    def add_blocked_time(
        self,
        start_time: datetime,
        end_time: datetime,
        reason: str | None,
        created_at: datetime,
    ) -> BlockedTime:
        with self._lock:
            blocked = BlockedTime(
                id=self._next_blocked_time_id,
                start_time=as_utc(start_time),
                end_time=as_utc(end_time),
                reason=reason,
                created_at=as_utc(created_at),
            )
            self._next_blocked_time_id += 1
            self._blocked_times[blocked.id] = blocked
            return blocked

    def delete_blocked_time(self, blocked_time_id: int) -> bool:
        with self._lock:
            return self._blocked_times.pop(blocked_time_id, None) is not None
