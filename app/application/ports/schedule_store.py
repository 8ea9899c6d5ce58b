from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from app.domain.entities.blocked_time import BlockedTime
from app.domain.entities.booking import Booking


class ScheduleStorePort(ABC):
    @abstractmethod
    def list_bookings(self, start: datetime | None = None, end: datetime | None = None) -> list[Booking]:
        """Bookings ordered by date_time; optionally only those with start <= date_time < end."""
        raise NotImplementedError

    @abstractmethod
    def get_booking(self, booking_id: int) -> Booking | None:
        raise NotImplementedError

    @abstractmethod
    def find_booking_at(self, date_time: datetime) -> Booking | None:
        raise NotImplementedError

    @abstractmethod
    def add_booking(
        self,
        client_name: str,
        email: str,
        phone: str,
        reason: str,
        date_time: datetime,
        created_at: datetime,
    ) -> Booking:
        """
        Persist a booking. Must raise ConflictError when a booking already
        exists at date_time, even if the caller checked beforehand.
        """
        raise NotImplementedError

    @abstractmethod
    def update_booking_notes(self, booking_id: int, notes: str | None) -> Booking | None:
        raise NotImplementedError

    @abstractmethod
    def delete_booking(self, booking_id: int) -> bool:
        raise NotImplementedError

    @abstractmethod
    def list_blocked_times(self, start: datetime | None = None, end: datetime | None = None) -> list[BlockedTime]:
        """Blocked times ordered by start_time; optionally only those overlapping [start, end)."""
        raise NotImplementedError

    @abstractmethod
    def add_blocked_time(
        self,
        start_time: datetime,
        end_time: datetime,
        reason: str | None,
        created_at: datetime,
    ) -> BlockedTime:
        raise NotImplementedError

    @abstractmethod
    def delete_blocked_time(self, blocked_time_id: int) -> bool:
        raise NotImplementedError
