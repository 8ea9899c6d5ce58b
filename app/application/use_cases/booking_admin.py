from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from zoneinfo import ZoneInfo

from app.application.exceptions import NotFoundError, NotificationError, ValidationError
from app.application.ports.notifier import NotifierPort
from app.application.ports.schedule_store import ScheduleStorePort
from app.application.utils.email_templates import NOTES_SUBJECT, build_notes_email
from app.application.utils.instants import format_booking_time
from app.domain.entities.booking import Booking

BOOKING_SCOPES = {"all", "upcoming", "past"}


class BookingAdminUseCase:
    def __init__(
        self,
        store: ScheduleStorePort,
        notifier: NotifierPort | None,
        timezone: ZoneInfo,
        business_name: str,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._store = store
        self._notifier = notifier
        self._timezone = timezone
        self._business_name = business_name
        self._clock = clock or (lambda: datetime.now(timezone))
        self._logger = logging.getLogger(__name__)

    def list_bookings(self, scope: str = "all") -> list[Booking]:
        if scope not in BOOKING_SCOPES:
            raise ValidationError(f"scope must be one of {sorted(BOOKING_SCOPES)}")
        bookings = self._store.list_bookings()
        if scope == "all":
            return bookings
        now = self._clock()
        if scope == "upcoming":
            return [b for b in bookings if b.date_time >= now]
        return [b for b in bookings if b.date_time < now]

    def get_booking(self, booking_id: int) -> Booking:
        booking = self._store.get_booking(booking_id)
        if booking is None:
            raise NotFoundError("Booking not found")
        return booking

    def cancel(self, booking_id: int) -> None:
        if not self._store.delete_booking(booking_id):
            raise NotFoundError("Booking not found")
        self._logger.info("Booking cancelled", extra={"booking_id": booking_id})

    def update_notes(self, booking_id: int, notes: str | None) -> Booking:
        """
        Persist notes and, when they are non-empty, email them to the client.
        A failed email never fails the update.
        """
        updated = self._store.update_booking_notes(booking_id, notes)
        if updated is None:
            raise NotFoundError("Booking not found")

        if notes and notes.strip():
            self._notify(updated, notes)
        return updated

    def _notify(self, booking: Booking, notes: str) -> None:
        if self._notifier is None:
            self._logger.info("Notifications disabled -> skipping email", extra={"booking_id": booking.id})
            return

        html = build_notes_email(
            client_name=booking.client_name,
            booking_time=format_booking_time(booking.date_time, self._timezone),
            notes=notes,
            business_name=self._business_name,
        )
        try:
            self._notifier.send_email(to=booking.email, subject=NOTES_SUBJECT, html=html)
        except NotificationError as e:
            self._logger.error(
                "Error sending notes email",
                extra={"booking_id": booking.id, "email": booking.email, "error": str(e)},
            )
            return
        self._logger.info("Notes email sent", extra={"booking_id": booking.id, "email": booking.email})
