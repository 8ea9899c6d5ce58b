from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.application.use_cases.availability import SlotView, WeekAvailability
from app.domain.entities.block_request import BlockType
from app.domain.entities.blocked_time import BlockedTime
from app.domain.entities.booking import Booking
from app.domain.entities.slot import SlotStatus


class CamelSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# Required fields are optional here so that missing ones surface as 400, not 422.
class BookingCreateSchema(CamelSchema):
    client_name: str | None = None
    email: str | None = None
    phone: str | None = None
    reason: str | None = None
    date_time: str | None = None


class NotesUpdateSchema(CamelSchema):
    notes: str | None = None


class BlockedTimeCreateSchema(CamelSchema):
    block_type: BlockType = BlockType.single
    start_time: str | None = None
    end_time: str | None = None
    day: str | None = Field(None, alias="date")
    reason: str | None = None


class LoginSchema(CamelSchema):
    username: str | None = None
    password: str | None = None


class BookingSchema(CamelSchema):
    id: int
    client_name: str
    email: str
    phone: str
    reason: str
    date_time: datetime
    notes: str | None = None
    created_at: datetime

    @classmethod
    def from_entity(cls, booking: Booking) -> "BookingSchema":
        return cls(
            id=booking.id,
            client_name=booking.client_name,
            email=booking.email,
            phone=booking.phone,
            reason=booking.reason,
            date_time=booking.date_time,
            notes=booking.notes,
            created_at=booking.created_at,
        )


class BlockedTimeSchema(CamelSchema):
    id: int
    start_time: datetime
    end_time: datetime
    reason: str | None = None
    created_at: datetime

    @classmethod
    def from_entity(cls, blocked: BlockedTime) -> "BlockedTimeSchema":
        return cls(
            id=blocked.id,
            start_time=blocked.start_time,
            end_time=blocked.end_time,
            reason=blocked.reason,
            created_at=blocked.created_at,
        )


class SlotSchema(CamelSchema):
    day: date = Field(alias="date")
    hour: int
    start: datetime
    status: SlotStatus
    reservable: bool

    @classmethod
    def from_view(cls, view: SlotView) -> "SlotSchema":
        return cls(
            day=view.slot.day,
            hour=view.slot.hour,
            start=view.slot.start,
            status=view.status,
            reservable=view.reservable,
        )


class AdminSlotSchema(SlotSchema):
    booking: BookingSchema | None = None

    @classmethod
    def from_view(cls, view: SlotView) -> "AdminSlotSchema":
        return cls(
            day=view.slot.day,
            hour=view.slot.hour,
            start=view.slot.start,
            status=view.status,
            reservable=view.reservable,
            booking=BookingSchema.from_entity(view.booking) if view.booking else None,
        )


class WeekSchema(CamelSchema):
    week_offset: int
    days: list[date]
    slots: list[SlotSchema]

    @classmethod
    def from_week(cls, week: WeekAvailability) -> "WeekSchema":
        return cls(
            week_offset=week.week_offset,
            days=week.days,
            slots=[SlotSchema.from_view(v) for v in week.slots],
        )


class AdminWeekSchema(CamelSchema):
    week_offset: int
    days: list[date]
    slots: list[AdminSlotSchema]

    @classmethod
    def from_week(cls, week: WeekAvailability) -> "AdminWeekSchema":
        return cls(
            week_offset=week.week_offset,
            days=week.days,
            slots=[AdminSlotSchema.from_view(v) for v in week.slots],
        )


class SuccessSchema(BaseModel):
    success: bool = True


class SessionSchema(BaseModel):
    authenticated: bool
