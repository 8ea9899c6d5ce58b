from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from app.api.auth import require_admin
from app.api.errors import to_http_error
from app.api.schemas import BookingCreateSchema, BookingSchema, NotesUpdateSchema, SuccessSchema
from app.application.exceptions import ScheduleError, StoreError
from app.application.use_cases.booking_admin import BookingAdminUseCase
from app.application.use_cases.reserve_booking import ReservationRequest, ReserveBookingUseCase
from app.wiring.dependencies import get_booking_admin_use_case, get_reserve_booking_use_case


router = APIRouter()


@router.get("/bookings", response_model=list[BookingSchema], dependencies=[Depends(require_admin)])
def list_bookings(
    scope: str = Query("all"),
    uc: BookingAdminUseCase = Depends(get_booking_admin_use_case),
):
    try:
        bookings = uc.list_bookings(scope)
    except (ScheduleError, StoreError) as e:
        raise to_http_error(e)
    return [BookingSchema.from_entity(b) for b in bookings]


@router.post("/bookings", response_model=BookingSchema, status_code=201)
def create_booking(
    req: BookingCreateSchema,
    uc: ReserveBookingUseCase = Depends(get_reserve_booking_use_case),
):
    try:
        booking = uc.execute(
            ReservationRequest(
                client_name=req.client_name,
                email=req.email,
                phone=req.phone,
                reason=req.reason,
                date_time=req.date_time,
            )
        )
    except (ScheduleError, StoreError) as e:
        raise to_http_error(e)
    return BookingSchema.from_entity(booking)


@router.get("/bookings/{booking_id}", response_model=BookingSchema, dependencies=[Depends(require_admin)])
def get_booking(
    booking_id: int,
    uc: BookingAdminUseCase = Depends(get_booking_admin_use_case),
):
    try:
        booking = uc.get_booking(booking_id)
    except (ScheduleError, StoreError) as e:
        raise to_http_error(e)
    return BookingSchema.from_entity(booking)


@router.patch("/bookings/{booking_id}/notes", response_model=BookingSchema, dependencies=[Depends(require_admin)])
def update_notes(
    booking_id: int,
    req: NotesUpdateSchema,
    uc: BookingAdminUseCase = Depends(get_booking_admin_use_case),
):
    try:
        booking = uc.update_notes(booking_id, req.notes)
    except (ScheduleError, StoreError) as e:
        raise to_http_error(e)
    return BookingSchema.from_entity(booking)


@router.delete("/bookings/{booking_id}", response_model=SuccessSchema, dependencies=[Depends(require_admin)])
def cancel_booking(
    booking_id: int,
    uc: BookingAdminUseCase = Depends(get_booking_admin_use_case),
):
    try:
        uc.cancel(booking_id)
    except (ScheduleError, StoreError) as e:
        raise to_http_error(e)
    return SuccessSchema()
