from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Request, Response

from app.api.auth import require_admin
from app.api.errors import to_http_error
from app.api.schemas import AdminWeekSchema, LoginSchema, SessionSchema, SuccessSchema
from app.application.exceptions import ScheduleError, StoreError
from app.application.use_cases.admin_auth import AdminAuthUseCase
from app.application.use_cases.availability import AvailabilityUseCase
from app.core.config import settings
from app.wiring.dependencies import get_admin_auth, get_availability_use_case


router = APIRouter(prefix="/admin")


@router.post("/login", response_model=SuccessSchema)
def login(
    req: LoginSchema,
    response: Response,
    auth: AdminAuthUseCase = Depends(get_admin_auth),
):
    try:
        token = auth.login(req.username, req.password)
    except ScheduleError as e:
        raise to_http_error(e)

    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        max_age=settings.SESSION_MAX_AGE_DAYS * 24 * 60 * 60,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax",
        path="/",
    )
    return SuccessSchema()


@router.post("/logout", response_model=SuccessSchema)
def logout(response: Response):
    response.delete_cookie(key=settings.SESSION_COOKIE_NAME, path="/")
    return SuccessSchema()


@router.get("/session", response_model=SessionSchema)
def session(request: Request, auth: AdminAuthUseCase = Depends(get_admin_auth)):
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    return SessionSchema(authenticated=auth.is_authenticated(token))


@router.get("/calendar", response_model=AdminWeekSchema, dependencies=[Depends(require_admin)])
def calendar(
    week: int = Query(0),
    uc: AvailabilityUseCase = Depends(get_availability_use_case),
):
    try:
        availability = uc.get_week(week, max_week_offset=settings.ADMIN_WEEK_HORIZON)
    except (ScheduleError, StoreError) as e:
        raise to_http_error(e)
    return AdminWeekSchema.from_week(availability)
