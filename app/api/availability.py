from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from app.api.errors import to_http_error
from app.api.schemas import WeekSchema
from app.application.exceptions import ScheduleError, StoreError
from app.application.use_cases.availability import AvailabilityUseCase
from app.core.config import settings
from app.wiring.dependencies import get_availability_use_case


router = APIRouter()


@router.get("/availability", response_model=WeekSchema)
def availability(
    week: int = Query(0),
    uc: AvailabilityUseCase = Depends(get_availability_use_case),
):
    try:
        result = uc.get_week(week, max_week_offset=settings.PUBLIC_WEEK_HORIZON)
    except (ScheduleError, StoreError) as e:
        raise to_http_error(e)
    return WeekSchema.from_week(result)
