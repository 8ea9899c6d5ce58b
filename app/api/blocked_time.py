from __future__ import annotations

from datetime import date
from zoneinfo import ZoneInfo

from fastapi import APIRouter, Depends

from app.api.auth import require_admin
from app.api.errors import to_http_error
from app.api.schemas import BlockedTimeCreateSchema, BlockedTimeSchema, SuccessSchema
from app.application.exceptions import ScheduleError, StoreError, ValidationError
from app.application.use_cases.blocked_time import BlockedTimeUseCase
from app.application.utils.instants import parse_instant
from app.domain.entities.block_request import BlockRequest, BlockType, SingleSlotBlock, WholeDayBlock, WholeWeekBlock
from app.wiring.dependencies import get_blocked_time_use_case, get_timezone


router = APIRouter()


def to_block_request(req: BlockedTimeCreateSchema, timezone: ZoneInfo) -> BlockRequest:
    if req.block_type is BlockType.single:
        if not req.start_time or not req.end_time:
            raise ValidationError("Start and end times are required")
        return SingleSlotBlock(
            start=parse_instant(req.start_time, timezone, field="startTime"),
            end=parse_instant(req.end_time, timezone, field="endTime"),
            reason=req.reason,
        )

    if not req.day:
        raise ValidationError("date is required for day and week blocks")
    try:
        day = date.fromisoformat(req.day)
    except ValueError:
        raise ValidationError("date must be YYYY-MM-DD")

    if req.block_type is BlockType.day:
        return WholeDayBlock(day=day, reason=req.reason)
    return WholeWeekBlock(anchor=day, reason=req.reason)


@router.get("/blocked-time", response_model=list[BlockedTimeSchema], dependencies=[Depends(require_admin)])
def list_blocked_times(uc: BlockedTimeUseCase = Depends(get_blocked_time_use_case)):
    try:
        blocked = uc.list_blocked_times()
    except (ScheduleError, StoreError) as e:
        raise to_http_error(e)
    return [BlockedTimeSchema.from_entity(b) for b in blocked]


@router.post(
    "/blocked-time",
    response_model=BlockedTimeSchema,
    status_code=201,
    dependencies=[Depends(require_admin)],
)
def create_blocked_time(
    req: BlockedTimeCreateSchema,
    uc: BlockedTimeUseCase = Depends(get_blocked_time_use_case),
    timezone: ZoneInfo = Depends(get_timezone),
):
    try:
        blocked = uc.create(to_block_request(req, timezone))
    except (ScheduleError, StoreError) as e:
        raise to_http_error(e)
    return BlockedTimeSchema.from_entity(blocked)


@router.delete(
    "/blocked-time/{blocked_time_id}",
    response_model=SuccessSchema,
    dependencies=[Depends(require_admin)],
)
def delete_blocked_time(
    blocked_time_id: int,
    uc: BlockedTimeUseCase = Depends(get_blocked_time_use_case),
):
    try:
        uc.delete(blocked_time_id)
    except (ScheduleError, StoreError) as e:
        raise to_http_error(e)
    return SuccessSchema()
