from __future__ import annotations

import logging

from fastapi import HTTPException

from app.application.exceptions import (
    AuthError,
    ConflictError,
    NotFoundError,
    ScheduleError,
    StoreError,
    ValidationError,
)

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: list[tuple[type[Exception], int]] = [
    (ValidationError, 400),
    (AuthError, 401),
    (NotFoundError, 404),
    (ConflictError, 409),
]


def to_http_error(error: ScheduleError | StoreError) -> HTTPException:
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return HTTPException(status_code=status_code, detail=str(error))
    logger.error("Request failed", extra={"error": str(error)})
    return HTTPException(status_code=500, detail="Internal server error")
