from __future__ import annotations

from fastapi import Depends, HTTPException, Request

from app.application.use_cases.admin_auth import AdminAuthUseCase
from app.core.config import settings
from app.wiring.dependencies import get_admin_auth


def require_admin(request: Request, auth: AdminAuthUseCase = Depends(get_admin_auth)) -> None:
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not auth.is_authenticated(token):
        raise HTTPException(status_code=401, detail="Unauthorized")
