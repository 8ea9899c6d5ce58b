from __future__ import annotations

import hmac
import logging

from app.application.exceptions import AuthError, ValidationError
from app.application.ports.session_tokens import SessionTokenPort


class AdminAuthUseCase:
    def __init__(self, username: str | None, password: str | None, signer: SessionTokenPort) -> None:
        self._username = username
        self._password = password
        self._signer = signer
        self._logger = logging.getLogger(__name__)

    def login(self, username: str | None, password: str | None) -> str:
        """Check the shared credential pair and return a fresh session token."""
        if not username or not password:
            raise ValidationError("Username and password are required")

        if not self._username or not self._password:
            self._logger.warning("Admin credentials not configured -> rejecting login")
            raise AuthError("Invalid credentials")

        user_ok = hmac.compare_digest(username.encode("utf-8"), self._username.encode("utf-8"))
        password_ok = hmac.compare_digest(password.encode("utf-8"), self._password.encode("utf-8"))
        if not (user_ok and password_ok):
            self._logger.info("Admin login failed")
            raise AuthError("Invalid credentials")

        self._logger.info("Admin login succeeded")
        return self._signer.issue()

    def is_authenticated(self, token: str | None) -> bool:
        return self._signer.verify(token)

    def require(self, token: str | None) -> None:
        if not self.is_authenticated(token):
            raise AuthError("Unauthorized")
