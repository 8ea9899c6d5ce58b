from __future__ import annotations

import hmac
import logging
import secrets
import time

from app.application.ports.session_tokens import SessionTokenPort


logger = logging.getLogger(__name__)


class SessionTokenSigner(SessionTokenPort):
    """Issues and verifies opaque admin session tokens of the form issued.nonce.signature."""

    def __init__(self, secret: str | None, max_age_seconds: int) -> None:
        if not secret:
            logger.warning("SESSION_SECRET not set; admin sessions will not survive a restart")
            secret = secrets.token_hex(32)
        self._secret = secret.encode("utf-8")
        self._max_age_seconds = max_age_seconds

    def _sign(self, payload: str) -> str:
        return hmac.new(self._secret, payload.encode("utf-8"), "sha256").hexdigest()

    def issue(self, now_ts: float | None = None) -> str:
        issued = int(now_ts if now_ts is not None else time.time())
        payload = f"{issued}.{secrets.token_urlsafe(16)}"
        return f"{payload}.{self._sign(payload)}"

    def verify(self, token: str | None, now_ts: float | None = None) -> bool:
        if not token:
            return False

        try:
            issued_str, nonce, signature = token.split(".", 2)
            issued = int(issued_str)
        except ValueError:
            return False

        expected = self._sign(f"{issued_str}.{nonce}")
        if not hmac.compare_digest(expected, signature):
            return False

        now = now_ts if now_ts is not None else time.time()
        return 0 <= now - issued <= self._max_age_seconds
