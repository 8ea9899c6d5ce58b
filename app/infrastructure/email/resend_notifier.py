from __future__ import annotations

import logging

import httpx

from app.application.exceptions import NotificationError
from app.application.ports.notifier import NotifierPort


class ResendEmailNotifier(NotifierPort):
    def __init__(
        self,
        api_key: str,
        from_email: str,
        base_url: str = "https://api.resend.com",
        client: httpx.Client | None = None,
    ) -> None:
        if not api_key:
            raise ValueError("RESEND_API_KEY is required for email notifications")
        self._api_key = api_key
        self._from_email = from_email
        self._base_url = base_url.rstrip("/")
        self._client = client or httpx.Client(timeout=10.0)
        self._logger = logging.getLogger(__name__)

    def send_email(self, to: str, subject: str, html: str) -> None:
        payload = {
            "from": self._from_email,
            "to": [to],
            "subject": subject,
            "html": html,
        }
        headers = {"Authorization": f"Bearer {self._api_key}"}
        try:
            resp = self._client.post(f"{self._base_url}/emails", json=payload, headers=headers)
        except httpx.HTTPError as e:
            raise NotificationError(f"Email request failed: {e}") from e

        if resp.status_code >= 400:
            try:
                body = resp.json()
            except ValueError:
                body = None
            error_message = body.get("message") if isinstance(body, dict) else None
            if not error_message:
                error_message = resp.text
            self._logger.error(
                "Resend send failed",
                extra={"status": resp.status_code, "error": error_message, "email": to},
            )
            raise NotificationError(f"Email rejected with status {resp.status_code}: {error_message}")
