from __future__ import annotations

import logging

from app.application.ports.notifier import NotifierPort


class LoggingNotifier(NotifierPort):
    def __init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def send_email(self, to: str, subject: str, html: str) -> None:
        self._logger.info("WOULD_SEND_EMAIL", extra={"email": to, "reason": subject})
