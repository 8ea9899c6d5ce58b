"""
Tests for the Resend email notifier using httpx.MockTransport.
"""

from __future__ import annotations

import json
from datetime import datetime

import httpx
import pytest

from app.application.exceptions import NotificationError
from app.application.use_cases.booking_admin import BookingAdminUseCase
from app.infrastructure.email.resend_notifier import ResendEmailNotifier
from app.infrastructure.store.memory_store import MemoryScheduleStore
from conftest import NOW, UTC, fixed_clock


def _notifier(handler) -> ResendEmailNotifier:
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return ResendEmailNotifier(api_key="re_test", from_email="Coach <coach@example.com>", client=client)


def test_send_email_posts_payload():
    """The notifier posts from, to, subject and html with the bearer key."""
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"id": "email_1"})

    _notifier(handler).send_email("jordan@example.com", "Hello", "<p>Hi</p>")

    assert len(seen) == 1
    request = seen[0]
    assert str(request.url) == "https://api.resend.com/emails"
    assert request.headers["Authorization"] == "Bearer re_test"
    body = json.loads(request.content)
    assert body == {
        "from": "Coach <coach@example.com>",
        "to": ["jordan@example.com"],
        "subject": "Hello",
        "html": "<p>Hi</p>",
    }


def test_rejected_request_raises_notification_error():
    """A 4xx response becomes NotificationError."""
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(422, json={"message": "Invalid `to` field"})

    with pytest.raises(NotificationError, match="422"):
        _notifier(handler).send_email("bad", "Hello", "<p>Hi</p>")


def test_network_failure_raises_notification_error():
    """Transport errors become NotificationError."""
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(NotificationError):
        _notifier(handler).send_email("jordan@example.com", "Hello", "<p>Hi</p>")


def test_api_key_required():
    """The notifier cannot be built without an API key."""
    with pytest.raises(ValueError):
        ResendEmailNotifier(api_key="", from_email="coach@example.com")


@pytest.mark.parametrize("body", [["bad gateway"], "bad gateway", None])
def test_non_object_error_body_raises_notification_error(body):
    """Error bodies that are not JSON objects still map to NotificationError."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, json=body)

    with pytest.raises(NotificationError, match="502"):
        _notifier(handler).send_email("jordan@example.com", "Hello", "<p>Hi</p>")


def test_notes_update_survives_gateway_error_from_resend():
    """A 502 with a JSON list body is logged and swallowed; the notes still save."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, json=["bad gateway"])

    store = MemoryScheduleStore()
    booking = store.add_booking("Ann", "ann@example.com", "555", "Consult", datetime(2024, 6, 10, 9, tzinfo=UTC), NOW)
    uc = BookingAdminUseCase(
        store=store,
        notifier=_notifier(handler),
        timezone=UTC,
        business_name="Coach",
        clock=fixed_clock(),
    )

    updated = uc.update_notes(booking.id, "hello")

    assert updated.notes == "hello"
    assert store.get_booking(booking.id).notes == "hello"
