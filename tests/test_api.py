"""
HTTP tests for the booking API using FastAPI's TestClient.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.application.ports.notifier import NotifierPort
from app.application.use_cases.admin_auth import AdminAuthUseCase
from app.application.use_cases.availability import AvailabilityUseCase
from app.application.use_cases.blocked_time import BlockedTimeUseCase
from app.application.use_cases.booking_admin import BookingAdminUseCase
from app.application.use_cases.reserve_booking import ReserveBookingUseCase
from app.infrastructure.auth.session_token import SessionTokenSigner
from app.infrastructure.store.memory_store import MemoryScheduleStore
from app.main import app
from app.wiring import dependencies
from conftest import UTC, WORKING_HOURS, fixed_clock

BOOKING = {
    "clientName": "Jordan Lee",
    "email": "jordan@example.com",
    "phone": "555-0100",
    "reason": "Strength program",
    "dateTime": "2024-06-10T09:00:00Z",
}


class RecordingNotifier(NotifierPort):
    def __init__(self) -> None:
        self.sent: list[str] = []

    def send_email(self, to: str, subject: str, html: str) -> None:
        self.sent.append(to)


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def client(notifier):
    store = MemoryScheduleStore()
    clock = fixed_clock()
    auth = AdminAuthUseCase(username="coach", password="s3cret", signer=SessionTokenSigner("key", 3600))

    app.dependency_overrides[dependencies.get_timezone] = lambda: UTC
    app.dependency_overrides[dependencies.get_admin_auth] = lambda: auth
    app.dependency_overrides[dependencies.get_availability_use_case] = lambda: AvailabilityUseCase(
        store=store, timezone=UTC, working_hours=WORKING_HOURS, clock=clock
    )
    app.dependency_overrides[dependencies.get_reserve_booking_use_case] = lambda: ReserveBookingUseCase(
        store=store, timezone=UTC, working_hours=WORKING_HOURS, clock=clock
    )
    app.dependency_overrides[dependencies.get_blocked_time_use_case] = lambda: BlockedTimeUseCase(
        store=store, timezone=UTC, clock=clock
    )
    app.dependency_overrides[dependencies.get_booking_admin_use_case] = lambda: BookingAdminUseCase(
        store=store, notifier=notifier, timezone=UTC, business_name="Coach", clock=clock
    )
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def _login(client: TestClient) -> None:
    resp = client.post("/admin/login", json={"username": "coach", "password": "s3cret"})
    assert resp.status_code == 200
    assert "admin_token" in resp.cookies


def test_health(client):
    """Liveness endpoint answers ok."""
    assert client.get("/health").json() == {"status": "ok"}


def test_create_booking_then_conflict(client):
    """POST /bookings returns 201, then 409 for the same slot."""
    resp = client.post("/bookings", json=BOOKING)
    assert resp.status_code == 201
    body = resp.json()
    assert body["clientName"] == "Jordan Lee"
    assert body["dateTime"] == "2024-06-10T09:00:00Z"

    again = client.post("/bookings", json={**BOOKING, "clientName": "Sam", "email": "sam@example.com"})
    assert again.status_code == 409
    assert again.json()["detail"] == "slot already booked"

    _login(client)
    assert len(client.get("/bookings").json()) == 1


def test_missing_fields_are_400(client):
    """Missing booking fields return 400, not 422."""
    resp = client.post("/bookings", json={"clientName": "Jordan"})

    assert resp.status_code == 400
    assert resp.json()["detail"] == "All fields are required"


def test_admin_endpoints_require_session(client):
    """Admin-only routes return 401 without a session cookie."""
    assert client.get("/bookings").status_code == 401
    assert client.get("/blocked-time").status_code == 401
    assert client.delete("/bookings/1").status_code == 401
    assert client.patch("/bookings/1/notes", json={"notes": "x"}).status_code == 401
    assert client.post("/blocked-time", json={"blockType": "day", "date": "2024-06-10"}).status_code == 401
    assert client.delete("/blocked-time/1").status_code == 401
    assert client.get("/admin/calendar").status_code == 401
    assert client.get("/admin/session").json() == {"authenticated": False}


def test_bad_login_is_401(client):
    """Wrong credentials return 401 and set no cookie."""
    resp = client.post("/admin/login", json={"username": "coach", "password": "nope"})

    assert resp.status_code == 401
    assert "admin_token" not in resp.cookies


def test_blocked_day_makes_slot_unavailable(client):
    """A blocked day turns a booking attempt into 409 slot unavailable."""
    _login(client)
    resp = client.post(
        "/blocked-time",
        json={"startTime": "2024-06-10T08:00:00Z", "endTime": "2024-06-10T17:00:00Z", "reason": "Vacation"},
    )
    assert resp.status_code == 201
    assert resp.json()["reason"] == "Vacation"

    booking = client.post("/bookings", json={**BOOKING, "dateTime": "2024-06-10T10:00:00Z"})
    assert booking.status_code == 409
    assert booking.json()["detail"] == "slot unavailable"


def test_block_types_and_delete(client):
    """Week blocks derive Sunday to Saturday; deleting twice gives 404."""
    _login(client)
    week = client.post("/blocked-time", json={"blockType": "week", "date": "2024-06-12"})
    assert week.status_code == 201
    assert week.json()["startTime"] == "2024-06-09T08:00:00Z"
    assert week.json()["endTime"] == "2024-06-15T17:00:00Z"

    missing = client.post("/blocked-time", json={"reason": "no times"})
    assert missing.status_code == 400

    block_id = week.json()["id"]
    assert client.delete(f"/blocked-time/{block_id}").json() == {"success": True}
    assert client.delete(f"/blocked-time/{block_id}").status_code == 404
    assert client.get("/blocked-time").json() == []


def test_notes_update_notifies_client(client, notifier):
    """PATCH notes saves and emails the client; unknown id gives 404."""
    booking_id = client.post("/bookings", json=BOOKING).json()["id"]
    _login(client)

    resp = client.patch(f"/bookings/{booking_id}/notes", json={"notes": "Bring water"})

    assert resp.status_code == 200
    assert resp.json()["notes"] == "Bring water"
    assert notifier.sent == ["jordan@example.com"]
    assert client.patch("/bookings/999/notes", json={"notes": "x"}).status_code == 404


def test_cancel_booking(client):
    """Cancelling frees the slot for a new booking."""
    booking_id = client.post("/bookings", json=BOOKING).json()["id"]
    _login(client)

    assert client.delete(f"/bookings/{booking_id}").status_code == 200
    assert client.delete(f"/bookings/{booking_id}").status_code == 404
    assert client.post("/bookings", json=BOOKING).status_code == 201


def test_public_availability_hides_client_data(client):
    """Public week view shows status only and enforces the public horizon."""
    client.post("/bookings", json=BOOKING)

    resp = client.get("/availability", params={"week": 0})
    assert resp.status_code == 200
    body = resp.json()
    assert len(body["slots"]) == 63
    booked = [s for s in body["slots"] if s["status"] == "booked"]
    assert len(booked) == 1
    assert booked[0]["date"] == "2024-06-10" and booked[0]["hour"] == 9
    assert booked[0]["reservable"] is False
    assert "booking" not in booked[0]

    assert client.get("/availability", params={"week": 2}).status_code == 400


def test_admin_calendar_includes_bookings(client):
    """Admin calendar attaches bookings and allows two weeks ahead."""
    client.post("/bookings", json=BOOKING)
    _login(client)

    resp = client.get("/admin/calendar", params={"week": 2})
    assert resp.status_code == 200

    week0 = client.get("/admin/calendar", params={"week": 0}).json()
    booked = [s for s in week0["slots"] if s["status"] == "booked"]
    assert booked[0]["booking"]["email"] == "jordan@example.com"
    assert client.get("/admin/calendar", params={"week": 3}).status_code == 400


def test_logout_clears_session(client):
    """Logout removes the session cookie."""
    _login(client)
    assert client.get("/admin/session").json() == {"authenticated": True}

    client.post("/admin/logout")

    assert client.get("/admin/session").json() == {"authenticated": False}
