#!/usr/bin/env python3
"""Smoke script for the booking API against a running server."""

import os
import sys
from datetime import datetime, timedelta

import httpx


BASE_URL = os.environ.get("BOOKING_BASE_URL", "http://127.0.0.1:8000")


def pick_slot(client: httpx.Client) -> str | None:
    """Return the start of the first reservable slot in the next two weeks."""
    for week in (0, 1):
        response = client.get(f"{BASE_URL}/availability", params={"week": week})
        response.raise_for_status()
        for slot in response.json()["slots"]:
            if slot["reservable"]:
                return slot["start"]
    return None


def test_booking(client: httpx.Client) -> int | None:
    print("=" * 60)
    print("Testing POST /bookings")
    print("=" * 60)

    slot = pick_slot(client)
    if not slot:
        print("❌ No reservable slot found")
        return None

    payload = {
        "clientName": "Smoke Test",
        "email": "smoke@example.com",
        "phone": "555-0100",
        "reason": "Smoke test booking",
        "dateTime": slot,
    }
    try:
        response = client.post(f"{BASE_URL}/bookings", json=payload)
        response.raise_for_status()
        data = response.json()
        print(f"✅ Booked {data['dateTime']} (id={data['id']})")

        again = client.post(f"{BASE_URL}/bookings", json=payload)
        print(f"{'✅' if again.status_code == 409 else '❌'} Second attempt -> {again.status_code}")
        return data["id"]
    except httpx.HTTPStatusError as e:
        print(f"❌ HTTP Error: {e.response.status_code}")
        print(f"Response: {e.response.text}")
        return None


def test_admin(client: httpx.Client, booking_id: int | None) -> bool:
    print("\n" + "=" * 60)
    print("Testing admin endpoints")
    print("=" * 60)

    username = os.environ.get("ADMIN_USERNAME")
    password = os.environ.get("ADMIN_PASSWORD")
    if not username or not password:
        print("⚠️  ADMIN_USERNAME/ADMIN_PASSWORD not set, skipping admin checks")
        return True

    try:
        client.post(f"{BASE_URL}/admin/login", json={"username": username, "password": password}).raise_for_status()
        print("✅ Logged in")

        tomorrow = (datetime.now() + timedelta(days=1)).date().isoformat()
        block = client.post(f"{BASE_URL}/blocked-time", json={"blockType": "day", "date": tomorrow, "reason": "smoke"})
        block.raise_for_status()
        print(f"✅ Blocked {block.json()['startTime']} -> {block.json()['endTime']}")
        client.delete(f"{BASE_URL}/blocked-time/{block.json()['id']}").raise_for_status()

        if booking_id is not None:
            notes = client.patch(f"{BASE_URL}/bookings/{booking_id}/notes", json={"notes": "Smoke test note"})
            notes.raise_for_status()
            print("✅ Notes updated")
            client.delete(f"{BASE_URL}/bookings/{booking_id}").raise_for_status()
            print("✅ Booking cancelled")
        return True
    except httpx.HTTPStatusError as e:
        print(f"❌ HTTP Error: {e.response.status_code}")
        print(f"Response: {e.response.text}")
        return False


def main():
    print("\n🚀 Smoke testing booking API\n")

    client = httpx.Client(timeout=10.0)
    try:
        client.get(f"{BASE_URL}/health", timeout=5.0)
        print("✅ Server is running\n")
    except httpx.HTTPError:
        print("❌ Server is not running!")
        print("   Please start it with: uvicorn app.main:app --reload")
        sys.exit(1)

    booking_id = test_booking(client)
    test_admin(client, booking_id)

    print("\n" + "=" * 60)
    print("✅ Smoke test complete!")
    print("=" * 60 + "\n")


if __name__ == "__main__":
    main()
