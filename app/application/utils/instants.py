from __future__ import annotations

from datetime import datetime, timezone as dt_timezone
from zoneinfo import ZoneInfo

from app.application.exceptions import ValidationError


def parse_instant(value: str | datetime, timezone: ZoneInfo, field: str = "dateTime") -> datetime:
    """
    Parse an ISO-8601 instant. Naive values are read in the business timezone.
    Returns an aware datetime in the business timezone.
    """
    if isinstance(value, datetime):
        parsed = value
    else:
        text = (value or "").strip()
        if not text:
            raise ValidationError(f"{field} is required")
        try:
            parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError:
            raise ValidationError(f"{field} is not a valid ISO-8601 datetime")

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone)
    return parsed.astimezone(timezone)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive values read back from the store, convert aware ones."""
    if value.tzinfo is None:
        return value.replace(tzinfo=dt_timezone.utc)
    return value.astimezone(dt_timezone.utc)


def format_booking_time(value: datetime, timezone: ZoneInfo) -> str:
    """e.g. 'Monday, June 10, 2024 at 9:00 AM'."""
    local = value.astimezone(timezone)
    hour = local.hour % 12 or 12
    suffix = "AM" if local.hour < 12 else "PM"
    return f"{local:%A, %B} {local.day}, {local.year} at {hour}:{local:%M} {suffix}"
