from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Booking:
    id: int
    client_name: str
    email: str
    phone: str
    reason: str
    date_time: datetime  # aware, top of an hour inside working hours
    created_at: datetime
    notes: str | None = None
