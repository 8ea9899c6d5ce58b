from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum


SLOT_LENGTH = timedelta(hours=1)


class SlotStatus(str, Enum):
    available = "available"
    booked = "booked"
    blocked = "blocked"
    past = "past"


@dataclass(frozen=True)
class Slot:
    day: date
    hour: int
    start: datetime

    @property
    def end(self) -> datetime:
        return self.start + SLOT_LENGTH
