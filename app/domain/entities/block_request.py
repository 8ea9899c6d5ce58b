from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum


class BlockType(str, Enum):
    single = "single"
    day = "day"
    week = "week"


@dataclass(frozen=True)
class SingleSlotBlock:
    start: datetime
    end: datetime
    reason: str | None = None


@dataclass(frozen=True)
class WholeDayBlock:
    day: date
    reason: str | None = None


@dataclass(frozen=True)
class WholeWeekBlock:
    anchor: date  # any day of the week to block
    reason: str | None = None


BlockRequest = SingleSlotBlock | WholeDayBlock | WholeWeekBlock
