from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class BlockedTime:
    id: int
    start_time: datetime
    end_time: datetime  # exclusive
    created_at: datetime
    reason: str | None = None  # internal only
