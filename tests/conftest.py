from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

from app.infrastructure.store.database import build_engine
from app.infrastructure.store.memory_store import MemoryScheduleStore
from app.infrastructure.store.sql_store import SqlScheduleStore

UTC = ZoneInfo("UTC")
WORKING_HOURS = list(range(8, 17))
# Sunday, start of the week of June 9-15 2024.
NOW = datetime(2024, 6, 9, 0, 0, tzinfo=UTC)


def fixed_clock(now: datetime = NOW):
    return lambda: now


@pytest.fixture(params=["memory", "sql"])
def store(request):
    if request.param == "memory":
        return MemoryScheduleStore()
    return SqlScheduleStore(build_engine("sqlite://"))


@pytest.fixture
def sql_store():
    return SqlScheduleStore(build_engine("sqlite://"))
