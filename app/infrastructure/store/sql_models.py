from __future__ import annotations

from sqlalchemy import CheckConstraint, Column, DateTime, Integer, String, Text, UniqueConstraint

from app.infrastructure.store.database import Base


class BookingRecord(Base):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    client_name = Column(String(200), nullable=False)
    email = Column(String(320), nullable=False)
    phone = Column(String(50), nullable=False)
    reason = Column(Text, nullable=False)
    date_time = Column(DateTime(timezone=True), nullable=False)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False)

    # Two concurrent reservations for one slot: exactly one insert wins.
    __table_args__ = (UniqueConstraint("date_time", name="uq_bookings_date_time"),)


class BlockedTimeRecord(Base):
    __tablename__ = "blocked_times"

    id = Column(Integer, primary_key=True, autoincrement=True)
    start_time = Column(DateTime(timezone=True), nullable=False, index=True)
    end_time = Column(DateTime(timezone=True), nullable=False)
    reason = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False)

    __table_args__ = (CheckConstraint("end_time > start_time", name="ck_blocked_times_range"),)
