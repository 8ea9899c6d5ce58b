from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from app.application.exceptions import ConflictError, StoreError
from app.application.ports.schedule_store import ScheduleStorePort
from app.application.utils.instants import as_utc
from app.domain.entities.blocked_time import BlockedTime
from app.domain.entities.booking import Booking
from app.infrastructure.store.database import Base, build_session_factory
from app.infrastructure.store.sql_models import BlockedTimeRecord, BookingRecord

logger = logging.getLogger(__name__)


def _to_booking(record: BookingRecord) -> Booking:
    return Booking(
        id=record.id,
        client_name=record.client_name,
        email=record.email,
        phone=record.phone,
        reason=record.reason,
        date_time=as_utc(record.date_time),
        created_at=as_utc(record.created_at),
        notes=record.notes,
    )


def _to_blocked_time(record: BlockedTimeRecord) -> BlockedTime:
    return BlockedTime(
        id=record.id,
        start_time=as_utc(record.start_time),
        end_time=as_utc(record.end_time),
        created_at=as_utc(record.created_at),
        reason=record.reason,
    )


class SqlScheduleStore(ScheduleStorePort):
    """Relational store; all instants are written as UTC."""

    def __init__(self, engine: Engine, create_tables: bool = True) -> None:
        self._session_factory = build_session_factory(engine)
        if create_tables:
            Base.metadata.create_all(bind=engine)

    @contextmanager
    def _session(self) -> Iterator[Session]:
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            logger.exception("Datastore failure", extra={"error": str(e)})
            raise StoreError("Datastore operation failed") from e
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def list_bookings(self, start: datetime | None = None, end: datetime | None = None) -> list[Booking]:
        query = select(BookingRecord).order_by(BookingRecord.date_time)
        if start is not None:
            query = query.where(BookingRecord.date_time >= as_utc(start))
        if end is not None:
            query = query.where(BookingRecord.date_time < as_utc(end))
        with self._session() as session:
            return [_to_booking(r) for r in session.scalars(query)]

    def get_booking(self, booking_id: int) -> Booking | None:
        with self._session() as session:
            record = session.get(BookingRecord, booking_id)
            return _to_booking(record) if record is not None else None

    def find_booking_at(self, date_time: datetime) -> Booking | None:
        query = select(BookingRecord).where(BookingRecord.date_time == as_utc(date_time))
        with self._session() as session:
            record = session.scalars(query).first()
            return _to_booking(record) if record is not None else None

    def add_booking(
        self,
        client_name: str,
        email: str,
        phone: str,
        reason: str,
        date_time: datetime,
        created_at: datetime,
    ) -> Booking:
        with self._session() as session:
            record = BookingRecord(
                client_name=client_name,
                email=email,
                phone=phone,
                reason=reason,
                date_time=as_utc(date_time),
                created_at=as_utc(created_at),
            )
            session.add(record)
            try:
                session.flush()
            except IntegrityError:
                logger.info("Unique slot constraint hit", extra={"date_time": date_time.isoformat()})
                raise ConflictError("slot already booked")
            return _to_booking(record)

    def update_booking_notes(self, booking_id: int, notes: str | None) -> Booking | None:
        with self._session() as session:
            record = session.get(BookingRecord, booking_id)
            if record is None:
                return None
            record.notes = notes
            session.flush()
            return _to_booking(record)

    def delete_booking(self, booking_id: int) -> bool:
        with self._session() as session:
            record = session.get(BookingRecord, booking_id)
            if record is None:
                return False
            session.delete(record)
            return True

    def list_blocked_times(self, start: datetime | None = None, end: datetime | None = None) -> list[BlockedTime]:
        query = select(BlockedTimeRecord).order_by(BlockedTimeRecord.start_time)
        if start is not None:
            query = query.where(BlockedTimeRecord.end_time > as_utc(start))
        if end is not None:
            query = query.where(BlockedTimeRecord.start_time < as_utc(end))
        with self._session() as session:
            return [_to_blocked_time(r) for r in session.scalars(query)]

    def add_blocked_time(
        self,
        start_time: datetime,
        end_time: datetime,
        reason: str | None,
        created_at: datetime,
    ) -> BlockedTime:
        with self._session() as session:
            record = BlockedTimeRecord(
                start_time=as_utc(start_time),
                end_time=as_utc(end_time),
                reason=reason,
                created_at=as_utc(created_at),
            )
            session.add(record)
            session.flush()
            return _to_blocked_time(record)

    def delete_blocked_time(self, blocked_time_id: int) -> bool:
        with self._session() as session:
            record = session.get(BlockedTimeRecord, blocked_time_id)
            if record is None:
                return False
            session.delete(record)
            return True
