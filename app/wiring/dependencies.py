from functools import lru_cache
import logging
from zoneinfo import ZoneInfo

from app.core.config import settings
from app.application.ports.notifier import NotifierPort
from app.application.ports.schedule_store import ScheduleStorePort
from app.application.use_cases.admin_auth import AdminAuthUseCase
from app.application.use_cases.availability import AvailabilityUseCase
from app.application.use_cases.blocked_time import BlockedTimeUseCase
from app.application.use_cases.booking_admin import BookingAdminUseCase
from app.application.use_cases.reserve_booking import ReserveBookingUseCase
from app.infrastructure.auth.session_token import SessionTokenSigner
from app.infrastructure.email.logging_notifier import LoggingNotifier
from app.infrastructure.email.resend_notifier import ResendEmailNotifier
from app.infrastructure.store.database import build_engine
from app.infrastructure.store.memory_store import MemoryScheduleStore
from app.infrastructure.store.sql_store import SqlScheduleStore


_store: ScheduleStorePort | None = None


def get_timezone() -> ZoneInfo:
    return ZoneInfo(settings.BUSINESS_TIMEZONE)


def get_store() -> ScheduleStorePort:
    global _store
    if _store is None:
        if settings.STORE_PROVIDER.lower() == "memory":
            _store = MemoryScheduleStore()
        else:
            _store = SqlScheduleStore(build_engine(settings.DATABASE_URL))
    return _store


@lru_cache
def get_notifier() -> NotifierPort | None:
    logger = logging.getLogger(__name__)
    if settings.RESEND_API_KEY and settings.RESEND_API_KEY.strip():
        logger.info("Using ResendEmailNotifier")
        return ResendEmailNotifier(
            api_key=settings.RESEND_API_KEY,
            from_email=settings.FROM_EMAIL,
            base_url=settings.RESEND_BASE_URL,
        )
    if settings.ENV.lower() in {"dev", "local"}:
        logger.info("Using LoggingNotifier (RESEND_API_KEY missing, ENV=dev/local)")
        return LoggingNotifier()
    logger.info("RESEND_API_KEY missing -> notifications disabled")
    return None


@lru_cache
def get_admin_auth() -> AdminAuthUseCase:
    signer = SessionTokenSigner(
        secret=settings.SESSION_SECRET,
        max_age_seconds=settings.SESSION_MAX_AGE_DAYS * 24 * 60 * 60,
    )
    return AdminAuthUseCase(
        username=settings.ADMIN_USERNAME,
        password=settings.ADMIN_PASSWORD,
        signer=signer,
    )


def get_availability_use_case() -> AvailabilityUseCase:
    return AvailabilityUseCase(
        store=get_store(),
        timezone=get_timezone(),
        working_hours=settings.working_hours,
    )


def get_reserve_booking_use_case() -> ReserveBookingUseCase:
    return ReserveBookingUseCase(
        store=get_store(),
        timezone=get_timezone(),
        working_hours=settings.working_hours,
    )


def get_blocked_time_use_case() -> BlockedTimeUseCase:
    return BlockedTimeUseCase(
        store=get_store(),
        timezone=get_timezone(),
        day_start_hour=settings.WORK_START_HOUR,
        day_end_hour=settings.WORK_END_HOUR,
    )


def get_booking_admin_use_case() -> BookingAdminUseCase:
    return BookingAdminUseCase(
        store=get_store(),
        notifier=get_notifier(),
        timezone=get_timezone(),
        business_name=settings.BUSINESS_NAME,
    )
