class ScheduleError(Exception):
    """Base class for errors raised by the scheduling use cases."""
    pass


class ValidationError(ScheduleError):
    """Raised when required input is missing or malformed."""
    pass


class ConflictError(ScheduleError):
    """Raised when a slot is already booked or falls inside blocked time."""
    pass


class NotFoundError(ScheduleError):
    """Raised when a booking or blocked time id does not exist."""
    pass


class AuthError(ScheduleError):
    """Raised when admin credentials or the admin session are invalid."""
    pass


class NotificationError(RuntimeError):
    """Raised when the notification sink fails (network errors, rejected requests)."""
    pass


class StoreError(RuntimeError):
    """Raised when the underlying datastore fails."""
    pass
