from .config import settings
from .errors import (
    CapacityExceededError,
    InvalidStateError,
    LockUnavailableError,
    NotFoundError,
    SchedulingError,
    SlotConflictError,
    ValidationError,
)
from .security import (
    create_access_token,
    create_refresh_token,
    get_password_hash,
    verify_token,
    verify_password,
)

__all__ = [
    "settings",
    "CapacityExceededError",
    "InvalidStateError",
    "LockUnavailableError",
    "NotFoundError",
    "SchedulingError",
    "SlotConflictError",
    "ValidationError",
    "create_access_token",
    "create_refresh_token",
    "get_password_hash",
    "verify_token",
    "verify_password",
]
