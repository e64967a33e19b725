from .availability import ExceptionDate, WeeklyAvailability
from .booking import Booking
from .enums import (
    ACTIVE_BOOKING_STATUSES,
    BOOKABLE_INTERVIEWEE_STATUSES,
    BookingStatus,
    IntervieweeStatus,
    RoundResult,
    TenantRole,
)
from .interviewee import Interviewee, IntervieweeNote
from .scheduling_settings import SchedulingSettings
from .tenant import Tenant
from .tenant_user import TenantUser
from .user import User

__all__ = [
    "ACTIVE_BOOKING_STATUSES",
    "BOOKABLE_INTERVIEWEE_STATUSES",
    "Booking",
    "BookingStatus",
    "ExceptionDate",
    "Interviewee",
    "IntervieweeNote",
    "IntervieweeStatus",
    "RoundResult",
    "SchedulingSettings",
    "Tenant",
    "TenantRole",
    "TenantUser",
    "User",
    "WeeklyAvailability",
]
