from __future__ import annotations

from enum import Enum


class TenantRole(str, Enum):
    ADMIN = "ADMIN"
    HR = "HR"
    INTERVIEWER = "INTERVIEWER"
    USER = "USER"


class BookingStatus(str, Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"


# Bookings in these states occupy their interval and count toward the daily cap
ACTIVE_BOOKING_STATUSES = (BookingStatus.PENDING, BookingStatus.CONFIRMED)


class IntervieweeStatus(str, Enum):
    NEW = "NEW"
    CONTACTED = "CONTACTED"
    SCHEDULED = "SCHEDULED"
    IN_PROGRESS = "IN_PROGRESS"
    REJECTED = "REJECTED"
    COMPLETED = "COMPLETED"


BOOKABLE_INTERVIEWEE_STATUSES = (
    IntervieweeStatus.CONTACTED,
    IntervieweeStatus.SCHEDULED,
    IntervieweeStatus.IN_PROGRESS,
)


class RoundResult(str, Enum):
    PASS = "PASS"
    FAIL = "FAIL"
