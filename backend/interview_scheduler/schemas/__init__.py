from .availability import (
    AvailabilityRead,
    AvailabilityUpdate,
    ExceptionDateBase,
    ExceptionDateRead,
    WeeklyAvailabilityBase,
    WeeklyAvailabilityRead,
)
from .booking import (
    AvailableSlotsResponse,
    BookingCreate,
    BookingRead,
    InterviewerInfo,
    SlotRead,
)
from .interviewee import (
    IntervieweeCreate,
    IntervieweeNoteCreate,
    IntervieweeNoteRead,
    IntervieweeRead,
    IntervieweeStatusUpdate,
    IntervieweeWithNotes,
)
from .scheduling_settings import SchedulingSettingsRead, SchedulingSettingsUpdate
from .tenant import (
    TenantCreate,
    TenantMemberCreate,
    TenantMemberRead,
    TenantRead,
    TenantReadWithRole,
    TenantUpdate,
)
from .user import (
    RefreshTokenRequest,
    TokenPair,
    UserBase,
    UserCreate,
    UserLogin,
    UserRead,
)

__all__ = [
    "AvailabilityRead",
    "AvailabilityUpdate",
    "AvailableSlotsResponse",
    "BookingCreate",
    "BookingRead",
    "ExceptionDateBase",
    "ExceptionDateRead",
    "IntervieweeCreate",
    "IntervieweeNoteCreate",
    "IntervieweeNoteRead",
    "IntervieweeRead",
    "IntervieweeStatusUpdate",
    "IntervieweeWithNotes",
    "InterviewerInfo",
    "RefreshTokenRequest",
    "SchedulingSettingsRead",
    "SchedulingSettingsUpdate",
    "SlotRead",
    "TenantCreate",
    "TenantMemberCreate",
    "TenantMemberRead",
    "TenantRead",
    "TenantReadWithRole",
    "TenantUpdate",
    "TokenPair",
    "UserBase",
    "UserCreate",
    "UserLogin",
    "UserRead",
    "WeeklyAvailabilityBase",
    "WeeklyAvailabilityRead",
]
