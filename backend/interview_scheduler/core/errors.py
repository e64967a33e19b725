"""Scheduling error taxonomy.

Every rejection raised by the scheduling services is a ``SchedulingError``
subclass with a stable ``code`` so that API clients can tell them apart.
"""

from __future__ import annotations

from fastapi import status


class SchedulingError(Exception):
    code = "scheduling_error"
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(SchedulingError):
    code = "not_found"
    status_code = status.HTTP_404_NOT_FOUND


class CapacityExceededError(SchedulingError):
    code = "capacity_exceeded"
    status_code = status.HTTP_409_CONFLICT


class SlotConflictError(SchedulingError):
    code = "slot_conflict"
    status_code = status.HTTP_409_CONFLICT


class InvalidStateError(SchedulingError):
    code = "invalid_state"
    status_code = status.HTTP_409_CONFLICT


class ValidationError(SchedulingError):
    code = "validation_error"
    status_code = status.HTTP_400_BAD_REQUEST


class LockUnavailableError(SchedulingError):
    """Another admission for the same interviewer and day held the lock too long."""

    code = "busy"
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
