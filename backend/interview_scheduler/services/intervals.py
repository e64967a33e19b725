"""Time and interval helpers shared by slot generation and booking admission.

All datetimes are naive and expressed in the service timezone.
"""

from __future__ import annotations

import re
from datetime import date, datetime, time, timedelta, timezone

from interview_scheduler.core.errors import ValidationError

_HHMM_RE = re.compile(r"^(\d{1,2}):(\d{2})$")


def parse_hhmm(value: str) -> time:
    """Parse an ``HH:MM`` string into a ``time``."""
    match = _HHMM_RE.match(value.strip()) if isinstance(value, str) else None
    if not match:
        raise ValidationError(f"Invalid time '{value}', expected HH:MM")
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        raise ValidationError(f"Invalid time '{value}', expected HH:MM")
    return time(hour, minute)


def day_of_week(day: date) -> int:
    """0 = Sunday, 1 = Monday, ... 6 = Saturday."""
    return (day.weekday() + 1) % 7


def to_naive_utc(moment: datetime) -> datetime:
    """Drop tzinfo after converting aware datetimes to UTC."""
    if moment.tzinfo is None:
        return moment
    return moment.astimezone(timezone.utc).replace(tzinfo=None)


def start_of_day(moment: datetime) -> datetime:
    return datetime.combine(moment.date(), time.min)


def end_of_day(moment: datetime) -> datetime:
    return datetime.combine(moment.date(), time.max)


def day_bounds(day: date) -> tuple[datetime, datetime]:
    return datetime.combine(day, time.min), datetime.combine(day, time.max)


def at_time(day: date, value: str) -> datetime:
    """Combine a calendar day with an ``HH:MM`` string."""
    return datetime.combine(day, parse_hhmm(value))


def overlaps(
    a_start: datetime, a_end: datetime, b_start: datetime, b_end: datetime
) -> bool:
    """Half-open intersection of [a_start, a_end) and [b_start, b_end)."""
    return a_start < b_end and a_end > b_start


def buffered_overlap(
    slot_start: datetime,
    slot_end: datetime,
    booking_start: datetime,
    booking_end: datetime,
    buffer_minutes: int,
) -> bool:
    """Whether a slot touches a booking widened by the buffer on both sides."""
    buffer = timedelta(minutes=buffer_minutes)
    return overlaps(slot_start, slot_end, booking_start - buffer, booking_end + buffer)


def iter_days(first: date, last: date):
    current = first
    while current <= last:
        yield current
        current += timedelta(days=1)


def days_spanned(start: datetime, end: datetime) -> list[date]:
    """Calendar days touched by the half-open interval [start, end)."""
    last = (end - timedelta(microseconds=1)).date() if end > start else start.date()
    return list(iter_days(start.date(), last))
