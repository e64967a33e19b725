"""
Interviewee pipeline

NEW -> CONTACTED -> SCHEDULED -> IN_PROGRESS(round N) -> REJECTED | COMPLETED

Every transition appends an audit note. Notes are never edited or deleted.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlmodel import Session

from interview_scheduler.core.errors import InvalidStateError, ValidationError
from interview_scheduler.models import (
    Interviewee,
    IntervieweeNote,
    IntervieweeStatus,
    RoundResult,
    User,
)

logger = logging.getLogger(__name__)

SYSTEM_PREFIX = "[SYSTEM]"
FINAL_ROUND = 3

TERMINAL_STATUSES = {IntervieweeStatus.REJECTED, IntervieweeStatus.COMPLETED}

# Manual moves; REJECTED is reachable from every non-terminal state.
# COMPLETED only follows a PASS in the final round.
_FORWARD = {
    IntervieweeStatus.NEW: {IntervieweeStatus.CONTACTED, IntervieweeStatus.SCHEDULED},
    IntervieweeStatus.CONTACTED: {IntervieweeStatus.SCHEDULED, IntervieweeStatus.IN_PROGRESS},
    IntervieweeStatus.SCHEDULED: {IntervieweeStatus.IN_PROGRESS},
    IntervieweeStatus.IN_PROGRESS: set(),
}


def _format_when(moment: datetime) -> str:
    return f"{moment:%B} {moment.day}, {moment:%Y} at {moment:%H:%M}"


def append_note(
    session: Session,
    interviewee: Interviewee,
    content: str,
    *,
    author_id: Optional[UUID] = None,
    is_system: bool = False,
) -> IntervieweeNote:
    note = IntervieweeNote(
        interviewee_id=interviewee.id,
        author_id=author_id,
        content=f"{SYSTEM_PREFIX} {content}" if is_system else content,
        is_system=is_system,
    )
    session.add(note)
    return note


def add_note(
    session: Session, interviewee: Interviewee, author: User, content: str
) -> IntervieweeNote:
    """User-authored note."""
    if not content or not content.strip():
        raise ValidationError("Note content is required")
    note = append_note(session, interviewee, content.strip(), author_id=author.id)
    session.commit()
    session.refresh(note)
    return note


def apply_booking_transition(
    session: Session,
    interviewee: Interviewee,
    interviewer: User,
    start: datetime,
) -> None:
    """Advance the pipeline after a successful booking. Does not commit."""
    interviewer_name = interviewer.full_name or interviewer.email
    when = _format_when(start)

    if interviewee.status in (IntervieweeStatus.CONTACTED, IntervieweeStatus.SCHEDULED):
        interviewee.status = IntervieweeStatus.IN_PROGRESS
        interviewee.current_round = 1
        content = (
            f"Interview scheduled with {interviewer_name} on {when}. "
            f"Status updated to IN_PROGRESS, starting round 1."
        )
    elif interviewee.status == IntervieweeStatus.IN_PROGRESS:
        interviewee.current_round += 1
        content = (
            f"Interview for round {interviewee.current_round} scheduled with "
            f"{interviewer_name} on {when}."
        )
    else:
        raise InvalidStateError(
            "Booking is only allowed for interviewees in CONTACTED, SCHEDULED "
            "or IN_PROGRESS status"
        )

    interviewee.touch()
    session.add(interviewee)
    append_note(session, interviewee, content, author_id=interviewer.id, is_system=True)
    logger.info(
        f"Interviewee {interviewee.id} now {interviewee.status.value} "
        f"round {interviewee.current_round} after booking"
    )


def record_round_result(
    session: Session,
    interviewee: Interviewee,
    result: RoundResult,
    author: User,
    note: Optional[str] = None,
) -> Interviewee:
    if interviewee.status != IntervieweeStatus.IN_PROGRESS:
        raise InvalidStateError(
            f"Round results can only be recorded for IN_PROGRESS interviewees, "
            f"not {interviewee.status.value}"
        )

    finished_round = interviewee.current_round
    if result == RoundResult.FAIL:
        interviewee.status = IntervieweeStatus.REJECTED
    elif finished_round >= FINAL_ROUND:
        interviewee.status = IntervieweeStatus.COMPLETED
    else:
        interviewee.current_round += 1

    interviewee.touch()
    session.add(interviewee)
    if note and note.strip():
        append_note(session, interviewee, note.strip(), author_id=author.id)
    else:
        append_note(
            session,
            interviewee,
            f"Round {finished_round} {result.value}.",
            author_id=author.id,
            is_system=True,
        )
    session.commit()
    session.refresh(interviewee)

    logger.info(
        f"Interviewee {interviewee.id} round {finished_round} {result.value}, "
        f"status {interviewee.status.value}"
    )
    return interviewee


def change_status(
    session: Session,
    interviewee: Interviewee,
    new_status: IntervieweeStatus,
    author: User,
    note: Optional[str] = None,
) -> Interviewee:
    previous = interviewee.status
    if previous in TERMINAL_STATUSES:
        raise InvalidStateError(f"Interviewee is already {previous.value}")
    if new_status == previous:
        raise InvalidStateError(f"Interviewee is already {previous.value}")
    if new_status != IntervieweeStatus.REJECTED and new_status not in _FORWARD[previous]:
        raise InvalidStateError(
            f"Cannot move interviewee from {previous.value} to {new_status.value}"
        )

    interviewee.status = new_status
    if new_status == IntervieweeStatus.IN_PROGRESS:
        interviewee.current_round = 1
    interviewee.touch()
    session.add(interviewee)

    if note and note.strip():
        append_note(session, interviewee, note.strip(), author_id=author.id)
    else:
        append_note(
            session,
            interviewee,
            f"Status changed from {previous.value} to {new_status.value}",
            author_id=author.id,
            is_system=True,
        )
    session.commit()
    session.refresh(interviewee)

    logger.info(
        f"Interviewee {interviewee.id} moved {previous.value} -> {new_status.value}"
    )
    return interviewee
