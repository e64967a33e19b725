import os
import tempfile
from datetime import datetime

import bcrypt
import pytest

# Settings are read at import time, so the environment must be ready first
_DB_DIR = tempfile.mkdtemp(prefix="interview-scheduler-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_DB_DIR, 'test.db')}"
os.environ["REDIS_URL"] = ""
os.environ["SECRET_KEY"] = "test-secret-key"

from fastapi.testclient import TestClient  # noqa: E402
from sqlmodel import Session, SQLModel  # noqa: E402

import interview_scheduler.models  # noqa: E402,F401
from interview_scheduler.core.locks import reset_lock_backend  # noqa: E402
from interview_scheduler.core.security import create_access_token  # noqa: E402
from interview_scheduler.db import engine  # noqa: E402
from interview_scheduler.main import app  # noqa: E402
from interview_scheduler.models import (  # noqa: E402
    Booking,
    BookingStatus,
    Interviewee,
    IntervieweeStatus,
    SchedulingSettings,
    Tenant,
    TenantRole,
    TenantUser,
    User,
    WeeklyAvailability,
)

PASSWORD = "correct-horse-battery"
# Low cost factor keeps the suite fast; verification works for any cost
PASSWORD_HASH = bcrypt.hashpw(PASSWORD.encode("utf-8"), bcrypt.gensalt(rounds=4)).decode(
    "utf-8"
)

# 2030-01-07 is a Monday
MONDAY = datetime(2030, 1, 7)
NOW = datetime(2030, 1, 6, 12, 0)


@pytest.fixture(autouse=True)
def reset_database():
    SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)
    reset_lock_backend()
    yield


@pytest.fixture
def session():
    with Session(engine) as session:
        yield session


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def make_user(session):
    counter = {"n": 0}

    def _make_user(email=None, full_name="Test User"):
        counter["n"] += 1
        user = User(
            email=email or f"user{counter['n']}@example.com",
            full_name=full_name,
            hashed_password=PASSWORD_HASH,
        )
        session.add(user)
        session.commit()
        session.refresh(user)
        return user

    return _make_user


@pytest.fixture
def tenant(session):
    tenant = Tenant(name="Acme Hiring")
    session.add(tenant)
    session.commit()
    session.refresh(tenant)
    return tenant


@pytest.fixture
def add_member(session):
    def _add_member(user, tenant, role=TenantRole.INTERVIEWER, is_active=True):
        membership = TenantUser(
            user_id=user.id, tenant_id=tenant.id, role=role, is_active=is_active
        )
        session.add(membership)
        session.commit()
        return membership

    return _add_member


@pytest.fixture
def interviewer(make_user, add_member, tenant):
    user = make_user(email="interviewer@example.com", full_name="Ada Lovelace")
    add_member(user, tenant, TenantRole.INTERVIEWER)
    return user


@pytest.fixture
def hr_user(make_user, add_member, tenant):
    user = make_user(email="hr@example.com", full_name="Grace Hopper")
    add_member(user, tenant, TenantRole.HR)
    return user


@pytest.fixture
def configure(session):
    """Save scheduling settings for a user in a tenant."""

    def _configure(user, tenant, **values):
        row = session.get(SchedulingSettings, (user.id, tenant.id))
        if row is None:
            row = SchedulingSettings(user_id=user.id, tenant_id=tenant.id)
        for field, value in values.items():
            setattr(row, field, value)
        session.add(row)
        session.commit()
        return row

    return _configure


@pytest.fixture
def add_window(session):
    def _add_window(user, tenant, day_of_week, start_time, end_time):
        window = WeeklyAvailability(
            user_id=user.id,
            tenant_id=tenant.id,
            day_of_week=day_of_week,
            start_time=start_time,
            end_time=end_time,
        )
        session.add(window)
        session.commit()
        return window

    return _add_window


@pytest.fixture
def add_booking(session):
    def _add_booking(user, tenant, start, end, status=BookingStatus.CONFIRMED):
        booking = Booking(
            interviewer_id=user.id,
            tenant_id=tenant.id,
            title="Existing interview",
            interviewee_name="Someone Else",
            interviewee_email="someone@example.com",
            start_time=start,
            end_time=end,
            status=status,
        )
        session.add(booking)
        session.commit()
        session.refresh(booking)
        return booking

    return _add_booking


@pytest.fixture
def make_interviewee(session, tenant):
    def _make_interviewee(
        status=IntervieweeStatus.CONTACTED,
        email="candidate@example.com",
        current_round=0,
        name="Alan Turing",
    ):
        interviewee = Interviewee(
            tenant_id=tenant.id,
            name=name,
            email=email,
            status=status,
            current_round=current_round,
        )
        session.add(interviewee)
        session.commit()
        session.refresh(interviewee)
        return interviewee

    return _make_interviewee


@pytest.fixture
def auth_headers():
    def _auth_headers(user, tenant=None):
        headers = {"Authorization": f"Bearer {create_access_token(user.id)}"}
        if tenant is not None:
            headers["X-Tenant-ID"] = str(tenant.id)
        return headers

    return _auth_headers
