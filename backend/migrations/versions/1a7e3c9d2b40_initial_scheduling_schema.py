"""initial scheduling schema

Revision ID: 1a7e3c9d2b40
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "1a7e3c9d2b40"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


tenant_role = sa.Enum("ADMIN", "HR", "INTERVIEWER", "USER", name="tenantrole")
booking_status = sa.Enum("PENDING", "CONFIRMED", "CANCELLED", name="bookingstatus")
interviewee_status = sa.Enum(
    "NEW",
    "CONTACTED",
    "SCHEDULED",
    "IN_PROGRESS",
    "REJECTED",
    "COMPLETED",
    name="intervieweestatus",
)


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("full_name", sa.String(length=255), nullable=True),
        sa.Column("hashed_password", sa.String(length=255), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_id"), "users", ["id"], unique=False)
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)

    op.create_table(
        "tenants",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("domain", sa.String(length=255), nullable=True),
        sa.Column("logo", sa.String(length=500), nullable=True),
        sa.Column("active", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_tenants_id"), "tenants", ["id"], unique=False)

    op.create_table(
        "tenant_users",
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("tenant_id", sa.Uuid(), nullable=False),
        sa.Column("role", tenant_role, nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["tenant_id"], ["tenants.id"]),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("user_id", "tenant_id"),
    )
    op.create_index(op.f("ix_tenant_users_user_id"), "tenant_users", ["user_id"], unique=False)
    op.create_index(
        op.f("ix_tenant_users_tenant_id"), "tenant_users", ["tenant_id"], unique=False
    )

    op.create_table(
        "scheduling_settings",
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("tenant_id", sa.Uuid(), nullable=False),
        sa.Column("meeting_duration", sa.Integer(), nullable=False, server_default="30"),
        sa.Column("buffer_between_events", sa.Integer(), nullable=False, server_default="15"),
        sa.Column("max_schedules_per_day", sa.Integer(), nullable=False, server_default="3"),
        sa.Column("advance_booking_days", sa.Integer(), nullable=False, server_default="30"),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["tenant_id"], ["tenants.id"]),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("user_id", "tenant_id"),
    )

    op.create_table(
        "weekly_availability",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("tenant_id", sa.Uuid(), nullable=False),
        sa.Column("day_of_week", sa.Integer(), nullable=False),
        sa.Column("start_time", sa.String(length=5), nullable=False),
        sa.Column("end_time", sa.String(length=5), nullable=False),
        sa.ForeignKeyConstraint(["tenant_id"], ["tenants.id"]),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_weekly_availability_id"), "weekly_availability", ["id"])
    op.create_index(
        op.f("ix_weekly_availability_user_id"), "weekly_availability", ["user_id"]
    )
    op.create_index(
        op.f("ix_weekly_availability_tenant_id"), "weekly_availability", ["tenant_id"]
    )

    op.create_table(
        "exception_dates",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("tenant_id", sa.Uuid(), nullable=False),
        sa.Column("exception_date", sa.Date(), nullable=False),
        sa.Column("is_blocked", sa.Boolean(), nullable=False),
        sa.ForeignKeyConstraint(["tenant_id"], ["tenants.id"]),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_exception_dates_id"), "exception_dates", ["id"])
    op.create_index(op.f("ix_exception_dates_user_id"), "exception_dates", ["user_id"])
    op.create_index(op.f("ix_exception_dates_tenant_id"), "exception_dates", ["tenant_id"])
    op.create_index(
        op.f("ix_exception_dates_exception_date"), "exception_dates", ["exception_date"]
    )

    op.create_table(
        "interviewees",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("tenant_id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("phone", sa.String(length=50), nullable=True),
        sa.Column("resume_link", sa.String(length=500), nullable=True),
        sa.Column("current_company", sa.String(length=255), nullable=True),
        sa.Column("years_of_experience", sa.Integer(), nullable=True),
        sa.Column("skills", sa.String(length=1000), nullable=True),
        sa.Column("current_location", sa.String(length=255), nullable=True),
        sa.Column("status", interviewee_status, nullable=False),
        sa.Column("current_round", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["tenant_id"], ["tenants.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_interviewees_id"), "interviewees", ["id"])
    op.create_index(op.f("ix_interviewees_tenant_id"), "interviewees", ["tenant_id"])
    op.create_index(op.f("ix_interviewees_email"), "interviewees", ["email"])
    op.create_index(op.f("ix_interviewees_status"), "interviewees", ["status"])

    op.create_table(
        "interviewee_notes",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("interviewee_id", sa.Uuid(), nullable=False),
        sa.Column("author_id", sa.Uuid(), nullable=True),
        sa.Column("content", sa.String(length=4000), nullable=False),
        sa.Column("is_system", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"]),
        sa.ForeignKeyConstraint(["interviewee_id"], ["interviewees.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_interviewee_notes_id"), "interviewee_notes", ["id"])
    op.create_index(
        op.f("ix_interviewee_notes_interviewee_id"), "interviewee_notes", ["interviewee_id"]
    )

    op.create_table(
        "bookings",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("interviewer_id", sa.Uuid(), nullable=False),
        sa.Column("tenant_id", sa.Uuid(), nullable=False),
        sa.Column("interviewee_id", sa.Uuid(), nullable=True),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("interviewee_name", sa.String(length=255), nullable=False),
        sa.Column("interviewee_email", sa.String(length=255), nullable=False),
        sa.Column("start_time", sa.DateTime(), nullable=False),
        sa.Column("end_time", sa.DateTime(), nullable=False),
        sa.Column("status", booking_status, nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("cancelled_at", sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(["interviewee_id"], ["interviewees.id"]),
        sa.ForeignKeyConstraint(["interviewer_id"], ["users.id"]),
        sa.ForeignKeyConstraint(["tenant_id"], ["tenants.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_bookings_id"), "bookings", ["id"])
    op.create_index(op.f("ix_bookings_interviewer_id"), "bookings", ["interviewer_id"])
    op.create_index(op.f("ix_bookings_tenant_id"), "bookings", ["tenant_id"])
    op.create_index(op.f("ix_bookings_interviewee_id"), "bookings", ["interviewee_id"])
    op.create_index(op.f("ix_bookings_start_time"), "bookings", ["start_time"])
    op.create_index(op.f("ix_bookings_end_time"), "bookings", ["end_time"])
    op.create_index(op.f("ix_bookings_status"), "bookings", ["status"])
    # Admission and slot generation both filter on these columns together
    op.create_index(
        "ix_bookings_interviewer_tenant_start",
        "bookings",
        ["interviewer_id", "tenant_id", "start_time"],
    )


def downgrade() -> None:
    op.drop_index("ix_bookings_interviewer_tenant_start", table_name="bookings")
    op.drop_table("bookings")
    op.drop_table("interviewee_notes")
    op.drop_table("interviewees")
    op.drop_table("exception_dates")
    op.drop_table("weekly_availability")
    op.drop_table("scheduling_settings")
    op.drop_table("tenant_users")
    op.drop_table("tenants")
    op.drop_table("users")
    booking_status.drop(op.get_bind(), checkfirst=True)
    interviewee_status.drop(op.get_bind(), checkfirst=True)
    tenant_role.drop(op.get_bind(), checkfirst=True)
