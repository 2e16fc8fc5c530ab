"""Create users, events and registrations

Revision ID: 3f1c9a7d2b10
Revises:
Create Date: 2026-10-18 10:12:31.408215

"""
from alembic import op
import sqlalchemy as sa


revision = "3f1c9a7d2b10"
down_revision = None
branch_labels = None
depends_on = None

DEPARTMENTS = ("CSE", "ECE", "ME", "EEE", "ISE", "CIVIL", "AIML", "AIDS", "CSBS")


def upgrade():
    # Shared by users and events; created once
    department_enum = sa.Enum(*DEPARTMENTS, name="department")
    user_role_enum = sa.Enum("ADMIN", "HOD", "FACULTY", "STUDENT", name="userrole")
    event_status_enum = sa.Enum("PENDING", "APPROVED", "REJECTED", name="eventstatus")

    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("password_hash", sa.String(), nullable=False),
        sa.Column("role", user_role_enum, nullable=False, server_default="STUDENT"),
        sa.Column("department", department_enum, nullable=False),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_users_id", "users", ["id"])
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "events",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("organizer_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("department", department_enum, nullable=False),
        sa.Column("date", sa.DateTime(), nullable=False),
        sa.Column("venue", sa.String(), nullable=False),
        sa.Column("status", event_status_enum, nullable=False, server_default="PENDING"),
        sa.Column("capacity", sa.Integer(), nullable=True),
        sa.Column("registrations_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.CheckConstraint("capacity IS NULL OR capacity >= 1", name="ck_events_capacity_min"),
        sa.CheckConstraint("registrations_count >= 0", name="ck_events_registrations_count_min"),
        sa.CheckConstraint(
            "capacity IS NULL OR registrations_count <= capacity",
            name="ck_events_registrations_within_capacity",
        ),
    )
    op.create_index("ix_events_id", "events", ["id"])
    op.create_index("ix_events_department_status_date", "events", ["department", "status", "date"])

    op.create_table(
        "registrations",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "event_id",
            sa.Integer(),
            sa.ForeignKey("events.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("attended", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("registered_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint("event_id", "user_id", name="uq_registration_event_user"),
    )
    op.create_index("ix_registrations_id", "registrations", ["id"])
    op.create_index("ix_registrations_event_id", "registrations", ["event_id"])
    op.create_index("ix_registrations_user_id", "registrations", ["user_id"])


def downgrade():
    op.drop_table("registrations")
    op.drop_table("events")
    op.drop_table("users")

    # ENUM types only exist as separate objects on PostgreSQL
    bind = op.get_bind()
    if bind.dialect.name == "postgresql":
        op.execute("DROP TYPE IF EXISTS eventstatus")
        op.execute("DROP TYPE IF EXISTS userrole")
        op.execute("DROP TYPE IF EXISTS department")
