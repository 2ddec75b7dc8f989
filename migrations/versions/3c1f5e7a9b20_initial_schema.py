"""initial_schema

Create the schema for PeerSkill:
- Users (profiles, teach/learn skills, reputation, optimistic version)
- Skill requests (append-only)
- Sessions (scheduled meetings with a generated link)
- Notifications (read/unread)

Requests, sessions and notifications reference users by email only.

Revision ID: 3c1f5e7a9b20
Revises:
Create Date: 2026-10-19 10:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f5e7a9b20"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id_column() -> sa.Column:
    return sa.Column(
        "id",
        sa.UUID(),
        server_default=sa.text("uuid_generate_v4()"),
        nullable=False,
    )


def _created_at_column() -> sa.Column:
    return sa.Column(
        "created_at",
        sa.TIMESTAMP(timezone=True),
        server_default=sa.text("NOW()"),
        nullable=False,
    )


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        _id_column(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("contact", sa.String(255), nullable=True),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column(
            "teach",
            postgresql.ARRAY(sa.Text()),
            server_default=sa.text("'{}'"),
            nullable=False,
        ),
        sa.Column(
            "learn",
            postgresql.ARRAY(sa.Text()),
            server_default=sa.text("'{}'"),
            nullable=False,
        ),
        sa.Column("study_year", sa.String(50), nullable=True),
        sa.Column("branch", sa.String(255), nullable=True),
        sa.Column("avatar", sa.Text(), nullable=True),
        sa.Column("skill_points", sa.Integer(), server_default="0", nullable=False),
        sa.Column("rating", sa.Float(), nullable=True),
        sa.Column("reviews", sa.Integer(), server_default="0", nullable=False),
        sa.Column("version", sa.Integer(), server_default="0", nullable=False),
        _created_at_column(),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("skill_points >= 0", name="check_users_skill_points"),
        sa.CheckConstraint("reviews >= 0", name="check_users_reviews"),
        sa.CheckConstraint(
            "rating IS NULL OR (rating >= 0 AND rating <= 5)",
            name="check_users_rating",
        ),
    )
    # Emails keep their signup spelling; uniqueness ignores case
    op.execute("CREATE UNIQUE INDEX uq_users_email_lower ON users (lower(email))")
    op.execute(
        "CREATE INDEX idx_users_skill_points ON users (skill_points DESC)"
    )

    # ========================================================================
    # SKILL_REQUESTS table
    # ========================================================================
    op.create_table(
        "skill_requests",
        _id_column(),
        sa.Column("requester_email", sa.String(255), nullable=False),
        sa.Column("requester_name", sa.String(255), nullable=False),
        sa.Column("skill", sa.String(255), nullable=False),
        sa.Column("status", sa.String(20), server_default="Open", nullable=False),
        _created_at_column(),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "status IN ('Open', 'In Progress', 'Closed')",
            name="check_skill_requests_status",
        ),
    )
    op.execute(
        "CREATE INDEX idx_skill_requests_requester "
        "ON skill_requests (lower(requester_email))"
    )

    # ========================================================================
    # SESSIONS table
    # ========================================================================
    op.create_table(
        "sessions",
        _id_column(),
        sa.Column("scheduler_email", sa.String(255), nullable=False),
        sa.Column("peer_email", sa.String(255), nullable=False),
        sa.Column("skill", sa.String(255), nullable=False),
        sa.Column("date_time", sa.String(255), nullable=False),
        sa.Column("link", sa.Text(), nullable=False),
        _created_at_column(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.execute(
        "CREATE INDEX idx_sessions_scheduler ON sessions (lower(scheduler_email))"
    )
    op.execute("CREATE INDEX idx_sessions_peer ON sessions (lower(peer_email))")

    # ========================================================================
    # NOTIFICATIONS table
    # ========================================================================
    op.create_table(
        "notifications",
        _id_column(),
        sa.Column("recipient_email", sa.String(255), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("read", sa.Boolean(), server_default="false", nullable=False),
        _created_at_column(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.execute(
        "CREATE INDEX idx_notifications_recipient "
        "ON notifications (lower(recipient_email))"
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("notifications")
    op.drop_table("sessions")
    op.drop_table("skill_requests")
    op.drop_table("users")
