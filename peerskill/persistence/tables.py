"""SQLAlchemy table definitions for PeerSkill.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.

Requests, sessions and notifications reference users by email only
(no foreign keys); the admin deletion cascades by hand.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Float,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    func,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(255), nullable=False),
    Column("email", String(255), nullable=False),  # Stored as typed at signup
    Column("contact", String(255), nullable=True),
    Column("password_hash", String(255), nullable=False),
    Column("teach", ARRAY(Text), nullable=False, server_default="{}"),
    Column("learn", ARRAY(Text), nullable=False, server_default="{}"),
    Column("study_year", String(50), nullable=True),
    Column("branch", String(255), nullable=True),
    Column("avatar", Text, nullable=True),
    Column("skill_points", Integer, nullable=False, server_default="0"),
    Column("rating", Float, nullable=True),  # NULL until the first review
    Column("reviews", Integer, nullable=False, server_default="0"),
    Column("version", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("skill_points >= 0", name="check_users_skill_points"),
    CheckConstraint("reviews >= 0", name="check_users_reviews"),
    CheckConstraint("rating IS NULL OR (rating >= 0 AND rating <= 5)", name="check_users_rating"),
)

# Case-insensitive uniqueness: emails are not normalized at signup
Index("uq_users_email_lower", func.lower(users_table.c.email), unique=True)
Index("idx_users_skill_points", users_table.c.skill_points.desc())

# ============================================================================
# SKILL REQUESTS TABLE
# ============================================================================
skill_requests_table = Table(
    "skill_requests",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("requester_email", String(255), nullable=False),
    Column("requester_name", String(255), nullable=False),  # Snapshot
    Column("skill", String(255), nullable=False),
    Column("status", String(20), nullable=False, server_default="Open"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "status IN ('Open', 'In Progress', 'Closed')",
        name="check_skill_requests_status",
    ),
)

Index(
    "idx_skill_requests_requester",
    func.lower(skill_requests_table.c.requester_email),
)

# ============================================================================
# SESSIONS TABLE
# ============================================================================
sessions_table = Table(
    "sessions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("scheduler_email", String(255), nullable=False),
    Column("peer_email", String(255), nullable=False),
    Column("skill", String(255), nullable=False),
    Column("date_time", String(255), nullable=False),  # Free-form label
    Column("link", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_sessions_scheduler", func.lower(sessions_table.c.scheduler_email))
Index("idx_sessions_peer", func.lower(sessions_table.c.peer_email))

# ============================================================================
# NOTIFICATIONS TABLE
# ============================================================================
notifications_table = Table(
    "notifications",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("recipient_email", String(255), nullable=False),
    Column("message", Text, nullable=False),
    Column("read", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_notifications_recipient",
    func.lower(notifications_table.c.recipient_email),
)
