"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from peerskill.domain.model import Notification, Session, SkillRequest, User
from peerskill.domain.value import (
    NotificationId,
    RequestStatus,
    SessionId,
    SkillRequestId,
    UserId,
)

# Columns a profile update writes; reputation columns go through
# update_reputation only
USER_PROFILE_COLUMNS = (
    "name",
    "email",
    "contact",
    "password_hash",
    "teach",
    "learn",
    "study_year",
    "branch",
    "avatar",
    "updated_at",
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        name=row["name"],
        email=row["email"],
        contact=row.get("contact"),
        password_hash=row["password_hash"],
        teach=list(row.get("teach") or []),
        learn=list(row.get("learn") or []),
        study_year=row.get("study_year"),
        branch=row.get("branch"),
        avatar=row.get("avatar"),
        skill_points=row["skill_points"],
        rating=row.get("rating"),
        reviews=row["reviews"],
        version=row["version"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict (all columns).

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion
    """
    return user.model_dump()


def user_profile_to_dict(user: User) -> Dict[str, Any]:
    """Profile columns only, for updates."""
    return user.model_dump(include=set(USER_PROFILE_COLUMNS))


def row_to_skill_request(row: Dict[str, Any]) -> SkillRequest:
    """Convert database row to SkillRequest domain model."""
    return SkillRequest(
        id=SkillRequestId(_uuid(row["id"])),
        requester_email=row["requester_email"],
        requester_name=row["requester_name"],
        skill=row["skill"],
        status=RequestStatus(row["status"]),
        created_at=row["created_at"],
    )


def skill_request_to_dict(request: SkillRequest) -> Dict[str, Any]:
    """Convert SkillRequest domain model to database dict."""
    data = request.model_dump()
    data["status"] = request.status.value
    return data


def row_to_session(row: Dict[str, Any]) -> Session:
    """Convert database row to Session domain model."""
    return Session(
        id=SessionId(_uuid(row["id"])),
        scheduler_email=row["scheduler_email"],
        peer_email=row["peer_email"],
        skill=row["skill"],
        date_time=row["date_time"],
        link=row["link"],
        created_at=row["created_at"],
    )


def session_to_dict(session: Session) -> Dict[str, Any]:
    """Convert Session domain model to database dict."""
    return session.model_dump()


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert database row to Notification domain model."""
    return Notification(
        id=NotificationId(_uuid(row["id"])),
        recipient_email=row["recipient_email"],
        message=row["message"],
        read=row["read"],
        created_at=row["created_at"],
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    """Convert Notification domain model to database dict."""
    return notification.model_dump()
