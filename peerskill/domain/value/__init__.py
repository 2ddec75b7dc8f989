"""Domain value objects for PeerSkill."""

from peerskill.domain.value.identifiers import (
    NotificationId,
    SessionId,
    SkillRequestId,
    UserId,
)
from peerskill.domain.value.types import (
    MatchMode,
    Principal,
    RequestStatus,
    Role,
    email_key,
    normalize_skills,
    same_email,
)

__all__ = [
    # Identifiers
    "UserId",
    "SkillRequestId",
    "SessionId",
    "NotificationId",
    # Types
    "MatchMode",
    "Principal",
    "RequestStatus",
    "Role",
    # Helpers
    "email_key",
    "normalize_skills",
    "same_email",
]
