"""PostgreSQL repository implementations."""

from peerskill.persistence.repository.notification import (
    PostgresNotificationRepository,
)
from peerskill.persistence.repository.session import PostgresSessionRepository
from peerskill.persistence.repository.skill_request import (
    PostgresSkillRequestRepository,
)
from peerskill.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresSkillRequestRepository",
    "PostgresSessionRepository",
    "PostgresNotificationRepository",
]
