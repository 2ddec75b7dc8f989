"""Repository interfaces for PeerSkill domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from peerskill.domain.repository.notification import NotificationRepository
from peerskill.domain.repository.session import SessionRepository
from peerskill.domain.repository.skill_request import SkillRequestRepository
from peerskill.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "SkillRequestRepository",
    "SessionRepository",
    "NotificationRepository",
]
