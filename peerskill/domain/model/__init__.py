"""Domain model entities for PeerSkill."""

from peerskill.domain.model.notification import Notification
from peerskill.domain.model.session import Session
from peerskill.domain.model.skill_request import SkillRequest
from peerskill.domain.model.user import User

__all__ = [
    "User",
    "SkillRequest",
    "Session",
    "Notification",
]
