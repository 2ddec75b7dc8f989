"""Domain services."""

from .access_service import AccessService, LoginResult
from .jwt_service import JWTService
from .matching_service import MatchingService
from .notification_service import NotificationService
from .reputation_service import RatingOutcome, ReputationService
from .session_service import SessionService
from .skill_request_service import SkillRequestService
from .user_service import DeletionReport, UserService

__all__ = [
    "AccessService",
    "DeletionReport",
    "JWTService",
    "LoginResult",
    "MatchingService",
    "NotificationService",
    "RatingOutcome",
    "ReputationService",
    "SessionService",
    "SkillRequestService",
    "UserService",
]
