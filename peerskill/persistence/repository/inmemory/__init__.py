"""In-memory repository implementations for testing."""

from .notification import InMemoryNotificationRepository
from .session import InMemorySessionRepository
from .skill_request import InMemorySkillRequestRepository
from .store import InMemoryStore
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryNotificationRepository",
    "InMemorySessionRepository",
    "InMemorySkillRequestRepository",
    "InMemoryStore",
    "InMemoryUserRepository",
]
