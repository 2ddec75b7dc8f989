"""In-memory user repository for testing."""

from datetime import datetime
from typing import List, Optional

from peerskill.domain.error import ConflictError
from peerskill.domain.model import User
from peerskill.domain.repository import UserRepository
from peerskill.domain.value import UserId, email_key
from peerskill.persistence.mappers import USER_PROFILE_COLUMNS

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    @property
    def _users(self) -> dict:
        return self._store.users

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email, ignoring case."""
        key = email_key(email)
        for user in self._users.values():
            if email_key(user.email) == key:
                return user
        return None

    async def find_all(self) -> List[User]:
        """Find all users in insertion order."""
        return list(self._users.values())

    async def find_all_except(self, email: str) -> List[User]:
        """Find every other user in insertion order."""
        key = email_key(email)
        return [u for u in self._users.values() if email_key(u.email) != key]

    async def find_top_by_points(self, limit: int) -> List[User]:
        """Find users with the most skill points (stable on ties)."""
        ranked = sorted(self._users.values(), key=lambda u: -u.skill_points)
        return ranked[:limit]

    async def save(self, user: User) -> User:
        """Save or update a user.

        Raises:
            ConflictError: If another user has the same email
        """
        key = email_key(user.email)
        for other in self._users.values():
            if other.id != user.id and email_key(other.email) == key:
                raise ConflictError(f"User already exists: {user.email}")

        existing = self._users.get(user.id)
        if existing:
            # Profile columns only, like the SQL implementation
            user = existing.model_copy(
                update={name: getattr(user, name) for name in USER_PROFILE_COLUMNS}
            )
        self._users[user.id] = user
        return user

    async def update_reputation(
        self,
        user_id: UserId,
        expected_version: int,
        rating: float | None,
        reviews: int,
        skill_points: int,
    ) -> bool:
        """Compare-and-set on the version field."""
        user = self._users.get(user_id)
        if not user or user.version != expected_version:
            return False
        self._users[user_id] = user.model_copy(
            update={
                "rating": rating,
                "reviews": reviews,
                "skill_points": skill_points,
                "version": user.version + 1,
                "updated_at": datetime.now(),
            }
        )
        return True

    async def delete(self, user_id: UserId) -> bool:
        """Delete a user."""
        return self._users.pop(user_id, None) is not None
