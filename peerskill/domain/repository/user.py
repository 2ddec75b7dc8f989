"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from peerskill.domain.model.user import User
from peerskill.domain.value import UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    All email lookups are case-insensitive.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email, matching the whole address case-insensitively.

        Args:
            email: The user's email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[User]:
        """Find all users in creation order."""
        pass

    @abstractmethod
    async def find_all_except(self, email: str) -> List[User]:
        """Find every user other than the given email, in creation order.

        Args:
            email: Email to exclude

        Returns:
            List of users
        """
        pass

    @abstractmethod
    async def find_top_by_points(self, limit: int) -> List[User]:
        """Find users with the most skill points.

        Ties are broken by creation order.

        Args:
            limit: Maximum number of users

        Returns:
            Users ordered by skill points, highest first
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update profile fields).

        Reputation fields (rating, reviews, skill points, version) are only
        written on create. Use update_reputation afterwards.

        Args:
            user: The user to save

        Returns:
            The saved user

        Raises:
            ConflictError: If another user already has this email
        """
        pass

    @abstractmethod
    async def update_reputation(
        self,
        user_id: UserId,
        expected_version: int,
        rating: float | None,
        reviews: int,
        skill_points: int,
    ) -> bool:
        """Write reputation fields if the stored version is unchanged.

        Bumps the version on success.

        Args:
            user_id: The user's unique identifier
            expected_version: Version the new values were computed from
            rating: New average rating
            reviews: New review count
            skill_points: New skill point balance

        Returns:
            True if written, False if the version moved or the user is gone
        """
        pass

    @abstractmethod
    async def delete(self, user_id: UserId) -> bool:
        """Delete a user.

        Args:
            user_id: The user's unique identifier

        Returns:
            True if a user was deleted
        """
        pass
