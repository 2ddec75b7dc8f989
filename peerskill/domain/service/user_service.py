"""User domain service."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

import logfire

from peerskill.domain.error import ConflictError, NotFoundError
from peerskill.domain.model import User
from peerskill.domain.repository import (
    NotificationRepository,
    SessionRepository,
    SkillRequestRepository,
    UserRepository,
)
from peerskill.domain.value import normalize_skills


# Fields a profile update may touch
EDITABLE_FIELDS = frozenset(
    {"name", "contact", "teach", "learn", "study_year", "branch", "avatar"}
)


@dataclass
class DeletionReport:
    """Records removed by a cascading user deletion."""

    email: str
    requests: int
    sessions: int
    notifications: int


class UserService:
    """Domain service for user operations."""

    def __init__(
        self,
        user_repository: UserRepository,
        skill_request_repository: SkillRequestRepository,
        session_repository: SessionRepository,
        notification_repository: NotificationRepository,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            skill_request_repository: Skill request repository (cascade)
            session_repository: Session repository (cascade)
            notification_repository: Notification repository (cascade)
        """
        self.user_repository = user_repository
        self.skill_request_repository = skill_request_repository
        self.session_repository = session_repository
        self.notification_repository = notification_repository

    async def get_by_email(self, email: str) -> User:
        """Get user by email.

        Args:
            email: User email (case-insensitive)

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_email", email=email):
            user = await self.user_repository.find_by_email(email)
            if not user:
                logfire.warn("User not found", email=email)
                raise NotFoundError("User", email)
            return user

    async def find_by_email(self, email: str) -> User | None:
        """Get user by email, or None."""
        return await self.user_repository.find_by_email(email)

    async def register(self, user: User) -> User:
        """Create a new user.

        Args:
            user: User with a hashed password

        Returns:
            Saved user

        Raises:
            ConflictError: If the email is taken, in any letter case
        """
        with logfire.span("user_service.register", email=user.email):
            if await self.user_repository.find_by_email(user.email):
                logfire.warn("Duplicate signup", email=user.email)
                raise ConflictError(f"User already exists: {user.email}")

            user = user.model_copy(
                update={
                    "teach": normalize_skills(user.teach),
                    "learn": normalize_skills(user.learn),
                }
            )
            saved = await self.user_repository.save(user)
            logfire.info("User registered", user_id=str(saved.id), email=saved.email)
            return saved

    async def update_profile(self, email: str, changes: dict[str, Any]) -> User:
        """Update editable profile fields.

        Keys outside the editable set and None values are ignored.

        Args:
            email: Email of the user to update
            changes: Field name to new value

        Returns:
            Updated user

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.update_profile", email=email):
            user = await self.get_by_email(email)

            update = {
                key: value
                for key, value in changes.items()
                if key in EDITABLE_FIELDS and value is not None
            }
            for key in ("teach", "learn"):
                if key in update:
                    update[key] = normalize_skills(update[key])
            update["updated_at"] = datetime.now()

            saved = await self.user_repository.save(user.model_copy(update=update))
            logfire.info(
                "Profile updated",
                email=email,
                fields=sorted(k for k in update if k != "updated_at"),
            )
            return saved

    async def list_all(self) -> list[User]:
        """List every user in creation order."""
        return await self.user_repository.find_all()

    async def delete_user(self, email: str) -> DeletionReport:
        """Delete a user and everything that references their email.

        Removes skill requests they made, sessions they take part in on
        either side, and notifications addressed to them.

        Args:
            email: Email of the user to delete

        Returns:
            Counts of removed records

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.delete_user", email=email):
            user = await self.get_by_email(email)

            requests = await self.skill_request_repository.delete_by_requester(
                user.email
            )
            sessions = await self.session_repository.delete_by_participant(user.email)
            notifications = await self.notification_repository.delete_by_recipient(
                user.email
            )
            await self.user_repository.delete(user.id)

            report = DeletionReport(
                email=user.email,
                requests=requests,
                sessions=sessions,
                notifications=notifications,
            )
            logfire.info(
                "User deleted",
                email=user.email,
                requests=requests,
                sessions=sessions,
                notifications=notifications,
            )
            return report
