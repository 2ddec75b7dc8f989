"""PostgreSQL implementation of User repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from peerskill.domain.error import ConflictError
from peerskill.domain.model import User
from peerskill.domain.repository import UserRepository
from peerskill.domain.value import UserId, email_key
from peerskill.persistence.mappers import row_to_user, user_profile_to_dict, user_to_dict
from peerskill.persistence.tables import users_table

_email_lower = func.lower(users_table.c.email)
_creation_order = (users_table.c.created_at, users_table.c.id)


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email, whole address, ignoring case."""
        stmt = select(users_table).where(_email_lower == email_key(email))
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_all(self) -> List[User]:
        """Find all users in creation order."""
        stmt = select(users_table).order_by(*_creation_order)
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def find_all_except(self, email: str) -> List[User]:
        """Find every other user in creation order."""
        stmt = (
            select(users_table)
            .where(_email_lower != email_key(email))
            .order_by(*_creation_order)
        )
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def find_top_by_points(self, limit: int) -> List[User]:
        """Find users with the most skill points."""
        stmt = (
            select(users_table)
            .order_by(users_table.c.skill_points.desc(), *_creation_order)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def save(self, user: User) -> User:
        """Save a user (create or update profile fields).

        Raises:
            ConflictError: If the email is already taken
        """
        existing = await self.find_by_id(user.id)

        if existing:
            stmt = (
                users_table.update()
                .where(users_table.c.id == user.id)
                .values(**user_profile_to_dict(user))
            )
        else:
            stmt = users_table.insert().values(**user_to_dict(user))

        # Savepoint keeps the request transaction usable after a clash
        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError:
            raise ConflictError(f"User already exists: {user.email}")

        return user

    async def update_reputation(
        self,
        user_id: UserId,
        expected_version: int,
        rating: float | None,
        reviews: int,
        skill_points: int,
    ) -> bool:
        """Conditional update on the version column."""
        stmt = (
            users_table.update()
            .where(users_table.c.id == user_id)
            .where(users_table.c.version == expected_version)
            .values(
                rating=rating,
                reviews=reviews,
                skill_points=skill_points,
                version=users_table.c.version + 1,
                updated_at=datetime.now(),
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1

    async def delete(self, user_id: UserId) -> bool:
        """Delete a user."""
        stmt = users_table.delete().where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
