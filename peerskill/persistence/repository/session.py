"""PostgreSQL implementation of Session repository."""

from typing import List

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from peerskill.domain.model import Session
from peerskill.domain.repository import SessionRepository
from peerskill.domain.value import email_key
from peerskill.persistence.mappers import row_to_session, session_to_dict
from peerskill.persistence.tables import sessions_table

_newest_first = (sessions_table.c.created_at.desc(), sessions_table.c.id)


def _participant(email: str):
    key = email_key(email)
    return or_(
        func.lower(sessions_table.c.scheduler_email) == key,
        func.lower(sessions_table.c.peer_email) == key,
    )


class PostgresSessionRepository(SessionRepository):
    """PostgreSQL implementation of SessionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session (not to be confused with
                the tutoring Session entity)
        """
        self.session = session

    async def save(self, session: Session) -> Session:
        stmt = sessions_table.insert().values(**session_to_dict(session))
        await self.session.execute(stmt)
        await self.session.flush()
        return session

    async def find_all(self) -> List[Session]:
        stmt = select(sessions_table).order_by(*_newest_first)
        result = await self.session.execute(stmt)
        return [row_to_session(dict(row)) for row in result.mappings().all()]

    async def find_by_participant(self, email: str) -> List[Session]:
        stmt = (
            select(sessions_table)
            .where(_participant(email))
            .order_by(*_newest_first)
        )
        result = await self.session.execute(stmt)
        return [row_to_session(dict(row)) for row in result.mappings().all()]

    async def delete_by_participant(self, email: str) -> int:
        stmt = sessions_table.delete().where(_participant(email))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
