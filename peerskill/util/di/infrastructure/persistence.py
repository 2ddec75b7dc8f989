"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from peerskill.config import Settings
from peerskill.domain.repository import (
    NotificationRepository,
    SessionRepository,
    SkillRequestRepository,
    UserRepository,
)
from peerskill.persistence.database import create_engine, create_session_factory
from peerskill.persistence.probe import EngineProbe, StoreProbe
from peerskill.persistence.repository import (
    PostgresNotificationRepository,
    PostgresSessionRepository,
    PostgresSkillRequestRepository,
    PostgresUserRepository,
)
from peerskill.util.di.base import ProviderBase
from peerskill.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide the database engine, disposed when the container closes."""
        engine = create_engine(settings.database, echo=settings.debug)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()
        logfire.info("Database engine disposed")

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.APP)
    def get_store_probe(self, engine: AsyncEngine) -> StoreProbe:
        """Provide database reachability probe."""
        return EngineProbe(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """One transaction per request.

        Committed when the request completes, rolled back when it raises.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.debug("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_skill_request_repository(
        self, session: AsyncSession
    ) -> SkillRequestRepository:
        """Provide SkillRequest repository."""
        return PostgresSkillRequestRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_session_repository(self, session: AsyncSession) -> SessionRepository:
        """Provide Session repository."""
        return PostgresSessionRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_notification_repository(
        self, session: AsyncSession
    ) -> NotificationRepository:
        """Provide Notification repository."""
        return PostgresNotificationRepository(session)
