"""Store reachability checks used by the health endpoint and startup."""

from abc import ABC, abstractmethod

from sqlalchemy.ext.asyncio import AsyncEngine

from peerskill.persistence.database import ping


class StoreProbe(ABC):
    """Checks that the backing store answers."""

    @abstractmethod
    async def ping(self) -> None:
        """Raise if the store is unreachable."""
        pass


class EngineProbe(StoreProbe):
    """Probe backed by a SQLAlchemy engine."""

    def __init__(self, engine: AsyncEngine) -> None:
        self.engine = engine

    async def ping(self) -> None:
        await ping(self.engine)


class InMemoryProbe(StoreProbe):
    """Probe for the in-memory store, always reachable."""

    async def ping(self) -> None:
        return None
