"""Session repository interface."""

from abc import ABC, abstractmethod
from typing import List

from peerskill.domain.model.session import Session


class SessionRepository(ABC):
    """Repository for Session entity."""

    @abstractmethod
    async def save(self, session: Session) -> Session:
        """Save a session (create)."""
        pass

    @abstractmethod
    async def find_all(self) -> List[Session]:
        """Find all sessions, newest first."""
        pass

    @abstractmethod
    async def find_by_participant(self, email: str) -> List[Session]:
        """Find sessions where the email is scheduler or peer, newest first.

        Args:
            email: Participant email

        Returns:
            List of sessions
        """
        pass

    @abstractmethod
    async def delete_by_participant(self, email: str) -> int:
        """Delete sessions where the email is scheduler or peer.

        Returns:
            Number of deleted sessions
        """
        pass
