"""In-memory session repository for testing."""

from typing import List

from peerskill.domain.model import Session
from peerskill.domain.repository import SessionRepository
from peerskill.domain.value import email_key

from .store import InMemoryStore, newest_first


class InMemorySessionRepository(SessionRepository):
    """In-memory implementation of SessionRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def save(self, session: Session) -> Session:
        self._store.sessions[session.id] = session
        return session

    async def find_all(self) -> List[Session]:
        return newest_first(list(self._store.sessions.values()))

    async def find_by_participant(self, email: str) -> List[Session]:
        key = email_key(email)
        return newest_first(
            [
                s
                for s in self._store.sessions.values()
                if key in (email_key(s.scheduler_email), email_key(s.peer_email))
            ]
        )

    async def delete_by_participant(self, email: str) -> int:
        doomed = [s.id for s in await self.find_by_participant(email)]
        for session_id in doomed:
            del self._store.sessions[session_id]
        return len(doomed)
