"""In-memory skill request repository for testing."""

from typing import List

from peerskill.domain.model import SkillRequest
from peerskill.domain.repository import SkillRequestRepository
from peerskill.domain.value import email_key

from .store import InMemoryStore, newest_first


class InMemorySkillRequestRepository(SkillRequestRepository):
    """In-memory implementation of SkillRequestRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def save(self, request: SkillRequest) -> SkillRequest:
        self._store.skill_requests[request.id] = request
        return request

    async def find_all(self) -> List[SkillRequest]:
        return newest_first(list(self._store.skill_requests.values()))

    async def find_by_requester(self, email: str) -> List[SkillRequest]:
        key = email_key(email)
        return newest_first(
            [
                r
                for r in self._store.skill_requests.values()
                if email_key(r.requester_email) == key
            ]
        )

    async def delete_by_requester(self, email: str) -> int:
        doomed = [r.id for r in await self.find_by_requester(email)]
        for request_id in doomed:
            del self._store.skill_requests[request_id]
        return len(doomed)
