"""PostgreSQL implementation of SkillRequest repository."""

from typing import List

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from peerskill.domain.model import SkillRequest
from peerskill.domain.repository import SkillRequestRepository
from peerskill.domain.value import email_key
from peerskill.persistence.mappers import row_to_skill_request, skill_request_to_dict
from peerskill.persistence.tables import skill_requests_table

_newest_first = (skill_requests_table.c.created_at.desc(), skill_requests_table.c.id)


class PostgresSkillRequestRepository(SkillRequestRepository):
    """PostgreSQL implementation of SkillRequestRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, request: SkillRequest) -> SkillRequest:
        stmt = skill_requests_table.insert().values(**skill_request_to_dict(request))
        await self.session.execute(stmt)
        await self.session.flush()
        return request

    async def find_all(self) -> List[SkillRequest]:
        stmt = select(skill_requests_table).order_by(*_newest_first)
        result = await self.session.execute(stmt)
        return [row_to_skill_request(dict(row)) for row in result.mappings().all()]

    async def find_by_requester(self, email: str) -> List[SkillRequest]:
        stmt = (
            select(skill_requests_table)
            .where(func.lower(skill_requests_table.c.requester_email) == email_key(email))
            .order_by(*_newest_first)
        )
        result = await self.session.execute(stmt)
        return [row_to_skill_request(dict(row)) for row in result.mappings().all()]

    async def delete_by_requester(self, email: str) -> int:
        stmt = skill_requests_table.delete().where(
            func.lower(skill_requests_table.c.requester_email) == email_key(email)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
