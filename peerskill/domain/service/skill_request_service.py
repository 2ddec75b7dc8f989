"""Skill request domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from peerskill.domain.error import ValidationError
from peerskill.domain.model import SkillRequest
from peerskill.domain.repository import SkillRequestRepository
from peerskill.domain.value import RequestStatus, SkillRequestId

from .user_service import UserService


class SkillRequestService:
    """Domain service for skill requests."""

    def __init__(
        self,
        skill_request_repository: SkillRequestRepository,
        user_service: UserService,
    ) -> None:
        self.skill_request_repository = skill_request_repository
        self.user_service = user_service

    async def request_skill(self, email: str, skill: str) -> SkillRequest:
        """Record that a user wants help with a skill.

        Args:
            email: Requester email
            skill: Skill label

        Returns:
            Created request, status Open

        Raises:
            ValidationError: If skill is blank
            NotFoundError: If requester does not exist
        """
        skill = skill.strip()
        if not skill:
            raise ValidationError("Skill is required")

        with logfire.span("skill_request_service.request_skill", email=email):
            user = await self.user_service.get_by_email(email)
            request = SkillRequest(
                id=SkillRequestId(uuid4()),
                requester_email=user.email,
                requester_name=user.name,
                skill=skill,
                status=RequestStatus.OPEN,
                created_at=datetime.now(),
            )
            saved = await self.skill_request_repository.save(request)
            logfire.info("Skill requested", request_id=str(saved.id), skill=skill)
            return saved

    async def list_all(self) -> list[SkillRequest]:
        """Every skill request, newest first."""
        return await self.skill_request_repository.find_all()
