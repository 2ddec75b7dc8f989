"""Request skill use case."""

from pydantic import Field

from peerskill.application.usecase.base import ApiModel, StatusResponse
from peerskill.domain.service import AccessService, SkillRequestService
from peerskill.domain.value import Principal


class RequestSkillRequest(ApiModel):
    """Skill request."""

    email: str = Field(min_length=1, max_length=255)
    skill: str = Field(max_length=255)


class RequestSkillUseCase:
    """Use case for asking for help with a skill."""

    def __init__(
        self,
        access_service: AccessService,
        skill_request_service: SkillRequestService,
    ) -> None:
        self.access_service = access_service
        self.skill_request_service = skill_request_service

    async def execute(
        self, request: RequestSkillRequest, caller: Principal
    ) -> StatusResponse:
        """Record the request in the caller's name.

        Raises:
            ForbiddenError: If the email is not the caller's
            ValidationError: If the skill is blank
            NotFoundError: If the requester does not exist
        """
        self.access_service.ensure_self(caller, request.email)
        await self.skill_request_service.request_skill(request.email, request.skill)
        return StatusResponse()
