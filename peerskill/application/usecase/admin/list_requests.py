"""Admin list skill requests use case."""

from peerskill.application.usecase.views import SkillRequestView
from peerskill.domain.service import AccessService, SkillRequestService
from peerskill.domain.value import Principal, Role


class ListRequestsUseCase:
    """Use case for listing every skill request, newest first."""

    def __init__(
        self,
        access_service: AccessService,
        skill_request_service: SkillRequestService,
    ) -> None:
        self.access_service = access_service
        self.skill_request_service = skill_request_service

    async def execute(self, caller: Principal) -> list[SkillRequestView]:
        self.access_service.authorize(caller, Role.ADMIN)
        requests = await self.skill_request_service.list_all()
        return [SkillRequestView.from_request(r) for r in requests]
