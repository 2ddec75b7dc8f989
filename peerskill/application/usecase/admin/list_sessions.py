"""Admin list sessions use case."""

from peerskill.application.usecase.views import SessionView
from peerskill.domain.service import AccessService, SessionService
from peerskill.domain.value import Principal, Role


class ListSessionsUseCase:
    """Use case for listing every session, newest first."""

    def __init__(
        self, access_service: AccessService, session_service: SessionService
    ) -> None:
        self.access_service = access_service
        self.session_service = session_service

    async def execute(self, caller: Principal) -> list[SessionView]:
        self.access_service.authorize(caller, Role.ADMIN)
        sessions = await self.session_service.list_all()
        return [SessionView.from_session(s) for s in sessions]
