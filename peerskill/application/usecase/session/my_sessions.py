"""List my sessions use case."""

from pydantic import Field

from peerskill.application.usecase.base import ApiModel
from peerskill.application.usecase.views import SessionView
from peerskill.domain.service import AccessService, SessionService
from peerskill.domain.value import Principal


class MySessionsRequest(ApiModel):
    """My sessions request."""

    email: str = Field(min_length=1)


class MySessionsUseCase:
    """Use case for listing the sessions a user takes part in, newest first."""

    def __init__(
        self, access_service: AccessService, session_service: SessionService
    ) -> None:
        self.access_service = access_service
        self.session_service = session_service

    async def execute(
        self, request: MySessionsRequest, caller: Principal
    ) -> list[SessionView]:
        """Raises ForbiddenError if the email is not the caller's."""
        self.access_service.ensure_self(caller, request.email)
        sessions = await self.session_service.list_for(request.email)
        return [SessionView.from_session(s) for s in sessions]
