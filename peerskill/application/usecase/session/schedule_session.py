"""Schedule session use case."""

from pydantic import Field

from peerskill.application.usecase.base import ApiModel
from peerskill.domain.service import AccessService, SessionService
from peerskill.domain.value import Principal


class ScheduleSessionRequest(ApiModel):
    """Schedule session request."""

    scheduler: str = Field(min_length=1, max_length=255)
    peer: str = Field(min_length=1, max_length=255)
    skill: str = Field(default="", max_length=255)
    date_time: str = Field(default="", max_length=255)


class ScheduleSessionResponse(ApiModel):
    """Schedule session response with the meeting link."""

    status: str = "ok"
    session_id: str
    link: str


class ScheduleSessionUseCase:
    """Use case for scheduling a session with a peer.

    The scheduler must be the caller. The peer is notified.
    """

    def __init__(
        self, access_service: AccessService, session_service: SessionService
    ) -> None:
        self.access_service = access_service
        self.session_service = session_service

    async def execute(
        self, request: ScheduleSessionRequest, caller: Principal
    ) -> ScheduleSessionResponse:
        """Execute schedule session flow.

        Raises:
            ForbiddenError: If the scheduler is not the caller
            ValidationError: If a field is blank or the peer is the scheduler
            NotFoundError: If scheduler or peer does not exist
        """
        self.access_service.ensure_self(caller, request.scheduler)
        session = await self.session_service.create_session(
            scheduler_email=request.scheduler,
            peer_email=request.peer,
            skill=request.skill,
            date_time=request.date_time,
        )
        return ScheduleSessionResponse(session_id=str(session.id), link=session.link)
