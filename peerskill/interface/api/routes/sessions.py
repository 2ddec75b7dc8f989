"""Session routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from peerskill.application.usecase.session import (
    MySessionsUseCase,
    ScheduleSessionUseCase,
)
from peerskill.application.usecase.session.my_sessions import MySessionsRequest
from peerskill.application.usecase.session.schedule_session import (
    ScheduleSessionRequest,
    ScheduleSessionResponse,
)
from peerskill.application.usecase.views import SessionView
from peerskill.domain.service import AccessService
from peerskill.interface.api.security import BearerCredentials, token_of

router = APIRouter(tags=["sessions"], route_class=DishkaRoute)


@router.post("/schedule-session", response_model=ScheduleSessionResponse)
async def schedule_session(
    request: ScheduleSessionRequest,
    schedule_session_use_case: FromDishka[ScheduleSessionUseCase],
    access_service: FromDishka[AccessService],
    credentials: BearerCredentials,
) -> ScheduleSessionResponse:
    """Schedule a session with a peer and get a meeting link.

    Example:
        POST /schedule-session
        Authorization: Bearer ...
        {
            "scheduler": "asha@example.com",
            "peer": "ravi@example.com",
            "skill": "Python",
            "dateTime": "Friday 5pm"
        }

        Response:
        {"status": "ok", "sessionId": "...", "link": "https://meet.jit.si/PeerSkill-..."}
    """
    caller = access_service.authenticate(token_of(credentials))
    return await schedule_session_use_case.execute(request, caller)


@router.post("/my-sessions", response_model=list[SessionView])
async def my_sessions(
    request: MySessionsRequest,
    my_sessions_use_case: FromDishka[MySessionsUseCase],
    access_service: FromDishka[AccessService],
    credentials: BearerCredentials,
) -> list[SessionView]:
    """Sessions the caller schedules or attends, newest first."""
    caller = access_service.authenticate(token_of(credentials))
    return await my_sessions_use_case.execute(request, caller)
