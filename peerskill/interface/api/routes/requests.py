"""Skill request routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from peerskill.application.usecase.base import StatusResponse
from peerskill.application.usecase.request import RequestSkillUseCase
from peerskill.application.usecase.request.request_skill import RequestSkillRequest
from peerskill.domain.service import AccessService
from peerskill.interface.api.security import BearerCredentials, token_of

router = APIRouter(tags=["requests"], route_class=DishkaRoute)


@router.post("/request-skill", response_model=StatusResponse)
async def request_skill(
    request: RequestSkillRequest,
    request_skill_use_case: FromDishka[RequestSkillUseCase],
    access_service: FromDishka[AccessService],
    credentials: BearerCredentials,
) -> StatusResponse:
    """Ask for help with a skill. The email must be the caller's."""
    caller = access_service.authenticate(token_of(credentials))
    return await request_skill_use_case.execute(request, caller)
