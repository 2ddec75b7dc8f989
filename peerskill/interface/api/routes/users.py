"""User profile routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from peerskill.application.usecase.base import StatusResponse
from peerskill.application.usecase.user import (
    GetProfileUseCase,
    UpdateProfileUseCase,
)
from peerskill.application.usecase.user.get_profile import GetProfileRequest
from peerskill.application.usecase.user.update_profile import UpdateProfileRequest
from peerskill.application.usecase.views import UserProfile
from peerskill.domain.service import AccessService
from peerskill.interface.api.security import BearerCredentials, token_of

router = APIRouter(tags=["users"], route_class=DishkaRoute)


@router.post("/me", response_model=UserProfile)
async def get_profile(
    request: GetProfileRequest,
    get_profile_use_case: FromDishka[GetProfileUseCase],
    access_service: FromDishka[AccessService],
    credentials: BearerCredentials,
) -> UserProfile:
    """Get a user's profile by email, without the password hash."""
    access_service.authenticate(token_of(credentials))
    return await get_profile_use_case.execute(request)


@router.post("/update-profile", response_model=StatusResponse)
async def update_profile(
    request: UpdateProfileRequest,
    update_profile_use_case: FromDishka[UpdateProfileUseCase],
    access_service: FromDishka[AccessService],
    credentials: BearerCredentials,
) -> StatusResponse:
    """Update profile fields. Only the user or an admin may do this.

    Example:
        POST /update-profile
        Authorization: Bearer ...
        {"email": "asha@example.com", "teach": ["Python", "SQL"], "branch": "ECE"}

        Response:
        {"status": "ok"}
    """
    caller = access_service.authenticate(token_of(credentials))
    return await update_profile_use_case.execute(request, caller)
