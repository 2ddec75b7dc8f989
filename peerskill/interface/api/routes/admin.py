"""Administrative routes. Every route requires the admin role."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from peerskill.application.usecase.admin import (
    DeleteUserUseCase,
    ListRequestsUseCase,
    ListSessionsUseCase,
    ListUsersUseCase,
    UpdatePointsUseCase,
)
from peerskill.application.usecase.admin.delete_user import (
    DeleteUserRequest,
    DeleteUserResponse,
)
from peerskill.application.usecase.admin.update_points import (
    UpdatePointsRequest,
    UpdatePointsResponse,
)
from peerskill.application.usecase.views import (
    SessionView,
    SkillRequestView,
    UserProfile,
)
from peerskill.domain.service import AccessService
from peerskill.interface.api.security import BearerCredentials, token_of

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)


@router.get("/users", response_model=list[UserProfile])
async def list_users(
    list_users_use_case: FromDishka[ListUsersUseCase],
    access_service: FromDishka[AccessService],
    credentials: BearerCredentials,
) -> list[UserProfile]:
    """Every user, without password hashes."""
    caller = access_service.authenticate(token_of(credentials))
    return await list_users_use_case.execute(caller)


@router.get("/requests", response_model=list[SkillRequestView])
async def list_requests(
    list_requests_use_case: FromDishka[ListRequestsUseCase],
    access_service: FromDishka[AccessService],
    credentials: BearerCredentials,
) -> list[SkillRequestView]:
    """Every skill request, newest first."""
    caller = access_service.authenticate(token_of(credentials))
    return await list_requests_use_case.execute(caller)


@router.get("/sessions", response_model=list[SessionView])
async def list_sessions(
    list_sessions_use_case: FromDishka[ListSessionsUseCase],
    access_service: FromDishka[AccessService],
    credentials: BearerCredentials,
) -> list[SessionView]:
    """Every session, newest first."""
    caller = access_service.authenticate(token_of(credentials))
    return await list_sessions_use_case.execute(caller)


@router.delete("/user", response_model=DeleteUserResponse)
async def delete_user(
    request: DeleteUserRequest,
    delete_user_use_case: FromDishka[DeleteUserUseCase],
    access_service: FromDishka[AccessService],
    credentials: BearerCredentials,
) -> DeleteUserResponse:
    """Delete a user with their requests, sessions and notifications.

    Example:
        DELETE /admin/user
        Authorization: Bearer ...
        {"email": "ravi@example.com"}

        Response:
        {"status": "ok", "requests": 1, "sessions": 2, "notifications": 3}
    """
    caller = access_service.authenticate(token_of(credentials))
    return await delete_user_use_case.execute(request, caller)


@router.post("/update-points", response_model=UpdatePointsResponse)
async def update_points(
    request: UpdatePointsRequest,
    update_points_use_case: FromDishka[UpdatePointsUseCase],
    access_service: FromDishka[AccessService],
    credentials: BearerCredentials,
) -> UpdatePointsResponse:
    """Set a user's skill point balance."""
    caller = access_service.authenticate(token_of(credentials))
    return await update_points_use_case.execute(request, caller)
