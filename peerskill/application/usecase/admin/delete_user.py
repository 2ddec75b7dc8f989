"""Admin delete user use case."""

import logfire
from pydantic import Field

from peerskill.application.usecase.base import ApiModel
from peerskill.domain.service import AccessService, UserService
from peerskill.domain.value import Principal, Role


class DeleteUserRequest(ApiModel):
    """Delete user request."""

    email: str = Field(min_length=1)


class DeleteUserResponse(ApiModel):
    """Delete user response with the number of removed dependent records."""

    status: str = "ok"
    requests: int
    sessions: int
    notifications: int


class DeleteUserUseCase:
    """Use case for removing a user together with their requests, sessions
    and notifications.
    """

    def __init__(self, access_service: AccessService, user_service: UserService) -> None:
        """Initialize delete user use case.

        Args:
            access_service: Access gate domain service
            user_service: User domain service
        """
        self.access_service = access_service
        self.user_service = user_service

    async def execute(
        self, request: DeleteUserRequest, caller: Principal
    ) -> DeleteUserResponse:
        """Execute the cascading delete.

        Raises:
            ForbiddenError: If the caller is not an admin
            NotFoundError: If user not found
        """
        self.access_service.authorize(caller, Role.ADMIN)

        with logfire.span(
            "delete_user.execute", email=request.email, admin=caller.email
        ):
            report = await self.user_service.delete_user(request.email)
            return DeleteUserResponse(
                requests=report.requests,
                sessions=report.sessions,
                notifications=report.notifications,
            )
