"""Admin list users use case."""

from peerskill.application.usecase.views import UserProfile
from peerskill.domain.service import AccessService, UserService
from peerskill.domain.value import Principal, Role


class ListUsersUseCase:
    """Use case for listing every user, without password hashes."""

    def __init__(self, access_service: AccessService, user_service: UserService) -> None:
        self.access_service = access_service
        self.user_service = user_service

    async def execute(self, caller: Principal) -> list[UserProfile]:
        self.access_service.authorize(caller, Role.ADMIN)
        users = await self.user_service.list_all()
        return [UserProfile.from_user(user) for user in users]
