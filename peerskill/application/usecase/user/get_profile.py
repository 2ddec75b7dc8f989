"""Get user profile use case."""

from pydantic import Field

from peerskill.application.usecase.base import ApiModel
from peerskill.application.usecase.views import UserProfile
from peerskill.domain.service import UserService


class GetProfileRequest(ApiModel):
    """Get profile request."""

    email: str = Field(min_length=1)


class GetProfileUseCase:
    """Use case for reading a user's profile by email."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: GetProfileRequest) -> UserProfile:
        """Look up a profile.

        Raises:
            NotFoundError: If no user has the email
        """
        user = await self.user_service.get_by_email(request.email)
        return UserProfile.from_user(user)
