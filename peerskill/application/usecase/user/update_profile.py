"""Update user profile use case."""

import logfire
from pydantic import Field, field_validator

from peerskill.application.usecase.base import ApiModel, StatusResponse, strip_required
from peerskill.domain.service import AccessService, UserService
from peerskill.domain.value import Principal


class UpdateProfileRequest(ApiModel):
    """Update profile request.

    Omitted fields are left unchanged.
    """

    email: str = Field(min_length=1)
    name: str | None = Field(default=None, min_length=1, max_length=200)
    contact: str | None = Field(default=None, max_length=255)
    teach: list[str] | None = None
    learn: list[str] | None = None
    study_year: str | None = Field(default=None, max_length=50)
    branch: str | None = Field(default=None, max_length=255)
    avatar: str | None = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return strip_required(value, "Name cannot be blank")


class UpdateProfileUseCase:
    """Use case for editing a user's profile.

    Users edit their own profile; admins may edit anyone's. Email,
    password, points and rating are not editable here.
    """

    def __init__(self, access_service: AccessService, user_service: UserService) -> None:
        """Initialize update profile use case.

        Args:
            access_service: Access gate domain service
            user_service: User domain service
        """
        self.access_service = access_service
        self.user_service = user_service

    async def execute(
        self, request: UpdateProfileRequest, caller: Principal
    ) -> StatusResponse:
        """Execute update profile flow.

        Raises:
            ForbiddenError: If the caller is neither the user nor an admin
            NotFoundError: If user not found
        """
        self.access_service.ensure_self_or_admin(caller, request.email)

        with logfire.span(
            "update_profile.execute", email=request.email, caller=caller.email
        ):
            changes = request.model_dump(exclude={"email"}, exclude_none=True)
            await self.user_service.update_profile(request.email, changes)
            return StatusResponse()
