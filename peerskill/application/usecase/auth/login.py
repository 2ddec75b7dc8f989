"""Login use case."""

from pydantic import Field

from peerskill.application.usecase.base import ApiModel
from peerskill.domain.service import AccessService


class LoginRequest(ApiModel):
    """Login request."""

    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class LoginResponse(ApiModel):
    """Login response with a bearer token."""

    status: str = "ok"
    role: str
    name: str
    email: str
    token: str


class LoginUseCase:
    """Use case for password login."""

    def __init__(self, access_service: AccessService) -> None:
        self.access_service = access_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Check credentials and issue a token.

        Raises:
            AuthError: If the credentials do not match
        """
        result = await self.access_service.login(request.email, request.password)
        return LoginResponse(
            role=result.principal.role.value,
            name=result.name,
            email=result.principal.email,
            token=result.token,
        )
