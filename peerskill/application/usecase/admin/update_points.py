"""Admin update points use case."""

from pydantic import Field

from peerskill.application.usecase.base import ApiModel
from peerskill.domain.service import AccessService, ReputationService
from peerskill.domain.value import Principal, Role


class UpdatePointsRequest(ApiModel):
    """Update points request. ``points`` replaces the current balance."""

    email: str = Field(min_length=1)
    points: int


class UpdatePointsResponse(ApiModel):
    """Update points response."""

    status: str = "ok"
    points: int


class UpdatePointsUseCase:
    """Use case for setting a user's skill point balance."""

    def __init__(
        self,
        access_service: AccessService,
        reputation_service: ReputationService,
    ) -> None:
        self.access_service = access_service
        self.reputation_service = reputation_service

    async def execute(
        self, request: UpdatePointsRequest, caller: Principal
    ) -> UpdatePointsResponse:
        """Raises ForbiddenError, ValidationError or NotFoundError."""
        self.access_service.authorize(caller, Role.ADMIN)
        outcome = await self.reputation_service.set_points(
            request.email, request.points
        )
        return UpdatePointsResponse(points=outcome.new_points)
