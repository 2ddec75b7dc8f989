"""Rate peer use case."""

from pydantic import Field

from peerskill.application.usecase.base import ApiModel
from peerskill.domain.service import ReputationService
from peerskill.domain.value import Principal


class RatePeerRequest(ApiModel):
    """Rate peer request. The rater is always the caller."""

    peer_email: str = Field(min_length=1)
    rating: float


class RatePeerResponse(ApiModel):
    """Rated peer's reputation after the rating."""

    status: str = "ok"
    new_points: int
    new_rating: float


class RatePeerUseCase:
    """Use case for rating another user after a session."""

    def __init__(self, reputation_service: ReputationService) -> None:
        self.reputation_service = reputation_service

    async def execute(
        self, request: RatePeerRequest, caller: Principal
    ) -> RatePeerResponse:
        """Apply the caller's rating to the peer.

        Raises:
            ValidationError: If the rating is out of range or the peer is the caller
            NotFoundError: If the peer does not exist
            StoreError: If the update kept conflicting with concurrent writers
        """
        outcome = await self.reputation_service.apply_rating(
            caller.email, request.peer_email, request.rating
        )
        return RatePeerResponse(
            new_points=outcome.new_points, new_rating=outcome.new_rating
        )
