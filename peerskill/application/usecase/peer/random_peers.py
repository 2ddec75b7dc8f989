"""Random peers use case."""

from pydantic import Field

from peerskill.application.usecase.base import ApiModel
from peerskill.application.usecase.views import PeerSummary
from peerskill.domain.service import MatchingService


class RandomPeersRequest(ApiModel):
    """Random peers request."""

    email: str = Field(min_length=1)


class RandomPeersUseCase:
    """Use case for a random sample of other users."""

    def __init__(self, matching_service: MatchingService) -> None:
        self.matching_service = matching_service

    async def execute(self, request: RandomPeersRequest) -> list[PeerSummary]:
        users = await self.matching_service.random_peers(request.email)
        return [PeerSummary.from_user(user) for user in users]
