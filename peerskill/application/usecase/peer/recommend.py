"""Recommend peers use case."""

from pydantic import Field

from peerskill.application.usecase.base import ApiModel
from peerskill.application.usecase.views import PeerSummary
from peerskill.domain.service import MatchingService


class RecommendRequest(ApiModel):
    """Recommendation request."""

    email: str = Field(min_length=1)


class RecommendUseCase:
    """Use case for recommending peers who teach what the user wants to learn."""

    def __init__(self, matching_service: MatchingService) -> None:
        self.matching_service = matching_service

    async def execute(self, request: RecommendRequest) -> list[PeerSummary]:
        users = await self.matching_service.recommend(request.email)
        return [PeerSummary.from_user(user) for user in users]
