"""Search peers use case."""

from pydantic import Field

from peerskill.application.usecase.base import ApiModel
from peerskill.application.usecase.views import PeerSummary
from peerskill.domain.service import MatchingService


class SearchPeersRequest(ApiModel):
    """Search peers request. A blank query returns no results."""

    email: str = Field(min_length=1)
    query: str = ""


class SearchPeersUseCase:
    """Use case for free-text peer search."""

    def __init__(self, matching_service: MatchingService) -> None:
        self.matching_service = matching_service

    async def execute(self, request: SearchPeersRequest) -> list[PeerSummary]:
        users = await self.matching_service.search_peers(request.email, request.query)
        return [PeerSummary.from_user(user) for user in users]
