"""Leaderboard use case."""

from peerskill.application.usecase.views import PeerSummary
from peerskill.domain.service import MatchingService


class LeaderboardUseCase:
    """Use case for the users with the most skill points."""

    def __init__(self, matching_service: MatchingService) -> None:
        self.matching_service = matching_service

    async def execute(self) -> list[PeerSummary]:
        users = await self.matching_service.leaderboard()
        return [PeerSummary.from_user(user) for user in users]
