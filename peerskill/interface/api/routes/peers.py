"""Peer discovery routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from peerskill.application.usecase.peer import (
    LeaderboardUseCase,
    RandomPeersUseCase,
    RecommendUseCase,
    SearchPeersUseCase,
)
from peerskill.application.usecase.peer.random_peers import RandomPeersRequest
from peerskill.application.usecase.peer.recommend import RecommendRequest
from peerskill.application.usecase.peer.search_peers import SearchPeersRequest
from peerskill.application.usecase.views import PeerSummary
from peerskill.domain.service import AccessService
from peerskill.interface.api.security import BearerCredentials, token_of

router = APIRouter(tags=["peers"], route_class=DishkaRoute)


@router.post("/recommendations", response_model=list[PeerSummary])
async def recommendations(
    request: RecommendRequest,
    recommend_use_case: FromDishka[RecommendUseCase],
    access_service: FromDishka[AccessService],
    credentials: BearerCredentials,
) -> list[PeerSummary]:
    """Users who teach something the given user wants to learn.

    Example:
        POST /recommendations
        Authorization: Bearer ...
        {"email": "asha@example.com"}

        Response:
        [{"name": "Ravi", "email": "ravi@example.com", "teach": ["Python Basics"], ...}]
    """
    access_service.authenticate(token_of(credentials))
    return await recommend_use_case.execute(request)


@router.post("/peers/random", response_model=list[PeerSummary])
async def random_peers(
    request: RandomPeersRequest,
    random_peers_use_case: FromDishka[RandomPeersUseCase],
    access_service: FromDishka[AccessService],
    credentials: BearerCredentials,
) -> list[PeerSummary]:
    """A random handful of other users."""
    access_service.authenticate(token_of(credentials))
    return await random_peers_use_case.execute(request)


@router.post("/peers/search", response_model=list[PeerSummary])
async def search_peers(
    request: SearchPeersRequest,
    search_peers_use_case: FromDishka[SearchPeersUseCase],
    access_service: FromDishka[AccessService],
    credentials: BearerCredentials,
) -> list[PeerSummary]:
    """Search other users by name, teach skills, branch or study year."""
    access_service.authenticate(token_of(credentials))
    return await search_peers_use_case.execute(request)


@router.get("/peers/leaderboard", response_model=list[PeerSummary])
async def leaderboard(
    leaderboard_use_case: FromDishka[LeaderboardUseCase],
    access_service: FromDishka[AccessService],
    credentials: BearerCredentials,
) -> list[PeerSummary]:
    """Users with the most skill points."""
    access_service.authenticate(token_of(credentials))
    return await leaderboard_use_case.execute()
