"""Peer discovery use cases."""

from .leaderboard import LeaderboardUseCase
from .random_peers import RandomPeersUseCase
from .recommend import RecommendUseCase
from .search_peers import SearchPeersUseCase

__all__ = [
    "LeaderboardUseCase",
    "RandomPeersUseCase",
    "RecommendUseCase",
    "SearchPeersUseCase",
]
