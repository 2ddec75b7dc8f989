"""Peer matching domain service.

Recommendation pairs a requester's "learn" labels with other users' "teach"
labels through a skill match policy:

- substring: the wanted label occurs anywhere in the offered label,
  ignoring case. "java" matches "JavaScript". High recall, low precision.
- exact: the labels are equal ignoring case.

Blank wanted labels never match anything.
"""

import random
from typing import Callable, Iterable, Optional

import logfire

from peerskill.config import MatchingSettings
from peerskill.domain.model import User
from peerskill.domain.repository import UserRepository
from peerskill.domain.value import MatchMode


SkillMatchPolicy = Callable[[str, str], bool]


def substring_match(wanted: str, offered: str) -> bool:
    """Case-insensitive containment of ``wanted`` in ``offered``."""
    needle = wanted.strip().casefold()
    if not needle:
        return False
    return needle in offered.casefold()


def exact_match(wanted: str, offered: str) -> bool:
    """Case-insensitive equality after stripping whitespace."""
    needle = wanted.strip().casefold()
    if not needle:
        return False
    return needle == offered.strip().casefold()


POLICIES: dict[MatchMode, SkillMatchPolicy] = {
    MatchMode.SUBSTRING: substring_match,
    MatchMode.EXACT: exact_match,
}


def teaches_any(
    offered: Iterable[str], wanted: Iterable[str], policy: SkillMatchPolicy
) -> bool:
    """Return True if any offered label satisfies the policy for any wanted label."""
    wanted = list(wanted)
    return any(policy(w, o) for o in offered for w in wanted)


class MatchingService:
    """Domain service for finding peers."""

    def __init__(
        self,
        user_repository: UserRepository,
        matching_settings: MatchingSettings,
        rng: Optional[random.Random] = None,
    ) -> None:
        """Initialize matching service.

        Args:
            user_repository: User repository
            matching_settings: Matching configuration
            rng: Random source for sampling (defaults to the OS source)
        """
        self.user_repository = user_repository
        self.settings = matching_settings
        self.policy = POLICIES[MatchMode(matching_settings.mode)]
        self.rng = rng or random.SystemRandom()

    async def recommend(self, requester_email: str) -> list[User]:
        """Find users who teach something the requester wants to learn.

        Args:
            requester_email: Email of the requester

        Returns:
            Matching users in store order. Empty if the requester is
            unknown or wants to learn nothing.
        """
        with logfire.span(
            "matching_service.recommend",
            requester=requester_email,
            mode=self.settings.mode,
        ):
            requester = await self.user_repository.find_by_email(requester_email)
            if not requester:
                logfire.warn("Recommendation for unknown user", email=requester_email)
                return []

            wanted = [label for label in requester.learn if label.strip()]
            if not wanted:
                logfire.info("Requester has no learn labels", email=requester_email)
                return []

            candidates = await self.user_repository.find_all_except(requester.email)
            matches = [
                user
                for user in candidates
                if teaches_any(user.teach, wanted, self.policy)
            ]
            logfire.info(
                "Recommendations computed",
                email=requester_email,
                candidates=len(candidates),
                matches=len(matches),
            )
            return matches

    async def random_peers(self, requester_email: str) -> list[User]:
        """Uniformly sample other users.

        Args:
            requester_email: Email of the requester (never included)

        Returns:
            Up to ``random_sample_size`` distinct users
        """
        with logfire.span("matching_service.random_peers", requester=requester_email):
            others = await self.user_repository.find_all_except(requester_email)
            # random.shuffle is a Fisher-Yates shuffle
            self.rng.shuffle(others)
            return others[: self.settings.random_sample_size]

    async def search_peers(self, requester_email: str, query: str) -> list[User]:
        """Free-text search over name, teach labels, branch and study year.

        Args:
            requester_email: Email of the requester (never included)
            query: Search text, matched case-insensitively as a substring

        Returns:
            Matching users in store order. Empty for a blank query.
        """
        needle = query.strip().casefold()
        if not needle:
            return []

        with logfire.span(
            "matching_service.search_peers", requester=requester_email, query=query
        ):
            others = await self.user_repository.find_all_except(requester_email)

            def hit(user: User) -> bool:
                fields = [user.name, user.branch or "", user.study_year or ""]
                fields.extend(user.teach)
                return any(needle in field.casefold() for field in fields)

            results = [user for user in others if hit(user)]
            logfire.info("Peer search", query=query, results=len(results))
            return results

    async def leaderboard(self) -> list[User]:
        """Users with the most skill points, highest first."""
        with logfire.span("matching_service.leaderboard"):
            return await self.user_repository.find_top_by_points(
                self.settings.leaderboard_size
            )
