"""Unit tests for MatchingService."""

import random

import pytest

from peerskill.config import MatchingSettings
from peerskill.domain.service import MatchingService
from peerskill.domain.service.matching_service import (
    exact_match,
    substring_match,
    teaches_any,
)
from peerskill.persistence.repository.inmemory import InMemoryUserRepository
from tests.factories import make_user


def make_service(
    user_repo: InMemoryUserRepository, mode: str = "substring", seed: int | None = None
) -> MatchingService:
    rng = random.Random(seed) if seed is not None else None
    return MatchingService(user_repo, MatchingSettings(mode=mode), rng=rng)


class TestMatchPolicies:
    """Tests for the skill match policies."""

    @pytest.mark.parametrize(
        "wanted,offered",
        [
            ("java", "JavaScript"),
            ("python", "Python Basics"),
            ("  SQL ", "PostgreSQL"),
        ],
    )
    def test_substring_matches_containment(self, wanted, offered):
        assert substring_match(wanted, offered)

    def test_substring_rejects_unrelated(self):
        assert not substring_match("guitar", "Python")

    def test_exact_ignores_case_only(self):
        assert exact_match("python", " Python ")
        assert not exact_match("java", "JavaScript")

    @pytest.mark.parametrize("policy", [substring_match, exact_match])
    def test_blank_wanted_label_never_matches(self, policy):
        assert not policy("", "Python")
        assert not policy("   ", "Python")

    def test_teaches_any(self):
        assert teaches_any(["Cooking", "Python Basics"], ["python"], substring_match)
        assert not teaches_any(["Cooking"], ["python"], substring_match)
        assert not teaches_any([], ["python"], substring_match)


class TestRecommend:
    """Tests for MatchingService.recommend()."""

    @pytest.mark.asyncio
    async def test_includes_peer_teaching_superset_label(self):
        """A learns python, B teaches Python Basics: B is recommended."""
        # Arrange
        user_repo = InMemoryUserRepository()
        a = await user_repo.save(make_user("A", learn=["python"]))
        b = await user_repo.save(make_user("B", teach=["Python Basics"]))
        await user_repo.save(make_user("C", teach=["Guitar"]))
        service = make_service(user_repo)

        # Act
        result = await service.recommend(a.email)

        # Assert
        assert [u.email for u in result] == [b.email]

    @pytest.mark.asyncio
    async def test_keeps_store_order(self):
        user_repo = InMemoryUserRepository()
        a = await user_repo.save(make_user("A", learn=["java", "sql"]))
        b = await user_repo.save(make_user("B", teach=["MySQL"]))
        c = await user_repo.save(make_user("C", teach=["JavaScript"]))
        service = make_service(user_repo)

        result = await service.recommend(a.email)

        assert [u.email for u in result] == [b.email, c.email]

    @pytest.mark.asyncio
    async def test_never_recommends_requester(self):
        user_repo = InMemoryUserRepository()
        a = await user_repo.save(make_user("A", teach=["Python"], learn=["python"]))
        service = make_service(user_repo)

        assert await service.recommend(a.email) == []

    @pytest.mark.asyncio
    async def test_empty_learn_set(self):
        user_repo = InMemoryUserRepository()
        a = await user_repo.save(make_user("A"))
        await user_repo.save(make_user("B", teach=["Python"]))
        service = make_service(user_repo)

        assert await service.recommend(a.email) == []

    @pytest.mark.asyncio
    async def test_unknown_requester(self):
        user_repo = InMemoryUserRepository()
        await user_repo.save(make_user("B", teach=["Python"]))
        service = make_service(user_repo)

        assert await service.recommend("nobody@example.com") == []

    @pytest.mark.asyncio
    async def test_requester_email_case_insensitive(self):
        user_repo = InMemoryUserRepository()
        await user_repo.save(make_user("A", email="a@example.com", learn=["python"]))
        b = await user_repo.save(make_user("B", teach=["Python"]))
        service = make_service(user_repo)

        result = await service.recommend("A@EXAMPLE.COM")

        assert [u.email for u in result] == [b.email]

    @pytest.mark.asyncio
    async def test_exact_mode(self):
        user_repo = InMemoryUserRepository()
        a = await user_repo.save(make_user("A", learn=["java"]))
        await user_repo.save(make_user("B", teach=["JavaScript"]))
        c = await user_repo.save(make_user("C", teach=["Java"]))
        service = make_service(user_repo, mode="exact")

        result = await service.recommend(a.email)

        assert [u.email for u in result] == [c.email]


class TestRandomPeers:
    """Tests for MatchingService.random_peers()."""

    @pytest.mark.asyncio
    async def test_at_most_five_distinct_others(self):
        user_repo = InMemoryUserRepository()
        me = await user_repo.save(make_user("Me"))
        for i in range(9):
            await user_repo.save(make_user(f"Peer{i}"))
        service = make_service(user_repo, seed=7)

        for _ in range(20):
            result = await service.random_peers(me.email)
            emails = [u.email for u in result]
            assert len(emails) == 5
            assert len(set(emails)) == 5
            assert me.email not in emails

    @pytest.mark.asyncio
    async def test_fewer_users_than_sample(self):
        user_repo = InMemoryUserRepository()
        me = await user_repo.save(make_user("Me"))
        other = await user_repo.save(make_user("Other"))
        service = make_service(user_repo)

        result = await service.random_peers(me.email)

        assert [u.email for u in result] == [other.email]

    @pytest.mark.asyncio
    async def test_does_not_reorder_store(self):
        user_repo = InMemoryUserRepository()
        me = await user_repo.save(make_user("Me"))
        for i in range(6):
            await user_repo.save(make_user(f"Peer{i}"))
        before = [u.email for u in await user_repo.find_all()]
        service = make_service(user_repo, seed=1)

        await service.random_peers(me.email)

        assert [u.email for u in await user_repo.find_all()] == before


class TestSearchPeers:
    """Tests for MatchingService.search_peers()."""

    @pytest.mark.asyncio
    async def test_matches_name_skill_branch_and_year(self):
        user_repo = InMemoryUserRepository()
        me = await user_repo.save(make_user("Me", branch="Mechanical"))
        by_name = await user_repo.save(make_user("Pythonista"))
        by_skill = await user_repo.save(make_user("Ravi", teach=["Python Basics"]))
        await user_repo.save(make_user("Meera", teach=["Guitar"]))
        service = make_service(user_repo)

        result = await service.search_peers(me.email, "  PYTHON ")

        assert [u.email for u in result] == [by_name.email, by_skill.email]

        by_branch = await user_repo.save(make_user("Kiran", branch="ECE"))
        by_year = await user_repo.save(make_user("Dev", study_year="3rd"))
        assert [u.email for u in await service.search_peers(me.email, "ece")] == [
            by_branch.email
        ]
        assert [u.email for u in await service.search_peers(me.email, "3rd")] == [
            by_year.email
        ]

    @pytest.mark.asyncio
    async def test_excludes_requester(self):
        user_repo = InMemoryUserRepository()
        me = await user_repo.save(make_user("Python Fan"))
        service = make_service(user_repo)

        assert await service.search_peers(me.email, "python") == []

    @pytest.mark.asyncio
    async def test_blank_query_returns_nothing(self):
        user_repo = InMemoryUserRepository()
        me = await user_repo.save(make_user("Me"))
        await user_repo.save(make_user("Other"))
        service = make_service(user_repo)

        assert await service.search_peers(me.email, "   ") == []


class TestLeaderboard:
    """Tests for MatchingService.leaderboard()."""

    @pytest.mark.asyncio
    async def test_top_five_by_points(self):
        user_repo = InMemoryUserRepository()
        points = [5, 50, 10, 50, 0, 30, 20]
        users = [
            await user_repo.save(make_user(f"U{i}", skill_points=p))
            for i, p in enumerate(points)
        ]
        service = make_service(user_repo)

        result = await service.leaderboard()

        # Ties keep creation order
        assert [u.email for u in result] == [
            users[1].email,
            users[3].email,
            users[5].email,
            users[6].email,
            users[2].email,
        ]
