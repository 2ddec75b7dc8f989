"""Integration tests for PostgresUserRepository.

These run against the database at DATABASE__URL with migrations applied.
"""

import os
from uuid import uuid4

import pytest

from peerskill.domain.error import ConflictError
from peerskill.domain.repository import UserRepository
from tests.factories import make_user
from tests.harness import create_env_fixture

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        "DATABASE__URL" not in os.environ, reason="DATABASE__URL not set"
    ),
]

integration_env = create_env_fixture(unmock={"persistence"})


def unique_email(prefix: str) -> str:
    return f"{prefix}-{uuid4().hex[:8]}@Example.com"


class TestUserRepositoryIntegration:
    """Integration tests for PostgresUserRepository."""

    @pytest.mark.asyncio
    async def test_find_by_email_ignores_case(self, integration_env):
        # Arrange
        repo = await integration_env.get(UserRepository)
        email = unique_email("asha")
        saved = await repo.save(make_user("Asha", email=email, teach=["Go"]))

        # Act
        found = await repo.find_by_email(email.lower())

        # Assert
        assert found is not None
        assert found.id == saved.id
        assert found.email == email
        assert found.teach == ["Go"]
        assert found.rating is None

    @pytest.mark.asyncio
    async def test_duplicate_email_conflicts(self, integration_env):
        repo = await integration_env.get(UserRepository)
        email = unique_email("ravi")
        await repo.save(make_user("Ravi", email=email))

        with pytest.raises(ConflictError):
            await repo.save(make_user("Ravi Two", email=email.upper()))

    @pytest.mark.asyncio
    async def test_update_reputation_compare_and_set(self, integration_env):
        repo = await integration_env.get(UserRepository)
        user = await repo.save(make_user("Meera", email=unique_email("meera")))

        assert await repo.update_reputation(user.id, user.version, 4.5, 1, 10)
        assert not await repo.update_reputation(user.id, user.version, 1.0, 1, 10)

        stored = await repo.find_by_id(user.id)
        assert stored.rating == 4.5
        assert stored.skill_points == 10
        assert stored.version == user.version + 1
