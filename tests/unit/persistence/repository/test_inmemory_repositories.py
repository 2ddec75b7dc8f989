"""Unit tests for the in-memory repositories used by the test container."""

from uuid import uuid4

import pytest

from peerskill.domain.error import ConflictError
from peerskill.domain.model import Notification
from peerskill.domain.value import NotificationId
from peerskill.persistence.repository.inmemory import (
    InMemoryNotificationRepository,
    InMemoryStore,
    InMemoryUserRepository,
)
from tests.factories import make_user


class TestInMemoryUserRepository:
    @pytest.mark.asyncio
    async def test_email_unique_ignoring_case(self):
        repo = InMemoryUserRepository()
        await repo.save(make_user("Asha", email="asha@example.com"))

        with pytest.raises(ConflictError):
            await repo.save(make_user("Imposter", email="ASHA@example.com"))

    @pytest.mark.asyncio
    async def test_save_existing_keeps_reputation(self):
        repo = InMemoryUserRepository()
        user = await repo.save(make_user("Asha"))
        assert await repo.update_reputation(user.id, user.version, 5.0, 1, 10)

        # Stale copy carries old reputation values
        await repo.save(user.model_copy(update={"branch": "CSE", "skill_points": 0}))

        stored = await repo.find_by_id(user.id)
        assert stored.branch == "CSE"
        assert stored.skill_points == 10
        assert stored.version == user.version + 1

    @pytest.mark.asyncio
    async def test_update_reputation_rejects_stale_version(self):
        repo = InMemoryUserRepository()
        user = await repo.save(make_user("Asha"))

        assert await repo.update_reputation(user.id, user.version, 4.0, 1, 10)
        assert not await repo.update_reputation(user.id, user.version, 3.0, 1, 10)

        assert (await repo.find_by_id(user.id)).rating == 4.0

    @pytest.mark.asyncio
    async def test_find_all_except(self):
        repo = InMemoryUserRepository()
        asha = await repo.save(make_user("Asha"))
        ravi = await repo.save(make_user("Ravi"))

        others = await repo.find_all_except(asha.email.upper())

        assert [u.id for u in others] == [ravi.id]

    @pytest.mark.asyncio
    async def test_delete(self):
        repo = InMemoryUserRepository()
        user = await repo.save(make_user("Asha"))

        assert await repo.delete(user.id)
        assert not await repo.delete(user.id)
        assert await repo.find_by_email(user.email) is None


class TestSharedStore:
    @pytest.mark.asyncio
    async def test_repositories_share_state(self):
        store = InMemoryStore()
        await InMemoryUserRepository(store).save(make_user("Asha"))

        assert len(await InMemoryUserRepository(store).find_all()) == 1
        assert await InMemoryUserRepository().find_all() == []

    @pytest.mark.asyncio
    async def test_mark_read_filters_by_recipient(self):
        repo = InMemoryNotificationRepository()
        note = await repo.save(
            Notification(
                id=NotificationId(uuid4()),
                recipient_email="asha@example.com",
                message="hi",
            )
        )

        assert await repo.mark_read([note.id], "ravi@example.com") == 0
        assert await repo.mark_read([note.id, note.id], "ASHA@example.com") == 1
