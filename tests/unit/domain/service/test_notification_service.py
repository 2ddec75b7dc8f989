"""Unit tests for NotificationService."""

from uuid import uuid4

import pytest

from peerskill.domain.error import ValidationError
from peerskill.domain.service import NotificationService
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestNotify:
    @pytest.mark.asyncio
    async def test_creates_unread(self, unit_env):
        service = await unit_env.get(NotificationService)

        created = await service.notify("asha@example.com", "Hello")

        assert created.read is False
        assert created.message == "Hello"
        assert [n.id for n in await service.list_for("ASHA@example.com")] == [
            created.id
        ]

    @pytest.mark.asyncio
    async def test_list_for_newest_first(self, unit_env):
        service = await unit_env.get(NotificationService)

        first = await service.notify("asha@example.com", "one")
        second = await service.notify("asha@example.com", "two")
        await service.notify("ravi@example.com", "other")

        inbox = await service.list_for("asha@example.com")

        assert [n.id for n in inbox] == [second.id, first.id]


class TestMarkRead:
    """Tests for NotificationService.mark_read()."""

    @pytest.mark.asyncio
    async def test_marks_only_owned(self, unit_env):
        service = await unit_env.get(NotificationService)
        mine = await service.notify("asha@example.com", "mine")
        theirs = await service.notify("ravi@example.com", "theirs")

        updated = await service.mark_read(
            [str(mine.id), str(theirs.id)], "Asha@Example.com"
        )

        assert updated == 1
        assert (await service.list_for("asha@example.com"))[0].read is True
        assert (await service.list_for("ravi@example.com"))[0].read is False

    @pytest.mark.asyncio
    async def test_without_owner_marks_any(self, unit_env):
        service = await unit_env.get(NotificationService)
        a = await service.notify("asha@example.com", "a")
        b = await service.notify("ravi@example.com", "b")

        assert await service.mark_read([str(a.id), str(b.id)], None) == 2

    @pytest.mark.asyncio
    async def test_already_read_and_unknown_ids_not_counted(self, unit_env):
        service = await unit_env.get(NotificationService)
        a = await service.notify("asha@example.com", "a")

        assert await service.mark_read([str(a.id)], None) == 1
        assert await service.mark_read([str(a.id), str(uuid4())], None) == 0

    @pytest.mark.asyncio
    async def test_empty_list(self, unit_env):
        service = await unit_env.get(NotificationService)

        assert await service.mark_read([], "asha@example.com") == 0

    @pytest.mark.asyncio
    async def test_invalid_id(self, unit_env):
        service = await unit_env.get(NotificationService)

        with pytest.raises(ValidationError):
            await service.mark_read(["not-a-uuid"], None)
