"""Unit tests for SessionService and meeting links."""

import re

import pytest

from peerskill.domain.error import NotFoundError, ValidationError
from peerskill.domain.repository import NotificationRepository, SessionRepository
from peerskill.domain.service import SessionService, UserService
from peerskill.domain.service.session_service import (
    generate_meeting_link,
    random_token,
    to_base36,
)
from tests.factories import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

LINK_PATTERN = re.compile(
    r"^https://meet\.jit\.si/PeerSkill-[0-9a-z]{6}-[0-9a-z]{6}-[0-9a-z]+$"
)


class TestMeetingLink:
    def test_to_base36(self):
        assert to_base36(0) == "0"
        assert to_base36(35) == "z"
        assert to_base36(36) == "10"
        assert to_base36(1_700_000_000_000) == "loyw3v28"

    def test_to_base36_rejects_negative(self):
        with pytest.raises(ValueError):
            to_base36(-1)

    def test_random_token(self):
        token = random_token(8)
        assert len(token) == 8
        assert re.fullmatch(r"[0-9a-z]+", token)

    def test_link_shape_and_timestamp(self):
        link = generate_meeting_link(
            "https://meet.jit.si/PeerSkill-", clock=lambda: 1_700_000_000.0
        )

        assert LINK_PATTERN.match(link)
        assert link.endswith("-loyw3v28")

    def test_links_differ(self):
        links = {generate_meeting_link("https://x/") for _ in range(50)}
        assert len(links) == 50


class TestCreateSession:
    """Tests for SessionService.create_session()."""

    @pytest.mark.asyncio
    async def test_creates_session_and_notifies_peer(self, unit_env):
        # Arrange
        users = await unit_env.get(UserService)
        service = await unit_env.get(SessionService)
        notifications = await unit_env.get(NotificationRepository)
        asha = await users.register(make_user("Asha"))
        ravi = await users.register(make_user("Ravi"))

        # Act
        session = await service.create_session(
            asha.email, "RAVI@example.com", " Python ", "Friday 5pm"
        )

        # Assert
        assert session.scheduler_email == asha.email
        assert session.peer_email == ravi.email
        assert session.skill == "Python"
        assert session.date_time == "Friday 5pm"
        assert LINK_PATTERN.match(session.link)

        inbox = await notifications.find_by_recipient(ravi.email)
        assert len(inbox) == 1
        assert inbox[0].message == (
            "Asha scheduled a Python session with you on Friday 5pm."
        )

    @pytest.mark.asyncio
    @pytest.mark.parametrize("skill,date_time", [("", "Monday"), ("Go", "  ")])
    async def test_blank_fields(self, unit_env, skill, date_time):
        users = await unit_env.get(UserService)
        service = await unit_env.get(SessionService)
        asha = await users.register(make_user("Asha"))
        ravi = await users.register(make_user("Ravi"))

        with pytest.raises(ValidationError):
            await service.create_session(asha.email, ravi.email, skill, date_time)

    @pytest.mark.asyncio
    async def test_peer_must_differ(self, unit_env):
        users = await unit_env.get(UserService)
        service = await unit_env.get(SessionService)
        asha = await users.register(make_user("Asha"))

        with pytest.raises(ValidationError):
            await service.create_session(asha.email, "ASHA@example.com", "Go", "Mon")

    @pytest.mark.asyncio
    async def test_peer_must_exist(self, unit_env):
        users = await unit_env.get(UserService)
        service = await unit_env.get(SessionService)
        sessions = await unit_env.get(SessionRepository)
        asha = await users.register(make_user("Asha"))

        with pytest.raises(NotFoundError):
            await service.create_session(asha.email, "ghost@example.com", "Go", "Mon")

        assert await sessions.find_all() == []


class TestListSessions:
    @pytest.mark.asyncio
    async def test_list_for_either_side_newest_first(self, unit_env):
        users = await unit_env.get(UserService)
        service = await unit_env.get(SessionService)
        asha = await users.register(make_user("Asha"))
        ravi = await users.register(make_user("Ravi"))
        meera = await users.register(make_user("Meera"))

        first = await service.create_session(asha.email, ravi.email, "Go", "Mon")
        second = await service.create_session(ravi.email, asha.email, "Rust", "Tue")
        await service.create_session(ravi.email, meera.email, "SQL", "Wed")

        mine = await service.list_for(asha.email)

        assert [s.id for s in mine] == [second.id, first.id]
        assert len(await service.list_all()) == 3
