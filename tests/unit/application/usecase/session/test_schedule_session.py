"""Unit tests for session use cases."""

import pytest

from peerskill.application.usecase.session import (
    MySessionsUseCase,
    ScheduleSessionUseCase,
)
from peerskill.application.usecase.session.my_sessions import MySessionsRequest
from peerskill.application.usecase.session.schedule_session import (
    ScheduleSessionRequest,
)
from peerskill.domain.error import ForbiddenError
from peerskill.domain.service import UserService
from peerskill.domain.value import Principal, Role
from tests.factories import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

ASHA = Principal(email="asha@example.com", role=Role.USER)


class TestScheduleSessionUseCase:
    """Tests for ScheduleSessionUseCase."""

    @pytest.mark.asyncio
    async def test_schedules_and_lists_for_both_sides(self, unit_env):
        # Arrange
        users = await unit_env.get(UserService)
        schedule = await unit_env.get(ScheduleSessionUseCase)
        my_sessions = await unit_env.get(MySessionsUseCase)
        await users.register(make_user("Asha"))
        await users.register(make_user("Ravi"))

        # Act
        response = await schedule.execute(
            ScheduleSessionRequest(
                scheduler="asha@example.com",
                peer="ravi@example.com",
                skill="Python",
                date_time="Friday 5pm",
            ),
            ASHA,
        )

        # Assert
        assert response.status == "ok"
        assert response.link.startswith("https://meet.jit.si/PeerSkill-")

        ravi = Principal(email="ravi@example.com", role=Role.USER)
        listed = await my_sessions.execute(
            MySessionsRequest(email="ravi@example.com"), ravi
        )
        assert [s.session_id for s in listed] == [response.session_id]
        assert listed[0].scheduler == "asha@example.com"

    @pytest.mark.asyncio
    async def test_cannot_schedule_on_behalf_of_someone_else(self, unit_env):
        users = await unit_env.get(UserService)
        schedule = await unit_env.get(ScheduleSessionUseCase)
        await users.register(make_user("Asha"))
        await users.register(make_user("Ravi"))

        with pytest.raises(ForbiddenError):
            await schedule.execute(
                ScheduleSessionRequest(
                    scheduler="ravi@example.com",
                    peer="asha@example.com",
                    skill="Go",
                    date_time="Mon",
                ),
                ASHA,
            )

    @pytest.mark.asyncio
    async def test_cannot_read_other_sessions(self, unit_env):
        my_sessions = await unit_env.get(MySessionsUseCase)

        with pytest.raises(ForbiddenError):
            await my_sessions.execute(MySessionsRequest(email="ravi@example.com"), ASHA)
