"""Unit tests for admin use cases."""

import pytest

from peerskill.application.usecase.admin import (
    DeleteUserUseCase,
    ListRequestsUseCase,
    ListSessionsUseCase,
    ListUsersUseCase,
    UpdatePointsUseCase,
)
from peerskill.application.usecase.admin.delete_user import DeleteUserRequest
from peerskill.application.usecase.admin.update_points import UpdatePointsRequest
from peerskill.domain.error import ForbiddenError, NotFoundError
from peerskill.domain.service import SessionService, SkillRequestService, UserService
from peerskill.domain.value import Principal, Role
from tests.factories import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

ADMIN = Principal(email="root@example.com", role=Role.ADMIN)
ASHA = Principal(email="asha@example.com", role=Role.USER)


class TestAdminGate:
    """Every admin use case rejects plain users."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "use_case_type", [ListUsersUseCase, ListRequestsUseCase, ListSessionsUseCase]
    )
    async def test_list_forbidden_for_users(self, unit_env, use_case_type):
        use_case = await unit_env.get(use_case_type)

        with pytest.raises(ForbiddenError):
            await use_case.execute(ASHA)

    @pytest.mark.asyncio
    async def test_mutations_forbidden_for_users(self, unit_env):
        users = await unit_env.get(UserService)
        await users.register(make_user("Ravi"))
        delete = await unit_env.get(DeleteUserUseCase)
        update_points = await unit_env.get(UpdatePointsUseCase)

        with pytest.raises(ForbiddenError):
            await delete.execute(DeleteUserRequest(email="ravi@example.com"), ASHA)
        with pytest.raises(ForbiddenError):
            await update_points.execute(
                UpdatePointsRequest(email="ravi@example.com", points=100), ASHA
            )

        ravi = await users.get_by_email("ravi@example.com")
        assert ravi.skill_points == 0


class TestAdminUseCases:
    @pytest.mark.asyncio
    async def test_lists(self, unit_env):
        # Arrange
        users = await unit_env.get(UserService)
        requests = await unit_env.get(SkillRequestService)
        sessions = await unit_env.get(SessionService)
        asha = await users.register(make_user("Asha"))
        ravi = await users.register(make_user("Ravi"))
        await requests.request_skill(asha.email, "Docker")
        await sessions.create_session(asha.email, ravi.email, "Go", "Mon")

        # Act
        listed_users = await (await unit_env.get(ListUsersUseCase)).execute(ADMIN)
        listed_requests = await (await unit_env.get(ListRequestsUseCase)).execute(
            ADMIN
        )
        listed_sessions = await (await unit_env.get(ListSessionsUseCase)).execute(
            ADMIN
        )

        # Assert
        assert [u.email for u in listed_users] == [asha.email, ravi.email]
        assert [(r.email, r.skill, r.status) for r in listed_requests] == [
            (asha.email, "Docker", "Open")
        ]
        assert [(s.scheduler, s.peer) for s in listed_sessions] == [
            (asha.email, ravi.email)
        ]

    @pytest.mark.asyncio
    async def test_update_points(self, unit_env):
        users = await unit_env.get(UserService)
        use_case = await unit_env.get(UpdatePointsUseCase)
        await users.register(make_user("Ravi"))

        response = await use_case.execute(
            UpdatePointsRequest(email="RAVI@example.com", points=120), ADMIN
        )

        assert response.points == 120
        assert (await users.get_by_email("ravi@example.com")).skill_points == 120

    @pytest.mark.asyncio
    async def test_delete_user_reports_cascade(self, unit_env):
        users = await unit_env.get(UserService)
        requests = await unit_env.get(SkillRequestService)
        sessions = await unit_env.get(SessionService)
        use_case = await unit_env.get(DeleteUserUseCase)
        asha = await users.register(make_user("Asha"))
        ravi = await users.register(make_user("Ravi"))
        await requests.request_skill(ravi.email, "Docker")
        await sessions.create_session(asha.email, ravi.email, "Go", "Mon")

        response = await use_case.execute(DeleteUserRequest(email=ravi.email), ADMIN)

        # The session notified Ravi
        assert (response.requests, response.sessions, response.notifications) == (
            1,
            1,
            1,
        )
        with pytest.raises(NotFoundError):
            await users.get_by_email(ravi.email)

    @pytest.mark.asyncio
    async def test_delete_unknown_user(self, unit_env):
        use_case = await unit_env.get(DeleteUserUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(DeleteUserRequest(email="ghost@example.com"), ADMIN)
