"""Unit tests for profile use cases."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from peerskill.application.usecase.user import GetProfileUseCase, UpdateProfileUseCase
from peerskill.application.usecase.user.get_profile import GetProfileRequest
from peerskill.application.usecase.user.update_profile import UpdateProfileRequest
from peerskill.domain.error import ForbiddenError, NotFoundError
from peerskill.domain.service import UserService
from peerskill.domain.value import Principal, Role
from tests.factories import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

ASHA = Principal(email="asha@example.com", role=Role.USER)
ADMIN = Principal(email="root@example.com", role=Role.ADMIN)


class TestUpdateProfileUseCase:
    """Tests for UpdateProfileUseCase."""

    @pytest.mark.asyncio
    async def test_updates_own_profile(self, unit_env):
        users = await unit_env.get(UserService)
        use_case = await unit_env.get(UpdateProfileUseCase)
        await users.register(make_user("Asha", teach=["Go"], branch="EEE"))

        response = await use_case.execute(
            UpdateProfileRequest(email="ASHA@example.com", learn=["Rust"]), ASHA
        )

        assert response.status == "ok"
        stored = await users.get_by_email(ASHA.email)
        assert stored.learn == ["Rust"]
        # Omitted fields are unchanged
        assert stored.teach == ["Go"]
        assert stored.branch == "EEE"

    @pytest.mark.asyncio
    async def test_other_user_forbidden(self, unit_env):
        users = await unit_env.get(UserService)
        use_case = await unit_env.get(UpdateProfileUseCase)
        await users.register(make_user("Ravi"))

        with pytest.raises(ForbiddenError):
            await use_case.execute(
                UpdateProfileRequest(email="ravi@example.com", name="Hacked"), ASHA
            )

        assert (await users.get_by_email("ravi@example.com")).name == "Ravi"

    @pytest.mark.asyncio
    async def test_admin_may_edit_anyone(self, unit_env):
        users = await unit_env.get(UserService)
        use_case = await unit_env.get(UpdateProfileUseCase)
        await users.register(make_user("Ravi"))

        await use_case.execute(
            UpdateProfileRequest(email="ravi@example.com", branch="CSE"), ADMIN
        )

        assert (await users.get_by_email("ravi@example.com")).branch == "CSE"

    @pytest.mark.asyncio
    async def test_name_is_stripped(self, unit_env):
        users = await unit_env.get(UserService)
        use_case = await unit_env.get(UpdateProfileUseCase)
        await users.register(make_user("Asha"))

        await use_case.execute(
            UpdateProfileRequest(email="asha@example.com", name="  Asha R  "), ASHA
        )

        assert (await users.get_by_email(ASHA.email)).name == "Asha R"

    @pytest.mark.parametrize(
        "overrides",
        [{"name": "   "}, {"studyYear": "y" * 51}, {"branch": "b" * 256}],
    )
    def test_rejects_bad_input(self, overrides):
        with pytest.raises(PydanticValidationError):
            UpdateProfileRequest.model_validate({"email": "asha@example.com", **overrides})


class TestGetProfileUseCase:
    @pytest.mark.asyncio
    async def test_profile_has_no_password_hash(self, unit_env):
        users = await unit_env.get(UserService)
        use_case = await unit_env.get(GetProfileUseCase)
        saved = await users.register(make_user("Asha"))

        profile = await use_case.execute(GetProfileRequest(email="ASHA@example.com"))

        dumped = profile.model_dump(by_alias=True)
        assert dumped["userId"] == str(saved.id)
        assert dumped["skillPoints"] == 0
        assert "passwordHash" not in dumped
        assert "password_hash" not in profile.model_dump()

    @pytest.mark.asyncio
    async def test_unknown(self, unit_env):
        use_case = await unit_env.get(GetProfileUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetProfileRequest(email="ghost@example.com"))
