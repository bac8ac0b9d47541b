"""Unit tests for UpdateUserCommand."""

import pytest

from userhub.application.commands import UpdateUserCommand
from userhub.domain.user import (
    EmailAlreadyTakenError,
    InvalidEmailError,
    InvalidUserNameError,
    UserNotFoundError,
)
from userhub.infrastructure.persistence.memory import InMemoryUserRepository
from userhub_auth import WeakPasswordError
from tests.shared.fixtures.factories import (
    FAST_PASSWORD_SERVICE,
    FIXED_TIME,
    TestUserFactory,
)


class TestUpdateUserCommand:
    def setup_method(self):
        self.user_repo = InMemoryUserRepository()
        self.command = UpdateUserCommand(
            user_repository=self.user_repo,
            password_service=FAST_PASSWORD_SERVICE,
        )

    async def _seed(self):
        await self.user_repo.save(TestUserFactory.alice())
        await self.user_repo.save(TestUserFactory.bob())

    @pytest.mark.asyncio
    async def test_updates_name_only(self):
        await self._seed()

        user = await self.command.execute(TestUserFactory.ALICE_ID, name="Alice Cooper")

        assert user.name == "Alice Cooper"
        assert user.email == TestUserFactory.ALICE_EMAIL
        assert user.updated_at > FIXED_TIME
        stored = await self.user_repo.find_by_id(TestUserFactory.ALICE_ID)
        assert stored.name == "Alice Cooper"

    @pytest.mark.asyncio
    async def test_updates_email_and_password(self):
        await self._seed()

        user = await self.command.execute(
            TestUserFactory.ALICE_ID,
            email="Alice.New@Example.com",
            password="NewSecret456!",
        )

        assert user.email == "alice.new@example.com"
        assert FAST_PASSWORD_SERVICE.verify("NewSecret456!", user.password_hash)

    @pytest.mark.asyncio
    async def test_keeping_own_email_is_allowed(self):
        await self._seed()

        user = await self.command.execute(
            TestUserFactory.ALICE_ID,
            email=TestUserFactory.ALICE_EMAIL.upper(),
        )

        assert user.email == TestUserFactory.ALICE_EMAIL

    @pytest.mark.asyncio
    async def test_no_fields_still_touches(self):
        await self._seed()

        user = await self.command.execute(TestUserFactory.ALICE_ID)

        assert user.name == TestUserFactory.ALICE_NAME
        assert user.updated_at > FIXED_TIME

    @pytest.mark.asyncio
    async def test_unknown_user(self):
        with pytest.raises(UserNotFoundError):
            await self.command.execute(99, name="Nobody")

    @pytest.mark.asyncio
    async def test_email_of_other_user_leaves_target_unchanged(self):
        await self._seed()

        with pytest.raises(EmailAlreadyTakenError):
            await self.command.execute(
                TestUserFactory.ALICE_ID,
                name="Renamed",
                email=TestUserFactory.BOB_EMAIL,
            )

        stored = await self.user_repo.find_by_id(TestUserFactory.ALICE_ID)
        assert stored.name == TestUserFactory.ALICE_NAME
        assert stored.email == TestUserFactory.ALICE_EMAIL
        assert stored.updated_at == FIXED_TIME

    @pytest.mark.asyncio
    async def test_invalid_fields_abort_before_any_change(self):
        await self._seed()

        with pytest.raises(InvalidEmailError):
            await self.command.execute(
                TestUserFactory.ALICE_ID,
                name="Renamed",
                email="broken",
            )
        with pytest.raises(InvalidUserNameError):
            await self.command.execute(TestUserFactory.ALICE_ID, name="")
        with pytest.raises(WeakPasswordError):
            await self.command.execute(TestUserFactory.ALICE_ID, password="short")

        stored = await self.user_repo.find_by_id(TestUserFactory.ALICE_ID)
        assert stored.name == TestUserFactory.ALICE_NAME
        assert stored.updated_at == FIXED_TIME
