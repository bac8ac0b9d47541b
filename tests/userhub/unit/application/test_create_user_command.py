"""Unit tests for CreateUserCommand."""

from unittest.mock import AsyncMock, Mock

import pytest

from userhub.application.commands import CreateUserCommand
from userhub.domain.user import (
    InvalidEmailError,
    InvalidUserNameError,
    UserAlreadyExistsError,
)
from userhub.infrastructure.persistence.memory import InMemoryUserRepository
from userhub_auth import WeakPasswordError
from tests.shared.fixtures.factories import FAST_PASSWORD_SERVICE, TestUserFactory


class TestCreateUserCommand:
    def setup_method(self):
        self.user_repo = InMemoryUserRepository()
        self.event_publisher = AsyncMock()
        self.command = CreateUserCommand(
            user_repository=self.user_repo,
            password_service=FAST_PASSWORD_SERVICE,
            event_publisher=self.event_publisher,
        )

    @pytest.mark.asyncio
    async def test_creates_user_with_hashed_password(self):
        user = await self.command.execute(
            name="Alice",
            email="Alice@Example.com",
            password="Secret123!",
        )

        assert user.id == 1
        assert user.email == "alice@example.com"
        assert user.password_hash != "Secret123!"
        assert FAST_PASSWORD_SERVICE.verify("Secret123!", user.password_hash)
        assert user.created_at == user.updated_at

        stored = await self.user_repo.find_by_id(1)
        assert stored is not None
        assert stored.email == "alice@example.com"

    @pytest.mark.asyncio
    async def test_allocates_next_id(self):
        await self.user_repo.save(TestUserFactory.bob())

        user = await self.command.execute("Carol", "carol@example.com", "Secret123!")

        assert user.id == TestUserFactory.BOB_ID + 1

    @pytest.mark.asyncio
    async def test_publishes_user_created_event(self):
        user = await self.command.execute("Alice", "alice@example.com", "Secret123!")

        self.event_publisher.publish.assert_awaited_once()
        event_type, payload = self.event_publisher.publish.await_args.args
        assert event_type == "user.created"
        assert payload["user"]["id"] == user.id
        assert payload["user"]["email"] == "alice@example.com"
        assert "password_hash" not in payload["user"]

    @pytest.mark.asyncio
    async def test_duplicate_email_is_rejected_without_saving(self):
        user_repo = AsyncMock()
        user_repo.find_by_email.return_value = TestUserFactory.alice()
        command = CreateUserCommand(
            user_repository=user_repo,
            password_service=FAST_PASSWORD_SERVICE,
            event_publisher=self.event_publisher,
        )

        with pytest.raises(UserAlreadyExistsError) as exc_info:
            await command.execute("Alice 2", "ALICE@example.com", "Secret123!")

        assert exc_info.value.email == TestUserFactory.ALICE_EMAIL
        user_repo.save.assert_not_called()
        self.event_publisher.publish.assert_not_called()

    @pytest.mark.asyncio
    async def test_invalid_email_is_rejected(self):
        with pytest.raises(InvalidEmailError):
            await self.command.execute("Alice", "not-an-email", "Secret123!")
        assert await self.user_repo.find_all() == []

    @pytest.mark.asyncio
    async def test_blank_name_is_rejected(self):
        with pytest.raises(InvalidUserNameError):
            await self.command.execute("   ", "alice@example.com", "Secret123!")

    @pytest.mark.asyncio
    async def test_short_password_is_rejected(self):
        with pytest.raises(WeakPasswordError):
            await self.command.execute("Alice", "alice@example.com", "short")
        assert await self.user_repo.find_all() == []

    @pytest.mark.asyncio
    async def test_publish_failure_does_not_fail_creation(self):
        self.event_publisher.publish.side_effect = ConnectionError("broker down")

        user = await self.command.execute("Alice", "alice@example.com", "Secret123!")

        assert await self.user_repo.find_by_id(user.id) is not None

    @pytest.mark.asyncio
    async def test_commits_before_publishing(self):
        calls = Mock()
        calls.commit = AsyncMock()
        calls.publish = AsyncMock()
        self.event_publisher.publish = calls.publish
        command = CreateUserCommand(
            user_repository=self.user_repo,
            password_service=FAST_PASSWORD_SERVICE,
            event_publisher=self.event_publisher,
            commit=calls.commit,
        )

        await command.execute("Alice", "alice@example.com", "Secret123!")

        assert [c[0] for c in calls.mock_calls] == ["commit", "publish"]

    @pytest.mark.asyncio
    async def test_failed_commit_publishes_nothing(self):
        commit = AsyncMock(side_effect=RuntimeError("commit failed"))
        command = CreateUserCommand(
            user_repository=self.user_repo,
            password_service=FAST_PASSWORD_SERVICE,
            event_publisher=self.event_publisher,
            commit=commit,
        )

        with pytest.raises(RuntimeError):
            await command.execute("Alice", "alice@example.com", "Secret123!")

        commit.assert_awaited_once()
        self.event_publisher.publish.assert_not_called()
