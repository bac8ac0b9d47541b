"""
Test data factories for creating deterministic test entities.

Usage:
    from tests.shared.fixtures.factories import TestUserFactory

    def test_something():
        user = TestUserFactory.alice()
"""

from dataclasses import dataclass
from datetime import datetime, timezone

from userhub.domain.user import User
from userhub_auth import PasswordHashingService

# bcrypt's minimum work factor keeps hashing fast in tests
FAST_PASSWORD_SERVICE = PasswordHashingService(rounds=4)

FIXED_TIME = datetime(2024, 1, 15, 10, 30, 0, tzinfo=timezone.utc)


@dataclass(frozen=True)
class TestUserFactory:
    """Factory for creating test users with deterministic ids and emails."""

    __test__ = False  # not a test class despite the name

    ALICE_ID = 1
    ALICE_NAME = "Alice Example"
    ALICE_EMAIL = "alice@example.com"

    BOB_ID = 2
    BOB_NAME = "Bob Example"
    BOB_EMAIL = "bob@example.com"

    PASSWORD = "Secret123!"

    @classmethod
    def build(
        cls,
        id: int,
        name: str,
        email: str,
        password: str = PASSWORD,
        created_at: datetime = FIXED_TIME,
    ) -> User:
        return User.reconstitute(
            id=id,
            name=name,
            email=email,
            password_hash=FAST_PASSWORD_SERVICE.hash(password),
            email_verified_at=None,
            created_at=created_at,
            updated_at=created_at,
        )

    @classmethod
    def alice(cls) -> User:
        return cls.build(cls.ALICE_ID, cls.ALICE_NAME, cls.ALICE_EMAIL)

    @classmethod
    def bob(cls) -> User:
        return cls.build(cls.BOB_ID, cls.BOB_NAME, cls.BOB_EMAIL)
