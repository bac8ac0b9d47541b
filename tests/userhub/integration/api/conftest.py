"""Pytest fixtures for API integration tests.

Uses a throwaway SQLite database per test, so tests never touch a
configured PostgreSQL instance.
"""

import asyncio
from typing import Any

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from userhub.application.ports import EventPublisher
from userhub.infrastructure.persistence.sqlalchemy import UserRepositorySQLAlchemy
from userhub.presentation.api.app import API_V1_PREFIX, create_app
from userhub.presentation.api.config import get_api_settings
from userhub.presentation.api.dependencies import get_db_session, get_event_publisher
from userhub_config.settings import Settings
from tests.shared.fixtures.database import create_schema
from tests.shared.fixtures.factories import TestUserFactory


class RecordingEventPublisher(EventPublisher):
    """Keeps published events in memory for assertions."""

    def __init__(self) -> None:
        self.events: list[tuple[str, dict[str, Any]]] = []

    async def publish(self, event_type: str, payload: dict[str, Any]) -> None:
        self.events.append((event_type, payload))


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def api_settings() -> Settings:
    """Test API settings with debug enabled."""
    return Settings(
        # Required security settings
        jwt_secret_key=SecretStr("test-jwt-secret-for-testing-only"),
        postgres_password=SecretStr("test-password"),
        # API settings
        api_host="127.0.0.1",
        api_port=8000,
        api_debug=True,
        api_cors_origins="http://localhost:3000",
        # Minimum bcrypt work factor keeps the suite fast
        password_hash_rounds=4,
    )


@pytest.fixture
def event_publisher() -> RecordingEventPublisher:
    return RecordingEventPublisher()


def _setup_test_database(async_engine):
    """Synchronously create the schema and seed Alice and Bob.

    This runs in a fresh event loop to avoid conflicts with TestClient's loop.
    """

    async def _setup():
        await create_schema(async_engine)

        session_maker = async_sessionmaker(
            async_engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        async with session_maker() as session:
            repo = UserRepositorySQLAlchemy(session)
            await repo.save(TestUserFactory.alice())
            await repo.save(TestUserFactory.bob())
            await session.commit()

        await async_engine.dispose()

    loop = asyncio.new_event_loop()
    try:
        loop.run_until_complete(_setup())
    finally:
        loop.close()


@pytest.fixture
def app(api_settings, async_engine, event_publisher):
    """FastAPI app wired to the test database and a recording publisher."""
    _setup_test_database(async_engine)

    app = create_app(settings=api_settings)

    test_session_maker = async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    # Override the database session dependency
    async def override_get_db_session():
        async with test_session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_api_settings] = lambda: api_settings
    app.dependency_overrides[get_event_publisher] = lambda: event_publisher
    return app


@pytest.fixture
def test_client(app):
    """Create a test client against the SQLite-backed app."""
    return TestClient(app)


@pytest.fixture
def login_data() -> dict:
    """Credentials of the seeded user Alice."""
    return {
        "email": TestUserFactory.ALICE_EMAIL,
        "password": TestUserFactory.PASSWORD,
    }


@pytest.fixture
def access_token(test_client, login_data, api_v1_prefix) -> str:
    response = test_client.post(f"{api_v1_prefix}/login", json=login_data)
    assert response.status_code == 200, (
        f"Login failed: {response.status_code} - {response.text}"
    )
    return response.json()["data"]["access_token"]


@pytest.fixture
def auth_headers(access_token) -> dict:
    """Get auth headers for the seeded user Alice."""
    return {"Authorization": f"Bearer {access_token}"}
