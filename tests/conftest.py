"""Root pytest configuration for test discovery and auto-skip behavior.

Test Structure:
    tests/
    ├── userhub/               # Service tests
    │   ├── unit/              # Fast, isolated tests (mocks / in-memory)
    │   └── integration/       # SQLite-backed repository and API tests
    ├── userhub_auth/          # Password hashing, JWT, token revocation
    ├── external/              # Tests against a real RabbitMQ broker
    └── shared/                # Shared fixtures and utilities

Environment Variables:
    RUN_EXTERNAL=1       Run @pytest.mark.external tests
    RUN_ALL_TESTS=1      Run all tests (overrides other settings)

Pytest Options:
    --run-external       Run external broker tests
    --run-all            Run all tests
"""

import os

import pytest

# Required settings must exist before the API module builds its app
os.environ.setdefault("JWT_SECRET_KEY", "test-jwt-secret-for-testing-only")
os.environ.setdefault("POSTGRES_PASSWORD", "test-password")

from userhub_config import clear_settings_cache  # noqa: E402


def _flag_enabled(name: str) -> bool:
    return os.environ.get(name, "").lower() in ("1", "true", "yes")


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-external",
        action="store_true",
        default=False,
        help="Run tests marked with @pytest.mark.external",
    )
    parser.addoption(
        "--run-all",
        action="store_true",
        default=False,
        help="Run all tests regardless of markers",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: Tests that use a real (SQLite) database",
    )
    config.addinivalue_line(
        "markers",
        "external: Tests connecting to real external services (auto-skipped)",
    )


def pytest_collection_modifyitems(config, items):
    """Auto-skip external tests unless explicitly enabled."""
    if config.getoption("--run-all") or _flag_enabled("RUN_ALL_TESTS"):
        return

    if config.getoption("--run-external") or _flag_enabled("RUN_EXTERNAL"):
        return

    skip_external = pytest.mark.skip(
        reason="External test - run with --run-external or RUN_EXTERNAL=1",
    )
    for item in items:
        if "external" in {mark.name for mark in item.iter_markers()}:
            item.add_marker(skip_external)


@pytest.fixture(scope="session", autouse=True)
def configure_app_settings():
    """Ensure every test session starts from freshly loaded settings."""
    clear_settings_cache()
    yield
    clear_settings_cache()
