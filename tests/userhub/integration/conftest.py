"""
Pytest configuration for userhub integration tests.

Integration tests run against a throwaway SQLite database file.
Import the shared fixtures to make them available.
"""

# Re-export shared database fixtures
from tests.shared.fixtures.database import (
    async_engine,
    database_url,
    db_session,
)

__all__ = [
    "async_engine",
    "database_url",
    "db_session",
]
