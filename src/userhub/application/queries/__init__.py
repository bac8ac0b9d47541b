"""Application queries (read operations)."""

from userhub.application.queries.user import GetUserQuery, ListUsersQuery

__all__ = ["GetUserQuery", "ListUsersQuery"]
