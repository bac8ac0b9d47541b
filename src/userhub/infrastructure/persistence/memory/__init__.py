from userhub.infrastructure.persistence.memory.user_repository import (
    InMemoryUserRepository,
)

__all__ = ["InMemoryUserRepository"]
