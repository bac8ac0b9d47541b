from userhub.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from userhub.infrastructure.persistence.sqlalchemy.models.user_model import (
    MAX_USER_ID,
    UserModel,
)

__all__ = ["Base", "MAX_USER_ID", "TimestampMixin", "UserModel"]
