"""Domain event emitted after a user has been created."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from userhub.domain.shared.time import format_event_timestamp, utc_now
from userhub.domain.user.aggregates import User


@dataclass(frozen=True)
class UserCreatedEvent:
    """Snapshot of a newly created user.

    The password hash is never part of the payload.
    """

    EVENT_TYPE = "user.created"

    user: User
    occurred_on: datetime = field(default_factory=utc_now)

    @property
    def event_type(self) -> str:
        return self.EVENT_TYPE

    def to_dict(self) -> dict[str, Any]:
        return {
            "event_type": self.EVENT_TYPE,
            "user": {
                "id": self.user.id,
                "name": self.user.name,
                "email": self.user.email,
                "email_verified_at": format_event_timestamp(
                    self.user.email_verified_at,
                ),
                "created_at": format_event_timestamp(self.user.created_at),
                "updated_at": format_event_timestamp(self.user.updated_at),
            },
            "occurred_on": format_event_timestamp(self.occurred_on),
        }
