from userhub.domain.user.events.user_created_event import UserCreatedEvent

__all__ = ["UserCreatedEvent"]
