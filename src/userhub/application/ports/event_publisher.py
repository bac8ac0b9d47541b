"""Event publisher port.

Use cases hand domain events to this port and move on. Delivery is
fire-and-forget: nothing about broker acknowledgement is reported back.
"""

from abc import ABC, abstractmethod
from typing import Any


class EventPublisher(ABC):
    """Publishes domain events to interested consumers."""

    @abstractmethod
    async def publish(self, event_type: str, payload: dict[str, Any]) -> None:
        """Publish one event.

        Parameters
        ----------
        event_type
            Dotted event name, e.g. ``user.created``
        payload
            JSON-serializable event body
        """

    async def close(self) -> None:  # NOQA: B027
        """Release any held connections."""
