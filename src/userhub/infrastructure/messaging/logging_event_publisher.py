"""Event publisher that only writes events to the log."""

import json
import logging
from typing import Any

from userhub.application.ports import EventPublisher

logger = logging.getLogger(__name__)


class LoggingEventPublisher(EventPublisher):
    """Used when no message broker is configured."""

    async def publish(self, event_type: str, payload: dict[str, Any]) -> None:
        logger.info("Event %s: %s", event_type, json.dumps(payload, default=str))
