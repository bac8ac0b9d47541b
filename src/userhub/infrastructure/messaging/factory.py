"""Build the event publisher selected by configuration."""

import logging

from userhub.application.ports import EventPublisher
from userhub.infrastructure.messaging.logging_event_publisher import (
    LoggingEventPublisher,
)
from userhub.infrastructure.messaging.rabbitmq_event_publisher import (
    RabbitMQEventPublisher,
)
from userhub_config.settings import Settings

logger = logging.getLogger(__name__)


def create_event_publisher(settings: Settings) -> EventPublisher:
    """RabbitMQ when RABBITMQ_ENABLED is set, otherwise log-only."""
    if not settings.rabbitmq_enabled:
        logger.info("RabbitMQ disabled (RABBITMQ_ENABLED=false); events are logged")
        return LoggingEventPublisher()

    logger.info(
        "Publishing events to %s:%s exchange %s",
        settings.rabbitmq_host,
        settings.rabbitmq_port,
        settings.rabbitmq_exchange,
    )
    return RabbitMQEventPublisher(
        url=settings.rabbitmq_url,
        exchange_name=settings.rabbitmq_exchange,
    )
