from userhub.infrastructure.messaging.factory import create_event_publisher
from userhub.infrastructure.messaging.logging_event_publisher import (
    LoggingEventPublisher,
)
from userhub.infrastructure.messaging.rabbitmq_event_publisher import (
    RabbitMQEventPublisher,
)

__all__ = [
    "LoggingEventPublisher",
    "RabbitMQEventPublisher",
    "create_event_publisher",
]
