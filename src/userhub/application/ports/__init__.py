"""Application layer ports (aka interfaces)."""

from userhub.application.ports.event_publisher import EventPublisher
from userhub.application.ports.payment_gateway import (
    PaymentGatewayError,
    PaymentGatewayPort,
)

__all__ = [
    "EventPublisher",
    "PaymentGatewayError",
    "PaymentGatewayPort",
]
