"""Payment gateway port.

Abstracts the external payment provider so the application layer stays
independent of HTTP clients and the provider's API contract.
"""

from abc import ABC, abstractmethod
from typing import Any

from userhub.domain.shared.exceptions import DomainException, ErrorCode


class PaymentGatewayError(DomainException):
    """Raised when the payment provider rejects a call or cannot be reached."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(
            message,
            code=ErrorCode.PAYMENT_GATEWAY_ERROR,
            details={"status_code": status_code} if status_code else None,
        )


class PaymentGatewayPort(ABC):
    """Interface for an external payment provider."""

    @abstractmethod
    async def process_payment(self, data: dict[str, Any]) -> dict[str, Any]:
        """Submit a payment and return the provider's response body."""

    @abstractmethod
    async def get_payment_status(self, payment_id: str) -> dict[str, Any]:
        """Fetch the current state of a payment."""
