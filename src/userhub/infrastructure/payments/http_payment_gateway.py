"""HTTP client for the external payment service."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from userhub.application.ports import PaymentGatewayError, PaymentGatewayPort
from userhub_config.settings import Settings

logger = logging.getLogger(__name__)


class HttpPaymentGateway(PaymentGatewayPort):
    """HTTP client wrapper for the payment service API.

    Calls are made once; there is no retry. Failed responses and transport
    errors both surface as ``PaymentGatewayError``.
    """

    def __init__(
        self,
        base_url: str = "https://api.payment-service.com",
        api_key: str = "",
        timeout: float = 10.0,
    ):
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._timeout = timeout
        self._client: httpx.AsyncClient | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "HttpPaymentGateway":
        return cls(
            base_url=settings.payment_base_url,
            api_key=settings.payment_api_key.get_secret_value(),
            timeout=settings.payment_timeout,
        )

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                headers={
                    "Authorization": f"Bearer {self._api_key}",
                    "Content-Type": "application/json",
                },
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def process_payment(self, data: dict[str, Any]) -> dict[str, Any]:
        """Create a payment at the provider."""
        try:
            client = await self._get_client()
            response = await client.post("/payments", json=data)
        except httpx.HTTPError as e:
            logger.warning("Payment service request failed: %s", e)
            raise PaymentGatewayError(f"Payment gateway error: {e}") from e

        if response.is_error:
            logger.warning(
                "Payment service returned error %d: %s",
                response.status_code,
                response.text[:200] if response.text else "no body",
            )
            raise PaymentGatewayError(
                f"Payment processing failed: {response.text}",
                status_code=response.status_code,
            )
        return response.json()

    async def get_payment_status(self, payment_id: str) -> dict[str, Any]:
        """Fetch the provider's view of a payment."""
        try:
            client = await self._get_client()
            response = await client.get(f"/payments/{payment_id}")
        except httpx.HTTPError as e:
            logger.warning("Payment service request failed: %s", e)
            raise PaymentGatewayError(f"Payment gateway error: {e}") from e

        if response.is_error:
            logger.warning(
                "Payment status lookup for %s returned %d",
                payment_id,
                response.status_code,
            )
            raise PaymentGatewayError(
                f"Failed to get payment status: {response.text}",
                status_code=response.status_code,
            )
        return response.json()
