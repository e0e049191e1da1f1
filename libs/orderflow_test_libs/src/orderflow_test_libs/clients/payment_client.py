"""Payment service HTTP client."""

from __future__ import annotations

import httpx
from orderflow_core.error_models import HealthStatus
from orderflow_core.payment_models import Payment, PaymentStats

from orderflow_test_libs.async_utils import wait_for
from orderflow_test_libs.clients._utils import request_json
from orderflow_test_libs.config import settings
from orderflow_test_libs.error_handling import ServiceResponseError
from orderflow_test_libs.logging_utils import create_harness_logger

logger = create_harness_logger("orderflow.payment_client")


class PaymentServiceClient:
    """HTTP client for the payment service REST API.

    Payments have no create endpoint: the service creates them from the
    order events it consumes, so lookups right after an order is placed can
    legitimately 404. Use ``wait_for_payment`` for those.
    """

    def __init__(self, http_client: httpx.AsyncClient, base_url: str | None = None) -> None:
        self._client = http_client
        self.base_url = (base_url or settings.payment_service_root()).rstrip("/")

    async def get_payments(self) -> list[Payment]:
        data = await request_json(self._client, "GET", f"{self.base_url}/payments")
        return [Payment.model_validate(item) for item in data]

    async def get_payment_by_order_id(self, order_id: str) -> Payment:
        data = await request_json(
            self._client, "GET", f"{self.base_url}/payments/order/{order_id}"
        )
        return Payment.model_validate(data)

    async def get_payments_by_user(self, user_id: str) -> list[Payment]:
        data = await request_json(
            self._client, "GET", f"{self.base_url}/payments/user/{user_id}"
        )
        return [Payment.model_validate(item) for item in data]

    async def get_payment_stats(self) -> PaymentStats:
        data = await request_json(self._client, "GET", f"{self.base_url}/payments/stats")
        return PaymentStats.model_validate(data)

    async def health_check(self) -> HealthStatus:
        data = await request_json(self._client, "GET", f"{self.base_url}/health")
        return HealthStatus.model_validate(data)

    async def wait_for_payment(
        self,
        order_id: str,
        timeout_ms: float | None = None,
        check_interval_ms: float | None = None,
    ) -> Payment:
        """
        Poll until the payment for ``order_id`` exists.

        A 404 means the order event has not been consumed yet and is polled
        again; any other failure ends the wait immediately.

        Raises:
            ConditionTimeoutError: If no payment appeared in time
            ServiceResponseError: For non-404 error responses
        """
        found: list[Payment] = []

        async def payment_exists() -> bool:
            try:
                found.append(await self.get_payment_by_order_id(order_id))
            except ServiceResponseError as e:
                if e.is_not_found:
                    return False
                raise
            return True

        await wait_for(
            payment_exists,
            timeout_ms=settings.PAYMENT_WAIT_TIMEOUT_MS if timeout_ms is None else timeout_ms,
            check_interval_ms=(
                settings.PAYMENT_CHECK_INTERVAL_MS
                if check_interval_ms is None
                else check_interval_ms
            ),
            description=f"payment for order {order_id}",
        )
        payment = found[-1]
        logger.info(
            "Payment observed", order_id=order_id, payment_id=payment.id, status=payment.status
        )
        return payment
