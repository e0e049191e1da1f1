"""Order service HTTP client."""

from __future__ import annotations

import httpx
from orderflow_core.error_models import HealthStatus
from orderflow_core.order_models import (
    CreateOrderRequest,
    Order,
    OrderPage,
    UpdateOrderStatusRequest,
)

from orderflow_test_libs.clients._utils import request_json
from orderflow_test_libs.config import settings
from orderflow_test_libs.logging_utils import create_harness_logger

logger = create_harness_logger("orderflow.order_client")


class OrderServiceClient:
    """HTTP client for the order service REST API."""

    def __init__(self, http_client: httpx.AsyncClient, base_url: str | None = None) -> None:
        """Initialize with shared HTTP client.

        Args:
            http_client: Shared httpx AsyncClient instance
            base_url: API root, e.g. ``http://localhost:8081/api`` (defaults to settings)
        """
        self._client = http_client
        self.base_url = (base_url or settings.order_service_root()).rstrip("/")

    async def create_order(self, request: CreateOrderRequest) -> Order:
        data = await request_json(
            self._client, "POST", f"{self.base_url}/orders", json=request.to_payload()
        )
        order = Order.model_validate(data)
        logger.info("Order created", order_id=order.id, user_id=order.user_id)
        return order

    async def get_orders(self, page: int = 0, size: int = 10) -> OrderPage:
        data = await request_json(
            self._client, "GET", f"{self.base_url}/orders", params={"page": page, "size": size}
        )
        return OrderPage.from_payload(data, page=page, size=size)

    async def get_order_by_id(self, order_id: str) -> Order:
        data = await request_json(self._client, "GET", f"{self.base_url}/orders/{order_id}")
        return Order.model_validate(data)

    async def get_orders_by_user(self, user_id: str) -> list[Order]:
        data = await request_json(self._client, "GET", f"{self.base_url}/orders/user/{user_id}")
        return [Order.model_validate(item) for item in data]

    async def get_orders_by_status(self, status: str) -> OrderPage:
        data = await request_json(self._client, "GET", f"{self.base_url}/orders/status/{status}")
        return OrderPage.from_payload(data)

    async def update_order_status(self, order_id: str, status: str) -> Order:
        """Move an order to ``status`` (an OrderStatus value or any raw string)."""
        body = UpdateOrderStatusRequest(status=status)
        data = await request_json(
            self._client,
            "PUT",
            f"{self.base_url}/orders/{order_id}/status",
            json=body.model_dump(mode="json", by_alias=True),
        )
        order = Order.model_validate(data)
        logger.info("Order status updated", order_id=order_id, status=order.status)
        return order

    async def health_check(self) -> HealthStatus:
        data = await request_json(self._client, "GET", f"{self.base_url}/health")
        return HealthStatus.model_validate(data)
