"""
Order Service API Testing

Exercises every order service REST endpoint:
- POST /api/orders
- GET /api/orders (paginated)
- GET /api/orders/{id}
- GET /api/orders/user/{userId}
- GET /api/orders/status/{status}
- PUT /api/orders/{id}/status
"""

from __future__ import annotations

import time
from datetime import datetime, timedelta, timezone

import aiohttp
import pytest
from orderflow_core.status_enums import OrderStatus
from orderflow_test_libs.clients import OrderServiceClient
from orderflow_test_libs.config import settings
from orderflow_test_libs.factories import OrderRequestFactory
from orderflow_test_libs.id_generators import generate_user_id

pytestmark = [pytest.mark.functional, pytest.mark.docker]

ORDERS_URL = f"{settings.order_service_root()}/orders"

# Service timestamps have no zone and may be truncated by the database
CLOCK_TOLERANCE = timedelta(seconds=1)


class TestCreateOrder:
    @pytest.mark.asyncio
    async def test_create_order_successfully(self, order_service: OrderServiceClient) -> None:
        request = OrderRequestFactory.create_order_request(
            user_id="test-user-001", product_name="Laptop", quantity=2, price=999.99
        )

        order = await order_service.create_order(request)

        assert order.id
        assert order.user_id == request.user_id
        assert order.product_id == request.product_id
        assert order.product_name == request.product_name
        assert order.quantity == request.quantity
        assert order.price == pytest.approx(request.price)
        assert order.total_price == pytest.approx(request.quantity * request.price)
        assert order.status == OrderStatus.PENDING
        assert order.created_at is not None
        assert order.updated_at is not None

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "overrides",
        [{"quantity": 0}, {"price": -10.0}],
        ids=["zero-quantity", "negative-price"],
    )
    async def test_invalid_order_rejected(
        self, http_session: aiohttp.ClientSession, overrides: dict
    ) -> None:
        payload = OrderRequestFactory.create_order_request(**overrides).to_payload()

        async with http_session.post(ORDERS_URL, json=payload) as response:
            assert response.status == 400

    @pytest.mark.asyncio
    async def test_missing_required_fields_rejected(
        self, http_session: aiohttp.ClientSession
    ) -> None:
        async with http_session.post(
            ORDERS_URL, json={"productName": "Test Product", "quantity": 1}
        ) as response:
            assert response.status == 400


class TestGetOrders:
    @pytest.mark.asyncio
    async def test_get_orders_with_pagination(self, order_service: OrderServiceClient) -> None:
        await order_service.create_order(OrderRequestFactory.create_order_request())
        await order_service.create_order(OrderRequestFactory.create_order_request())

        page = await order_service.get_orders(0, 10)

        assert isinstance(page.content, list)
        assert page.content
        if page.total_elements is not None:
            assert page.total_elements >= 2
        assert page.pageable.page_number == 0
        assert page.pageable.page_size == 10
        assert page.first is True

    @pytest.mark.asyncio
    async def test_pagination_parameters(self, order_service: OrderServiceClient) -> None:
        first_page = await order_service.get_orders(0, 5)
        second_page = await order_service.get_orders(1, 5)

        assert (first_page.size, first_page.number) == (5, 0)
        assert (second_page.size, second_page.number) == (5, 1)
        assert len(first_page.content) <= 5


class TestGetOrderById:
    @pytest.mark.asyncio
    async def test_get_order_by_id(self, order_service: OrderServiceClient) -> None:
        created = await order_service.create_order(
            OrderRequestFactory.create_order_request(product_name="Specific Product")
        )

        fetched = await order_service.get_order_by_id(created.id)

        assert fetched.id == created.id
        assert fetched.product_name == "Specific Product"
        assert fetched.user_id == created.user_id
        assert fetched.total_price == pytest.approx(created.total_price)

    @pytest.mark.asyncio
    async def test_unknown_order_returns_404(self, http_session: aiohttp.ClientSession) -> None:
        async with http_session.get(f"{ORDERS_URL}/non-existent-id") as response:
            assert response.status == 404


class TestGetOrdersByUser:
    @pytest.mark.asyncio
    async def test_orders_for_user(self, order_service: OrderServiceClient) -> None:
        user_id = generate_user_id()
        for _ in range(3):
            await order_service.create_order(
                OrderRequestFactory.create_order_request(user_id=user_id)
            )

        orders = await order_service.get_orders_by_user(user_id)

        assert len(orders) >= 3
        assert all(order.user_id == user_id for order in orders)

    @pytest.mark.asyncio
    async def test_user_without_orders_gets_empty_list(
        self, order_service: OrderServiceClient
    ) -> None:
        orders = await order_service.get_orders_by_user(f"no-orders-{int(time.time() * 1000)}")

        assert orders == []


class TestGetOrdersByStatus:
    @pytest.mark.asyncio
    async def test_pending_orders(self, order_service: OrderServiceClient) -> None:
        await order_service.create_order(OrderRequestFactory.create_order_request())

        page = await order_service.get_orders_by_status(OrderStatus.PENDING.value)

        assert page.content
        assert all(order.status == OrderStatus.PENDING for order in page.content)

    @pytest.mark.asyncio
    async def test_completed_orders_include_completed_order(
        self, order_service: OrderServiceClient
    ) -> None:
        order = await order_service.create_order(OrderRequestFactory.create_order_request())
        await order_service.update_order_status(order.id, OrderStatus.COMPLETED.value)

        page = await order_service.get_orders_by_status(OrderStatus.COMPLETED.value)

        completed = next((o for o in page.content if o.id == order.id), None)
        assert completed is not None
        assert completed.status == OrderStatus.COMPLETED


class TestUpdateOrderStatus:
    @pytest.mark.asyncio
    async def test_pending_to_processing(self, order_service: OrderServiceClient) -> None:
        order = await order_service.create_order(OrderRequestFactory.create_order_request())
        assert order.status == OrderStatus.PENDING

        updated = await order_service.update_order_status(order.id, OrderStatus.PROCESSING.value)

        assert updated.id == order.id
        assert updated.status == OrderStatus.PROCESSING
        assert updated.updated_at != order.updated_at

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [OrderStatus.COMPLETED, OrderStatus.CANCELLED])
    async def test_update_to_terminal_status(
        self, order_service: OrderServiceClient, status: OrderStatus
    ) -> None:
        order = await order_service.create_order(OrderRequestFactory.create_order_request())

        updated = await order_service.update_order_status(order.id, status.value)

        assert updated.status == status
        assert status in OrderStatus.terminal()

    @pytest.mark.asyncio
    async def test_updating_unknown_order_returns_404(
        self, http_session: aiohttp.ClientSession
    ) -> None:
        async with http_session.put(
            f"{ORDERS_URL}/non-existent/status", json={"status": OrderStatus.COMPLETED.value}
        ) as response:
            assert response.status == 404


class TestOrderDataValidation:
    @pytest.mark.asyncio
    async def test_total_price_calculation(self, order_service: OrderServiceClient) -> None:
        order = await order_service.create_order(
            OrderRequestFactory.create_order_request(quantity=5, price=19.99)
        )

        assert order.total_price == pytest.approx(5 * 19.99)

    @pytest.mark.asyncio
    async def test_created_at_within_request_window(
        self, order_service: OrderServiceClient
    ) -> None:
        before = (datetime.now(), datetime.now(timezone.utc))
        order = await order_service.create_order(OrderRequestFactory.create_order_request())
        after = (datetime.now(), datetime.now(timezone.utc))

        assert order.created_at is not None
        aware = order.created_at.tzinfo is not None
        window_start, window_end = before[aware], after[aware]
        assert window_start - CLOCK_TOLERANCE <= order.created_at <= window_end + CLOCK_TOLERANCE
