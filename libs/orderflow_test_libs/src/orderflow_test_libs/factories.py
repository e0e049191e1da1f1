"""Test data factories for order service requests."""

from __future__ import annotations

from typing import Any

from orderflow_core.order_models import CreateOrderRequest

from orderflow_test_libs.id_generators import generate_product_id, generate_user_id


class OrderRequestFactory:
    """Builds valid CreateOrderRequest instances with fresh identifiers."""

    DEFAULT_PRODUCT_NAME = "Test Product"
    DEFAULT_QUANTITY = 1
    DEFAULT_PRICE = 99.99

    @classmethod
    def create_order_request(cls, **overrides: Any) -> CreateOrderRequest:
        """
        Create an order request, overriding any field by keyword.

        Overrides use Python field names (``user_id``, ``price``...). Business rules
        (quantity >= 1, price > 0) are left to the service so invalid requests
        can be built on purpose.
        """
        fields: dict[str, Any] = {
            "user_id": generate_user_id(),
            "product_id": generate_product_id(),
            "product_name": cls.DEFAULT_PRODUCT_NAME,
            "quantity": cls.DEFAULT_QUANTITY,
            "price": cls.DEFAULT_PRICE,
        }
        fields.update(overrides)
        return CreateOrderRequest(**fields)
