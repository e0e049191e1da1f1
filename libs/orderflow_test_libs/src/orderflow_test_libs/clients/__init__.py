"""Orderflow service clients.

Thin typed wrappers over the order and payment service REST APIs.
"""

from orderflow_test_libs.clients.order_client import OrderServiceClient
from orderflow_test_libs.clients.payment_client import PaymentServiceClient

__all__ = ["OrderServiceClient", "PaymentServiceClient"]
