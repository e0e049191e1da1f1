"""
Orderflow Common Core Package.

Shared enums and response models describing the JSON contract of the
order and payment services exercised by the end-to-end harness.
"""

from .config_enums import Environment
from .error_enums import ErrorCode
from .error_models import ErrorResponse, HealthStatus
from .order_models import (
    CreateOrderRequest,
    Order,
    OrderPage,
    PageableInfo,
    SortInfo,
    UpdateOrderStatusRequest,
)
from .payment_models import Payment, PaymentStats
from .status_enums import OrderStatus, PaymentStatus

__all__ = [
    "CreateOrderRequest",
    "Environment",
    "ErrorCode",
    "ErrorResponse",
    "HealthStatus",
    "Order",
    "OrderPage",
    "OrderStatus",
    "PageableInfo",
    "Payment",
    "PaymentStats",
    "PaymentStatus",
    "SortInfo",
    "UpdateOrderStatusRequest",
]
