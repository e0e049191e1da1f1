"""Status enums for the order and payment lifecycles.

OrderStatus: Order state as reported by the order service.
PaymentStatus: Payment state as reported by the payment service, driven by
the order events it consumes.
"""

from __future__ import annotations

from enum import Enum


class OrderStatus(str, Enum):
    """Order lifecycle states.

    New orders are created as PENDING; clients move them through
    PROCESSING to COMPLETED, or to CANCELLED.
    """

    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"

    @classmethod
    def terminal(cls) -> set[OrderStatus]:
        """Return terminal states (no further transitions expected)."""
        return {cls.COMPLETED, cls.CANCELLED}


class PaymentStatus(str, Enum):
    """Payment lifecycle states.

    A payment is created PENDING when the order event is consumed, moves to
    PROCESSING and ends as COMPLETED or FAILED.
    """

    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"

    @classmethod
    def terminal(cls) -> set[PaymentStatus]:
        """Return terminal states."""
        return {cls.COMPLETED, cls.FAILED}

    @classmethod
    def in_flight(cls) -> set[PaymentStatus]:
        """Return states observed while an order event is still being settled."""
        return {cls.PENDING, cls.PROCESSING, cls.COMPLETED}
