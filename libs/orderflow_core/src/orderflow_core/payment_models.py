"""Payment service response models."""

from __future__ import annotations

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_CAMEL_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class Payment(BaseModel):
    """Payment created by the payment service from an order event."""

    model_config = _CAMEL_CONFIG

    id: str = Field(validation_alias=AliasChoices("id", "paymentId", "payment_id"))
    order_id: str
    user_id: str
    amount: float
    status: str
    payment_method: str | None = None
    transaction_id: str | None = None
    error_message: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class PaymentStats(BaseModel):
    """Body of ``GET /api/payments/stats``.

    ``success_rate`` is a percentage (0-100) of completed payments.
    """

    model_config = _CAMEL_CONFIG

    total_payments: int
    completed: int
    failed: int
    pending: int
    processing: int
    total_amount_processed: float
    success_rate: float

    def status_total(self) -> int:
        """Sum of the per-status counters; equals total_payments on a consistent snapshot."""
        return self.completed + self.failed + self.pending + self.processing

    def expected_success_rate(self) -> float:
        if self.total_payments == 0:
            return 0.0
        return self.completed / self.total_payments * 100
