"""
Orderflow Test Libraries Package.

Harness utilities shared by the orderflow end-to-end suite: async waiting
primitives, test-scoped cleanup, identifier generation, service clients,
configuration and structured logging.
"""

from .async_utils import retry_with_backoff, sleep, wait_for
from .cleanup import CleanupRegistry
from .error_handling import (
    ConditionTimeoutError,
    HarnessError,
    InvalidResponseError,
    ServiceConnectionError,
    ServiceResponseError,
)
from .factories import OrderRequestFactory
from .id_generators import generate_product_id, generate_test_id, generate_user_id

__all__ = [
    "CleanupRegistry",
    "ConditionTimeoutError",
    "HarnessError",
    "InvalidResponseError",
    "OrderRequestFactory",
    "ServiceConnectionError",
    "ServiceResponseError",
    "generate_product_id",
    "generate_test_id",
    "generate_user_id",
    "retry_with_backoff",
    "sleep",
    "wait_for",
]
