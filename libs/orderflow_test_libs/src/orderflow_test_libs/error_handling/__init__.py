"""Error handling utilities for the orderflow harness."""

from orderflow_test_libs.error_handling.harness_error import (
    ConditionTimeoutError,
    HarnessError,
    InvalidResponseError,
    ServiceConnectionError,
    ServiceResponseError,
)

__all__ = [
    "ConditionTimeoutError",
    "HarnessError",
    "InvalidResponseError",
    "ServiceConnectionError",
    "ServiceResponseError",
]
