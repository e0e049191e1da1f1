"""
Structured exceptions raised by the harness itself.

Failures of caller-supplied operations and predicates are never wrapped;
these types cover what the harness detects on its own: a condition that
never became true and a service answering with a non-success status.
"""

from __future__ import annotations

from typing import Any

from orderflow_core.error_enums import ErrorCode
from orderflow_core.error_models import ErrorResponse


class HarnessError(Exception):
    """Base exception carrying an ErrorCode and structured details."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def __str__(self) -> str:
        return f"[{self.error_code.value}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "error_code": self.error_code.value,
            "message": self.message,
            "details": self.details,
        }


class ConditionTimeoutError(HarnessError):
    """A polled condition did not become true within its wall-clock bound."""

    def __init__(self, timeout_ms: float, elapsed_ms: float, checks: int) -> None:
        super().__init__(
            f"Condition not met within {timeout_ms}ms",
            error_code=ErrorCode.TIMEOUT,
            details={"timeout_ms": timeout_ms, "elapsed_ms": elapsed_ms, "checks": checks},
        )
        self.timeout_ms = timeout_ms
        self.elapsed_ms = elapsed_ms
        self.checks = checks


_STATUS_TO_CODE = {
    400: ErrorCode.VALIDATION_ERROR,
    404: ErrorCode.RESOURCE_NOT_FOUND,
    503: ErrorCode.SERVICE_UNAVAILABLE,
}


class ServiceResponseError(HarnessError):
    """A service under test answered with a non-2xx status."""

    def __init__(
        self,
        method: str,
        url: str,
        status_code: int,
        body: str = "",
        error_response: ErrorResponse | None = None,
    ) -> None:
        reason = error_response.error if error_response else body
        super().__init__(
            f"{method} {url} failed: {status_code} - {reason}",
            error_code=_STATUS_TO_CODE.get(status_code, ErrorCode.EXTERNAL_SERVICE_ERROR),
            details={"method": method, "url": url, "status_code": status_code},
        )
        self.method = method
        self.url = url
        self.status_code = status_code
        self.body = body
        self.error_response = error_response

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404


class ServiceConnectionError(HarnessError):
    """A service under test could not be reached (refused, reset or timed out)."""

    def __init__(self, method: str, url: str, reason: str) -> None:
        super().__init__(
            f"{method} {url} unreachable: {reason}",
            error_code=ErrorCode.CONNECTION_ERROR,
            details={"method": method, "url": url},
        )
        self.method = method
        self.url = url


class InvalidResponseError(HarnessError):
    """A service answered 2xx with a body that is not JSON."""

    def __init__(self, method: str, url: str, status_code: int, body: str) -> None:
        super().__init__(
            f"{method} {url} returned {status_code} with a non-JSON body",
            error_code=ErrorCode.INVALID_RESPONSE,
            details={"method": method, "url": url, "status_code": status_code},
        )
        self.method = method
        self.url = url
        self.status_code = status_code
        self.body = body
