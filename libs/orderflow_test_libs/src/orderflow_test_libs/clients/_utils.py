"""Shared utilities for the service HTTP clients."""

from __future__ import annotations

from typing import Any

import httpx
from orderflow_core.error_models import ErrorResponse
from pydantic import ValidationError

from orderflow_test_libs.error_handling import (
    InvalidResponseError,
    ServiceConnectionError,
    ServiceResponseError,
)

JSON_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


def parse_error_response(response: httpx.Response) -> ErrorResponse | None:
    """Parse an error body into ErrorResponse, or None when it is not one."""
    try:
        return ErrorResponse.model_validate(response.json())
    except (ValueError, ValidationError):
        return None


async def request_json(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    *,
    params: dict[str, Any] | None = None,
    json: Any = None,
) -> Any:
    """Issue a request and return the decoded JSON body.

    Raises:
        ServiceResponseError: For any non-2xx response
        ServiceConnectionError: For transport failures (connection refused, timeout)
        InvalidResponseError: For a 2xx response whose body is not JSON
    """
    try:
        response = await client.request(
            method, url, params=params, json=json, headers=JSON_HEADERS
        )
    except httpx.TransportError as e:
        raise ServiceConnectionError(method, url, f"{type(e).__name__}: {e}") from e

    if not response.is_success:
        raise ServiceResponseError(
            method=method,
            url=str(response.request.url),
            status_code=response.status_code,
            body=response.text,
            error_response=parse_error_response(response),
        )

    try:
        return response.json()
    except ValueError as e:
        raise InvalidResponseError(
            method, str(response.request.url), response.status_code, response.text
        ) from e
