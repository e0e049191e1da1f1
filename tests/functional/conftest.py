"""
Shared fixtures for functional tests.

Functional tests drive the deployed order and payment services over HTTP.
The suite is skipped, not failed, when those services are not reachable.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator, Iterator

import aiohttp
import httpx
import pytest
from orderflow_test_libs.clients import OrderServiceClient, PaymentServiceClient
from orderflow_test_libs.config import settings
from orderflow_test_libs.logging_utils import (
    bind_test_context,
    configure_harness_logging,
    create_harness_logger,
)
from structlog.contextvars import clear_contextvars

from tests.utils.service_test_manager import ServiceNotReadyError, ServiceTestManager

logger = create_harness_logger("test.functional.conftest")


@pytest.fixture(scope="session", autouse=True)
def configure_functional_logging() -> None:
    """Configure structlog once for the functional test session."""
    # Avoid duplicate log output under pytest by dropping the handler basicConfig adds
    root = logging.getLogger()
    pre_handlers = list(root.handlers)
    configure_harness_logging(
        harness_name=settings.HARNESS_NAME,
        environment=settings.ENVIRONMENT.value,
        log_level=settings.LOG_LEVEL,
    )
    for handler in list(root.handlers):
        if handler not in pre_handlers:
            root.removeHandler(handler)


@pytest.fixture(scope="session", autouse=True)
def ensure_services_ready(configure_functional_logging: None) -> dict:
    """
    Wait for the order and payment services to report UP.

    Uses ServiceTestManager to poll the health endpoints with a bounded
    timeout and skips the suite with a clear message if the stack is not up.
    """
    manager = ServiceTestManager()
    try:
        endpoints = asyncio.run(manager.wait_until_ready())
    except ServiceNotReadyError as e:
        pytest.skip(f"Functional stack not ready: {e}")

    logger.info("Functional stack healthy, starting tests", services=sorted(endpoints))
    return endpoints


@pytest.fixture(autouse=True)
def functional_log_context(request: pytest.FixtureRequest) -> Iterator[None]:
    """Tag every log line emitted during a test with the test's name."""
    bind_test_context(request.node.name)
    yield
    clear_contextvars()


@pytest.fixture
async def http_client() -> AsyncIterator[httpx.AsyncClient]:
    """Shared httpx client used by the service clients of one test."""
    async with httpx.AsyncClient(timeout=settings.HTTP_TIMEOUT_SECONDS) as client:
        yield client


@pytest.fixture
def order_service(http_client: httpx.AsyncClient) -> OrderServiceClient:
    return OrderServiceClient(http_client)


@pytest.fixture
def payment_service(http_client: httpx.AsyncClient) -> PaymentServiceClient:
    return PaymentServiceClient(http_client)


@pytest.fixture
async def http_session() -> AsyncIterator[aiohttp.ClientSession]:
    """Raw aiohttp session for assertions on status codes and error bodies."""
    timeout = aiohttp.ClientTimeout(total=settings.HTTP_TIMEOUT_SECONDS)
    async with aiohttp.ClientSession(timeout=timeout) as session:
        yield session
