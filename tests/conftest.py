"""
Pytest Configuration

Global configuration for the orderflow end-to-end suite.
Registers markers and provides the per-test cleanup registry.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

import pytest
from orderflow_test_libs.cleanup import CleanupRegistry


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "functional: mark test as functional/integration test")
    config.addinivalue_line("markers", "slow: mark test as slow running")
    config.addinivalue_line("markers", "docker: mark test as requiring Docker services")


@pytest.fixture
async def test_cleanup() -> AsyncIterator[CleanupRegistry]:
    """
    Cleanup registry private to one test.

    Tests register async teardown actions while they create data; all of them
    run after the test body, last registered first, whatever the outcome.
    """
    registry = CleanupRegistry()
    try:
        yield registry
    finally:
        await registry.run_all()
