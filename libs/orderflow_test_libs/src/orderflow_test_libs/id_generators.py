"""
Unique identifier generation for test isolation.

Identifiers combine a millisecond timestamp with a random base36 suffix so
that concurrent test runs against the same services never share users or
products.
"""

from __future__ import annotations

import secrets
import string
import time

_BASE36 = string.digits + string.ascii_lowercase


def _random_base36(length: int) -> str:
    return "".join(secrets.choice(_BASE36) for _ in range(length))


def _epoch_ms() -> int:
    return int(time.time() * 1000)


def generate_test_id() -> str:
    """Generate a unique test ID, e.g. ``test-1718000000000-k3j9x0a1b``."""
    return f"test-{_epoch_ms()}-{_random_base36(9)}"


def generate_user_id() -> str:
    """Generate a unique user ID, e.g. ``user-test-1718000000000-k3j9x0a1b``."""
    return f"user-{generate_test_id()}"


def generate_product_id() -> str:
    """Generate a unique product ID, e.g. ``PROD-1718000000000-X7K2Q``."""
    return f"PROD-{_epoch_ms()}-{_random_base36(5).upper()}"
