"""
Orderflow Structured Logging Utilities using Structlog.

Composable logging helpers for the end-to-end harness. Configured once per
test session; individual modules obtain loggers via create_harness_logger.

Environment Variables:
    LOG_FORMAT: "json" for JSON lines, "console" for human-readable (default: console)
    HARNESS_NAME: Value of the ``harness.name`` field (set by configure_harness_logging)
    ENVIRONMENT: Value of the ``deployment.environment`` field
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars, merge_contextvars
from structlog.typing import Processor


def add_harness_context(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """
    Add harness identification to all logs.

    Fields added:
    - harness.name: Logical harness name (from HARNESS_NAME env var)
    - deployment.environment: Environment under test (from ENVIRONMENT env var)
    """
    event_dict["harness.name"] = os.getenv("HARNESS_NAME", "unknown")
    event_dict["deployment.environment"] = os.getenv("ENVIRONMENT", "development")
    return event_dict


def configure_harness_logging(
    harness_name: str,
    environment: str | None = None,
    log_level: str = "INFO",
) -> None:
    """
    Configure structlog for a harness run.

    Args:
        harness_name: Name reported as ``harness.name`` (e.g. "orderflow-e2e")
        environment: Environment name (defaults to ENVIRONMENT env var)
        log_level: Logging level (defaults to "INFO")
    """
    if environment is None:
        environment = os.getenv("ENVIRONMENT", "development")

    os.environ.setdefault("HARNESS_NAME", harness_name)
    os.environ.setdefault("ENVIRONMENT", environment)

    log_format = os.getenv("LOG_FORMAT", "").lower()
    use_json = log_format == "json" or (not log_format and environment == "production")

    shared: list[Processor] = [
        merge_contextvars,
        add_harness_context,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
    ]
    if use_json:
        processors: list[Processor] = [
            *shared,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared,
            structlog.dev.set_exc_info,
            structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()),
        ]

    logging.basicConfig(
        format="%(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
        level=getattr(logging, log_level.upper()),
        force=True,
    )

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def create_harness_logger(name: str | None = None) -> Any:
    """
    Create a harness logger with optional name binding.

    The logger is a lazy proxy: it resolves against the structlog
    configuration in effect at first use, so module-level loggers created
    before configure_harness_logging still honour it.

    Args:
        name: Optional logger name (e.g., "async_utils", "order_client")

    Returns:
        A structlog logger proxy
    """
    if name:
        return structlog.get_logger(logger_name=name)

    return structlog.get_logger()


def bind_test_context(test_name: str, **extra: Any) -> None:
    """Bind the running test's name (and any ids it created) to every log line."""
    clear_contextvars()
    bind_contextvars(test_name=test_name, **extra)
