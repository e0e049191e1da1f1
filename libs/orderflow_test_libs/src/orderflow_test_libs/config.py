"""Configuration for the orderflow end-to-end harness.

Uses Pydantic settings for environment-based configuration. Every value can
be overridden with an ``ORDERFLOW_E2E_`` prefixed environment variable or a
``.env`` file, e.g. ``ORDERFLOW_E2E_ORDER_SERVICE_URL=http://orders:8081``.
"""

from __future__ import annotations

from orderflow_core.config_enums import Environment
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class HarnessSettings(BaseSettings):
    """Configuration settings for the end-to-end harness."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="ORDERFLOW_E2E_",
        case_sensitive=False,
        extra="ignore",
    )

    HARNESS_NAME: str = "orderflow-e2e"

    ENVIRONMENT: Environment = Field(
        default=Environment.TESTING,
        validation_alias="ENVIRONMENT",
        description="Environment the services under test are deployed in",
    )
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")

    # Services under test
    ORDER_SERVICE_URL: str = Field(
        default="http://localhost:8081/api", description="Order service API base URL"
    )
    PAYMENT_SERVICE_URL: str = Field(
        default="http://localhost:8082/api", description="Payment service API base URL"
    )
    API_GATEWAY_URL: str = Field(
        default="http://localhost:8080/api", description="API gateway base URL"
    )

    # HTTP client configuration
    HTTP_TIMEOUT_SECONDS: float = Field(default=10.0, description="Per-request timeout")

    # Readiness gate for the functional suite
    READINESS_TIMEOUT_SECONDS: float = Field(
        default=15.0, description="How long to wait for services before skipping the suite"
    )
    READINESS_RETRY_SECONDS: float = Field(default=3.0, description="Pause between probes")
    CHECK_API_GATEWAY: bool = Field(
        default=False, description="Include the API gateway in readiness checks"
    )

    # Eventual-consistency waits
    PAYMENT_WAIT_TIMEOUT_MS: int = Field(
        default=30000, description="Upper bound for a payment to appear after an order"
    )
    PAYMENT_CHECK_INTERVAL_MS: int = Field(default=2000, description="Payment poll interval")
    DEFAULT_RETRY_ATTEMPTS: int = Field(default=5, ge=1)
    DEFAULT_RETRY_DELAY_MS: int = Field(default=2000, ge=0)

    def order_service_root(self) -> str:
        return self.ORDER_SERVICE_URL.rstrip("/")

    def payment_service_root(self) -> str:
        return self.PAYMENT_SERVICE_URL.rstrip("/")


# Create a single instance for the harness to use
settings = HarnessSettings()
