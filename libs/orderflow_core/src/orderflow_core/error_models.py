"""Error and health response shapes shared by both services."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ErrorResponse(BaseModel):
    """Error body returned with 4xx responses.

    The payment service answers a missing payment with
    ``{"error": "Payment not found for order: <id>"}``; Spring's default error
    handler adds ``message``, ``timestamp`` and ``path``.
    """

    model_config = ConfigDict(extra="allow")

    error: str
    message: str | None = None
    timestamp: str | None = None
    path: str | None = None


class HealthStatus(BaseModel):
    """Body of ``GET /api/health``.

    Besides ``status`` the services report component states (``database``,
    ``kafka``, ``redis``) which are kept as extra fields.
    """

    model_config = ConfigDict(extra="allow")

    status: str
    service: str | None = None

    @property
    def is_up(self) -> bool:
        return self.status == "UP"
