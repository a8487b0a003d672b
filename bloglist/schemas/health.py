from typing import Literal

from pydantic import BaseModel


class HealthCheckResponse(BaseModel):
    """Health check payload."""

    status: Literal["ok", "degraded"]
    version: str
    timestamp: str
    database: Literal["ok", "unavailable"]
