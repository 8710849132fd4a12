"""Response DTOs for API endpoints."""

from pydantic import BaseModel, Field


class StoredValueResponse(BaseModel):
    """Response DTO for reading the demo value."""

    key: str = Field(..., description="The distributed cache key that was read")
    value: str | None = Field(None, description="The stored value, or null if absent")


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    cache_healthy: bool = Field(..., description="Whether the cache backend is reachable")
