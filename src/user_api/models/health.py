"""Health check response models."""

from typing import ClassVar

from pydantic import BaseModel, Field


class HealthCheckResponse(BaseModel):
    """Application-level health check response model."""

    status: str
    version: str
    environment: str | None = None
    message: str = "API is healthy"

    class Config:
        """Pydantic config."""

        json_schema_extra: ClassVar[dict] = {
            "example": {
                "status": "ok",
                "version": "0.1.0",
                "environment": "development",
                "message": "API is healthy",
            }
        }


class UserServiceHealth(BaseModel):
    """Health report of the user service."""

    status: str = "healthy"
    service: str
    timestamp: int = Field(..., description="Current time in epoch milliseconds")
    total_users: int

    class Config:
        """Pydantic config."""

        json_schema_extra: ClassVar[dict] = {
            "example": {
                "status": "healthy",
                "service": "User Management Service",
                "timestamp": 1760000000000,
                "total_users": 2,
            }
        }
