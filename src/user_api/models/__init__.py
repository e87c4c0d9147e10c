"""User API models package."""

from user_api.models.health import HealthCheckResponse, UserServiceHealth
from user_api.models.user import (
    FieldViolation,
    MessageResponse,
    User,
    UserListResponse,
    UserMutationResponse,
    UserStats,
    ValidationErrorResponse,
)

__all__ = [
    "FieldViolation",
    "HealthCheckResponse",
    "MessageResponse",
    "User",
    "UserListResponse",
    "UserMutationResponse",
    "UserServiceHealth",
    "UserStats",
    "ValidationErrorResponse",
]
