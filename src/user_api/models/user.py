"""User models for the User API."""

from typing import ClassVar

from pydantic import BaseModel, Field


class User(BaseModel):
    """User entity model.

    ``name`` and ``email`` are loosely typed so that an incomplete payload
    still parses and reaches ``validate_user``, which reports every
    violated constraint at once. Two users are equal when they share a
    non-null ``id``.
    """

    id: int | None = Field(None, description="Identifier, assigned by the store when absent")
    name: str | None = Field(None, description="Full name of the user")
    email: str | None = Field(None, description="Email address of the user")
    department: str | None = Field(None, description="Department the user belongs to")
    active: bool = Field(True, description="Whether the user is active")

    class Config:
        """Pydantic config."""

        json_schema_extra: ClassVar[dict] = {
            "example": {
                "id": 1,
                "name": "John Doe",
                "email": "john@example.com",
                "department": "Engineering",
                "active": True,
            }
        }

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, User):
            return NotImplemented
        return self.id is not None and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id) if self.id is not None else 0


class FieldViolation(BaseModel):
    """A single violated field constraint."""

    field: str
    message: str


class UserListResponse(BaseModel):
    """All users together with total and active counts."""

    users: list[User]
    total: int
    active: int


class UserMutationResponse(BaseModel):
    """Result of a create or update."""

    user: User
    message: str


class MessageResponse(BaseModel):
    message: str


class ValidationErrorResponse(BaseModel):
    """Body of a 400 response."""

    error: str = "Validation failed"
    details: list[FieldViolation]


class UserStats(BaseModel):
    """Aggregate statistics over the stored users."""

    total_users: int
    active_users: int
    average_name_length: float
