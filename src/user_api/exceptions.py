"""Exceptions raised by the request handlers."""

from user_api.models.user import FieldViolation


class UserValidationError(Exception):
    """A create or update payload violated one or more field constraints.

    Rendered as HTTP 400 by the handler registered in ``user_api.main``.
    """

    message: str = "Validation failed"

    def __init__(self, violations: list[FieldViolation]) -> None:
        self.violations = violations
        super().__init__(f"{self.message}: " + ", ".join(f"{v.field} ({v.message})" for v in violations))
