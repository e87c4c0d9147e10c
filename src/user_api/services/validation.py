"""Field validation for user payloads."""

from user_api.models.user import FieldViolation, User

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50


def is_valid_email(email: str | None) -> bool:
    """Weak email check: the address only has to contain an "@"."""
    return email is not None and "@" in email


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def validate_user(user: User) -> list[FieldViolation]:
    """Check the name and email of a create or update payload.

    Args:
        user: Candidate user

    Returns:
        Violations in field order, empty when the payload is acceptable
    """
    violations: list[FieldViolation] = []

    if _is_blank(user.name):
        violations.append(FieldViolation(field="name", message="Name is required"))
    # Length counts code points
    if user.name is not None and not NAME_MIN_LENGTH <= len(user.name) <= NAME_MAX_LENGTH:
        violations.append(
            FieldViolation(
                field="name",
                message=f"Name must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters",
            )
        )

    if _is_blank(user.email):
        violations.append(FieldViolation(field="email", message="Email is required"))
    elif not is_valid_email(user.email):
        violations.append(FieldViolation(field="email", message="Email should be valid"))

    return violations
