"""In-memory user store."""

import logging
import threading
from abc import ABC, abstractmethod

from user_api.models.user import User

logger = logging.getLogger(__name__)

SEED_USERS: tuple[User, ...] = (
    User(id=1, name="John Doe", email="john@example.com", department="Engineering"),
    User(id=2, name="Jane Smith", email="jane@example.com", department="Marketing"),
)


class UserStore(ABC):
    """Abstract interface for user storage."""

    @abstractmethod
    def list_users(self) -> list[User]:
        """List all users in insertion order."""

    @abstractmethod
    def get(self, user_id: int) -> User | None:
        """Get a user by ID, or None when absent."""

    @abstractmethod
    def create(self, user: User) -> User:
        """Store a user, assigning an ID when it has none."""

    @abstractmethod
    def update(self, user_id: int, patch: User) -> User | None:
        """Overwrite the mutable fields of a user, or return None when absent."""

    @abstractmethod
    def delete(self, user_id: int) -> bool:
        """Delete a user, returning whether one was removed."""

    @abstractmethod
    def filter_by_department(self, department: str) -> list[User]:
        """List users whose department equals ``department`` exactly."""

    @abstractmethod
    def list_active(self) -> list[User]:
        """List active users."""

    @abstractmethod
    def count(self) -> int:
        """Count all users."""

    @abstractmethod
    def count_active(self) -> int:
        """Count active users."""

    @abstractmethod
    def average_name_length(self) -> float:
        """Mean name length over all users, 0.0 when there are none."""

    @abstractmethod
    def exists_by_id(self, user_id: int) -> bool:
        """Check whether a user with this ID exists."""

    @abstractmethod
    def exists_by_email(self, email: str) -> bool:
        """Check whether a user with this email exists."""


class InMemoryUserStore(UserStore):
    """UserStore backed by a list.

    A single lock guards the list and the ID counter together. Records
    handed out are copies, so callers only change state through the
    store's operations.
    """

    def __init__(self, seed: bool = True) -> None:
        """Initialize the store.

        Args:
            seed: Load the two sample users and prime the counter to 3
        """
        self._lock = threading.Lock()
        self._users: list[User] = []
        self._next_id = 1
        if seed:
            self._users.extend(user.model_copy() for user in SEED_USERS)
            self._next_id = 3

    @property
    def next_id(self) -> int:
        """ID the next create without an ID will receive."""
        with self._lock:
            return self._next_id

    def _find(self, user_id: int) -> User | None:
        for user in self._users:
            if user.id == user_id:
                return user
        return None

    def list_users(self) -> list[User]:
        with self._lock:
            return [user.model_copy() for user in self._users]

    def get(self, user_id: int) -> User | None:
        with self._lock:
            user = self._find(user_id)
            return user.model_copy() if user is not None else None

    def create(self, user: User) -> User:
        """Store a user.

        A caller-supplied ID is kept as is, without checking it against
        existing users.

        Args:
            user: User to store

        Returns:
            The stored user
        """
        stored = user.model_copy()
        with self._lock:
            if stored.id is None:
                stored.id = self._next_id
                self._next_id += 1
            self._users.append(stored)
            logger.info(f"Created user {stored.id}")
            return stored.model_copy()

    def update(self, user_id: int, patch: User) -> User | None:
        """Overwrite name, email, department and active of an existing user.

        Args:
            user_id: ID of the user to update
            patch: New field values; its ``id`` is ignored

        Returns:
            The updated user, or None if no user has this ID
        """
        with self._lock:
            existing = self._find(user_id)
            if existing is None:
                return None
            existing.name = patch.name
            existing.email = patch.email
            existing.department = patch.department
            existing.active = patch.active
            logger.info(f"Updated user {user_id}")
            return existing.model_copy()

    def delete(self, user_id: int) -> bool:
        with self._lock:
            remaining = [user for user in self._users if user.id != user_id]
            deleted = len(remaining) != len(self._users)
            self._users = remaining
        if deleted:
            logger.info(f"Deleted user {user_id}")
        return deleted

    def filter_by_department(self, department: str) -> list[User]:
        with self._lock:
            return [user.model_copy() for user in self._users if user.department == department]

    def list_active(self) -> list[User]:
        with self._lock:
            return [user.model_copy() for user in self._users if user.active]

    def count(self) -> int:
        with self._lock:
            return len(self._users)

    def count_active(self) -> int:
        with self._lock:
            return sum(1 for user in self._users if user.active)

    def average_name_length(self) -> float:
        with self._lock:
            if not self._users:
                return 0.0
            # Code points, as in validate_user
            total = sum(len(user.name or "") for user in self._users)
            return total / len(self._users)

    def exists_by_id(self, user_id: int) -> bool:
        with self._lock:
            return self._find(user_id) is not None

    def exists_by_email(self, email: str) -> bool:
        with self._lock:
            return any(user.email == email for user in self._users)
