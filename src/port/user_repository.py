from typing import Protocol

from domain.model.user import User


class UserRepository(Protocol):
    """Protocol defining the interface for user data access.

    Implementations never raise domain errors: a missing entity is
    reported as ``None`` (or ``False`` for delete).
    """

    def create(
        self,
        email: str,
        password_hash: str,
        first_name: str,
        last_name: str,
        role: str | None = None,
        status: str | None = None,
        avatar: str | None = None,
        phone: str | None = None,
        bio: str | None = None,
    ) -> User:
        """Insert a new user. Does not check email uniqueness."""
        ...

    def create_if_absent(
        self,
        email: str,
        password_hash: str,
        first_name: str,
        last_name: str,
        role: str | None = None,
        status: str | None = None,
        avatar: str | None = None,
        phone: str | None = None,
        bio: str | None = None,
    ) -> User | None:
        """Atomically insert a new user unless the email is taken. Return None on conflict."""
        ...

    def get_by_id(self, user_id: str) -> User | None:
        """Find a user by ID. Return User or None if not found."""
        ...

    def get_by_email(self, email: str) -> User | None:
        """Find a user by email (exact match). Return User or None if not found."""
        ...

    def update(self, user_id: str, changes: dict) -> User | None:
        """Merge supplied fields onto a user. Return the merged User or None if not found."""
        ...

    def delete(self, user_id: str) -> bool:
        """Delete a user. Return True if deleted, False if not found."""
        ...

    def list_all(self) -> list[User]:
        """Return all users in insertion order."""
        ...

    def count(self) -> int:
        ...
