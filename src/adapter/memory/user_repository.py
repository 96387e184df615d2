"""In-memory implementation of UserRepository."""

import threading
from dataclasses import replace

from domain.model.user import User


class InMemoryUserRepository:
    def __init__(self):
        self.store: dict[str, User] = {}
        self._lock = threading.Lock()

    # ── write operations ─────────────────────────────────────

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
        user = User.create(
            email=email,
            password_hash=password_hash,
            first_name=first_name,
            last_name=last_name,
            role=role,
            status=status,
            avatar=avatar,
            phone=phone,
            bio=bio,
        )
        with self._lock:
            self.store[user.id] = user
        return user

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
        user = User.create(
            email=email,
            password_hash=password_hash,
            first_name=first_name,
            last_name=last_name,
            role=role,
            status=status,
            avatar=avatar,
            phone=phone,
            bio=bio,
        )
        with self._lock:
            if self._find_by_email(email):
                return None
            self.store[user.id] = user
        return user

    def add(self, user: User) -> User:
        """Insert a fully built user as-is (bootstrap data)."""
        with self._lock:
            self.store[user.id] = user
        return user

    def update(self, user_id: str, changes: dict) -> User | None:
        allowed = {
            k: v for k, v in changes.items()
            if k in User.__dataclass_fields__ and k not in User.IMMUTABLE_FIELDS
        }
        with self._lock:
            user = self.store.get(user_id)
            if not user:
                return None
            updated = replace(user, **allowed)
            self.store[user_id] = updated
        return updated

    def delete(self, user_id: str) -> bool:
        with self._lock:
            return self.store.pop(user_id, None) is not None

    # ── read operations ──────────────────────────────────────

    def get_by_id(self, user_id: str) -> User | None:
        return self.store.get(user_id)

    def get_by_email(self, email: str) -> User | None:
        with self._lock:
            return self._find_by_email(email)

    def list_all(self) -> list[User]:
        with self._lock:
            return list(self.store.values())

    def count(self) -> int:
        return len(self.store)

    def _find_by_email(self, email: str) -> User | None:
        for user in self.store.values():
            if user.email == email:
                return user
        return None
