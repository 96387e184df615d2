import uuid
from dataclasses import dataclass
from datetime import datetime, timezone

DEFAULT_ROLE = 'user'
DEFAULT_STATUS = 'active'


@dataclass
class User:
    """Domain model representing a dashboard user."""

    IMMUTABLE_FIELDS = ('id', 'created_at')

    id: str
    email: str
    password_hash: str
    first_name: str
    last_name: str
    created_at: datetime
    role: str = DEFAULT_ROLE
    status: str = DEFAULT_STATUS
    avatar: str | None = None
    phone: str | None = None
    bio: str | None = None
    last_login: datetime | None = None

    @staticmethod
    def create(
        email: str,
        password_hash: str,
        first_name: str,
        last_name: str,
        role: str | None = None,
        status: str | None = None,
        avatar: str | None = None,
        phone: str | None = None,
        bio: str | None = None,
    ) -> 'User':
        """Factory method: assigns id, creation time and field defaults."""
        return User(
            id=str(uuid.uuid4()),
            email=email,
            password_hash=password_hash,
            first_name=first_name,
            last_name=last_name,
            created_at=datetime.now(timezone.utc),
            role=role or DEFAULT_ROLE,
            status=status or DEFAULT_STATUS,
            avatar=avatar or None,
            phone=phone or None,
            bio=bio or None,
        )
