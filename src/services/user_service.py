"""User service — CRUD business logic over a UserRepository.

Enforces email uniqueness and keeps plain passwords out of storage.
"""

import logging

from domain.model.errors import DuplicateError, NotFoundError
from domain.model.user import User
from port.user_repository import UserRepository
from services.auth_service import hash_password

logger = logging.getLogger(__name__)

USER_NOT_FOUND = "User not found"
USER_EXISTS = "User already exists"


def list_users(repo: UserRepository) -> list[User]:
    return repo.list_all()


def get_user(repo: UserRepository, user_id: str) -> User:
    """Raises NotFoundError if the id is unknown."""
    user = repo.get_by_id(user_id)
    if not user:
        raise NotFoundError(USER_NOT_FOUND)
    return user


def create_user(
    repo: UserRepository,
    email: str,
    password: str,
    first_name: str,
    last_name: str,
    role: str | None = None,
    status: str | None = None,
    avatar: str | None = None,
    phone: str | None = None,
    bio: str | None = None,
) -> User:
    """Create a user with a unique email.

    The lookup rejects obvious duplicates before paying for a bcrypt hash;
    ``create_if_absent`` closes the race between lookup and insert.

    Raises:
        DuplicateError: email already registered
        ValidationError: password cannot be hashed
    """
    if repo.get_by_email(email):
        raise DuplicateError(USER_EXISTS)

    user = repo.create_if_absent(
        email=email,
        password_hash=hash_password(password),
        first_name=first_name,
        last_name=last_name,
        role=role,
        status=status,
        avatar=avatar,
        phone=phone,
        bio=bio,
    )
    if not user:
        raise DuplicateError(USER_EXISTS)

    logger.info("User created", extra={"userId": user.id, "email": user.email})
    return user


def update_user(repo: UserRepository, user_id: str, changes: dict) -> User:
    """Apply a partial update.

    ``changes`` holds only the fields the caller supplied. A ``password``
    key is replaced by its hash.

    Raises:
        NotFoundError: unknown id
        DuplicateError: new email belongs to another user
    """
    changes = dict(changes)
    email = changes.get("email")
    if email is not None:
        owner = repo.get_by_email(email)
        if owner and owner.id != user_id:
            raise DuplicateError(USER_EXISTS)
    if "password" in changes:
        changes["password_hash"] = hash_password(changes.pop("password"))

    user = repo.update(user_id, changes)
    if not user:
        raise NotFoundError(USER_NOT_FOUND)

    logger.info("User updated", extra={"userId": user_id, "fields": sorted(changes)})
    return user


def delete_user(repo: UserRepository, user_id: str) -> None:
    """Raises NotFoundError if nothing was removed."""
    if not repo.delete(user_id):
        raise NotFoundError(USER_NOT_FOUND)
    logger.info("User deleted", extra={"userId": user_id})
