"""Auth service — password hashing and authentication business logic.

Pure business logic with no HTTP dependencies.
Raises domain errors that route handlers map to HTTP status codes.
"""

import logging
import os
from datetime import datetime, timezone

import bcrypt

from domain.model.errors import AuthenticationError, ValidationError
from domain.model.user import User
from port.user_repository import UserRepository

logger = logging.getLogger(__name__)

DEFAULT_BCRYPT_ROUNDS = 12
# Cost factors bcrypt.gensalt accepts
MIN_BCRYPT_ROUNDS = 4
MAX_BCRYPT_ROUNDS = 31


def read_bcrypt_rounds() -> int:
    """Cost factor from BCRYPT_ROUNDS; malformed or out-of-range values fall back to the default."""
    raw = os.getenv("BCRYPT_ROUNDS")
    if raw is None:
        return DEFAULT_BCRYPT_ROUNDS
    try:
        rounds = int(raw)
    except ValueError:
        rounds = None
    if rounds is None or not MIN_BCRYPT_ROUNDS <= rounds <= MAX_BCRYPT_ROUNDS:
        logger.warning(
            f"Invalid BCRYPT_ROUNDS={raw!r}, expected an integer from "
            f"{MIN_BCRYPT_ROUNDS} to {MAX_BCRYPT_ROUNDS}; using {DEFAULT_BCRYPT_ROUNDS}"
        )
        return DEFAULT_BCRYPT_ROUNDS
    return rounds


BCRYPT_ROUNDS = read_bcrypt_rounds()
# bcrypt only looks at the first 72 bytes of input
BCRYPT_MAX_BYTES = 72

INVALID_CREDENTIALS = "Invalid credentials"


def hash_password(password: str) -> str:
    """Hash password using bcrypt.

    Raises:
        ValidationError: password longer than bcrypt accepts
    """
    encoded = password.encode("utf-8")
    if len(encoded) > BCRYPT_MAX_BYTES:
        raise ValidationError(f"Password must be at most {BCRYPT_MAX_BYTES} bytes")
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(encoded, salt).decode("utf-8")


def verify_password(plain: str, hashed: str) -> bool:
    encoded = plain.encode("utf-8")
    if len(encoded) > BCRYPT_MAX_BYTES:
        return False
    return bcrypt.checkpw(encoded, hashed.encode("utf-8"))


def authenticate(repo: UserRepository, email: str, password: str) -> User:
    """Authenticate a user by email and password.

    Returns the authenticated User with ``last_login`` set to now.
    Doesn't reveal whether the email exists.

    Raises:
        AuthenticationError: invalid credentials (deliberately vague)
    """
    user = repo.get_by_email(email)
    if not user or not verify_password(password, user.password_hash):
        raise AuthenticationError(INVALID_CREDENTIALS)

    # The user may be deleted between lookup and update; login still succeeds
    updated = repo.update(user.id, {"last_login": datetime.now(timezone.utc)})
    return updated or user
