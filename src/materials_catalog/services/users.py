"""User registration and credential checks."""

import logging
from dataclasses import dataclass
from typing import Protocol

import bcrypt

from materials_catalog.domain.errors import InvalidCredentials, ValidationError
from materials_catalog.domain.models import Credentials, UserRecord

logger = logging.getLogger(__name__)

_BCRYPT_ROUNDS = 10
# bcrypt only looks at the first 72 bytes of a password.
_MAX_PASSWORD_BYTES = 72


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_by_id(self, user_id: int) -> UserRecord | None:
        """Return the user with this id, if present."""

    def get_credentials(self, email: str) -> Credentials | None:
        """Return the stored credentials for an email, if present."""

    def create_user(self, email: str, password_hash: str) -> UserRecord:
        """Create and return a new user record."""


def hash_password(password: str) -> str:
    """Hash a password using bcrypt."""
    salt = bcrypt.gensalt(rounds=_BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Verify a password against a bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False


def normalize_email(email: str | None) -> str:
    return (email or "").strip().lower()


@dataclass
class UserService:
    """Application service for user accounts."""

    repository: UserRepository

    def register(self, email: str | None, password: str | None) -> UserRecord:
        """Create a user with a hashed password."""
        normalized = normalize_email(email)
        if not normalized or not password:
            raise ValidationError("Email and password are required")
        if self.repository.get_credentials(normalized) is not None:
            raise ValidationError("User already exists")
        if len(password.encode("utf-8")) > _MAX_PASSWORD_BYTES:
            raise ValidationError("Password must be at most 72 bytes")
        user = self.repository.create_user(normalized, hash_password(password))
        logger.info("Registered user", extra={"user_id": user.id})
        return user

    def authenticate(self, email: str | None, password: str | None) -> UserRecord:
        """Return the user whose credentials match, or fail."""
        normalized = normalize_email(email)
        if not normalized or not password:
            raise ValidationError("Email and password are required")
        credentials = self.repository.get_credentials(normalized)
        if credentials is None or not verify_password(
            password, credentials.password_hash
        ):
            raise InvalidCredentials("Invalid credentials")
        return UserRecord(id=credentials.id, email=credentials.email)

    def get_user(self, user_id: int) -> UserRecord | None:
        """Return a user by id, if present."""
        return self.repository.get_by_id(user_id)
