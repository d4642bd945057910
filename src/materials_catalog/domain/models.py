"""Domain models for the materials catalog."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the database."""

    id: int
    email: str


@dataclass(frozen=True)
class Credentials:
    """User row including the stored password hash."""

    id: int
    email: str
    password_hash: str
