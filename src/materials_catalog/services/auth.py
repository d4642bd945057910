"""Session tokens and the authorization gate for catalog writes."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

import jwt

from materials_catalog.domain.errors import Unauthorized
from materials_catalog.domain.models import UserRecord
from materials_catalog.services.users import UserService

logger = logging.getLogger(__name__)

_ALGORITHM = "HS256"


@dataclass
class SessionTokens:
    """Issues and reads signed, expiring session tokens."""

    secret: str
    max_age_seconds: int

    def issue(self, user_id: int) -> str:
        """Return a token bound to the user id."""
        now = datetime.now(tz=UTC)
        claims = {
            "sub": str(user_id),
            "iat": now,
            "exp": now + timedelta(seconds=self.max_age_seconds),
        }
        return jwt.encode(claims, self.secret, algorithm=_ALGORITHM)

    def read_user_id(self, token: str) -> int | None:
        """Return the user id of a valid token, or None."""
        try:
            claims = jwt.decode(token, self.secret, algorithms=[_ALGORITHM])
        except jwt.PyJWTError:
            return None
        subject = claims.get("sub")
        if not isinstance(subject, str) or not subject.isdigit():
            return None
        return int(subject)


@dataclass
class AuthGate:
    """Resolves the acting user from a session token."""

    user_service: UserService
    tokens: SessionTokens

    def resolve_current_user(self, token: str | None) -> UserRecord | None:
        """Return the session's user, or None when the session is not valid."""
        if not token:
            return None
        user_id = self.tokens.read_user_id(token)
        if user_id is None:
            return None
        return self.user_service.get_user(user_id)

    def require_user(self, token: str | None) -> UserRecord:
        """Return the session's user or raise Unauthorized."""
        user = self.resolve_current_user(token)
        if user is None:
            raise Unauthorized("Unauthorized")
        return user

    def start_session(self, user: UserRecord) -> str:
        """Issue a fresh session token for a logged-in user."""
        logger.info("Issued session", extra={"user_id": user.id})
        return self.tokens.issue(user.id)
