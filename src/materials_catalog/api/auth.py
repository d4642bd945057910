"""Account endpoints and the session dependency for catalog writes."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request, Response, status

from materials_catalog.api.catalog_models import CredentialsIn
from materials_catalog.domain.models import UserRecord  # noqa: TC001

if TYPE_CHECKING:
    from materials_catalog.containers import AppContainer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


def session_token(request: Request) -> str | None:
    """Return the raw session token from the request cookie."""
    container: AppContainer = request.app.state.container
    return request.cookies.get(container.settings.session_cookie_name)


def require_user(request: Request) -> UserRecord:
    """Resolve the session user or fail with Unauthorized."""
    container: AppContainer = request.app.state.container
    return container.auth_gate.require_user(session_token(request))


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(payload: CredentialsIn, request: Request) -> dict[str, object]:
    """Create an account."""
    container: AppContainer = request.app.state.container
    user = container.user_service.register(payload.email, payload.password)
    return _serialize_user(user)


@router.post("/login")
def login(
    payload: CredentialsIn, request: Request, response: Response
) -> dict[str, object]:
    """Verify credentials and start a session."""
    container: AppContainer = request.app.state.container
    user = container.user_service.authenticate(payload.email, payload.password)
    token = container.auth_gate.start_session(user)
    settings = container.settings
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.session_max_age_seconds,
        httponly=True,
        samesite="lax",
        secure=settings.is_production,
    )
    return _serialize_user(user)


@router.post("/logout")
def logout(request: Request, response: Response) -> dict[str, str]:
    """Clear the session cookie."""
    container: AppContainer = request.app.state.container
    user = container.auth_gate.resolve_current_user(session_token(request))
    if user is not None:
        logger.info("Logged out", extra={"user_id": user.id})
    response.delete_cookie(
        key=container.settings.session_cookie_name,
        httponly=True,
        samesite="lax",
        secure=container.settings.is_production,
    )
    return {"message": "Logged out successfully"}


@router.get("/me")
def me(user: UserRecord = Depends(require_user)) -> dict[str, object]:
    """Return the logged-in user."""
    return _serialize_user(user)


def _serialize_user(user: UserRecord) -> dict[str, object]:
    return {"id": user.id, "email": user.email}
