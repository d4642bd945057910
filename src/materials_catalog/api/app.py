"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from materials_catalog.api.auth import router as auth_router
from materials_catalog.api.categories import router as categories_router
from materials_catalog.api.media import router as media_router
from materials_catalog.api.products import router as products_router
from materials_catalog.app_logging import configure_logging
from materials_catalog.containers import AppContainer
from materials_catalog.domain.errors import (
    CatalogError,
    CategoryInUse,
    NotFound,
    Unauthorized,
    ValidationError,
)

_CLIENT_ERRORS: tuple[tuple[type[CatalogError], int], ...] = (
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (Unauthorized, status.HTTP_401_UNAUTHORIZED),
    (NotFound, status.HTTP_404_NOT_FOUND),
    (CategoryInUse, status.HTTP_409_CONFLICT),
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Materials Catalog")
    app.state.container = container

    app.include_router(auth_router)
    app.include_router(categories_router)
    app.include_router(products_router)
    app.include_router(media_router)

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(
        request: Request, exc: CatalogError
    ) -> JSONResponse:
        status_code = _client_status(exc)
        if status_code is not None:
            return JSONResponse(status_code=status_code, content={"error": str(exc)})
        logger.exception(
            "Request failed",
            extra={"path": request.url.path, "method": request.method},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_internal_error_body(container, exc),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": _first_validation_message(exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app


def _client_status(exc: CatalogError) -> int | None:
    """Return the 4xx status for an error, or None for server-side failures."""
    for error_type, status_code in _CLIENT_ERRORS:
        if isinstance(exc, error_type):
            return status_code
    return None


def _first_validation_message(exc: RequestValidationError) -> str:
    """Render the first request validation problem as one line."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    # loc starts with the request part (body, query, ...); list indexes are dropped.
    location = first.get("loc", ())[1:]
    field = ".".join(part for part in location if isinstance(part, str))
    message = str(first.get("msg", "Invalid request"))
    return f"{field}: {message}" if field else message


def _internal_error_body(container: AppContainer, exc: CatalogError) -> dict[str, str]:
    """Return a generic error body, with debug detail outside production."""
    body = {"error": "Internal server error"}
    if not container.settings.is_production:
        body["details"] = f"{type(exc).__name__}: {exc}"
    return body
