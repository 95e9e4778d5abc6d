"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from calorie_planner.api.routes import router
from calorie_planner.app_logging import configure_logging
from calorie_planner.containers import AppContainer
from calorie_planner.domain.errors import (
    ConcurrentUpdateError,
    DomainError,
    InvalidStateError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)

_STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ValidationError, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (PermissionDeniedError, status.HTTP_403_FORBIDDEN),
    (InvalidStateError, status.HTTP_409_CONFLICT),
    (ConcurrentUpdateError, status.HTTP_409_CONFLICT),
]


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container
    app.include_router(router)

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
        status_code = error_status(exc)
        logger.info(
            "Request rejected: path=%s error=%s status=%s",
            request.url.path,
            type(exc).__name__,
            status_code,
        )
        return JSONResponse(
            status_code=status_code,
            content={"error": type(exc).__name__, "detail": str(exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app


def error_status(exc: DomainError) -> int:
    """HTTP status for a domain error."""
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST
