"""Main FastAPI application."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from user_api.config import get_settings
from user_api.exceptions import UserValidationError
from user_api.middleware import get_cors_headers, setup_middleware
from user_api.models.user import FieldViolation, ValidationErrorResponse
from user_api.routes import api_router

# Initialize settings
settings = get_settings()

# Configure logging
logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)

_LOCATION_PREFIXES = ("body", "path", "query")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Handle application lifespan events."""
    # Startup
    logger.info(f"{settings.app_name} v{settings.app_version} started")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Log level: {settings.log_level}")

    yield

    # Shutdown
    logger.info(f"{settings.app_name} shutting down")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    description="In-memory user management REST service",
    version=settings.app_version,
    lifespan=lifespan,
    redirect_slashes=False,
)

# Setup middleware (must be before exception handlers)
setup_middleware(app, cors_origins=settings.cors_origins)


def _validation_response(violations: list[FieldViolation]) -> JSONResponse:
    body = ValidationErrorResponse(details=violations)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())


@app.exception_handler(UserValidationError)
async def user_validation_exception_handler(request: Request, exc: UserValidationError) -> JSONResponse:
    """Render rejected create/update payloads as 400 with per-field details."""
    return _validation_response(exc.violations)


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report unparseable bodies and path parameters in the same shape as field violations."""
    violations = [
        FieldViolation(
            field=".".join(str(part) for part in error.get("loc", ()) if part not in _LOCATION_PREFIXES) or "body",
            message=error.get("msg", "Invalid value"),
        )
        for error in exc.errors()
    ]
    logger.warning("Request validation failed on %s: %s", request.url.path, violations)
    return _validation_response(violations)


# Exception handler to ensure CORS headers are present on all error responses
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Global exception handler to ensure CORS headers are present on all errors."""
    logger.error("Unhandled exception: %s", exc, exc_info=True)

    origin = request.headers.get("origin")
    cors_headers = get_cors_headers(origin, cors_origins=settings.cors_origins)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": str(exc)},
        headers=cors_headers,
    )


# Include routers
app.include_router(api_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "user_api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=True,
        log_level=settings.log_level.lower(),
    )
