"""Middleware setup for the FastAPI application."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

logger = logging.getLogger(__name__)

WILDCARD = "*"


def get_allowed_origins(cors_origins: str | None = WILDCARD) -> list[str]:
    """Get list of allowed CORS origins based on configuration.

    Args:
        cors_origins: Comma-separated origins, or "*" to allow any origin

    Returns:
        List of allowed origin URLs, ["*"] when any origin is allowed
    """
    if not cors_origins:
        return []

    origins = [origin.strip().rstrip("/") for origin in cors_origins.split(",") if origin.strip()]
    if WILDCARD in origins:
        return [WILDCARD]

    # Deduplicate while preserving order
    return list(dict.fromkeys(origins))


def get_cors_headers(origin: str | None, cors_origins: str | None = WILDCARD) -> dict[str, str]:
    """Get CORS headers for a given origin.

    Args:
        origin: The origin from the request header
        cors_origins: Comma-separated allowed origins, or "*"

    Returns:
        Dictionary of CORS headers, empty if origin is not allowed
    """
    if not origin:
        return {}

    allowed_origins = get_allowed_origins(cors_origins)

    if allowed_origins == [WILDCARD]:
        return {
            "Access-Control-Allow-Origin": WILDCARD,
            "Access-Control-Allow-Methods": "*",
            "Access-Control-Allow-Headers": "*",
        }
    if origin in allowed_origins:
        return {
            "Access-Control-Allow-Origin": origin,
            "Access-Control-Allow-Credentials": "true",
            "Access-Control-Allow-Methods": "*",
            "Access-Control-Allow-Headers": "*",
        }
    return {}


def setup_middleware(app: FastAPI, cors_origins: str | None = WILDCARD) -> None:
    """Setup middleware for the FastAPI application.

    Args:
        app: FastAPI application instance
        cors_origins: Comma-separated allowed origins, or "*"
    """
    allowed_origins = get_allowed_origins(cors_origins)

    # Browsers reject credentials on a wildcard origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=allowed_origins != [WILDCARD],
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["*"],
    )

    logger.info("CORS enabled for origins: %s", allowed_origins)
