"""CORS allow-list parsing and middleware installation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi.middleware.cors import CORSMiddleware

from tasks_api.core.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from fastapi import FastAPI

ALLOW_ANY_ORIGIN = "*"
CORS_ALLOW_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
CORS_ALLOW_HEADERS = [
    "Origin",
    "X-Requested-With",
    "Content-Type",
    "Accept",
    "Authorization",
]

logger = get_logger(__name__)


def parse_cors_origins(raw: str) -> list[str]:
    """Split a comma-separated origin list, dropping blanks."""
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def install_cors(app: FastAPI, origins: Sequence[str]) -> None:
    """Add CORS handling for `origins`; an empty list leaves CORS disabled.

    ``*`` answers every origin with a wildcard and no credentials. An explicit
    list reflects the matching request origin and allows credentials.
    """
    if not origins:
        logger.info("app.cors.disabled")
        return
    allow_any = ALLOW_ANY_ORIGIN in origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[ALLOW_ANY_ORIGIN] if allow_any else list(origins),
        allow_credentials=not allow_any,
        allow_methods=CORS_ALLOW_METHODS,
        allow_headers=CORS_ALLOW_HEADERS,
    )
    logger.info(
        "app.cors.enabled",
        extra={"origins_count": len(origins), "allow_any_origin": allow_any},
    )
