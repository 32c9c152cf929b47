# blog_api/middleware/middleware.py
"""
Middleware components for the Blog API.

This module contains middleware for security headers, request logging and
CORS handling, plus the lifespan event handler that prepares and releases
the database.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from time import perf_counter
from uuid import uuid4

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from blog_api.configs import settings
from blog_api.db import close_db, init_db
from blog_api.monitoring import bind_request_id, clear_context, get_logger
from blog_api.utils.helpers import get_summary, host

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Manage application startup and shutdown events."""
    logger.info(f"Starting {app.title}...")
    logger.info(f"{app.description}")

    try:
        if settings.DATABASE_AUTO_CREATE:
            await init_db()
        logger.info("Services initialized successfully")
        logger.info(f"  - Backend API: http://{settings.HOST}:{settings.PORT}")
        logger.info(f"  - API Documentation: http://{settings.HOST}:{settings.PORT}/docs")
        logger.info(f"  - Health Check: http://{settings.HOST}:{settings.PORT}/health")
    except Exception:
        logger.exception("Failed to initialize services")
        raise

    yield

    logger.info(f"Shutting down {app.title}...")
    await close_db()
    logger.info("Services cleaned up successfully")


def configure_cors(app: FastAPI) -> None:
    """Configure CORS middleware for the application."""
    allowed_origins: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    if frontend_url := settings.PRODUCTION_FRONTEND_URL:
        allowed_origins.append(frontend_url)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )


class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Log request summary and timing, tagging every log line with a request ID."""

        clear_context()
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
        bind_request_id(request_id)

        start_time = perf_counter()
        route_info = get_summary(request) or f"{request.method} {request.url.path}"
        logger.info(f"Request: {route_info}, from ip: {host(request)}")

        response = await call_next(request)
        duration = perf_counter() - start_time

        logger.info(
            f"Response: {response.status_code} for {request.method} {request.url.path} "
            f"in {duration:.3f}s",
        )
        response.headers[REQUEST_ID_HEADER] = request_id
        clear_context()
        return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Add security headers to all responses."""

        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        if settings.ENVIRONMENT == "production":
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        return response
