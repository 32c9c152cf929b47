# blog_api/main.py

"""Blog API - signup/login and draft/published blog posts with owner-only mutation."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from blog_api.configs import settings
from blog_api.errors import (
    BaseAppError,
    app_exception_handler,
    http_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from blog_api.managers import limiter, rate_limit_exceeded_handler
from blog_api.middleware import (
    LoggingMiddleware,
    SecurityHeadersMiddleware,
    configure_cors,
    lifespan,
)
from blog_api.monitoring import configure_logging
from blog_api.routes import auth_router, post_router
from blog_api.schemas import HealthCheckResponse
from blog_api.utils.helpers import today_str

configure_logging()

app = FastAPI(
    title=settings.APP_NAME,
    description="Blogging platform API with draft/published posts and owner-only mutation",
    version=settings.APP_VERSION,
    lifespan=lifespan,
    default_response_class=ORJSONResponse,
    swagger_ui_parameters={
        "docExpansion": "none",
        "operationsSorter": "method",
    },
)

configure_cors(app)

app.add_middleware(LoggingMiddleware)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(GZipMiddleware, minimum_size=1000)

routes = [
    auth_router,
    post_router,
]

_ = [app.include_router(router) for router in routes]

errors = [
    (BaseAppError, app_exception_handler),
    (RequestValidationError, validation_exception_handler),
    (RateLimitExceeded, rate_limit_exceeded_handler),
    (StarletteHTTPException, http_exception_handler),
    (Exception, unhandled_exception_handler),
]

_ = [app.add_exception_handler(exc_type, handler) for exc_type, handler in errors]

app.state.limiter = limiter


@app.get(
    "/health",
    tags=["🩺 Health"],
    summary="Health check endpoint",
    response_model=HealthCheckResponse,
    response_class=ORJSONResponse,
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "status": "OK",
                        "message": "Server is healthy",
                        "version": "1.0.0",
                        "environment": "production",
                        "timestamp": "2026-01-01 00:00:00",
                    },
                },
            },
        },
    },
    operation_id="health_check",
)
@limiter.exempt
async def health_check(request: Request) -> HealthCheckResponse:
    """
    Health check endpoint.

    Parameters
    ----------
    request : Request
        Current request context.

    Returns
    -------
    HealthCheckResponse
        Liveness status with version and environment.
    """
    return HealthCheckResponse(
        version=app.version,
        environment=settings.ENVIRONMENT,
        timestamp=today_str(),
    )


@app.get(
    "/",
    tags=["🏠 Root"],
    summary="Root access",
    response_model=dict[str, str | dict[str, str]],
    response_class=ORJSONResponse,
    operation_id="root_access",
)
@limiter.exempt
async def root(request: Request) -> dict[str, str | dict[str, str]]:
    """
    Root endpoint listing the main API entry points.

    Parameters
    ----------
    request : Request
        Current request context.

    Returns
    -------
    dict
        Welcome message and endpoint map.
    """
    return {
        "status": "success",
        "message": f"Welcome to {app.title}",
        "version": app.version,
        "endpoints": {
            "auth": "/api/auth",
            "blogs": "/api/blogs",
            "docs": "/docs",
            "health": "/health",
        },
    }
