from blog_api.middleware.middleware import (
    REQUEST_ID_HEADER,
    LoggingMiddleware,
    SecurityHeadersMiddleware,
    configure_cors,
    lifespan,
)

__all__ = [
    "REQUEST_ID_HEADER",
    "LoggingMiddleware",
    "SecurityHeadersMiddleware",
    "configure_cors",
    "lifespan",
]
