from collections.abc import Awaitable, Callable
from typing import Any

from fastapi import Request
from fastapi.responses import ORJSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.status import (
    HTTP_404_NOT_FOUND,
    HTTP_405_METHOD_NOT_ALLOWED,
    HTTP_500_INTERNAL_SERVER_ERROR,
)
from structlog.stdlib import BoundLogger

from blog_api.configs import DEFAULT_ERROR_MESSAGE
from blog_api.monitoring import get_logger
from blog_api.utils.helpers import host

logger = get_logger(__name__)


class BaseAppError(Exception):
    """
    Base exception class for application errors.

    Every error carries an explicit ``kind`` tag, an HTTP ``status_code``,
    a human readable ``detail`` and an ``is_operational`` flag. Operational
    errors are expected outcomes whose message is safe to show to clients;
    anything else is rendered as a generic server error.
    """

    kind: str = "internal"
    is_operational: bool = True

    def __init__(
        self,
        detail: str = "Internal Server Error",
        status_code: int = HTTP_500_INTERNAL_SERVER_ERROR,
    ) -> None:
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code

    @property
    def status(self) -> str:
        """Envelope status: ``fail`` for client errors, ``error`` for server errors."""
        return "fail" if 400 <= self.status_code < 500 else "error"  # noqa: PLR2004

    def __str__(self) -> str:
        return self.detail


def error_content(status: str, message: str, **extra: Any) -> dict[str, Any]:
    """Build the failure envelope shared by every error response."""
    return {"status": status, "message": message, **extra}


def server_error_response() -> ORJSONResponse:
    """Generic 500 response that never leaks internal detail."""
    return ORJSONResponse(
        content=error_content("error", DEFAULT_ERROR_MESSAGE),
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
    )


def create_exception_handler(
    logger: BoundLogger,
) -> Callable[[Request, Exception], Awaitable[ORJSONResponse]]:
    """
    Create a standardized exception handler for application errors.

    Args:
        logger: Logger instance to use for logging exceptions.

    Returns:
        A callable exception handler.
    """

    async def handler(request: Request, exc: Exception) -> ORJSONResponse:
        if not isinstance(exc, BaseAppError) or not exc.is_operational:
            logger.error(
                f"Unexpected {type(exc).__name__} for ip: {host(request)} "
                f"for endpoint {request.url.path}: {exc}",
                exc_info=exc,
            )
            return server_error_response()

        logger.warning(
            f"{exc.detail} for ip: {host(request)} for endpoint {request.url.path}",
            kind=exc.kind,
            status_code=exc.status_code,
        )
        return ORJSONResponse(
            content=error_content(exc.status, exc.detail),
            status_code=exc.status_code,
        )

    return handler


app_exception_handler = create_exception_handler(logger)


async def unhandled_exception_handler(request: Request, exc: Exception) -> ORJSONResponse:
    """Last-resort handler for exceptions no other handler recognised."""
    logger.error(
        f"Unhandled {type(exc).__name__} for ip: {host(request)} "
        f"for endpoint {request.url.path}: {exc}",
        exc_info=exc,
    )
    return server_error_response()


async def http_exception_handler(request: Request, exc: Exception) -> ORJSONResponse:
    """
    Render framework HTTP errors in the failure envelope.

    Unmatched routes and unsupported methods on known paths both answer
    404 ``Can't find <path> on this server!``.
    """
    http_exc = exc if isinstance(exc, StarletteHTTPException) else None
    status_code = http_exc.status_code if http_exc else HTTP_500_INTERNAL_SERVER_ERROR

    if status_code in (HTTP_404_NOT_FOUND, HTTP_405_METHOD_NOT_ALLOWED):
        logger.info(f"No route for {request.method} {request.url.path} from ip: {host(request)}")
        return ORJSONResponse(
            content=error_content("fail", f"Can't find {request.url.path} on this server!"),
            status_code=HTTP_404_NOT_FOUND,
        )

    if status_code >= HTTP_500_INTERNAL_SERVER_ERROR:
        return server_error_response()

    detail = str(http_exc.detail) if http_exc else DEFAULT_ERROR_MESSAGE
    return ORJSONResponse(
        content=error_content("fail", detail),
        status_code=status_code,
        headers=getattr(http_exc, "headers", None),
    )
