"""Rate limiter configuration using slowapi."""

from typing import cast

from fastapi import Request
from fastapi.responses import ORJSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.status import HTTP_429_TOO_MANY_REQUESTS

from blog_api.configs import LimiterConfig
from blog_api.errors import error_content
from blog_api.monitoring import get_logger
from blog_api.utils.helpers import host

logger = get_logger(__name__)


def get_identifier(request: Request) -> str:
    """
    Get unique identifier for rate limiting.

    Args:
        request: FastAPI request object.

    Returns:
        Client IP based identifier.
    """
    return f"ip:{get_remote_address(request)}"


limiter = Limiter(**LimiterConfig().model_dump(), key_func=get_identifier)


async def rate_limit_exceeded_handler(
    request: Request,
    exc: Exception,
) -> ORJSONResponse:
    """
    Handle rate limit exceeded exceptions.

    Args:
        request: FastAPI request object.
        exc: RateLimitExceeded exception.

    Returns:
        JSON failure envelope with the violated limit.
    """
    http_exc = cast(RateLimitExceeded, exc)
    logger.warning(
        f"Rate limit {http_exc.detail} exceeded for ip: {host(request)} "
        f"at endpoint {request.url.path}",
    )
    return ORJSONResponse(
        status_code=HTTP_429_TOO_MANY_REQUESTS,
        content=error_content(
            "fail",
            "Too many requests, please try again later.",
            allowed_requests=http_exc.detail,
        ),
    )
