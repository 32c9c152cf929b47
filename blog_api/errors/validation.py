"""Custom validation error handling for FastAPI."""

from typing import cast

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_400_BAD_REQUEST

from blog_api.errors.base import error_content
from blog_api.monitoring import get_logger
from blog_api.utils.helpers import host

logger = get_logger(__name__)


def format_validation_errors(exc: RequestValidationError) -> list[dict]:
    """
    Flatten pydantic validation errors into ``field``/``message``/``type`` entries.

    Submitted values are left out so secrets such as passwords never echo back.
    """
    formatted_errors = []
    for error in exc.errors():
        formatted_error = {
            # First location item is the source: body, query or path
            "field": ".".join(str(loc) for loc in error.get("loc", [])[1:]),
            "message": error.get("msg", "Invalid value"),
            "type": error.get("type", "validation_error"),
        }
        if "ctx" in error:
            formatted_error["context"] = {
                key: str(value) if isinstance(value, Exception) else value
                for key, value in error["ctx"].items()
            }
        formatted_errors.append(formatted_error)
    return formatted_errors


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> ORJSONResponse:
    """
    Handle request validation errors as ``400 fail`` responses.

    Args:
        request: The incoming request.
        exc: The RequestValidationError exception.

    Returns:
        ORJSONResponse with formatted validation errors.
    """
    formatted_errors = format_validation_errors(cast(RequestValidationError, exc))
    summary = ". ".join(
        f"{error['field']}: {error['message']}" if error["field"] else error["message"]
        for error in formatted_errors
    )

    logger.warning(
        f"Validation error for ip: {host(request)} at endpoint {request.url.path}: {summary}",
    )

    return ORJSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content=error_content(
            "fail",
            f"Invalid input data. {summary}",
            errors=formatted_errors,
        ),
    )
