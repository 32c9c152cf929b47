"""Tests for blog_api/errors/base.py and the error taxonomy."""

from unittest.mock import MagicMock

import orjson
import pytest
from starlette.exceptions import HTTPException as StarletteHTTPException

from blog_api.configs import DEFAULT_ERROR_MESSAGE
from blog_api.errors import (
    BaseAppError,
    DatabaseError,
    DuplicateEntryError,
    IdentityNotFoundError,
    InvalidCredentialsError,
    InvalidTokenError,
    PostNotFoundError,
    PostOwnershipError,
    TokenExpiredError,
    UnauthenticatedError,
    create_exception_handler,
    http_exception_handler,
    unhandled_exception_handler,
)


@pytest.fixture
def request_mock() -> MagicMock:
    request = MagicMock()
    request.client.host = "192.168.1.1"
    request.url.path = "/api/test"
    request.method = "GET"
    return request


class TestBaseAppError:
    """Tests for BaseAppError exception."""

    def test_default_values(self) -> None:
        error = BaseAppError()

        assert error.detail == "Internal Server Error"
        assert error.status_code == 500
        assert error.status == "error"
        assert error.kind == "internal"

    def test_client_errors_fail(self) -> None:
        error = BaseAppError(detail="Bad", status_code=400)

        assert error.status == "fail"
        assert str(error) == "Bad"


class TestTaxonomy:
    """Each error carries the status code and message clients rely on."""

    @pytest.mark.parametrize(
        ("error", "status_code", "message"),
        [
            (UnauthenticatedError(), 401, "Not authorized, no token"),
            (InvalidTokenError(), 401, "Invalid token. Please login again!"),
            (TokenExpiredError(), 401, "Your token has expired! Please login again."),
            (IdentityNotFoundError(), 401, "User no longer exists"),
            (InvalidCredentialsError(), 401, "Invalid email or password"),
            (PostOwnershipError("update"), 403, "You are not authorized to update this blog"),
            (PostNotFoundError(), 404, "Blog not found"),
            (
                DuplicateEntryError(value="Hello", field="title"),
                400,
                'Duplicate field value: "Hello". Please use another value!',
            ),
        ],
    )
    def test_operational(self, error: BaseAppError, status_code: int, message: str) -> None:
        assert error.is_operational
        assert error.status_code == status_code
        assert error.detail == message

    def test_database_error_not_operational(self) -> None:
        assert DatabaseError().is_operational is False


class TestCreateExceptionHandler:
    """Tests for create_exception_handler factory function."""

    async def test_operational_error_rendered(self, request_mock: MagicMock) -> None:
        logger = MagicMock()
        handler = create_exception_handler(logger)

        response = await handler(request_mock, PostNotFoundError())

        assert response.status_code == 404
        assert orjson.loads(response.body) == {"status": "fail", "message": "Blog not found"}
        logger.warning.assert_called_once()

    async def test_non_operational_error_hidden(self, request_mock: MagicMock) -> None:
        logger = MagicMock()
        handler = create_exception_handler(logger)

        response = await handler(request_mock, DatabaseError("connection refused at 10.0.0.5"))

        assert response.status_code == 500
        assert orjson.loads(response.body) == {"status": "error", "message": DEFAULT_ERROR_MESSAGE}
        assert b"10.0.0.5" not in response.body
        logger.error.assert_called_once()


class TestFallbackHandlers:
    """Tests for the unhandled and HTTP exception handlers."""

    async def test_unhandled_exception(self, request_mock: MagicMock) -> None:
        response = await unhandled_exception_handler(request_mock, RuntimeError("boom"))

        assert response.status_code == 500
        assert orjson.loads(response.body)["message"] == DEFAULT_ERROR_MESSAGE

    @pytest.mark.parametrize("status_code", [404, 405])
    async def test_missing_route(self, request_mock: MagicMock, status_code: int) -> None:
        response = await http_exception_handler(
            request_mock,
            StarletteHTTPException(status_code=status_code),
        )

        assert response.status_code == 404
        assert orjson.loads(response.body) == {
            "status": "fail",
            "message": "Can't find /api/test on this server!",
        }

    async def test_other_client_error_keeps_detail(self, request_mock: MagicMock) -> None:
        response = await http_exception_handler(
            request_mock,
            StarletteHTTPException(status_code=409, detail="Conflict"),
        )

        assert response.status_code == 409
        assert orjson.loads(response.body) == {"status": "fail", "message": "Conflict"}

    async def test_server_error_detail_hidden(self, request_mock: MagicMock) -> None:
        response = await http_exception_handler(
            request_mock,
            StarletteHTTPException(status_code=503, detail="db down"),
        )

        assert response.status_code == 500
        assert b"db down" not in response.body
