from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from blog_api.errors.base import BaseAppError


class DatabaseError(BaseAppError):
    """Base exception for database errors."""

    kind = "database"
    is_operational = False

    def __init__(
        self,
        detail: str = "Database Error",
        status_code: int = HTTP_500_INTERNAL_SERVER_ERROR,
    ) -> None:
        super().__init__(detail, status_code)


class DatabaseConnectionError(DatabaseError):
    """Exception raised when the database cannot be reached or a statement fails."""

    def __init__(
        self,
        detail: str = "Failed to connect to the database",
    ) -> None:
        super().__init__(detail, HTTP_500_INTERNAL_SERVER_ERROR)


class DuplicateEntryError(DatabaseError):
    """Exception raised when a unique field already holds the submitted value."""

    kind = "duplicate"
    is_operational = True

    def __init__(
        self,
        value: str | None = None,
        field: str | None = None,
    ) -> None:
        detail = (
            f'Duplicate field value: "{value}". Please use another value!'
            if value is not None
            else "A record with this value already exists"
        )
        super().__init__(detail, HTTP_400_BAD_REQUEST)
        self.field = field


class RecordNotFoundError(DatabaseError):
    """Exception raised when a record is not found."""

    kind = "not_found"
    is_operational = True

    def __init__(
        self,
        detail: str = "Record not found",
    ) -> None:
        super().__init__(detail, HTTP_404_NOT_FOUND)
