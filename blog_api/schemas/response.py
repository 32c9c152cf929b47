"""Response envelopes shared by every endpoint."""

from typing import Generic, Literal, TypeVar

from pydantic import BaseModel, Field

DataT = TypeVar("DataT")


class SuccessResponse(BaseModel, Generic[DataT]):
    """``{"status": "success", "data": ...}``"""

    status: Literal["success"] = "success"
    data: DataT


class ListResponse(BaseModel, Generic[DataT]):
    """Paginated list envelope."""

    status: Literal["success"] = "success"
    data: list[DataT]
    page: int = Field(..., ge=1)
    limit: int = Field(..., ge=1)
    total: int = Field(..., ge=0, description="Matches before pagination")


class ErrorResponse(BaseModel):
    """Failure envelope. ``fail`` for client errors, ``error`` for server errors."""

    status: Literal["fail", "error"]
    message: str


class HealthCheckResponse(BaseModel):
    status: str = "OK"
    message: str = "Server is healthy"
    version: str
    environment: str
    timestamp: str
