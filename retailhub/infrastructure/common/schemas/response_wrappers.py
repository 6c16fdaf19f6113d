"""Common response envelope schemas for API responses."""

from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, Field

from retailhub.exceptions import ErrorType

T = TypeVar("T")


class ErrorItem(BaseModel):
    """One reason a request failed."""

    field: str
    message: str
    type: ErrorType


class PaginationMetadata(BaseModel):
    """Pagination block of list responses."""

    page: int
    limit: int
    total_records: int
    total_pages: int


class ApiResponse(BaseModel, Generic[T]):
    """Uniform success/failure envelope."""

    status: Literal["success", "failed"]
    message: str
    data: T | None = None
    errors: list[ErrorItem] = Field(default_factory=list)
    metadata: PaginationMetadata | dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def success(
        cls,
        data: T,
        message: str = "Request was successful",
        metadata: PaginationMetadata | None = None,
    ) -> "ApiResponse[T]":
        """Build a success envelope."""
        return cls(status="success", message=message, data=data, metadata=metadata or {})

    @classmethod
    def failure(cls, message: str, errors: list[ErrorItem]) -> "ApiResponse[Any]":
        """Build a failure envelope."""
        return cls(status="failed", message=message, data=None, errors=errors)
