"""
Pagination types for list queries.

Example:
    result = repository.get_all(pagination=Pagination(page=2, limit=10))
    metadata = {
        "page": result.page,
        "limit": result.limit,
        "total_records": result.total,
        "total_pages": result.total_pages,
    }
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from retailhub.exceptions import ValidationError

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Pagination:
    """
    Pagination parameters for list queries.

    Attributes:
        page: Current page number (1-indexed)
        limit: Number of items per page
    """

    page: int = 1
    limit: int = 10

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValidationError("Page must be at least 1", field="page")
        if self.limit < 1:
            raise ValidationError("Limit must be at least 1", field="limit")

    @property
    def offset(self) -> int:
        """Calculate the offset for database queries."""
        return (self.page - 1) * self.limit

    def slice(self, items: list[T]) -> list[T]:
        """Cut the current page out of an in-memory list."""
        return items[self.offset : self.offset + self.limit]


@dataclass(frozen=True)
class PaginatedResult(Generic[T]):
    """
    Paginated result containing items and metadata.

    Attributes:
        data: Items of the current page
        total: Total number of items across all pages
        pagination: The pagination parameters used, None for an unpaginated listing
    """

    data: list[T]
    total: int
    pagination: Pagination | None = None

    @property
    def page(self) -> int:
        """Current page number."""
        return self.pagination.page if self.pagination else 1

    @property
    def limit(self) -> int:
        """Page size; an unpaginated listing reports the whole result as one page."""
        return self.pagination.limit if self.pagination else self.total

    @property
    def total_pages(self) -> int:
        """Total number of pages, 0 when there are no records."""
        if self.total == 0:
            return 0
        if self.pagination is None:
            return 1
        return (self.total + self.pagination.limit - 1) // self.pagination.limit

    def map(self, func: Callable[[T], U]) -> "PaginatedResult[U]":
        """Apply ``func`` to every item, keeping the pagination metadata."""
        return PaginatedResult([func(item) for item in self.data], self.total, self.pagination)


@dataclass(frozen=True)
class SearchTerm:
    """Case-insensitive substring match of ``value`` against column ``field``."""

    field: str
    value: str
