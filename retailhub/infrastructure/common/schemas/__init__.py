"""Common schemas."""

from retailhub.infrastructure.common.schemas.list_query import (
    ListQuery,
    ListQueryParams,
    get_list_query,
)
from retailhub.infrastructure.common.schemas.response_wrappers import (
    ApiResponse,
    ErrorItem,
    PaginationMetadata,
)

__all__ = [
    "ApiResponse",
    "ErrorItem",
    "ListQuery",
    "ListQueryParams",
    "PaginationMetadata",
    "get_list_query",
]
