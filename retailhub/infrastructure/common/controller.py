"""Generic controller wrapping a service and a response mapper into envelopes."""

from collections.abc import Mapping
from typing import Any, Protocol

from retailhub.application.common.pagination import PaginatedResult
from retailhub.application.common.service import Service
from retailhub.infrastructure.common.schemas import (
    ApiResponse,
    ListQuery,
    PaginationMetadata,
)
from retailhub.mapping.responses import ResponseMapper

Response = dict[str, Any]


class ListResultMapper(Protocol):
    def to_list_response(self, entity: Any) -> Response: ...  # noqa: ANN401


def paginated_response(
    result: PaginatedResult[Any],
    mapper: ListResultMapper,
    message: str = "Data retrieved successfully",
) -> ApiResponse[list[Response]]:
    """Map a page of entities and attach the pagination metadata."""
    return ApiResponse.success(
        [mapper.to_list_response(entity) for entity in result.data],
        message=message,
        metadata=PaginationMetadata(
            page=result.page,
            limit=result.limit,
            total_records=result.total,
            total_pages=result.total_pages,
        ),
    )


class Controller:
    """Uniform CRUD endpoints for one resource.

    Failures are not caught here; they propagate as exceptions and the
    application's exception handlers render the failure envelope.
    """

    def __init__(self, service: Service, response_mapper: ResponseMapper) -> None:
        self.service = service
        self.response_mapper = response_mapper

    def find_all(self, query: ListQuery) -> ApiResponse[list[Response]]:
        result = self.service.find_all(
            pagination=query.pagination, search=query.search, filters=query.filters
        )
        return paginated_response(result, self.response_mapper)

    def find_by_id(self, id: str) -> ApiResponse[Response]:
        entity = self.service.find_by_id(id)
        return ApiResponse.success(
            self.response_mapper.to_response(entity), message="Data retrieved successfully"
        )

    def create(self, data: Mapping[str, Any]) -> ApiResponse[Response]:
        entity = self.service.create(data)
        return ApiResponse.success(
            self.response_mapper.to_response(entity), message="Data created successfully"
        )

    def update(self, id: str, data: Mapping[str, Any]) -> ApiResponse[Response]:
        entity = self.service.update(id, data)
        return ApiResponse.success(
            self.response_mapper.to_response(entity), message="Data updated successfully"
        )

    def delete(self, id: str) -> ApiResponse[None]:
        self.service.delete(id)
        return ApiResponse.success(None, message="Data deleted successfully")
