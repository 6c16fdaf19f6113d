"""Query-string parameters shared by list endpoints."""

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, Query, Request

from retailhub.application.common.pagination import Pagination, SearchTerm
from retailhub.config import Settings, get_settings
from retailhub.exceptions import ValidationError

_RESERVED_PARAMS = frozenset({"page", "limit", "search_key", "search_value"})


@dataclass(frozen=True)
class ListQuery:
    """Pagination, search and exact-match filters of one list request."""

    pagination: Pagination
    search: list[SearchTerm] | None = None
    filters: dict[str, str] | None = None


def get_list_query(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int | None, Query(ge=1)] = None,
    search_key: str | None = None,
    search_value: str | None = None,
) -> ListQuery:
    """
    Parse ``?page&limit&search_key&search_value`` plus free-form filters.

    ``search_key`` may name several columns separated by commas; they are
    OR-ed together. Every other query parameter is an exact-match filter.
    """
    if limit is None:
        limit = settings.DEFAULT_PAGE_SIZE
    if limit > settings.MAX_PAGE_SIZE:
        raise ValidationError(f"Limit cannot exceed {settings.MAX_PAGE_SIZE}", field="limit")

    search = None
    if search_key and search_value:
        search = [
            SearchTerm(field=key.strip(), value=search_value)
            for key in search_key.split(",")
            if key.strip()
        ]

    filters = {
        key: value for key, value in request.query_params.items() if key not in _RESERVED_PARAMS
    }

    return ListQuery(
        pagination=Pagination(page=page, limit=limit),
        search=search or None,
        filters=filters or None,
    )


ListQueryParams = Annotated[ListQuery, Depends(get_list_query)]
