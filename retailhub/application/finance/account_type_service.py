from collections.abc import Mapping, Sequence
from typing import Any

from retailhub.application.common.pagination import PaginatedResult, Pagination, SearchTerm
from retailhub.application.common.service import Entity, Service
from retailhub.mapping.mapper_util import camel_to_snake


class AccountTypeService(Service):
    """Account types are read-only; listings show active types unless filtered otherwise."""

    def find_all(
        self,
        pagination: Pagination | None = None,
        search: Sequence[SearchTerm] | None = None,
        filters: Mapping[str, Any] | None = None,
    ) -> PaginatedResult[Entity]:
        filters = dict(filters or {})
        if not any(camel_to_snake(name) == "is_active" for name in filters):
            filters["is_active"] = True
        return super().find_all(pagination=pagination, search=search, filters=filters)
