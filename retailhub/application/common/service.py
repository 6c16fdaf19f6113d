"""Generic CRUD service."""

from collections.abc import Mapping, Sequence
from typing import Any, Protocol

from retailhub.application.common.pagination import PaginatedResult, Pagination, SearchTerm
from retailhub.exceptions import NotFoundError

Entity = dict[str, Any]


class RepositoryProtocol(Protocol):
    """What a service needs from its repository."""

    label: str

    def get_by_id(self, id: str) -> Entity | None: ...

    def get_all(
        self,
        pagination: Pagination | None = None,
        search: Sequence[SearchTerm] | None = None,
        filters: Mapping[str, Any] | None = None,
    ) -> PaginatedResult[Entity]: ...

    def create(self, entity: Mapping[str, Any]) -> Entity: ...

    def update(self, id: str, partial: Mapping[str, Any]) -> Entity: ...

    def delete(self, id: str) -> None: ...


class ReferenceRepositoryProtocol(Protocol):
    """Repository of rows other resources point at."""

    label: str

    def exists(self, id: str) -> bool: ...


def require_reference(repository: ReferenceRepositoryProtocol, value: object, field: str) -> None:
    """Raise NotFoundError unless the referenced row exists; None references are allowed."""
    if value is None:
        return
    if not repository.exists(str(value)):
        raise NotFoundError(repository.label, value, field=field)


class Service:
    """Pass-through over a repository; resource services override what they need."""

    def __init__(self, repository: RepositoryProtocol) -> None:
        self.repository = repository

    def find_by_id(self, id: str) -> Entity:
        """
        Get one entity.

        Raises:
            NotFoundError: If no row has this id
        """
        entity = self.repository.get_by_id(id)
        if entity is None:
            raise NotFoundError(self.repository.label, id)
        return entity

    def find_all(
        self,
        pagination: Pagination | None = None,
        search: Sequence[SearchTerm] | None = None,
        filters: Mapping[str, Any] | None = None,
    ) -> PaginatedResult[Entity]:
        return self.repository.get_all(pagination=pagination, search=search, filters=filters)

    def create(self, data: Mapping[str, Any]) -> Entity:
        return self.repository.create(data)

    def update(self, id: str, data: Mapping[str, Any]) -> Entity:
        return self.repository.update(id, data)

    def delete(self, id: str) -> None:
        self.repository.delete(id)
