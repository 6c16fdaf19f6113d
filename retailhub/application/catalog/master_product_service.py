from collections.abc import Mapping
from typing import Any

from retailhub.application.common.service import (
    Entity,
    ReferenceRepositoryProtocol,
    RepositoryProtocol,
    Service,
    require_reference,
)


class MasterProductService(Service):
    """Master products may only point at an existing category."""

    def __init__(
        self,
        repository: RepositoryProtocol,
        category_repository: ReferenceRepositoryProtocol,
    ) -> None:
        super().__init__(repository)
        self.category_repository = category_repository

    def create(self, data: Mapping[str, Any]) -> Entity:
        require_reference(self.category_repository, data.get("category_id"), "category_id")
        return super().create(data)

    def update(self, id: str, data: Mapping[str, Any]) -> Entity:
        require_reference(self.category_repository, data.get("category_id"), "category_id")
        return super().update(id, data)
