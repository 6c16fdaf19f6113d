"""Standard CRUD routes for resources served by the generic Controller."""

import logging
from collections.abc import Collection
from typing import Any

from dependency_injector.providers import Provider
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from retailhub.infrastructure.common.controller import Controller
from retailhub.infrastructure.common.di import inject_provider
from retailhub.infrastructure.common.schemas import ApiResponse, ListQueryParams

logger = logging.getLogger(__name__)

ALL_OPERATIONS = frozenset({"list", "get", "create", "update", "delete"})


def register_crud_routes(
    router: APIRouter,
    controller_provider: Provider[Controller],
    create_schema: type[BaseModel] | None = None,
    update_schema: type[BaseModel] | None = None,
    operations: Collection[str] = ALL_OPERATIONS,
) -> APIRouter:
    """
    Add list/get/create/update/delete routes to ``router``.

    Routes with fixed paths (``/stock``, ``/report``...) must be registered
    before calling this, since ``/{id}`` would otherwise shadow them.

    Args:
        router: Router carrying the resource prefix and tags
        controller_provider: Container provider building the resource controller
        create_schema: Request body model for POST
        update_schema: Request body model for PUT
        operations: Subset of operations to expose

    Returns:
        The same router
    """
    get_controller = inject_provider(controller_provider)

    if "list" in operations:

        @router.get("", status_code=status.HTTP_200_OK)
        def list_resources(
            query: ListQueryParams,
            controller: Controller = Depends(get_controller),
        ) -> ApiResponse[list[dict[str, Any]]]:
            """List with pagination, search (search_key/search_value) and filters."""
            return controller.find_all(query)

    if "get" in operations:

        @router.get("/{id}", status_code=status.HTTP_200_OK)
        def get_resource(
            id: str,
            controller: Controller = Depends(get_controller),
        ) -> ApiResponse[dict[str, Any]]:
            """Get one resource by id."""
            return controller.find_by_id(id)

    if "create" in operations and create_schema is not None:

        @router.post("", status_code=status.HTTP_201_CREATED)
        def create_resource(
            payload: create_schema,  # type: ignore[valid-type]
            controller: Controller = Depends(get_controller),
        ) -> ApiResponse[dict[str, Any]]:
            """Create a resource."""
            return controller.create(payload.model_dump())

    if "update" in operations and update_schema is not None:

        @router.put("/{id}", status_code=status.HTTP_200_OK)
        def update_resource(
            id: str,
            payload: update_schema,  # type: ignore[valid-type]
            controller: Controller = Depends(get_controller),
        ) -> ApiResponse[dict[str, Any]]:
            """Update the fields present in the body."""
            return controller.update(id, payload.model_dump(exclude_unset=True))

    if "delete" in operations:

        @router.delete("/{id}", status_code=status.HTTP_200_OK)
        def delete_resource(
            id: str,
            controller: Controller = Depends(get_controller),
        ) -> ApiResponse[None]:
            """Delete a resource."""
            return controller.delete(id)

    return router
