from typing import Any

from retailhub.mapping.responses.base import (
    Response,
    ResponseMapper,
    is_active,
    isoformat,
    response_id,
)


class RoleResponseMapper(ResponseMapper):
    def to_response(self, entity: dict[str, Any]) -> Response:
        return {
            "id": response_id(entity["id"]),
            "name": entity.get("name"),
            "description": entity.get("description") or None,
            "is_active": is_active(entity),
            "created_at": isoformat(entity.get("createdAt")),
            "updated_at": isoformat(entity.get("updatedAt")),
        }
