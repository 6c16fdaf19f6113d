"""Mapping tables for roles."""

from retailhub.mapping.entity_map_config import EntityMapConfig, FieldMap
from retailhub.mapping.mapper_util import map_date, map_id, map_nullable_string

ROLE_CONFIG = EntityMapConfig(
    fields=(
        FieldMap("id", "id", map_id),
        FieldMap("name", "name"),
        FieldMap("description", "description", map_nullable_string),
        FieldMap("is_active", "isActive"),
        FieldMap("created_at", "createdAt", map_date),
        FieldMap("updated_at", "updatedAt", map_date),
    ),
)
