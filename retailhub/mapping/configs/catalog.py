"""Mapping tables for the product catalog."""

from typing import Any

from retailhub.mapping.entity_map_config import EntityMapConfig, FieldMap, RelationMap
from retailhub.mapping.mapper_util import (
    map_boolean,
    map_date,
    map_id,
    map_nullable_number,
    map_nullable_string,
    map_relation,
)
from retailhub.mapping.relations import Record


def _timestamps() -> tuple[FieldMap, ...]:
    return (
        FieldMap("created_at", "createdAt", map_date),
        FieldMap("updated_at", "updatedAt", map_date),
    )


def map_category_summary(record: Record) -> dict[str, Any]:
    return {
        "id": map_id(record["id"]),
        "name": record.get("name"),
        "isActive": map_boolean(record.get("is_active"), default=True),
    }


def map_master_product_summary(record: Record) -> dict[str, Any]:
    return {
        "id": map_id(record["id"]),
        "name": record.get("name"),
        "categoryId": record.get("category_id"),
        "category": map_relation(record.get("category"), map_category_summary),
    }


def map_product_summary(record: Record) -> dict[str, Any]:
    master = record.get("product_master") or {}
    return {
        "id": map_id(record["id"]),
        "name": map_nullable_string(master.get("name")),
        "price": map_nullable_number(record.get("price")),
    }


PRODUCT_CATEGORY_CONFIG = EntityMapConfig(
    fields=(
        FieldMap("id", "id", map_id),
        FieldMap("name", "name"),
        FieldMap("is_active", "isActive"),
        *_timestamps(),
    ),
)

MASTER_PRODUCT_CONFIG = EntityMapConfig(
    fields=(
        FieldMap("id", "id", map_id),
        FieldMap("name", "name"),
        FieldMap("category_id", "categoryId"),
        FieldMap("is_active", "isActive"),
        *_timestamps(),
    ),
    relations=(RelationMap.single("category", "category", map_category_summary),),
)

PRODUCT_CONFIG = EntityMapConfig(
    fields=(
        FieldMap("id", "id", map_id),
        FieldMap("master_product_id", "masterProductId"),
        FieldMap("description", "description", map_nullable_string),
        FieldMap("image_path", "imagePath"),
        FieldMap("price", "price", map_nullable_number),
        FieldMap("hpp", "hpp"),
        FieldMap("is_active", "isActive"),
        *_timestamps(),
    ),
    relations=(
        RelationMap.single(
            "product_master",
            "productMaster",
            map_master_product_summary,
            include_hint=("category",),
        ),
    ),
)

PRODUCT_STOCK_CONFIG = EntityMapConfig(
    fields=(
        FieldMap("id", "id", map_id),
        FieldMap("product_id", "productId"),
        FieldMap("quantity", "quantity", map_nullable_number),
        FieldMap("unit_quantity", "unitQuantity"),
        FieldMap("movement_type", "movementType"),
        FieldMap("source", "source"),
        FieldMap("created_at", "createdAt", map_date),
    ),
    relations=(
        RelationMap.single(
            "product", "product", map_product_summary, include_hint=("product_master",)
        ),
    ),
)
