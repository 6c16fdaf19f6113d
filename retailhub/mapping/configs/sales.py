"""Mapping tables for orders."""

from typing import Any

from retailhub.mapping.entity_map_config import EntityMapConfig, FieldMap, RelationMap
from retailhub.mapping.mapper_util import map_date, map_id, map_nullable_number
from retailhub.mapping.relations import Record


def map_order_item(record: Record) -> dict[str, Any]:
    product = record.get("product") or {}
    master = product.get("product_master") or {}
    return {
        "id": map_id(record["id"]),
        "productId": record.get("product_id"),
        "productName": master.get("name"),
        "quantity": record.get("quantity"),
        "price": map_nullable_number(record.get("price")),
    }


ORDER_CONFIG = EntityMapConfig(
    fields=(
        FieldMap("id", "id", map_id),
        FieldMap("invoice_number", "invoiceNumber"),
        FieldMap("payment_method", "paymentMethod"),
        FieldMap("total_amount", "totalAmount", map_nullable_number),
        FieldMap("status", "status"),
        FieldMap("is_active", "isActive"),
        FieldMap("created_at", "createdAt", map_date),
        FieldMap("updated_at", "updatedAt", map_date),
    ),
    relations=(
        RelationMap.array(
            "items", "items", map_order_item, include_hint=("product", "product_master")
        ),
    ),
)
