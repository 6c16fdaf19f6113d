"""Mapping tables for accounts and transactions."""

from typing import Any

from retailhub.mapping.entity_map_config import EntityMapConfig, FieldMap, RelationMap
from retailhub.mapping.mapper_util import (
    map_date,
    map_id,
    map_nullable_number,
    map_nullable_string,
)
from retailhub.mapping.relations import Record


def map_account_category_summary(record: Record) -> dict[str, Any]:
    return {
        "id": map_id(record["id"]),
        "name": record.get("name"),
        "description": map_nullable_string(record.get("description")),
        "isActive": record.get("is_active"),
    }


def map_account_type_summary(record: Record) -> dict[str, Any]:
    return {
        "id": map_id(record["id"]),
        "name": record.get("name"),
        "description": map_nullable_string(record.get("description")),
    }


def map_account_summary(record: Record) -> dict[str, Any]:
    # Only id, name and number are exposed on a transaction's account
    return {
        "id": map_id(record["id"]),
        "name": record.get("name"),
        "number": record.get("number"),
    }


ACCOUNT_CATEGORY_CONFIG = EntityMapConfig(
    fields=(
        FieldMap("id", "id", map_id),
        FieldMap("name", "name"),
        FieldMap("description", "description", map_nullable_string),
        FieldMap("is_active", "isActive"),
        FieldMap("created_at", "createdAt", map_date),
        FieldMap("updated_at", "updatedAt", map_date),
    ),
)

ACCOUNT_TYPE_CONFIG = EntityMapConfig(
    fields=(
        FieldMap("id", "id", map_id),
        FieldMap("name", "name"),
        FieldMap("description", "description", map_nullable_string),
        FieldMap("account_category_id", "accountCategoryId"),
        FieldMap("is_active", "isActive"),
        FieldMap("created_at", "createdAt", map_date),
        FieldMap("updated_at", "updatedAt", map_date),
    ),
    relations=(
        RelationMap.single("account_category", "accountCategory", map_account_category_summary),
    ),
)

ACCOUNT_CONFIG = EntityMapConfig(
    fields=(
        FieldMap("id", "id", map_id),
        FieldMap("name", "name"),
        FieldMap("number", "number"),
        FieldMap("balance", "balance", map_nullable_number),
        FieldMap("description", "description", map_nullable_string),
        FieldMap("account_category_id", "accountCategoryId"),
        FieldMap("account_type_id", "accountTypeId"),
        FieldMap("is_active", "isActive"),
        FieldMap("transaction_count", "transactionCount", map_nullable_number),
        FieldMap("created_at", "createdAt", map_date),
        FieldMap("updated_at", "updatedAt", map_date),
    ),
    relations=(
        RelationMap.single("account_category", "accountCategory", map_account_category_summary),
        RelationMap.single("account_type", "accountType", map_account_type_summary),
    ),
)

TRANSACTION_CONFIG = EntityMapConfig(
    fields=(
        FieldMap("id", "id", map_id),
        FieldMap("account_id", "accountId"),
        FieldMap("amount", "amount", map_nullable_number),
        FieldMap("transaction_type", "transactionType"),
        FieldMap("description", "description", map_nullable_string),
        FieldMap("transaction_date", "transactionDate", map_date),
        FieldMap("reference_number", "referenceNumber", map_nullable_string),
        FieldMap("created_at", "createdAt", map_date),
        FieldMap("updated_at", "updatedAt", map_date),
    ),
    relations=(RelationMap.single("account", "account", map_account_summary),),
)
