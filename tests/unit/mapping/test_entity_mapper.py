"""Tests for the generic entity mapper and its configuration registry."""

from typing import Any

import pytest

from retailhub.exceptions import ConfigurationError
from retailhub.mapping.configs import ENTITY_MAP_CONFIGS, get_entity_map_config
from retailhub.mapping.entity_map_config import EntityMapConfig, FieldMap, RelationMap
from retailhub.mapping.entity_mapper import EntityMapper
from retailhub.mapping.mapper_util import map_id, map_nullable_string
from retailhub.mapping.relations import (
    NULL_RELATION,
    RecordArrayRelation,
    RecordRelation,
    ScalarRelation,
    classify_relation,
)


def _tag(record: dict[str, Any]) -> dict[str, Any]:
    return {"id": map_id(record["id"]), "label": record.get("label")}


@pytest.fixture
def config() -> EntityMapConfig:
    return EntityMapConfig(
        fields=(
            FieldMap("id", "id", map_id),
            FieldMap("display_name", "displayName", map_nullable_string),
            FieldMap("notes", "notes"),
        ),
        relations=(
            RelationMap.single("owner", "owner", _tag),
            RelationMap.array("tags", "tags", _tag, include_hint=("group",)),
        ),
    )


class TestEntityMapper:
    def test_key_set_is_exactly_the_declared_targets(self, config: EntityMapConfig) -> None:
        mapper = EntityMapper(config)

        entity = mapper.map_to_entity({"id": 1, "unexpected": "dropped"})

        assert list(entity) == ["id", "displayName", "notes", "owner", "tags"]

    def test_missing_fields_read_as_none_and_go_through_transform(
        self, config: EntityMapConfig
    ) -> None:
        entity = EntityMapper(config).map_to_entity({"id": 5})

        assert entity["id"] == "5"
        assert entity["displayName"] == ""
        assert entity["notes"] is None

    def test_absent_relations_map_to_none_and_empty_list(self, config: EntityMapConfig) -> None:
        entity = EntityMapper(config).map_to_entity({"id": 1})

        assert entity["owner"] is None
        assert entity["tags"] == []

    def test_loaded_relations_are_mapped(self, config: EntityMapConfig) -> None:
        entity = EntityMapper(config).map_to_entity(
            {
                "id": 1,
                "owner": {"id": 9, "label": "root"},
                "tags": [{"id": 2, "label": "a"}, {"id": 3, "label": "b"}],
            }
        )

        assert entity["owner"] == {"id": "9", "label": "root"}
        assert entity["tags"] == [{"id": "2", "label": "a"}, {"id": "3", "label": "b"}]

    def test_scalar_relation_is_treated_as_reference(self, config: EntityMapConfig) -> None:
        entity = EntityMapper(config).map_to_entity({"id": 1, "owner": 4})

        assert entity["owner"] == {"id": "4", "label": None}

    def test_map_to_entities(self, config: EntityMapConfig) -> None:
        entities = EntityMapper(config).map_to_entities([{"id": 1}, {"id": 2}])

        assert [entity["id"] for entity in entities] == ["1", "2"]

    def test_includes_exposes_hints_by_source_field(self, config: EntityMapConfig) -> None:
        assert EntityMapper(config).includes() == {"owner": None, "tags": ("group",)}

    def test_to_one_relation_rejects_collection(self, config: EntityMapConfig) -> None:
        with pytest.raises(ConfigurationError):
            EntityMapper(config).map_to_entity({"id": 1, "owner": [{"id": 1}]})


class TestEntityMapConfig:
    def test_duplicate_target_field_is_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="name"):
            EntityMapConfig(fields=(FieldMap("name", "name"), FieldMap("title", "name")))

    def test_field_and_relation_targets_must_not_collide(self) -> None:
        with pytest.raises(ConfigurationError):
            EntityMapConfig(
                fields=(FieldMap("owner_id", "owner"),),
                relations=(RelationMap.single("owner", "owner", _tag),),
            )


class TestClassifyRelation:
    def test_shapes(self) -> None:
        assert classify_relation(None) is NULL_RELATION
        assert classify_relation(3) == ScalarRelation(3)
        assert classify_relation({"id": 1}) == RecordRelation({"id": 1})
        assert classify_relation([{"id": 1}]) == RecordArrayRelation(({"id": 1},))

    def test_collection_of_non_records_is_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            classify_relation([1, 2])


class TestRegistry:
    def test_every_resource_has_a_config(self) -> None:
        assert set(ENTITY_MAP_CONFIGS) == {
            "product_category",
            "master_product",
            "product",
            "product_stock",
            "role",
            "account_category",
            "account_type",
            "account",
            "transaction",
            "order",
        }

    def test_unknown_resource_names_the_resource(self) -> None:
        with pytest.raises(ConfigurationError, match="supplier") as exc_info:
            get_entity_map_config("supplier")
        assert exc_info.value.resource == "supplier"
        assert exc_info.value.status_code == 500

    def test_for_resource_uses_registered_config(self) -> None:
        mapper = EntityMapper.for_resource("product_category")

        entity = mapper.map_to_entity({"id": 3, "name": "Snacks", "is_active": True})

        assert entity == {
            "id": "3",
            "name": "Snacks",
            "isActive": True,
            "createdAt": None,
            "updatedAt": None,
        }

    def test_master_product_without_category(self) -> None:
        entity = EntityMapper.for_resource("master_product").map_to_entity(
            {"id": 1, "name": "Chips", "category_id": None}
        )

        assert entity["category"] is None
