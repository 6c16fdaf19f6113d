"""Generic engine turning persisted records into domain entities."""

from collections.abc import Hashable, Iterable
from typing import Any, Self, TypeAlias

from retailhub.mapping.configs import get_entity_map_config
from retailhub.mapping.entity_map_config import EntityMapConfig
from retailhub.mapping.relations import Record, classify_relation

Entity: TypeAlias = dict[str, Any]


class EntityMapper:
    """Apply one ``EntityMapConfig`` to raw records.

    The produced entity holds exactly the declared target fields, in
    declaration order. A missing source field reads as None and still goes
    through its transform; relation mappers are always called, with the
    relation value classified into its tagged form.
    """

    def __init__(self, config: EntityMapConfig) -> None:
        self.config = config

    @classmethod
    def for_resource(cls, resource: str) -> Self:
        """Build a mapper from the config registered under ``resource``."""
        return cls(get_entity_map_config(resource))

    def map_to_entity(self, record: Record) -> Entity:
        entity: Entity = {}

        for field_map in self.config.fields:
            value = record.get(field_map.source_field)
            if field_map.transform is not None:
                value = field_map.transform(value)
            entity[field_map.target_field] = value

        for relation_map in self.config.relations:
            raw = record.get(relation_map.source_field)
            entity[relation_map.target_field] = relation_map.mapper(classify_relation(raw))

        return entity

    def map_to_entities(self, records: Iterable[Record]) -> list[Entity]:
        return [self.map_to_entity(record) for record in records]

    def includes(self) -> dict[str, Hashable | None]:
        """Relations to load with the record, keyed by source field.

        The hint is passed through untouched; None means "load the relation
        itself and nothing below it".
        """
        return {
            relation_map.source_field: relation_map.include_hint
            for relation_map in self.config.relations
        }
