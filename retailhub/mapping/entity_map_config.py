"""Declarative per-resource mapping tables."""

from collections.abc import Callable, Hashable
from dataclasses import dataclass, field
from typing import Any

from retailhub.exceptions import ConfigurationError
from retailhub.mapping import relations as relation_mappers
from retailhub.mapping.relations import ItemMapper, RelationMapper

FieldTransform = Callable[[Any], Any]


@dataclass(frozen=True)
class FieldMap:
    """Copy ``source_field`` of a record to ``target_field`` of the entity."""

    source_field: str
    target_field: str
    transform: FieldTransform | None = None


@dataclass(frozen=True)
class RelationMap:
    """Map a nested relation of a record onto the entity.

    ``include_hint`` is opaque to the mapper; the query layer reads it to
    decide what to load along with the relation (a path of nested relation
    names for the SQLAlchemy repositories).
    """

    source_field: str
    target_field: str
    mapper: RelationMapper
    is_array: bool = False
    include_hint: Hashable | None = None

    @classmethod
    def single(
        cls,
        source_field: str,
        target_field: str,
        item_mapper: ItemMapper,
        include_hint: Hashable | None = None,
    ) -> "RelationMap":
        """To-one relation; maps to None when absent."""
        mapper = relation_mappers.single(item_mapper)
        return cls(source_field, target_field, mapper, is_array=False, include_hint=include_hint)

    @classmethod
    def array(
        cls,
        source_field: str,
        target_field: str,
        item_mapper: ItemMapper,
        include_hint: Hashable | None = None,
    ) -> "RelationMap":
        """To-many relation; maps to [] when absent."""
        mapper = relation_mappers.many(item_mapper)
        return cls(source_field, target_field, mapper, is_array=True, include_hint=include_hint)


@dataclass(frozen=True)
class EntityMapConfig:
    """Fields and relations that make up one resource's domain entity."""

    fields: tuple[FieldMap, ...]
    relations: tuple[RelationMap, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Target fields must be unique across fields and relations."""
        seen: set[str] = set()
        for target in self.target_fields:
            if target in seen:
                raise ConfigurationError(f"Duplicate target field '{target}' in mapping config")
            seen.add(target)

    @property
    def target_fields(self) -> tuple[str, ...]:
        """Declared entity keys, in declaration order."""
        return tuple(f.target_field for f in self.fields) + tuple(
            r.target_field for r in self.relations
        )
