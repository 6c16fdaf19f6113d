"""Tagged union describing the raw value found at a relation field.

Persisted records hand relations over as whatever the storage layer loaded:
nothing, a bare key, a nested record or a list of nested records. The entity
mapper classifies that value once so relation mappers never guess its shape.
"""

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, TypeAlias

from retailhub.exceptions import ConfigurationError
from retailhub.mapping.mapper_util import map_relation, map_relation_array

Record: TypeAlias = Mapping[str, Any]


@dataclass(frozen=True)
class NullRelation:
    """Relation absent or not loaded."""


@dataclass(frozen=True)
class ScalarRelation:
    """Relation given as a bare value, usually the related id."""

    value: Any


@dataclass(frozen=True)
class RecordRelation:
    """A single nested record."""

    record: Record


@dataclass(frozen=True)
class RecordArrayRelation:
    """A collection of nested records."""

    records: tuple[Record, ...]


RelationValue: TypeAlias = NullRelation | ScalarRelation | RecordRelation | RecordArrayRelation
RelationMapper: TypeAlias = Callable[[RelationValue], Any]
ItemMapper: TypeAlias = Callable[[Record], Any]

NULL_RELATION = NullRelation()


def classify_relation(raw: object) -> RelationValue:
    """Wrap a raw relation value in its tagged form."""
    if raw is None:
        return NULL_RELATION
    if isinstance(raw, Mapping):
        return RecordRelation(raw)
    if isinstance(raw, Sequence) and not isinstance(raw, (str, bytes)):
        records = tuple(raw)
        for item in records:
            if not isinstance(item, Mapping):
                raise ConfigurationError(
                    f"Relation collection contains a non-record item: {item!r}"
                )
        return RecordArrayRelation(records)
    return ScalarRelation(raw)


def single(item_mapper: ItemMapper) -> RelationMapper:
    """Relation mapper for a to-one relation; absent maps to None.

    A scalar is treated as a reference carrying only the related id.
    """

    def mapper(value: RelationValue) -> Any:
        if isinstance(value, RecordRelation):
            return map_relation(value.record, item_mapper)
        if isinstance(value, ScalarRelation):
            return map_relation({"id": value.value}, item_mapper)
        if isinstance(value, RecordArrayRelation):
            raise ConfigurationError("To-one relation received a collection of records")
        return None

    return mapper


def many(item_mapper: ItemMapper) -> RelationMapper:
    """Relation mapper for a to-many relation; absent maps to []."""

    def mapper(value: RelationValue) -> list[Any]:
        if isinstance(value, RecordArrayRelation):
            return map_relation_array(value.records, item_mapper)
        if isinstance(value, RecordRelation):
            return map_relation_array([value.record], item_mapper)
        if isinstance(value, ScalarRelation):
            return map_relation_array([{"id": value.value}], item_mapper)
        return map_relation_array(None, item_mapper)

    return mapper
