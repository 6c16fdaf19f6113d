"""Conversion of ORM instances into persisted records (plain nested dicts)."""

from collections.abc import Hashable, Mapping
from typing import Any

from sqlalchemy import inspect
from sqlalchemy.orm import Load, RelationshipProperty, selectinload
from sqlalchemy.orm.attributes import InstrumentedAttribute

from retailhub.database import Base
from retailhub.exceptions import ConfigurationError

# relation name -> nested include tree
IncludeTree = dict[str, "IncludeTree"]


def build_include_tree(includes: Mapping[str, Hashable | None]) -> IncludeTree:
    """Turn ``{relation: hint}`` into a nested tree of relation names.

    A hint is None or a tuple of relation names forming a path below the
    relation: ``{"items": ("product", "product_master")}`` becomes
    ``{"items": {"product": {"product_master": {}}}}``.
    """
    tree: IncludeTree = {}
    for relation, hint in includes.items():
        if hint is not None and not (
            isinstance(hint, tuple) and all(isinstance(name, str) for name in hint)
        ):
            raise ConfigurationError(
                f"Include hint for relation '{relation}' must be a tuple of relation names"
            )
        node = tree.setdefault(relation, {})
        for name in hint or ():
            node = node.setdefault(name, {})
    return tree


def _relationship(model: type[Base], name: str) -> InstrumentedAttribute[Any]:
    attribute = getattr(model, name, None)
    if not isinstance(attribute, InstrumentedAttribute) or not isinstance(
        attribute.property, RelationshipProperty
    ):
        raise ConfigurationError(f"{model.__name__} has no relationship named '{name}'")
    return attribute


def load_options(model: type[Base], tree: IncludeTree) -> list[Load]:
    """``selectinload`` options for every path of the include tree."""
    options: list[Load] = []

    def walk(current: type[Base], node: IncludeTree, parent: Load | None) -> None:
        for name, children in node.items():
            attribute = _relationship(current, name)
            option = parent.selectinload(attribute) if parent else selectinload(attribute)
            if children:
                walk(attribute.property.mapper.class_, children, option)
            else:
                options.append(option)

    walk(model, tree, None)
    return options


def to_record(instance: Base, tree: IncludeTree | None = None) -> dict[str, Any]:
    """Snapshot an ORM instance as a snake_case record.

    Column attributes that are loaded are copied. Relations appear only when
    they are part of ``tree`` and were actually loaded; a to-many relation
    becomes a list of records, a missing to-one relation None.
    """
    state = inspect(instance)
    unloaded = state.unloaded
    record: dict[str, Any] = {
        attribute.key: state.dict[attribute.key]
        for attribute in state.mapper.column_attrs
        if attribute.key not in unloaded
    }

    for name, children in (tree or {}).items():
        if name not in state.dict:
            continue
        value = state.dict[name]
        if value is None:
            record[name] = None
        elif state.mapper.relationships[name].uselist:
            record[name] = [to_record(item, children) for item in value]
        else:
            record[name] = to_record(value, children)

    return record
