"""Generic SQLAlchemy repository producing domain entities."""

from collections.abc import Generator, Mapping, Sequence
from contextlib import contextmanager
from datetime import date, datetime
from typing import Any, Literal

import structlog
from sqlalchemy import (
    Boolean,
    Date,
    DateTime,
    Float,
    Integer,
    Numeric,
    String,
    Text,
    func,
    or_,
    select,
)
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.sql import ColumnElement, Select

from retailhub.application.common.pagination import PaginatedResult, Pagination, SearchTerm
from retailhub.database import Base
from retailhub.exceptions import NotFoundError, PersistenceError, ValidationError
from retailhub.infrastructure.common.records import build_include_tree, load_options, to_record
from retailhub.mapping.entity_map_config import EntityMapConfig
from retailhub.mapping.entity_mapper import Entity, EntityMapper
from retailhub.mapping.mapper_util import camel_to_snake, parse_int_id, to_database_fields

logger = structlog.get_logger(__name__)

SortDirection = Literal["asc", "desc"]

# Managed by the database, never written from request data
_READ_ONLY_COLUMNS = frozenset({"id", "created_at", "updated_at"})
_TRUE_VALUES = frozenset({"true", "1", "yes"})
_FALSE_VALUES = frozenset({"false", "0", "no"})


class Repository:
    """CRUD over one ORM model, speaking domain entities at the boundary.

    Ids arrive as decimal strings and are parsed to integer keys here.
    Reads load the relations named by the entity map config; writes commit
    immediately and re-read the row so the returned entity reflects
    database defaults.
    """

    def __init__(
        self,
        db: Session,
        resource: str,
        orm_model: type[Base],
        config: EntityMapConfig | None = None,
    ) -> None:
        self.db = db
        self.resource = resource
        self.orm_model = orm_model
        self.mapper = EntityMapper(config) if config else EntityMapper.for_resource(resource)
        self._include_tree = build_include_tree(self.mapper.includes())

    @property
    def label(self) -> str:
        """Human-readable resource name for messages."""
        return self.resource.replace("_", " ").capitalize()

    # Reads

    def get_by_id(self, id: str) -> Entity | None:
        instance = self._fetch(parse_int_id(id))
        return self._to_entity(instance) if instance is not None else None

    def get_all(
        self,
        pagination: Pagination | None = None,
        search: Sequence[SearchTerm] | None = None,
        filters: Mapping[str, Any] | None = None,
        order_by: Mapping[str, SortDirection] | None = None,
    ) -> PaginatedResult[Entity]:
        """
        List entities with optional pagination, search and filters.

        Args:
            pagination: Page and limit; None returns every row as one page
            search: Case-insensitive substring matches, OR-ed together
            filters: Exact matches, AND-ed, coerced to the column types
            order_by: Column -> direction, defaults to id ascending

        Returns:
            The page of entities with the total row count
        """
        conditions = self._filter_conditions(filters) + self._search_conditions(search)

        total_stmt = select(func.count()).select_from(self.orm_model)
        if conditions:
            total_stmt = total_stmt.where(*conditions)
        total = self.db.execute(total_stmt).scalar_one()

        stmt = self._select().where(*conditions)
        stmt = stmt.order_by(*self._ordering(order_by or {"id": "asc"}))
        if pagination is not None:
            stmt = stmt.offset(pagination.offset).limit(pagination.limit)

        instances = self.db.execute(stmt).scalars().all()
        return PaginatedResult(
            data=[self._to_entity(instance) for instance in instances],
            total=total,
            pagination=pagination,
        )

    def find_one_by(self, **filters: Any) -> Entity | None:
        """First entity matching the exact filters, if any."""
        stmt = self._select().where(*self._filter_conditions(filters)).limit(1)
        instance = self.db.execute(stmt).scalars().first()
        return self._to_entity(instance) if instance is not None else None

    def exists(self, id: str) -> bool:
        stmt = select(self.orm_model.id).where(self.orm_model.id == parse_int_id(id))
        return self.db.execute(stmt).first() is not None

    # Writes

    def create(self, entity: Mapping[str, Any]) -> Entity:
        values = self._writable(entity)
        instance = self.orm_model(**values)
        with self.atomic():
            self.db.add(instance)
            self.db.flush()
            new_id = instance.id

        logger.info(f"{self.resource}_created", id=new_id)
        return self._require(new_id)

    def update(self, id: str, partial: Mapping[str, Any]) -> Entity:
        numeric_id = parse_int_id(id)
        instance = self.db.get(self.orm_model, numeric_id)
        if instance is None:
            raise NotFoundError(self.label, id)

        with self.atomic():
            for key, value in self._writable(partial).items():
                setattr(instance, key, value)

        logger.info(f"{self.resource}_updated", id=numeric_id)
        return self._require(numeric_id)

    def delete(self, id: str) -> None:
        numeric_id = parse_int_id(id)
        instance = self.db.get(self.orm_model, numeric_id)
        if instance is None:
            raise NotFoundError(self.label, id)

        with self.atomic():
            self.db.delete(instance)

        logger.info(f"{self.resource}_deleted", id=numeric_id)

    @contextmanager
    def atomic(self) -> Generator[None, None, None]:
        """Commit the enclosed writes as one transaction, rolling back on failure."""
        try:
            yield
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.warning(f"{self.resource}_write_failed", error=str(e))
            raise PersistenceError.from_sqlalchemy(e) from e
        except Exception:
            self.db.rollback()
            raise

    # Helpers

    def _select(self) -> Select[Any]:
        return (
            select(self.orm_model)
            .options(*load_options(self.orm_model, self._include_tree))
            .execution_options(populate_existing=True)
        )

    def _fetch(self, numeric_id: int) -> Base | None:
        stmt = self._select().where(self.orm_model.id == numeric_id)
        return self.db.execute(stmt).scalars().first()

    def _require(self, numeric_id: int) -> Entity:
        instance = self._fetch(numeric_id)
        if instance is None:
            raise NotFoundError(self.label, numeric_id)
        return self._to_entity(instance)

    def _to_entity(self, instance: Base) -> Entity:
        return self.mapper.map_to_entity(to_record(instance, self._include_tree))

    def _column(self, name: str) -> Any:
        column = self.orm_model.__table__.columns.get(camel_to_snake(name))
        if column is None:
            raise ValidationError(f"Unknown field '{name}' for {self.resource}", field=name)
        return column

    def _writable(self, entity: Mapping[str, Any]) -> dict[str, Any]:
        columns = self.orm_model.__table__.columns
        return {
            key: value
            for key, value in to_database_fields(entity).items()
            if key in columns and key not in _READ_ONLY_COLUMNS
        }

    def _filter_conditions(self, filters: Mapping[str, Any] | None) -> list[ColumnElement[bool]]:
        conditions: list[ColumnElement[bool]] = []
        for name, raw in (filters or {}).items():
            column = self._column(name)
            conditions.append(column == self._coerce(column, name, raw))
        return conditions

    def _search_conditions(
        self, search: Sequence[SearchTerm] | None
    ) -> list[ColumnElement[bool]]:
        if not search:
            return []
        clauses = []
        for term in search:
            column = self._column(term.field)
            if not isinstance(column.type, (String, Text)):
                raise ValidationError(
                    f"Field '{term.field}' is not searchable", field=term.field
                )
            clauses.append(column.ilike(f"%{term.value}%"))
        return [or_(*clauses)]

    def _ordering(self, order_by: Mapping[str, SortDirection]) -> list[Any]:
        return [
            self._column(name).desc() if direction == "desc" else self._column(name).asc()
            for name, direction in order_by.items()
        ]

    @staticmethod
    def _coerce(column: Any, name: str, raw: Any) -> Any:
        """Convert a query-string value to the column's Python type."""
        if not isinstance(raw, str):
            return raw
        if isinstance(column.type, Boolean):
            lowered = raw.strip().lower()
            if lowered in _TRUE_VALUES:
                return True
            if lowered in _FALSE_VALUES:
                return False
            raise ValidationError(f"Invalid boolean '{raw}' for {name}", field=name)
        if isinstance(column.type, Integer):
            return parse_int_id(raw, field=name)
        if isinstance(column.type, (Float, Numeric)):
            try:
                return float(raw)
            except ValueError:
                raise ValidationError(f"Invalid number '{raw}' for {name}", field=name) from None
        if isinstance(column.type, DateTime):
            try:
                return datetime.fromisoformat(raw.strip())
            except ValueError:
                raise ValidationError(
                    f"Invalid datetime '{raw}' for {name}, expected ISO-8601", field=name
                ) from None
        if isinstance(column.type, Date):
            try:
                return date.fromisoformat(raw.strip())
            except ValueError:
                raise ValidationError(
                    f"Invalid date '{raw}' for {name}, expected YYYY-MM-DD", field=name
                ) from None
        if isinstance(column.type, (String, Text)):
            return raw
        raise ValidationError(f"Field '{name}' cannot be filtered", field=name)
