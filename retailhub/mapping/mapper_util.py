"""Field-level value transforms shared by entity map configs.

All functions are pure. Only the id parsers can fail, and they fail loudly
with ``ParseError`` instead of producing a bogus number.
"""

import re
from collections.abc import Callable, Iterable, Mapping
from datetime import date
from typing import Any, Final, TypeVar

from retailhub.exceptions import ParseError

TInput = TypeVar("TInput")
TOutput = TypeVar("TOutput")

_INT_ID_PATTERN = re.compile(r"^\d+$")
_SNAKE_SEGMENT = re.compile(r"_([a-z])")
_UPPER_LETTER = re.compile(r"[A-Z]")


class _Unset:
    """Marker for 'no value supplied', distinct from an explicit None."""

    _instance: "_Unset | None" = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Final = _Unset()


def map_id(value: int | str) -> str:
    """Numeric ids become decimal strings; strings pass through."""
    if isinstance(value, str):
        return value
    return str(value)


def map_nullable_string(value: str | None, default: str = "") -> str:
    return default if value is None else value


def map_nullable_number(value: float | None, default: float = 0) -> float:
    return default if value is None else value


def map_boolean(value: bool | None, default: bool = False) -> bool:
    return default if value is None else value


def map_date(value: date | None) -> date | None:
    """Identity for now; the seam where timezone normalization would go."""
    return value


def snake_to_camel(name: str) -> str:
    """account_category_id -> accountCategoryId."""
    return _SNAKE_SEGMENT.sub(lambda match: match.group(1).upper(), name)


def camel_to_snake(name: str) -> str:
    """accountCategoryId -> account_category_id.

    A leading capital gains a leading underscore ("A" -> "_a"), which
    snake_to_camel turns back into "A".
    """
    return _UPPER_LETTER.sub(lambda match: f"_{match.group(0).lower()}", name)


def parse_int_id(value: int | str, field: str = "id") -> int:
    """Parse an id given as int or decimal string."""
    if isinstance(value, bool):
        raise ParseError(value, field=field)
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _INT_ID_PATTERN.match(value.strip()):
        return int(value.strip())
    raise ParseError(value, field=field)


def to_database_fields(domain_data: Mapping[str, Any]) -> dict[str, Any]:
    """Convert a camelCase domain mapping into snake_case persisted fields.

    UNSET values are dropped (explicit None is kept). String values of keys
    ending in ``_id`` are parsed to integers.
    """
    db_data: dict[str, Any] = {}
    for key, value in domain_data.items():
        if value is UNSET:
            continue

        snake_key = camel_to_snake(key)
        if snake_key.endswith("_id") and isinstance(value, str):
            db_data[snake_key] = parse_int_id(value, field=snake_key)
        else:
            db_data[snake_key] = value

    return db_data


def extract_relation_id(relation: Mapping[str, Any] | int | str) -> int:
    """Return the numeric id of a relation given as a bare id or an object with ``id``."""
    if isinstance(relation, Mapping):
        if "id" not in relation:
            raise ParseError(relation, field="id")
        return parse_int_id(relation["id"])
    return parse_int_id(relation)


def map_relation(
    relation: TInput | None, mapper: Callable[[TInput], TOutput]
) -> TOutput | None:
    return mapper(relation) if relation is not None else None


def map_relation_array(
    relations: Iterable[TInput] | None, mapper: Callable[[TInput], TOutput]
) -> list[TOutput]:
    return [mapper(relation) for relation in relations] if relations is not None else []
