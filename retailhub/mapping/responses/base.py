"""Shared helpers for entity -> response conversion."""

from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import Any

from retailhub.mapping.mapper_util import map_boolean, parse_int_id

Response = dict[str, Any]


def isoformat(value: date | datetime | str | None) -> str | None:
    """Render a date/datetime as ISO-8601; strings are assumed already formatted."""
    if value is None or isinstance(value, str):
        return value
    return value.isoformat()


def response_id(value: int | str | None) -> int | None:
    """Entity ids are decimal strings; responses carry them as integers."""
    if value is None:
        return None
    return parse_int_id(value)


def is_active(entity: dict[str, Any]) -> bool:
    return map_boolean(entity.get("isActive"), default=True)


class ResponseMapper(ABC):
    """Base response mapper; list items default to the detail shape."""

    @abstractmethod
    def to_response(self, entity: dict[str, Any]) -> Response: ...

    def to_list_response(self, entity: dict[str, Any]) -> Response:
        return self.to_response(entity)
