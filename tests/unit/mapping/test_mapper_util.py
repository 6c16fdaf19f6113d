"""Tests for the field-level mapping helpers."""

from datetime import date

import pytest

from retailhub.exceptions import ParseError
from retailhub.mapping.mapper_util import (
    UNSET,
    camel_to_snake,
    extract_relation_id,
    map_boolean,
    map_date,
    map_id,
    map_nullable_number,
    map_nullable_string,
    map_relation,
    map_relation_array,
    parse_int_id,
    snake_to_camel,
    to_database_fields,
)


class TestScalarMappers:
    def test_map_id_accepts_numbers_and_strings(self) -> None:
        assert map_id(42) == "42"
        assert map_id("42") == "42"

    def test_map_nullable_string_falls_back_only_on_none(self) -> None:
        assert map_nullable_string(None, "x") == "x"
        assert map_nullable_string("y", "x") == "y"
        assert map_nullable_string("", "x") == ""
        assert map_nullable_string(None) == ""

    def test_map_nullable_number_keeps_zero(self) -> None:
        assert map_nullable_number(None) == 0
        assert map_nullable_number(None, 7) == 7
        assert map_nullable_number(0, 7) == 0

    def test_map_boolean_keeps_false(self) -> None:
        assert map_boolean(None) is False
        assert map_boolean(None, default=True) is True
        assert map_boolean(False, default=True) is False

    def test_map_date_is_identity(self) -> None:
        today = date(2024, 5, 1)
        assert map_date(today) is today
        assert map_date(None) is None


class TestCaseConversion:
    def test_snake_to_camel(self) -> None:
        assert snake_to_camel("account_category_id") == "accountCategoryId"
        assert snake_to_camel("name") == "name"

    def test_camel_to_snake(self) -> None:
        assert camel_to_snake("accountCategoryId") == "account_category_id"
        assert camel_to_snake("name") == "name"

    def test_round_trip_of_snake_case_name(self) -> None:
        assert camel_to_snake(snake_to_camel("account_category_id")) == "account_category_id"

    def test_leading_capital_gets_leading_underscore(self) -> None:
        assert camel_to_snake("A") == "_a"
        assert snake_to_camel("_a") == "A"


class TestIdParsing:
    def test_parse_int_id(self) -> None:
        assert parse_int_id("12") == 12
        assert parse_int_id(12) == 12

    @pytest.mark.parametrize("value", ["abc", "1.5", "", "-3", True])
    def test_parse_int_id_rejects_non_numeric(self, value: object) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_int_id(value, field="product_id")  # type: ignore[arg-type]
        assert exc_info.value.field == "product_id"
        assert exc_info.value.status_code == 400

    def test_extract_relation_id_from_object_or_scalar(self) -> None:
        assert extract_relation_id({"id": "7", "name": "x"}) == 7
        assert extract_relation_id("8") == 8
        assert extract_relation_id(9) == 9

    def test_extract_relation_id_rejects_garbage(self) -> None:
        with pytest.raises(ParseError):
            extract_relation_id({"id": "seven"})
        with pytest.raises(ParseError):
            extract_relation_id({"name": "no id"})


class TestToDatabaseFields:
    def test_renames_keys_and_parses_ids(self) -> None:
        result = to_database_fields(
            {"name": "Cash", "accountCategoryId": "3", "isActive": True}
        )
        assert result == {"name": "Cash", "account_category_id": 3, "is_active": True}

    def test_drops_unset_but_keeps_none(self) -> None:
        result = to_database_fields({"name": UNSET, "description": None})
        assert result == {"description": None}

    def test_non_numeric_id_raises(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            to_database_fields({"categoryId": "abc"})
        assert exc_info.value.field == "category_id"

    def test_unset_is_falsy_singleton(self) -> None:
        assert not UNSET
        assert repr(UNSET) == "UNSET"


class TestRelationHelpers:
    def test_map_relation(self) -> None:
        assert map_relation(None, lambda r: r["id"]) is None
        assert map_relation({"id": 1}, lambda r: r["id"]) == 1

    def test_map_relation_array(self) -> None:
        assert map_relation_array(None, lambda r: r["id"]) == []
        assert map_relation_array([{"id": 1}, {"id": 2}], lambda r: r["id"]) == [1, 2]
