"""Tests for pagination types."""

import pytest

from retailhub.application.common.pagination import PaginatedResult, Pagination
from retailhub.exceptions import ValidationError


class TestPagination:
    def test_offset(self) -> None:
        assert Pagination(page=1, limit=10).offset == 0
        assert Pagination(page=3, limit=10).offset == 20

    @pytest.mark.parametrize(("page", "limit"), [(0, 10), (1, 0), (-1, 5)])
    def test_rejects_values_below_one(self, page: int, limit: int) -> None:
        with pytest.raises(ValidationError):
            Pagination(page=page, limit=limit)

    def test_slice(self) -> None:
        items = list(range(23))
        assert Pagination(page=3, limit=10).slice(items) == [20, 21, 22]
        assert Pagination(page=4, limit=10).slice(items) == []


class TestPaginatedResult:
    def test_total_pages_rounds_up(self) -> None:
        result = PaginatedResult(data=[], total=23, pagination=Pagination(page=1, limit=10))
        assert result.total_pages == 3

    def test_total_pages_is_zero_without_records(self) -> None:
        result = PaginatedResult(data=[], total=0, pagination=Pagination(page=1, limit=10))
        assert result.total_pages == 0

    def test_unpaginated_listing_is_one_page(self) -> None:
        result = PaginatedResult(data=[1, 2, 3], total=3)
        assert result.page == 1
        assert result.limit == 3
        assert result.total_pages == 1

    def test_map_keeps_metadata(self) -> None:
        pagination = Pagination(page=2, limit=2)
        result = PaginatedResult(data=[1, 2], total=5, pagination=pagination).map(str)
        assert result.data == ["1", "2"]
        assert result.total == 5
        assert result.pagination is pagination
