"""Testes da paginação client-side sobre a janela do provider."""

from __future__ import annotations

import math

import pytest

from app.services.pagination import MAX_PER_PAGE, paginate, sort_newest_first


class TestPaginate:
    @pytest.mark.parametrize(
        ("total", "page", "per_page"),
        [(0, 1, 10), (7, 1, 10), (23, 3, 10), (23, 1, 5), (50, 5, 10), (12, 9, 5)],
    )
    def test_page_bounds(self, total: int, page: int, per_page: int) -> None:
        result = paginate(list(range(total)), page, per_page)

        expected_len = max(0, min(per_page, total - (page - 1) * per_page))
        assert len(result.items) == expected_len
        assert result.total == total
        assert result.total_pages == math.ceil(total / per_page)

    def test_per_page_is_clamped_before_offset(self) -> None:
        result = paginate(list(range(120)), page=2, per_page=200)

        assert result.per_page == MAX_PER_PAGE
        assert result.items[0] == 50
        assert result.from_index == 51
        assert result.to_index == 100

    def test_page_below_one_is_clamped(self) -> None:
        result = paginate(list(range(5)), page=0, per_page=0)

        assert result.current_page == 1
        assert result.per_page == 1
        assert result.items == (0,)

    def test_navigation_fields(self) -> None:
        result = paginate(list(range(25)), page=2, per_page=10)

        assert result.has_next is True
        assert result.has_previous is True
        assert result.next_page == 3
        assert result.previous_page == 1

    def test_last_page(self) -> None:
        result = paginate(list(range(25)), page=3, per_page=10)

        assert result.has_next is False
        assert result.next_page is None
        assert result.to_index == 25

    def test_pagination_dict_keys(self) -> None:
        payload = paginate([1, 2, 3], 1, 2).pagination_dict()

        assert payload == {
            "current_page": 1,
            "per_page": 2,
            "total": 3,
            "total_pages": 2,
            "has_next_page": True,
            "has_previous_page": False,
            "next_page": 2,
            "previous_page": None,
            "from": 1,
            "to": 2,
            "window_limited": False,
        }


class TestSortNewestFirst:
    def test_sorts_descending_with_undated_last(self) -> None:
        items = [
            {"id": "a", "ts": "2025-09-01T10:00:00Z"},
            {"id": "b", "ts": None},
            {"id": "c", "ts": "2025-09-03T10:00:00Z"},
            {"id": "d", "ts": "2025-09-02T10:00:00Z"},
        ]

        ordered = sort_newest_first(items, key=lambda item: item["ts"])

        assert [item["id"] for item in ordered] == ["c", "d", "a", "b"]
